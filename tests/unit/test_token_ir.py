"""
Unit tests for the Token IR types.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tests.conftest import make_token
from tokensmith.core.ir import Token, TokenDictionary, TokenType


class TestToken:
    """Tests for Token."""

    def test_name_and_top(self):
        token = make_token("color.blue.500", "#0000ff", TokenType.COLOR)
        assert token.name == "color.blue.500"
        assert token.top == "color"

    def test_empty_path_rejected(self):
        with pytest.raises(ValidationError):
            Token(path=())

    def test_empty_segment_rejected(self):
        with pytest.raises(ValidationError):
            Token(path=("color", "", "500"))

    def test_frozen(self):
        token = make_token("space.md", "1rem", TokenType.DIMENSION)
        with pytest.raises(ValidationError):
            token.resolved_value = "2rem"

    def test_type_from_raw(self):
        assert TokenType.from_raw("cubicBezier") is TokenType.CUBIC_BEZIER
        assert TokenType.from_raw("gradient") is TokenType.UNKNOWN
        assert TokenType.from_raw(None) is TokenType.UNKNOWN

    def test_has_references_ignores_object_braces(self):
        shadow = {"blur": "4px", "color": "#000000"}
        assert not make_token("shadow.sm", shadow, TokenType.SHADOW).has_references

    def test_has_references_inside_object(self):
        shadow = {"blur": "4px", "color": "{color.black}"}
        assert make_token("shadow.sm", shadow, TokenType.SHADOW).has_references


class TestTokenDictionary:
    """Tests for TokenDictionary."""

    def test_lookup(self, token_dictionary):
        assert "color.blue.500" in token_dictionary
        assert "color.blue.600" not in token_dictionary
        assert token_dictionary.get("color.blue.600") is None

    def test_duplicate_path_rejected(self):
        tokens = [make_token("space.md", "1rem"), make_token("space.md", "2rem")]
        with pytest.raises(ValueError, match="duplicate"):
            TokenDictionary(tokens)

    def test_by_group(self, token_dictionary):
        groups = token_dictionary.by_group()
        assert list(groups)[:2] == ["color", "duration"]
        assert [token.name for token in groups["space"]] == ["space.md"]
        assert len(groups["color"]) == 5

    def test_by_type(self, token_dictionary):
        types = token_dictionary.by_type()
        assert [token.name for token in types["duration"]] == ["duration.fast"]
        assert "cubicBezier" in types

    def test_filter(self, token_dictionary):
        durations = token_dictionary.filter(lambda token: token.type is TokenType.DURATION)
        assert [token.name for token in durations] == ["duration.fast"]

    def test_indexes_are_copies(self, token_dictionary):
        token_dictionary.by_group().clear()
        assert token_dictionary.by_group()
