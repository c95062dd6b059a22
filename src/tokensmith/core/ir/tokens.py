"""
Token IR types.

A Token is one DTCG record after loading: its path, its type, the fully
reference-resolved literal and the literal as authored (which may still
embed ``{dot.path}`` references). Every emitter except the CSS one reads
``resolved_value``; the CSS emitter reads ``authored_value`` so that
references survive as live ``var()`` chains.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Enums
# =============================================================================


class TokenType(StrEnum):
    """DTCG token types understood by the emitters."""

    COLOR = "color"
    DIMENSION = "dimension"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    NUMBER = "number"
    SHADOW = "shadow"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, raw: str | None) -> TokenType:
        """Map a ``$type`` string to a TokenType, unknown strings included."""
        if raw is None:
            return cls.UNKNOWN
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


class Layer(StrEnum):
    """Cascade tier of a token."""

    PRIMITIVE = "primitive"
    SEMANTIC = "semantic"
    COMPONENT = "component"


# =============================================================================
# Token
# =============================================================================


class Token(BaseModel):
    """A single design token."""

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...] = Field(description="Ordered, non-empty path segments")
    type: TokenType = Field(default=TokenType.UNKNOWN)
    raw_type: str | None = Field(
        default=None, description="The $type string as written in the source"
    )
    resolved_value: Any = Field(default=None, description="Reference-free literal")
    authored_value: Any = Field(default=None, description="Literal before resolution")
    description: str | None = None
    theme_overrides: dict[str, Any] = Field(default_factory=dict)
    source: str | None = Field(default=None, description="File the token was read from")

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("token path must not be empty")
        if any(not segment for segment in value):
            raise ValueError(f"token path has an empty segment: {value!r}")
        return value

    @property
    def name(self) -> str:
        """Dot-joined path, unique within a dictionary."""
        return ".".join(self.path)

    @property
    def top(self) -> str:
        return self.path[0]

    @property
    def type_name(self) -> str:
        """The type as reported in generated outputs."""
        if self.type is TokenType.UNKNOWN and self.raw_type:
            return self.raw_type
        return self.type.value

    @property
    def has_references(self) -> bool:
        return _contains_reference(self.authored_value)


def _contains_reference(value: Any) -> bool:
    if isinstance(value, str):
        return "{" in value
    if isinstance(value, dict):
        return any(_contains_reference(v) for v in value.values())
    if isinstance(value, list | tuple):
        return any(_contains_reference(v) for v in value)
    return False


# =============================================================================
# TokenDictionary
# =============================================================================


class TokenDictionary:
    """
    Ordered, read-only collection of tokens.

    Built once per run by the loader. Lookup by path and the group/type
    indexes are computed at construction and never change afterwards.
    """

    __slots__ = ("_tokens", "_by_name", "_by_group", "_by_type")

    def __init__(self, tokens: list[Token] | tuple[Token, ...] = ()) -> None:
        ordered = tuple(tokens)
        by_name: dict[str, Token] = {}
        by_group: dict[str, list[Token]] = {}
        by_type: dict[str, list[Token]] = {}

        for token in ordered:
            if token.name in by_name:
                raise ValueError(f"duplicate token path: {token.name}")
            by_name[token.name] = token
            by_group.setdefault(token.top, []).append(token)
            by_type.setdefault(token.type_name, []).append(token)

        self._tokens = ordered
        self._by_name = by_name
        self._by_group = {k: tuple(v) for k, v in by_group.items()}
        self._by_type = {k: tuple(v) for k, v in by_type.items()}

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"TokenDictionary(tokens={len(self._tokens)})"

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def get(self, name: str) -> Token | None:
        """Look up a token by dot-joined path."""
        return self._by_name.get(name)

    def by_group(self) -> dict[str, tuple[Token, ...]]:
        """Tokens grouped by top-level path segment, in first-appearance order."""
        return dict(self._by_group)

    def by_type(self) -> dict[str, tuple[Token, ...]]:
        """Tokens grouped by reported type, in first-appearance order."""
        return dict(self._by_type)

    def filter(self, predicate: Callable[[Token], bool]) -> list[Token]:
        return [token for token in self._tokens if predicate(token)]

    def theme_names(self) -> list[str]:
        """Distinct theme override names, in first-appearance order."""
        names: list[str] = []
        for token in self._tokens:
            for theme in token.theme_overrides:
                if theme not in names:
                    names.append(theme)
        return names
