"""Shared pytest fixtures for tokensmith tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from tokensmith.core.ir import Token, TokenDictionary, TokenType
from tokensmith.core.loader import build_dictionary

PRIMITIVE_COLORS: dict[str, Any] = {
    "color": {
        "$type": "color",
        "blue": {
            "500": {"$value": "oklch(0.6 0.15 250)", "$description": "Brand blue"},
        },
        "neutral": {
            "50": {"$value": "oklch(0.98 0 0)"},
            "900": {"$value": "#1a1a1a"},
        },
        "brand-accent": {"$value": "#ff00aa"},
    }
}

PRIMITIVE_MOTION: dict[str, Any] = {
    "duration": {"$type": "duration", "fast": {"$value": "200ms"}},
    "easing": {"$type": "cubicBezier", "standard": {"$value": [0.4, 0, 0.2, 1]}},
    "spacing": {"$type": "dimension", "4": {"$value": "1rem"}},
    "shadow": {
        "md": {
            "$type": "shadow",
            "$value": {
                "offsetX": "0px",
                "offsetY": "4px",
                "blur": "8px",
                "spread": "0px",
                "color": "rgba(0, 0, 0, 0.25)",
            },
        }
    },
}

SEMANTIC_TOKENS: dict[str, Any] = {
    "color": {
        "$type": "color",
        "text": {
            "primary": {
                "$value": "{color.blue.500}",
                "$extensions": {"theme": {"dark": "{color.neutral.50}"}},
            }
        },
    },
    "space": {"$type": "dimension", "md": {"$value": "1.5rem"}},
}

COMPONENT_TOKENS: dict[str, Any] = {
    "component": {
        "button": {
            "primary-bg": {"$type": "color", "$value": "{color.text.primary}"},
        }
    }
}


def make_token(
    path: str,
    value: Any,
    token_type: TokenType = TokenType.UNKNOWN,
    **kwargs: Any,
) -> Token:
    """Build a Token from a dotted path; ``authored_value`` defaults to ``value``."""
    kwargs.setdefault("authored_value", value)
    return Token(
        path=tuple(path.split(".")),
        type=token_type,
        raw_type=token_type.value if token_type is not TokenType.UNKNOWN else None,
        resolved_value=value,
        **kwargs,
    )


@pytest.fixture
def token_documents() -> list[tuple[str, dict[str, Any]]]:
    """Source documents in the default load order."""
    return [
        ("src/primitives/color.json", PRIMITIVE_COLORS),
        ("src/primitives/motion.json", PRIMITIVE_MOTION),
        ("src/semantic/color.json", SEMANTIC_TOKENS),
        ("src/component/button.json", COMPONENT_TOKENS),
    ]


@pytest.fixture
def token_dictionary(token_documents) -> TokenDictionary:
    return build_dictionary(token_documents)


@pytest.fixture
def token_project(tmp_path: Path, token_documents) -> Path:
    """A token project on disk with the default source layout and no config file."""
    for name, document in token_documents:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2))
    return tmp_path
