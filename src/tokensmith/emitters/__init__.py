"""
Platform emitters.

Each format is a pure function ``(tokens, options) -> str``. ``FORMATS`` maps
the names used in tokensmith.yaml to those functions; it is assembled once at
import time and is read-only afterwards.
"""

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from ..core.ir import Token
from .css import format_css_variables, normalize_color_functions
from .javascript import (
    format_es6_declarations,
    format_es6_module,
    format_index_declarations,
    format_index_module,
)
from .json_flat import format_flat_map
from .kotlin import format_kotlin
from .swift import format_swift
from .typescript import format_token_types

FormatFunction = Callable[[Sequence[Token], Mapping[str, Any]], str]

FORMATS: MappingProxyType[str, FormatFunction] = MappingProxyType(
    {
        "css/variables-with-fallbacks": format_css_variables,
        "javascript/es6": format_es6_module,
        "typescript/es6-declarations": format_es6_declarations,
        "typescript/token-types": format_token_types,
        "javascript/index": format_index_module,
        "typescript/index": format_index_declarations,
        "ios/swift-enum": format_swift,
        "android/kotlin-object": format_kotlin,
        "json/flat-map": format_flat_map,
    }
)


def get_format(name: str) -> FormatFunction | None:
    """Look up a format function by name."""
    return FORMATS.get(name)


def list_formats() -> list[str]:
    return list(FORMATS)


__all__ = [
    "FORMATS",
    "FormatFunction",
    "get_format",
    "list_formats",
    "format_css_variables",
    "normalize_color_functions",
    "format_es6_module",
    "format_es6_declarations",
    "format_token_types",
    "format_index_module",
    "format_index_declarations",
    "format_swift",
    "format_kotlin",
    "format_flat_map",
]
