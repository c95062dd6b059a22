"""Core tokensmith functionality: IR, loading, classification, conversion engines."""

from . import ir
from .color import RGBA, color_to_hex, oklch_to_rgb, parse_color
from .dimension import format_number, parse_duration_ms, rem_to_numeric_pt
from .errors import (
    ConfigError,
    EmitError,
    TokenContext,
    TokensmithError,
    TokenSourceError,
)
from .layers import FILTERS, classify
from .loader import build_dictionary, load_tokens
from .naming import css_variable_name, to_camel_case, to_identifier, to_pascal_case

__all__ = [
    "ir",
    # Errors
    "TokensmithError",
    "TokenSourceError",
    "ConfigError",
    "EmitError",
    "TokenContext",
    # Engines
    "RGBA",
    "parse_color",
    "oklch_to_rgb",
    "color_to_hex",
    "rem_to_numeric_pt",
    "parse_duration_ms",
    "format_number",
    "to_camel_case",
    "to_pascal_case",
    "to_identifier",
    "css_variable_name",
    # Loading and classification
    "build_dictionary",
    "load_tokens",
    "classify",
    "FILTERS",
]
