"""
tokensmith Intermediate Representation (IR) types.

Token records, the read-only dictionary built from them, and the build
configuration models.
"""

from .config import (
    DEFAULT_SOURCES,
    BuildConfig,
    OutputFileConfig,
    PlatformConfig,
)
from .tokens import (
    Layer,
    Token,
    TokenDictionary,
    TokenType,
)

__all__ = [
    # Tokens
    "Layer",
    "Token",
    "TokenDictionary",
    "TokenType",
    # Configuration
    "DEFAULT_SOURCES",
    "BuildConfig",
    "OutputFileConfig",
    "PlatformConfig",
]
