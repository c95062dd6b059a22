"""
tokensmith - design-token compiler.

Compiles DTCG token sources into layered CSS custom properties, a web token
module, TypeScript literal types, Swift and Kotlin constant trees and a flat
JSON map.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ConfigError, EmitError, TokensmithError, TokenSourceError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TokensmithError",
    "TokenSourceError",
    "ConfigError",
    "EmitError",
]
