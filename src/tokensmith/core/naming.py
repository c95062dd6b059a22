"""
Deterministic name conversions for generated code.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_SEPARATOR_RE = re.compile(r"[-.](\w)")
_INVALID_IDENTIFIER_RE = re.compile(r"[^A-Za-z0-9_]")

# Prefix for identifiers that would otherwise start with a digit (color.blue.500 -> s500)
NUMERIC_PREFIX = "s"


def to_camel_case(text: str) -> str:
    """``primary-bg`` / ``font.size`` -> ``primaryBg`` / ``fontSize``."""
    return _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), text)


def to_pascal_case(text: str) -> str:
    """``primary-bg`` -> ``PrimaryBg``."""
    camel = to_camel_case(text)
    return camel[:1].upper() + camel[1:]


def to_identifier(parts: Sequence[str]) -> str:
    """Build a camelCase identifier from path segments.

    Characters that are not valid in Swift/Kotlin/JS identifiers are dropped
    and a leading digit gets the ``s`` prefix.
    """
    name = _INVALID_IDENTIFIER_RE.sub("", to_camel_case("-".join(parts)))
    if not name or name[0].isdigit():
        name = f"{NUMERIC_PREFIX}{name}"
    return name


def to_type_identifier(text: str) -> str:
    """PascalCase identifier for a group/namespace name."""
    name = _INVALID_IDENTIFIER_RE.sub("", to_pascal_case(text))
    if not name or name[0].isdigit():
        name = f"{NUMERIC_PREFIX.upper()}{name}"
    return name


def css_variable_name(path: Sequence[str]) -> str:
    """``("color", "blue", "500")`` -> ``--color-blue-500``."""
    return f"--{'-'.join(path)}"
