"""
Static numeric values from CSS dimension and duration strings.

Native targets need plain numbers where CSS happily keeps ``clamp()`` and
``calc()`` expressions. These helpers pick a representative static value or
report that there is none; callers decide how to degrade.
"""

from __future__ import annotations

import re
from typing import Any

# Root font size used for rem -> pt/dp. Fixed: the generated native sources
# have no notion of a user-scaled root size.
ROOT_FONT_SIZE = 16

_CLAMP_RE = re.compile(r"clamp\(\s*([^,]+),\s*([^,]+),\s*([^)]+)\)")
_REM_ANYWHERE_RE = re.compile(r"([\d.]+)\s*rem")
_REM_RE = re.compile(r"^([\d.]+)\s*rem$")
_PX_RE = re.compile(r"^(-?[\d.]+)\s*px$")
_DURATION_MS_RE = re.compile(r"^(\d+)ms$")


def _rem_points(match: re.Match[str] | None) -> float | None:
    if match is None:
        return None
    try:
        return float(match.group(1)) * ROOT_FONT_SIZE
    except ValueError:
        return None


def rem_to_numeric_pt(value: Any) -> float | None:
    """Extract a static point value from a rem/px dimension string.

    - ``clamp(min, preferred, max)``: the preferred value, else the minimum
    - ``calc(...)``: the first rem term (the arithmetic is not evaluated)
    - ``<n>rem``: n * 16
    - ``<n>px``: n

    Returns:
        Points, or None when no static value can be derived.
    """
    if not isinstance(value, str):
        return None

    clamp = _CLAMP_RE.search(value)
    if clamp:
        preferred = _rem_points(_REM_ANYWHERE_RE.search(clamp.group(2).strip()))
        if preferred is not None:
            return preferred
        minimum = _rem_points(_REM_ANYWHERE_RE.search(clamp.group(1).strip()))
        if minimum is not None:
            return minimum

    if "calc(" in value:
        first_rem = _rem_points(_REM_ANYWHERE_RE.search(value))
        if first_rem is not None:
            return first_rem

    rem = _rem_points(_REM_RE.match(value))
    if rem is not None:
        return rem

    px = _PX_RE.match(value)
    if px:
        try:
            return float(px.group(1))
        except ValueError:
            return None

    return None


def parse_duration_ms(value: Any) -> int | None:
    """Parse a ``"<n>ms"`` duration into whole milliseconds."""
    match = _DURATION_MS_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def format_number(value: Any) -> str:
    """Render a number for generated source code.

    Integral floats drop their fraction (``24.0`` -> ``24``); everything else
    uses the shortest round-tripping representation.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int | float):
        return repr(value)
    return str(value)
