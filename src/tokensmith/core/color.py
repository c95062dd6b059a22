"""
Pure-Python color parsing and OKLCH conversion.

Parses the color literals that appear in token sources (OKLCH, rgb/rgba,
hex) into 8-bit sRGB channels. No external color libraries required.

The OKLCH -> sRGB path uses the fixed OKLab matrices with no gamut mapping:
out-of-gamut channels are simply clamped, so the same input always yields the
same bytes on every target.
"""

from __future__ import annotations

import math
import re
from typing import Any, NamedTuple


class RGBA(NamedTuple):
    """8-bit sRGB channels plus a 0-1 alpha."""

    r: int
    g: int
    b: int
    a: float = 1.0


_OKLCH_RE = re.compile(
    r"oklch\(\s*([\d.]+)(%?)\s+([\d.]+)\s+([\d.]+)(?:deg)?\s*(?:/\s*([\d.]+)(%?)\s*)?\)"
)
_RGBA_RE = re.compile(
    r"rgba?\(\s*([\d.]+)[,\s]+([\d.]+)[,\s]+([\d.]+)(?:[,\s/]+([\d.]+))?\s*\)"
)
_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _round_half_up(value: float) -> int:
    """Round the way generated sources always have (0.5 goes up)."""
    return math.floor(value + 0.5)


def _gamma(channel: float) -> float:
    """Linear sRGB -> gamma-encoded sRGB."""
    if channel <= 0.0031308:
        return 12.92 * channel
    return 1.055 * math.pow(channel, 1 / 2.4) - 0.055


def oklch_to_rgb(L: float, C: float, H: float) -> tuple[int, int, int]:
    """Convert OKLCH to 8-bit sRGB.

    Args:
        L: Lightness (0-1).
        C: Chroma.
        H: Hue in degrees.

    Returns:
        (r, g, b) each clamped to 0-255.
    """
    # Polar -> OKLab
    h_rad = H * math.pi / 180
    a = C * math.cos(h_rad)
    b = C * math.sin(h_rad)

    # OKLab -> LMS (cube-root domain)
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l = l_ * l_ * l_  # noqa: E741
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    # LMS -> linear sRGB
    r_lin = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    g_lin = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    b_lin = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

    def to_byte(channel: float) -> int:
        return max(0, min(255, _round_half_up(_gamma(channel) * 255)))

    return to_byte(r_lin), to_byte(g_lin), to_byte(b_lin)


def _parse_oklch(value: str) -> RGBA | None:
    match = _OKLCH_RE.match(value)
    if not match:
        return None
    try:
        L = float(match.group(1))
        C = float(match.group(3))
        H = float(match.group(4))
        alpha = float(match.group(5)) if match.group(5) else 1.0
    except ValueError:
        return None
    if match.group(2):
        L = L / 100
    if match.group(6):
        alpha = alpha / 100
    r, g, b = oklch_to_rgb(L, C, H)
    return RGBA(r, g, b, min(1.0, alpha))


def _parse_rgba(value: str) -> RGBA | None:
    match = _RGBA_RE.search(value)
    if not match:
        return None
    try:
        r, g, b = (int(float(match.group(i))) for i in (1, 2, 3))
        alpha = float(match.group(4)) if match.group(4) else 1.0
    except ValueError:
        return None
    return RGBA(r, g, b, alpha)


def _parse_hex(value: str) -> RGBA | None:
    match = _HEX_RE.match(value)
    if not match:
        return None
    digits = match.group(1)
    return RGBA(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
        int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0,
    )


def parse_color(value: Any) -> RGBA | None:
    """Parse a CSS color literal.

    Understands ``oklch(L C H)`` (optionally ``L%`` and ``/ alpha``),
    ``rgb()``/``rgba()`` with comma or space/slash separators, and
    ``#RRGGBB``/``#RRGGBBAA``. Never raises.

    Returns:
        RGBA, or None when the value is not a color this module understands.
    """
    if not isinstance(value, str):
        return None
    value = value.strip()

    if value.startswith("oklch("):
        parsed = _parse_oklch(value)
        if parsed is not None:
            return parsed

    return _parse_rgba(value) or _parse_hex(value)


def _hex_byte(n: int) -> str:
    return f"{n:02x}"


def color_to_hex(value: Any) -> Any:
    """Convert a color literal to ``#rrggbb`` (or ``#rrggbbaa`` when translucent).

    Unparseable input is returned unchanged.
    """
    color = parse_color(value)
    if color is None:
        return value
    base = f"#{_hex_byte(color.r)}{_hex_byte(color.g)}{_hex_byte(color.b)}"
    if color.a < 1:
        return f"{base}{_hex_byte(_round_half_up(color.a * 255))}"
    return base


def color_to_argb_literal(color: RGBA) -> str:
    """Pack a color as an upper-case ``0xAARRGGBB`` literal."""
    alpha = _round_half_up(color.a * 255)
    return f"0x{alpha:02X}{color.r:02X}{color.g:02X}{color.b:02X}"


def rgba_to_css(color: RGBA) -> str:
    """Format a color in the broadly supported ``rgb()`` space syntax."""
    if color.a < 1:
        return f"rgb({color.r} {color.g} {color.b} / {color.a:g})"
    return f"rgb({color.r} {color.g} {color.b})"
