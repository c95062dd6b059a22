"""
Shared pieces of the Swift and Kotlin emitters.

Both targets render the same declaration tree: the first path segment is an
outer namespace, the second segment an inner namespace when the path is
longer than two segments, and the rest becomes the constant name.

Shadow tokens lose information on both targets. The conversions live in
named functions here so the mapping can be changed in one place.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core.color import parse_color
from ..core.dimension import format_number, rem_to_numeric_pt
from ..core.ir import Token
from ..core.naming import to_identifier

ROOT_SUBGROUP = "_root"

SWIFT_FONT_WEIGHTS: dict[str, str] = {
    "400": ".regular",
    "500": ".medium",
    "600": ".semibold",
    "700": ".bold",
}
KOTLIN_FONT_WEIGHTS: dict[str, str] = {
    "400": "Normal",
    "500": "Medium",
    "600": "SemiBold",
    "700": "Bold",
}


@dataclass
class Leaf:
    """A token positioned in the declaration tree."""

    name: str
    token: Token


@dataclass
class Namespace:
    """A group of leaves, optionally split into named sub-namespaces."""

    name: str
    subgroups: dict[str, list[Leaf]] = field(default_factory=dict)


def build_tree(tokens: Sequence[Token]) -> list[Namespace]:
    """Group tokens by first and second path segment, preserving order."""
    namespaces: dict[str, Namespace] = {}
    for token in tokens:
        namespace = namespaces.setdefault(token.top, Namespace(token.top))
        if len(token.path) > 2:
            sub, name_parts = token.path[1], token.path[2:]
        else:
            sub, name_parts = ROOT_SUBGROUP, token.path[1:]
        leaf = Leaf(to_identifier(name_parts), token)
        namespace.subgroups.setdefault(sub, []).append(leaf)
    return list(namespaces.values())


def font_weight_key(value: Any) -> str:
    """Normalize a fontWeight literal (``600``, ``600.0``, ``"600"``) for table lookup."""
    return format_number(value) if isinstance(value, int | float) else str(value)


def first_shadow(value: Any) -> dict[str, Any] | None:
    """The shadow layer used by native targets (the first one of a list)."""
    if isinstance(value, list):
        value = value[0] if value else None
    return value if isinstance(value, dict) else None


def swift_color(value: Any) -> str | None:
    color = parse_color(value)
    if color is None:
        return None
    return (
        f"UIColor(red: {color.r / 255:.3f}, green: {color.g / 255:.3f}, "
        f"blue: {color.b / 255:.3f}, alpha: {color.a:.3f})"
    )


def swift_shadow_constants(name: str, shadow: dict[str, Any], indent: str) -> list[str]:
    """Swift shadow mapping: color, blur radius and offset. Spread is dropped."""
    color = shadow.get("color")
    color_literal = swift_color(color) or f'"{color}"'
    lines = [
        f"{indent}/// Shadow: offset({shadow.get('offsetX')}, {shadow.get('offsetY')}), "
        f"blur: {shadow.get('blur')}, spread: {shadow.get('spread')}",
        f"{indent}public static let {name}Color = {color_literal}",
    ]

    blur = rem_to_numeric_pt(shadow.get("blur"))
    if blur is not None:
        lines.append(f"{indent}public static let {name}Radius: CGFloat = {format_number(blur)}")

    offset_x = rem_to_numeric_pt(shadow.get("offsetX"))
    offset_y = rem_to_numeric_pt(shadow.get("offsetY"))
    if offset_x is not None and offset_y is not None:
        lines.append(
            f"{indent}public static let {name}Offset = "
            f"CGSize(width: {format_number(offset_x)}, height: {format_number(offset_y)})"
        )
    return lines


def kotlin_shadow_elevation(name: str, shadow: dict[str, Any], indent: str) -> list[str]:
    """Kotlin shadow mapping: elevation from blur only. Color, offset and spread are dropped."""
    elevation = rem_to_numeric_pt(shadow.get("blur"))
    if elevation is None:
        return [f"{indent}// {name}: shadow blur {shadow.get('blur')} (dynamic — resolve at runtime)"]
    return [
        f"{indent}/** Shadow: offset({shadow.get('offsetX')}, {shadow.get('offsetY')}), "
        f"blur: {shadow.get('blur')} */",
        f"{indent}val {name}Elevation = {format_number(elevation)}.dp",
    ]
