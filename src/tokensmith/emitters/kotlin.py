"""
Android Kotlin emitter: a Compose-ready ``DesignTokens`` object tree.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..core.color import color_to_argb_literal, parse_color
from ..core.dimension import format_number, parse_duration_ms, rem_to_numeric_pt
from ..core.ir import Token, TokenType
from ..core.naming import to_type_identifier
from .native import (
    KOTLIN_FONT_WEIGHTS,
    ROOT_SUBGROUP,
    build_tree,
    first_shadow,
    font_weight_key,
    kotlin_shadow_elevation,
)

DEFAULT_PACKAGE = "com.example.design.tokens"


def dimension_unit(token: Token) -> str:
    """``sp`` for font sizes (path has both "font" and "size"), ``dp`` otherwise."""
    return "sp" if "font" in token.path and "size" in token.path else "dp"


def _constant_lines(name: str, token: Token, indent: str) -> list[str]:
    value = token.resolved_value
    kind = token.type

    if kind is TokenType.COLOR:
        color = parse_color(value)
        if color is None:
            return [f"{indent}// {name}: {value} (requires runtime conversion)"]
        return [f"{indent}val {name} = Color({color_to_argb_literal(color)})"]

    if kind is TokenType.DIMENSION:
        points = rem_to_numeric_pt(value)
        if points is None:
            return [f"{indent}// {name}: {value} (dynamic — resolve at runtime)"]
        return [f"{indent}val {name} = {format_number(points)}.{dimension_unit(token)}"]

    if kind is TokenType.DURATION:
        ms = parse_duration_ms(value)
        if ms is None:
            return [f"{indent}// {name}: {value} (not a millisecond duration)"]
        return [f"{indent}val {name}: Long = {ms}L"]

    if kind is TokenType.CUBIC_BEZIER:
        if isinstance(value, list) and len(value) == 4:
            points = ", ".join(f"{format_number(v)}f" for v in value)
            return [
                f"{indent}val {name} = androidx.compose.animation.core.CubicBezierEasing({points})"
            ]
        return [f"{indent}// {name}: {value} (not a control point list)"]

    if kind is TokenType.FONT_FAMILY:
        family = value[0] if isinstance(value, list) and value else value
        return [f'{indent}val {name} = "{family}"']

    if kind is TokenType.FONT_WEIGHT:
        weight = KOTLIN_FONT_WEIGHTS.get(font_weight_key(value), "Normal")
        return [f"{indent}val {name} = FontWeight.{weight}"]

    if kind is TokenType.NUMBER:
        return [f"{indent}val {name} = {format_number(value)}f"]

    if kind is TokenType.SHADOW:
        shadow = first_shadow(value)
        if shadow is None:
            return []
        return kotlin_shadow_elevation(name, shadow, indent)

    return []


def format_kotlin(tokens: Sequence[Token], options: Mapping[str, Any]) -> str:
    """Format tokens as ``DesignTokens.kt``.

    Options:
        package: Kotlin package name (default ``com.example.design.tokens``).
        object_name: Root object name (default ``DesignTokens``).
    """
    package = options.get("package", DEFAULT_PACKAGE)
    root = options.get("object_name", "DesignTokens")
    lines = [
        f"// {root}.kt",
        "// Generated by tokensmith — do not edit manually",
        "",
        f"package {package}",
        "",
        "import androidx.compose.ui.graphics.Color",
        "import androidx.compose.ui.unit.dp",
        "import androidx.compose.ui.unit.sp",
        "import androidx.compose.ui.text.font.FontWeight",
        "",
        '@Suppress("unused", "MagicNumber")',
        f"object {root} {{",
    ]

    for namespace in build_tree(tokens):
        lines.append("")
        lines.append(f"    object {to_type_identifier(namespace.name)} {{")

        for sub, leaves in namespace.subgroups.items():
            nested = sub != ROOT_SUBGROUP
            indent = " " * (12 if nested else 8)
            if nested:
                lines.append(f"        object {to_type_identifier(sub)} {{")

            for leaf in leaves:
                if leaf.token.description:
                    lines.append(f"{indent}/** {leaf.token.description} */")
                lines.extend(_constant_lines(leaf.name, leaf.token, indent))

            if nested:
                lines.append("        }")

        lines.append("    }")

    lines.append("}")
    lines.append("")
    return "\n".join(lines)
