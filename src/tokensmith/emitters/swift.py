"""
iOS Swift emitter: a ``DesignTokens`` enum tree of typed constants.

All value conversions happen here (OKLCH -> UIColor channels, rem -> points,
ms -> seconds); values that have no static equivalent degrade to a raw
string or a comment instead of failing the build.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..core.dimension import format_number, parse_duration_ms, rem_to_numeric_pt
from ..core.ir import Token, TokenType
from ..core.naming import to_type_identifier
from .native import (
    ROOT_SUBGROUP,
    SWIFT_FONT_WEIGHTS,
    build_tree,
    first_shadow,
    font_weight_key,
    swift_color,
    swift_shadow_constants,
)


def _constant_lines(name: str, token: Token, indent: str) -> list[str]:
    value = token.resolved_value
    kind = token.type
    prefix = f"{indent}public static let {name}"

    if kind is TokenType.COLOR:
        color = swift_color(value)
        if color is None:
            return [f'{prefix} = "{value}" // requires runtime conversion']
        return [f"{prefix} = {color}"]

    if kind is TokenType.DIMENSION:
        points = rem_to_numeric_pt(value)
        if points is None:
            return [f"{indent}// {name}: {value} (dynamic — resolve at runtime)"]
        return [f"{prefix}: CGFloat = {format_number(points)}"]

    if kind is TokenType.DURATION:
        ms = parse_duration_ms(value)
        if ms is None:
            return [f"{prefix}: TimeInterval = 0 // {value}"]
        return [f"{prefix}: TimeInterval = {format_number(ms / 1000)}"]

    if kind is TokenType.CUBIC_BEZIER:
        if isinstance(value, list) and len(value) == 4:
            points = ", ".join(format_number(v) for v in value)
            return [f"{prefix} = CAMediaTimingFunction(controlPoints: {points})"]
        return [f"{indent}// {name}: {value} (not a control point list)"]

    if kind is TokenType.FONT_FAMILY:
        family = value[0] if isinstance(value, list) and value else value
        return [f'{prefix} = "{family}"']

    if kind is TokenType.FONT_WEIGHT:
        weight = SWIFT_FONT_WEIGHTS.get(font_weight_key(value), ".regular")
        return [f"{prefix}: UIFont.Weight = {weight}"]

    if kind is TokenType.NUMBER:
        return [f"{prefix}: CGFloat = {format_number(value)}"]

    if kind is TokenType.SHADOW:
        shadow = first_shadow(value)
        if shadow is None:
            return []
        return swift_shadow_constants(name, shadow, indent)

    return []


def format_swift(tokens: Sequence[Token], options: Mapping[str, Any]) -> str:
    """Format tokens as ``DesignTokens.swift``.

    Options:
        enum_name: Root enum name (default ``DesignTokens``).
    """
    root = options.get("enum_name", "DesignTokens")
    lines = [
        f"// {root}.swift",
        "// Generated by tokensmith — do not edit manually",
        "",
        "import UIKit",
        "",
        "// swiftlint:disable all",
        f"public enum {root} {{",
    ]

    for namespace in build_tree(tokens):
        group = to_type_identifier(namespace.name)
        lines.append("")
        lines.append(f"    // MARK: - {group}")
        lines.append(f"    public enum {group} {{")

        for sub, leaves in namespace.subgroups.items():
            nested = sub != ROOT_SUBGROUP
            indent = " " * (12 if nested else 8)
            if nested:
                lines.append(f"        public enum {to_type_identifier(sub)} {{")

            for leaf in leaves:
                if leaf.token.description:
                    lines.append(f"{indent}/// {leaf.token.description}")
                lines.extend(_constant_lines(leaf.name, leaf.token, indent))

            if nested:
                lines.append("        }")

        lines.append("    }")

    lines.append("}")
    lines.append("// swiftlint:enable all")
    lines.append("")
    return "\n".join(lines)
