"""
Web runtime module: token values as ES module constants, their declarations,
and the package index that re-exports them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..core.ir import Token
from ..core.naming import to_pascal_case
from .typescript import js_literal

GENERATED_BANNER = "/**\n * Do not edit directly, this file was auto-generated.\n */"

DEFAULT_DENSITY_LEVELS: dict[str, tuple[float, str]] = {
    "compact": (0.85, "Compact"),
    "default": (1.0, "Default"),
    "comfortable": (1.15, "Comfortable"),
}


def export_name(token: Token) -> str:
    """``color.blue.500`` -> ``ColorBlue500``."""
    return to_pascal_case("-".join(token.path))


def ts_type(value: Any) -> str:
    """Infer a TypeScript type from a resolved literal."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        members = sorted({ts_type(v) for v in value})
        if not members:
            return "unknown[]"
        if len(members) == 1:
            return f"{members[0]}[]"
        return f"({' | '.join(members)})[]"
    if isinstance(value, Mapping):
        fields = "; ".join(f"{js_literal(str(k))}: {ts_type(v)}" for k, v in value.items())
        return f"{{ {fields} }}" if fields else "Record<string, never>"
    return "unknown"


def format_es6_module(tokens: Sequence[Token], options: Mapping[str, Any]) -> str:
    lines = [GENERATED_BANNER, ""]
    for token in tokens:
        line = f"export const {export_name(token)} = {js_literal(token.resolved_value)};"
        if token.description:
            line += f" // {token.description}"
        lines.append(line)
    return "\n".join(lines) + "\n"


def format_es6_declarations(tokens: Sequence[Token], options: Mapping[str, Any]) -> str:
    lines = [GENERATED_BANNER, ""]
    for token in tokens:
        if token.description:
            lines.append(f"/** {token.description} */")
        lines.append(f"export const {export_name(token)}: {ts_type(token.resolved_value)};")
    return "\n".join(lines) + "\n"


def _index_exports(options: Mapping[str, Any]) -> tuple[str, str]:
    return options.get("module", "./tokens.js"), options.get("types_module", "./types.js")


def _theme_modes(tokens: Sequence[Token]) -> list[str]:
    modes = ["light"]
    for token in tokens:
        for theme in token.theme_overrides:
            if theme not in modes:
                modes.append(theme)
    return modes


def _density_levels(options: Mapping[str, Any]) -> dict[str, tuple[float, str]]:
    configured = options.get("density")
    if not configured:
        return DEFAULT_DENSITY_LEVELS
    return {
        name: (float(multiplier), name.replace("-", " ").title())
        for name, multiplier in configured.items()
    }


def format_index_module(tokens: Sequence[Token], options: Mapping[str, Any]) -> str:
    """Package entry point: re-exports plus the density and theme runtime constants.

    Options:
        module: Token module to re-export (default ``./tokens.js``).
        density: Mapping of density level -> multiplier.
    """
    module, _ = _index_exports(options)
    density = _density_levels(options)
    modes = _theme_modes(tokens)

    density_entries = "\n".join(
        f"  {js_literal(name)}: {{ multiplier: {multiplier}, label: {js_literal(label)} }},"
        for name, (multiplier, label) in density.items()
    )
    return f"""// Main exports for the design tokens package
export * from '{module}';

export const DENSITY_MULTIPLIERS = {{
{density_entries}
}};

export function getDensityMultiplier(level) {{
  return DENSITY_MULTIPLIERS[level].multiplier;
}}

export const THEME_MODES = {js_literal(modes)};
"""


def format_index_declarations(tokens: Sequence[Token], options: Mapping[str, Any]) -> str:
    """Declarations matching ``format_index_module``, plus the literal types re-export.

    Options:
        module: Token module to re-export (default ``./tokens.js``).
        types_module: Literal types module (default ``./types.js``).
        density: Mapping of density level -> multiplier.
    """
    module, types_module = _index_exports(options)
    density_union = " | ".join(f"'{name}'" for name in _density_levels(options))
    mode_union = " | ".join(f"'{mode}'" for mode in _theme_modes(tokens))

    return f"""// Main exports for the design tokens package
export * from '{module}';
export * from '{types_module}';

// Density system types
export type DensityLevel = {density_union};

export interface DensityConfig {{
  multiplier: number;
  label: string;
}}

export declare const DENSITY_MULTIPLIERS: Record<DensityLevel, DensityConfig>;

export declare function getDensityMultiplier(level: DensityLevel): number;

// Theme system types
export type ThemeMode = {mode_union};

export interface ThemeConfig {{
  mode: ThemeMode;
  density?: DensityLevel;
}}

export declare const THEME_MODES: readonly ThemeMode[];
"""
