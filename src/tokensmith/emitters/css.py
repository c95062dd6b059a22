"""
Layered CSS custom property emitter.

Produces one ``@layer`` block per file with a ``:root`` rule of custom
properties and one ``[data-theme="<name>"]`` rule per theme that has
overrides in the file. Values that were authored as references are written
as ``var()`` chains so re-theming a primitive at runtime re-colors every
dependent token. A final pass adds ``rgb()`` fallbacks for ``oklch()``
values while keeping the original behind ``@supports``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from ..core.color import parse_color, rgba_to_css
from ..core.dimension import format_number
from ..core.ir import Token, TokenType
from ..core.naming import css_variable_name
from ..core.references import rewrite_to_css_vars

logger = logging.getLogger(__name__)

DEFAULT_LAYER_NAME = "tokens"
OKLCH_SUPPORTS_QUERY = "(color: oklch(0% 0 0))"

_WHITESPACE_RE = re.compile(r"\s")
_OKLCH_CALL_RE = re.compile(r"oklch\([^()]*\)")
_BLOCK_OPEN_RE = re.compile(r"^(\s*)(.+?)\s*\{$")
_BLOCK_CLOSE_RE = re.compile(r"^\s*\}$")
_DECLARATION_RE = re.compile(r"^(\s*)([\w-]+)\s*:\s*(.+);$")


# =============================================================================
# Value rendering
# =============================================================================


def _shadow_css(shadow: Mapping[str, Any]) -> str:
    parts = [
        shadow.get("offsetX", 0),
        shadow.get("offsetY", 0),
        shadow.get("blur", 0),
        shadow.get("spread", 0),
        shadow.get("color", ""),
    ]
    text = " ".join(css_literal(part) for part in parts).strip()
    if shadow.get("inset"):
        text = f"inset {text}"
    return text


def css_literal(value: Any, token_type: TokenType = TokenType.UNKNOWN) -> str:
    """Render a token literal as CSS text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool | int | float):
        return format_number(value)
    if isinstance(value, Mapping):
        if token_type is TokenType.SHADOW or "offsetX" in value:
            return _shadow_css(value)
        return " ".join(css_literal(v) for v in value.values())
    if isinstance(value, list | tuple):
        if token_type is TokenType.CUBIC_BEZIER:
            return f"cubic-bezier({', '.join(css_literal(v) for v in value)})"
        if token_type is TokenType.FONT_FAMILY:
            return ", ".join(
                f'"{v}"' if isinstance(v, str) and _WHITESPACE_RE.search(v) else css_literal(v)
                for v in value
            )
        return ", ".join(css_literal(v, token_type) for v in value)
    return "" if value is None else str(value)


def css_override_value(literal: Any, token_type: TokenType = TokenType.UNKNOWN) -> str:
    """Render an authored literal, turning references into ``var()`` calls."""
    text = css_literal(literal, token_type)
    if "{" in text:
        return rewrite_to_css_vars(text)
    return text


def css_value(token: Token) -> str:
    """The CSS value of a token: a var() chain if authored with references."""
    if token.has_references:
        return css_override_value(token.authored_value, token.type)
    return css_literal(token.resolved_value, token.type)


# =============================================================================
# Format
# =============================================================================


def format_css_variables(tokens: Sequence[Token], options: Mapping[str, Any]) -> str:
    """Format tokens as one ``@layer`` block of custom properties.

    Options:
        layer_name: Cascade layer name (default ``tokens``).
        normalize_colors: Add rgb() fallbacks for oklch() (default True).
    """
    layer_name = options.get("layer_name", DEFAULT_LAYER_NAME)

    root_lines: list[str] = []
    themes: dict[str, list[str]] = {}

    for token in tokens:
        name = css_variable_name(token.path)
        root_lines.append(f"    {name}: {css_value(token)};")

        for theme, literal in token.theme_overrides.items():
            value = css_override_value(literal, token.type)
            themes.setdefault(theme, []).append(f"    {name}: {value};")

    lines = [f"@layer {layer_name} {{", "  :root {", *root_lines, "  }"]
    for theme, theme_lines in themes.items():
        lines.append(f'  [data-theme="{theme}"] {{')
        lines.extend(theme_lines)
        lines.append("  }")
    lines.append("}")
    css = "\n".join(lines) + "\n"

    if options.get("normalize_colors", True):
        css = normalize_color_functions(css)
    return css


# =============================================================================
# Compatibility normalization
# =============================================================================


def _fallback_value(value: str) -> str | None:
    """Replace every oklch() call with rgb(); None if any call is unparseable."""
    calls = _OKLCH_CALL_RE.findall(value)
    if not calls:
        return None
    for call in calls:
        color = parse_color(call)
        if color is None:
            return None
        value = value.replace(call, rgba_to_css(color), 1)
    return value


def _normalize(css: str) -> str:
    output: list[str] = []
    # (indent, selector, declarations preserved for @supports)
    stack: list[tuple[str, str, list[str]]] = []

    for line in css.split("\n"):
        opened = _BLOCK_OPEN_RE.match(line)
        if opened:
            stack.append((opened.group(1), opened.group(2), []))
            output.append(line)
            continue

        if _BLOCK_CLOSE_RE.match(line):
            output.append(line)
            if not stack:
                raise ValueError("unbalanced closing brace")
            indent, selector, preserved = stack.pop()
            if preserved and not selector.startswith("@"):
                output.append(f"{indent}@supports {OKLCH_SUPPORTS_QUERY} {{")
                output.append(f"{indent}  {selector} {{")
                output.extend(f"{indent}  {declaration}" for declaration in preserved)
                output.append(f"{indent}  }}")
                output.append(f"{indent}}}")
            continue

        declaration = _DECLARATION_RE.match(line)
        if declaration and stack and "oklch(" in declaration.group(3):
            lead, prop, value = declaration.groups()
            fallback = _fallback_value(value)
            if fallback is not None:
                output.append(f"{lead}{prop}: {fallback};")
                stack[-1][2].append(f"{lead.removeprefix(stack[-1][0])}{prop}: {value};")
                continue

        output.append(line)

    if stack:
        raise ValueError("unclosed block")
    return "\n".join(output)


def normalize_color_functions(css: str) -> str:
    """Add broadly supported fallbacks for modern color functions.

    Every declaration using ``oklch()`` is rewritten to ``rgb()`` and the
    original declaration is kept in an ``@supports`` block right after its
    rule, so capable browsers still get the wide-gamut value. Never fails:
    on any error the input is returned unchanged.
    """
    try:
        return _normalize(css)
    except Exception as e:
        logger.warning(f"Color normalization skipped: {e}")
        return css
