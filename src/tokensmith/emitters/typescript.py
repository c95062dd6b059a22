"""
TypeScript literal types for compile-time token-name checking.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from ..core.ir import Token

HEADER = "// Generated token types - do not edit manually"


def js_literal(value: Any) -> str:
    """Compact JSON, as JSON.stringify would print it."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _type_alias_name(type_name: str) -> str:
    return f"{type_name[:1].upper()}{type_name[1:]}Token"


def format_token_types(tokens: Sequence[Token], options: Mapping[str, Any]) -> str:
    """One string-literal union per token type plus a path -> value map.

    Output::

        export type ColorToken =
          | 'color.blue.500';

        export interface TokenMap {
          'color.blue.500': "oklch(0.6 0.15 250)";
        }
    """
    by_type: dict[str, list[str]] = {}
    for token in tokens:
        by_type.setdefault(token.type_name, []).append(token.name)

    output = f"{HEADER}\n\n"

    for type_name, paths in by_type.items():
        output += f"export type {_type_alias_name(type_name)} =\n"
        output += "\n".join(f"  | '{path}'" for path in paths)
        output += ";\n\n"

    output += "export interface TokenMap {\n"
    for token in tokens:
        output += f"  '{token.name}': {js_literal(token.resolved_value)};\n"
    output += "}\n\n"

    output += "export type TokenValue<T extends keyof TokenMap> = TokenMap[T];\n"
    output += "export type TokenKey = keyof TokenMap;\n"
    return output
