"""
Flat JSON map for design tools (Tokens Studio, Supernova, etc.).
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from ..core.ir import Token


def format_flat_map(tokens: Sequence[Token], options: Mapping[str, Any]) -> str:
    """``{"color.blue.500": {"$value": ..., "$type": ..., "$description": ...}}``.

    Values are the resolved literals, unconverted; dictionary order is kept.
    """
    flat: dict[str, dict[str, Any]] = {}
    for token in tokens:
        entry: dict[str, Any] = {"$value": token.resolved_value, "$type": token.type_name}
        if token.description:
            entry["$description"] = token.description
        flat[token.name] = entry
    return json.dumps(flat, indent=2, ensure_ascii=False) + "\n"
