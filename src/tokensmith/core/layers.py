"""
Layer classification for the primitive -> semantic -> component cascade.

Classification is a pure function of the token path. Source directories
only suggest a layer; the path alone decides which CSS file a token lands in.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from types import MappingProxyType

from .ir import Layer, Token

# Scale names under color.* that are raw palette values
PRIMITIVE_COLOR_FAMILIES: frozenset[str] = frozenset(
    {"blue", "purple", "green", "red", "amber", "cyan", "neutral"}
)

# Role names under color.* that point at palette values
SEMANTIC_COLOR_GROUPS: frozenset[str] = frozenset({"text", "background", "border", "interactive"})

# Top-level groups that are always semantic
SEMANTIC_GROUPS: frozenset[str] = frozenset({"space", "typography", "size"})

COMPONENT_GROUP = "component"


def classify(path: Sequence[str]) -> Layer | None:
    """Assign a token path to a layer.

    Returns:
        The layer, or None for ``color.*`` tokens whose second segment is
        neither a primitive family nor a semantic group. Those tokens are
        left out of every CSS layer file.
    """
    top = path[0]
    if top == COMPONENT_GROUP:
        return Layer.COMPONENT
    if top in SEMANTIC_GROUPS:
        return Layer.SEMANTIC
    if top == "color":
        second = path[1] if len(path) > 1 else ""
        if second in PRIMITIVE_COLOR_FAMILIES:
            return Layer.PRIMITIVE
        if second in SEMANTIC_COLOR_GROUPS:
            return Layer.SEMANTIC
        return None
    # spacing, font, animation, shadow, sizing, z-index, ...
    return Layer.PRIMITIVE


def is_primitive_token(token: Token) -> bool:
    return classify(token.path) is Layer.PRIMITIVE


def is_semantic_token(token: Token) -> bool:
    return classify(token.path) is Layer.SEMANTIC


def is_component_token(token: Token) -> bool:
    return classify(token.path) is Layer.COMPONENT


def is_unclassified_token(token: Token) -> bool:
    return classify(token.path) is None


def _all_tokens(token: Token) -> bool:
    return True


TokenFilter = Callable[[Token], bool]

# Filter names usable from tokensmith.yaml
FILTERS: MappingProxyType[str, TokenFilter] = MappingProxyType(
    {
        "all": _all_tokens,
        "primitive": is_primitive_token,
        "semantic": is_semantic_token,
        "component": is_component_token,
    }
)
