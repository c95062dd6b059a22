"""
DTCG reference handling.

A reference is ``{dot.path}`` embedded in a token value. The loader resolves
references to literals (``resolve_value``); the CSS emitter instead rewrites
them into ``var(--dot-path)`` so the cascade stays live at runtime
(``rewrite_to_css_vars``).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

REFERENCE_RE = re.compile(r"\{([^}]+)\}")


class UnresolvedReference(LookupError):
    """A reference could not be resolved to a literal."""

    def __init__(self, reference: str, reason: str = "unknown token"):
        self.reference = reference
        self.reason = reason
        super().__init__(f"{{{reference}}}: {reason}")


def find_references(value: Any) -> list[str]:
    """All reference paths in a literal, depth first, in order of appearance."""
    if isinstance(value, str):
        return REFERENCE_RE.findall(value)
    if isinstance(value, dict):
        return [ref for v in value.values() for ref in find_references(v)]
    if isinstance(value, list | tuple):
        return [ref for v in value for ref in find_references(v)]
    return []


def resolve_value(value: Any, lookup: Callable[[str], Any]) -> Any:
    """Replace every reference in ``value`` with the literal ``lookup`` returns.

    A string that is exactly one reference takes the referenced literal
    unchanged, so references to arrays, objects and numbers keep their type.
    References inside longer strings are substituted as text.

    Raises:
        UnresolvedReference: propagated from ``lookup``.
    """
    if isinstance(value, str):
        whole = REFERENCE_RE.fullmatch(value.strip())
        if whole:
            return lookup(whole.group(1))
        return REFERENCE_RE.sub(lambda m: _as_text(lookup(m.group(1))), value)
    if isinstance(value, dict):
        return {k: resolve_value(v, lookup) for k, v in value.items()}
    if isinstance(value, list):
        return [resolve_value(v, lookup) for v in value]
    return value


def _as_text(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ", ".join(_as_text(v) for v in value)
    return str(value)


def reference_to_css_var(reference: str) -> str:
    """``color.blue.500`` -> ``var(--color-blue-500)``."""
    return f"var(--{reference.replace('.', '-')})"


def rewrite_to_css_vars(text: str) -> str:
    """Rewrite every ``{a.b.c}`` in a string to ``var(--a-b-c)``."""
    return REFERENCE_RE.sub(lambda m: reference_to_css_var(m.group(1)), text)
