"""
Token source loader.

Reads DTCG token documents (JSON or YAML) matched by the configured source
globs, flattens their group hierarchy into one ordered list of tokens and
resolves ``{dot.path}`` references. Each Token keeps both the resolved
literal and the value as authored.

Document shape::

    {
      "color": {
        "$type": "color",
        "blue": {
          "500": {"$value": "oklch(0.6 0.15 250)", "$description": "Brand"}
        }
      }
    }

A group's ``$type`` applies to every token below it that does not set its
own. Theme overrides live under ``$extensions.theme.<name>``.
"""

from __future__ import annotations

import glob
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import TokenContext, TokenSourceError
from .ir import Token, TokenDictionary, TokenType
from .references import UnresolvedReference, resolve_value

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}
# Keys only a token record carries. A node with just $type is an (empty) group.
_TOKEN_ONLY_KEYS = {"$description", "$extensions"}


@dataclass
class _RawToken:
    """A token record as read, before reference resolution."""

    path: tuple[str, ...]
    value: Any
    raw_type: str | None
    description: str | None
    source: str | None
    theme_overrides: dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Reading documents
# =============================================================================


def _expand_pattern(project_root: Path, pattern: str) -> list[Path]:
    # Path.glob only takes relative patterns
    if Path(pattern).is_absolute():
        return sorted(Path(match) for match in glob.glob(pattern, recursive=True))
    return sorted(project_root.glob(pattern))


def discover_sources(project_root: Path, patterns: list[str]) -> list[Path]:
    """Expand source globs relative to the project root.

    Absolute patterns are expanded as given. Matches are sorted within each
    pattern, pattern order is kept and a file matched by several patterns is
    only read once.
    """
    seen: set[Path] = set()
    files: list[Path] = []
    for pattern in patterns:
        for path in _expand_pattern(project_root, pattern):
            if path.is_file() and path not in seen:
                seen.add(path)
                files.append(path)
    return files


def read_document(path: Path, display_name: str | None = None) -> dict[str, Any]:
    """Parse one token document.

    Raises:
        TokenSourceError: If the file is not valid JSON/YAML or its root is
            not an object.
    """
    name = display_name or str(path)
    content = path.read_text(encoding="utf-8")

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except json.JSONDecodeError as e:
        raise TokenSourceError(f"Invalid JSON: {e}", TokenContext(file=name)) from e
    except yaml.YAMLError as e:
        raise TokenSourceError(f"Invalid YAML: {e}", TokenContext(file=name)) from e

    if data is None:
        logger.warning(f"Empty token document: {name}")
        return {}
    if not isinstance(data, dict):
        raise TokenSourceError(
            f"Document root must be an object, got {type(data).__name__}",
            TokenContext(file=name),
        )
    return data


# =============================================================================
# Flattening
# =============================================================================


def _collect(
    node: dict[str, Any],
    path: tuple[str, ...],
    inherited_type: str | None,
    source: str | None,
    out: dict[str, _RawToken],
) -> None:
    group_type = node.get("$type", inherited_type)

    for key, child in node.items():
        if key.startswith("$"):
            continue
        child_path = (*path, key)
        dotted = ".".join(child_path)

        if not isinstance(child, dict):
            raise TokenSourceError(
                "Token record is missing $value",
                TokenContext(file=source, path=dotted),
            )

        if "$value" in child:
            extensions = child.get("$extensions") or {}
            themes = extensions.get("theme") if isinstance(extensions, dict) else None
            if dotted in out:
                logger.warning(
                    f"Token {dotted} redefined in {source} "
                    f"(previously {out[dotted].source}); using the later value"
                )
            out[dotted] = _RawToken(
                path=child_path,
                value=child["$value"],
                raw_type=child.get("$type", group_type),
                description=child.get("$description"),
                source=source,
                theme_overrides=dict(themes) if isinstance(themes, dict) else {},
            )
            continue

        has_children = any(
            not k.startswith("$") and isinstance(v, dict) for k, v in child.items()
        )
        if not has_children and _TOKEN_ONLY_KEYS & child.keys():
            raise TokenSourceError(
                "Token record is missing $value",
                TokenContext(file=source, path=dotted),
            )

        _collect(child, child_path, group_type, source, out)


def flatten_documents(documents: list[tuple[str, dict[str, Any]]]) -> dict[str, _RawToken]:
    """Flatten (source name, document) pairs into raw tokens keyed by dotted path."""
    raw: dict[str, _RawToken] = {}
    for source, document in documents:
        _collect(document, (), None, source, raw)
    return raw


# =============================================================================
# Reference resolution
# =============================================================================


def _resolve_all(raw: dict[str, _RawToken]) -> dict[str, Any]:
    """Resolve every token's value, tolerating unknown and circular references."""
    cache: dict[str, Any] = {}
    in_progress: set[str] = set()

    def lookup(reference: str) -> Any:
        if reference not in raw:
            raise UnresolvedReference(reference)
        return resolve(reference)

    def resolve(name: str) -> Any:
        if name in cache:
            return cache[name]
        if name in in_progress:
            raise UnresolvedReference(name, "circular reference")
        in_progress.add(name)
        try:
            value = resolve_value(raw[name].value, lookup)
        finally:
            in_progress.discard(name)
        cache[name] = value
        return value

    def lenient_lookup(reference: str) -> Any:
        try:
            return lookup(reference)
        except UnresolvedReference:
            return f"{{{reference}}}"

    results: dict[str, Any] = {}
    for name, token in raw.items():
        try:
            results[name] = resolve(name)
        except UnresolvedReference as e:
            logger.warning(f"Unresolved reference in {name} ({token.source}): {e}")
            results[name] = resolve_value(token.value, lenient_lookup)
    return results


# =============================================================================
# Public API
# =============================================================================


def build_dictionary(documents: list[tuple[str, dict[str, Any]]]) -> TokenDictionary:
    """Build a TokenDictionary from already-parsed documents.

    Args:
        documents: (source name, parsed document) pairs in load order.

    Raises:
        TokenSourceError: If a token record has no $value.
    """
    raw = flatten_documents(documents)
    resolved = _resolve_all(raw)

    tokens = [
        Token(
            path=item.path,
            type=TokenType.from_raw(item.raw_type),
            raw_type=item.raw_type,
            resolved_value=resolved[name],
            authored_value=item.value,
            description=item.description,
            theme_overrides=item.theme_overrides,
            source=item.source,
        )
        for name, item in raw.items()
    ]
    return TokenDictionary(tokens)


def load_tokens(project_root: Path, patterns: list[str]) -> TokenDictionary:
    """Load every token document matched by ``patterns`` into one dictionary.

    Raises:
        TokenSourceError: On unreadable documents or records without $value.
    """
    files = discover_sources(project_root, patterns)
    if not files:
        logger.warning(f"No token sources matched {patterns} under {project_root}")

    documents: list[tuple[str, dict[str, Any]]] = []
    for path in files:
        try:
            display = path.relative_to(project_root).as_posix()
        except ValueError:
            display = str(path)
        documents.append((display, read_document(path, display)))

    dictionary = build_dictionary(documents)
    logger.info(f"Loaded {len(dictionary)} tokens from {len(files)} source files")
    return dictionary
