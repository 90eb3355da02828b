"""
Token tree flattening.

Walks a nested token tree and emits one ``FlattenedToken`` per leaf record,
named by joining the traversed keys with ``-``::

    {"color": {"brand": {"primary": {"$value": "#0af"}}}}
    -> color-brand-primary: #0af

A mapping is a leaf record when it carries ``$value`` (DTCG) or a ``value``
holding a renderable value. A ``value`` key holding a group is a child
named "value", not the parent's value.
Malformed leaves are dropped without raising.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .ir import FlattenedToken, TokenSource
from .references import NAME_SEPARATOR, compose_value, is_dimension, normalize_name

logger = logging.getLogger(__name__)

VALUE_KEYS = ("$value", "value")
DESCRIPTION_KEYS = ("$description", "description")


def is_token_record(node: Any) -> bool:
    """Return True if node is a leaf token record."""
    if not isinstance(node, Mapping):
        return False
    if "$value" in node:
        return True
    if "value" not in node:
        return False
    value = node["value"]
    return not isinstance(value, Mapping) or is_dimension(value)


def token_name(path: Sequence[str]) -> str:
    """Build the CSS variable name for a key path."""
    return NAME_SEPARATOR.join(normalize_name(segment) for segment in path)


def _first(record: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return None


def _make_token(
    record: Mapping[str, Any], path: tuple[str, ...], source: str
) -> FlattenedToken | None:
    value = compose_value(_first(record, VALUE_KEYS))
    if value is None:
        logger.debug("Skipping malformed token %s in %s", ".".join(path), source or "<tree>")
        return None

    description = _first(record, DESCRIPTION_KEYS)
    return FlattenedToken(
        name=token_name(path),
        value=value,
        comment=description if isinstance(description, str) else "",
        path=path,
        source=source,
    )


def flatten_tree(
    tree: Mapping[str, Any],
    path_prefix: Sequence[str] = (),
    *,
    source: str = "",
) -> dict[str, FlattenedToken]:
    """
    Flatten a token tree into an ordered name -> token mapping.

    Args:
        tree: Nested token tree.
        path_prefix: Keys already traversed (empty at the root).
        source: Originating file path recorded on each token.

    Returns:
        Tokens in key encounter order. Colliding names keep the position of
        the first occurrence and the value of the last.
    """
    tokens: dict[str, FlattenedToken] = {}
    prefix = tuple(path_prefix)

    for key, node in tree.items():
        key = str(key)
        if key.startswith("$"):
            continue

        path = (*prefix, key)
        if is_token_record(node):
            token = _make_token(node, path, source)
            if token is not None:
                tokens[token.name] = token
        elif isinstance(node, Mapping):
            tokens.update(flatten_tree(node, path, source=source))
        else:
            logger.debug("Skipping non-token entry %s in %s", ".".join(path), source or "<tree>")

    return tokens


def flatten_source(source: TokenSource) -> list[FlattenedToken]:
    """Flatten a parsed token file."""
    return list(flatten_tree(source.tree, source=source.path.as_posix()).values())


def flatten_sources(sources: Iterable[TokenSource]) -> list[FlattenedToken]:
    """Flatten several sources, concatenated in source order."""
    tokens: list[FlattenedToken] = []
    for source in sources:
        tokens.extend(flatten_source(source))
    return tokens
