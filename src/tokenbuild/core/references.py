"""
Alias reference resolution and value composition.

Token values are either literals (``#fff``, ``8px``) or alias references
naming another token's dotted path (``{color.brand.primary}``). Aliases are
rewritten to one of three CSS forms depending on ``ReferenceMode``:

- NAME:    ``color-brand-primary``
- VAR:     ``var(--color-brand-primary)``
- RESOLVE: the literal value at the end of the alias chain

Structured dimensions (``{"magnitude": "8", "unit": "px"}``) are composed
into ``8px`` before any rewriting.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .ir import FlattenedToken, ReferenceMode

logger = logging.getLogger(__name__)

REFERENCE_OPEN = "{"
REFERENCE_CLOSE = "}"
NAME_SEPARATOR = "-"


def normalize_name(dotted: str) -> str:
    """Convert a dotted/underscored path into a kebab-case variable name."""
    return dotted.replace(".", NAME_SEPARATOR).replace("_", NAME_SEPARATOR)


def is_alias(value: Any) -> bool:
    """Return True if value is a ``{...}`` alias reference."""
    return (
        isinstance(value, str)
        and len(value) > 2
        and value.startswith(REFERENCE_OPEN)
        and value.endswith(REFERENCE_CLOSE)
    )


def alias_target(value: str) -> str:
    """Strip the delimiters and return the normalized target name."""
    return normalize_name(value[len(REFERENCE_OPEN) : -len(REFERENCE_CLOSE)].strip())


def is_dimension(raw: Any) -> bool:
    """Return True if raw is a magnitude/unit mapping with scalar parts."""
    if not isinstance(raw, Mapping) or not ("magnitude" in raw or "unit" in raw):
        return False
    return not any(isinstance(raw.get(part), Mapping) for part in ("magnitude", "unit"))


def compose_dimension(value: Mapping[str, Any]) -> str:
    """Concatenate magnitude and unit; a missing part contributes nothing."""
    magnitude = value.get("magnitude")
    unit = value.get("unit")
    return f"{'' if magnitude is None else magnitude}{'' if unit is None else unit}"


def compose_value(raw: Any) -> str | None:
    """
    Turn an authored token value into a string.

    Returns None for values that cannot be rendered as CSS; callers skip
    such tokens.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, int | float):
        return str(raw)
    if is_dimension(raw):
        return compose_dimension(raw)
    if isinstance(raw, list) and raw and all(isinstance(item, str) for item in raw):
        # Font stacks
        return ", ".join(raw)
    return None


def resolve_reference(
    raw: Any,
    mode: ReferenceMode = ReferenceMode.VAR,
    lookup: Mapping[str, FlattenedToken] | None = None,
) -> str | None:
    """
    Rewrite a raw token value for CSS output.

    Args:
        raw: Authored value, composed string, or alias reference.
        mode: Rewrite strategy for aliases.
        lookup: Flattened tokens by name, required for RESOLVE.

    Returns:
        The CSS value, or None when the value is malformed or an alias
        cannot be resolved.
    """
    value = compose_value(raw)
    if value is None or not is_alias(value):
        return value

    target = alias_target(value)
    if mode == ReferenceMode.NAME:
        return target
    if mode == ReferenceMode.VAR:
        return f"var(--{target})"
    return _follow_alias(target, lookup or {})


def _follow_alias(target: str, lookup: Mapping[str, FlattenedToken]) -> str | None:
    """Walk an alias chain to its literal value."""
    seen: list[str] = []
    while True:
        if target in seen:
            logger.warning("Circular reference: %s", " -> ".join([*seen, target]))
            return None
        seen.append(target)

        token = lookup.get(target)
        if token is None:
            logger.warning("Unresolved reference {%s}", target)
            return None
        if not token.is_alias:
            return token.value
        target = alias_target(token.value)
