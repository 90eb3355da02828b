"""
Light/dark and base/semantic partitioning.

Classification trusts file naming conventions: a token is dark when its
source path contains ``dark`` and base when it contains ``base``. Within a
bucket, tokens sharing a name overwrite each other in input order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .ir import FlattenedToken, Layer, Scheme


@dataclass
class SchemeBuckets:
    """Tokens split by color scheme, each keyed by variable name."""

    light: dict[str, FlattenedToken] = field(default_factory=dict)
    dark: dict[str, FlattenedToken] = field(default_factory=dict)

    def bucket(self, scheme: Scheme) -> dict[str, FlattenedToken]:
        return self.dark if scheme == Scheme.DARK else self.light

    def __len__(self) -> int:
        return len(self.light) + len(self.dark)


def partition_tokens(
    tokens: Iterable[FlattenedToken],
    mode: Layer | None = None,
) -> SchemeBuckets:
    """
    Split tokens into light and dark buckets.

    Args:
        tokens: Flattened tokens in traversal order.
        mode: Keep only this layer; None keeps base and semantic tokens.

    Returns:
        SchemeBuckets with last-write-wins collisions per bucket.
    """
    buckets = SchemeBuckets()
    for token in tokens:
        if mode is not None and token.layer != mode:
            continue
        buckets.bucket(token.scheme)[token.name] = token
    return buckets


def partition_by_layer(tokens: Iterable[FlattenedToken]) -> dict[Layer, SchemeBuckets]:
    """Split tokens into all four layer/scheme buckets."""
    result = {layer: SchemeBuckets() for layer in Layer}
    for token in tokens:
        result[token.layer].bucket(token.scheme)[token.name] = token
    return result


def resolution_scope(buckets: SchemeBuckets, scheme: Scheme) -> dict[str, FlattenedToken]:
    """
    Tokens visible to alias resolution for a scheme.

    Dark tokens see the light tokens overlaid with the dark ones, so a dark
    override wins over its light counterpart.
    """
    scope = dict(buckets.light)
    if scheme == Scheme.DARK:
        scope.update(buckets.dark)
    return scope
