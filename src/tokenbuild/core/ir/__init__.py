"""
tokenbuild Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .tokens import (
    FlattenedToken,
    Layer,
    ReferenceMode,
    Scheme,
    TokenSource,
    layer_for_path,
    scheme_for_path,
)

__all__ = [
    "FlattenedToken",
    "Layer",
    "ReferenceMode",
    "Scheme",
    "TokenSource",
    "layer_for_path",
    "scheme_for_path",
]
