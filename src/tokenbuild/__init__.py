"""
tokenbuild - design token build pipeline.

Flattens nested JSON/YAML token trees into CSS custom properties, rewrites
alias references and splits light/dark variants into
``prefers-color-scheme`` blocks.
"""

from __future__ import annotations

from ._version import __version__
from .build import BuildResult, build_tokens
from .core.errors import ManifestError, TokenBuildError, TokenSourceError
from .core.flatten import flatten_tree
from .core.ir import FlattenedToken, Layer, ReferenceMode, Scheme
from .core.partition import partition_tokens
from .core.references import resolve_reference

__all__ = [
    "__version__",
    "BuildResult",
    "build_tokens",
    "flatten_tree",
    "partition_tokens",
    "resolve_reference",
    "FlattenedToken",
    "Layer",
    "ReferenceMode",
    "Scheme",
    "TokenBuildError",
    "TokenSourceError",
    "ManifestError",
]
