"""
Token IR types.

A token tree is parsed into ``TokenSource`` objects (one per file), which
the flattener turns into ``FlattenedToken`` records. The file path of a
source decides its ``Layer`` and ``Scheme``.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class Layer(StrEnum):
    """Base palette tokens versus semantic (role) tokens."""

    BASE = "base"
    SEMANTIC = "semantic"


class Scheme(StrEnum):
    """Color scheme a token belongs to."""

    LIGHT = "light"
    DARK = "dark"


class ReferenceMode(StrEnum):
    """How alias references are written into CSS."""

    NAME = "name"  # color-brand-primary
    VAR = "var"  # var(--color-brand-primary)
    RESOLVE = "resolve"  # literal value of the target token


# =============================================================================
# Path classification
# =============================================================================


def layer_for_path(path: str | Path) -> Layer:
    """Classify a source path as base or semantic by substring."""
    return Layer.BASE if "base" in str(path) else Layer.SEMANTIC


def scheme_for_path(path: str | Path) -> Scheme:
    """Classify a source path as dark or light by substring."""
    return Scheme.DARK if "dark" in str(path) else Scheme.LIGHT


# =============================================================================
# Tokens
# =============================================================================


class FlattenedToken(BaseModel):
    """A single leaf of a token tree, addressed by its kebab-case name."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Kebab-case variable name without the leading --")
    value: str = Field(description="Composed literal or {dotted.alias} reference")
    comment: str = Field(default="", description="Token description, empty if none")
    path: tuple[str, ...] = Field(default=(), description="Keys traversed to reach the token")
    source: str = Field(default="", description="Originating source file path")

    @property
    def layer(self) -> Layer:
        return layer_for_path(self.source)

    @property
    def scheme(self) -> Scheme:
        return scheme_for_path(self.source)

    @property
    def is_alias(self) -> bool:
        from tokenbuild.core.references import is_alias

        return is_alias(self.value)


class TokenSource(BaseModel):
    """A parsed token file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    tree: dict[Any, Any] = Field(default_factory=dict)

    @property
    def layer(self) -> Layer:
        return layer_for_path(self.path)

    @property
    def scheme(self) -> Scheme:
        return scheme_for_path(self.path)
