"""
CSS generator for flattened design tokens.

Renders CSS custom properties from flattened tokens. Light tokens go in a
top-level ``:root`` block; dark tokens are wrapped in a
``prefers-color-scheme: dark`` media query.

Formats:
- css/variables:           light :root plus dark media block (if any dark tokens)
- css/variables-combined:  semantic tokens only, dark media block always emitted
- css/variables-dark:      dark media block only
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from tokenbuild.core.ir import FlattenedToken, Layer, ReferenceMode, Scheme
from tokenbuild.core.manifest import HEADER_COMMENT, FileConfig
from tokenbuild.core.partition import SchemeBuckets, partition_tokens, resolution_scope
from tokenbuild.core.references import resolve_reference

logger = logging.getLogger(__name__)

DARK_MEDIA_QUERY = "@media (prefers-color-scheme: dark)"

DEFAULT_REFERENCE_MODES: dict[str, ReferenceMode] = {
    "css/variables": ReferenceMode.RESOLVE,
    "css/variables-combined": ReferenceMode.VAR,
    "css/variables-dark": ReferenceMode.NAME,
}


@dataclass
class FormatContext:
    """Everything a format needs besides the tokens it renders.

    Attributes:
        reference_mode: How alias references are written
        dictionary: All tokens of the build, used to resolve aliases
        header: Comment prepended to the output
    """

    reference_mode: ReferenceMode = ReferenceMode.VAR
    dictionary: list[FlattenedToken] = field(default_factory=list)
    header: str = HEADER_COMMENT

    def scope(self, scheme: Scheme) -> dict[str, FlattenedToken]:
        return resolution_scope(partition_tokens(self.dictionary), scheme)


Formatter = Callable[[list[FlattenedToken], FormatContext], str]


def format_declaration(name: str, value: str, comment: str = "", indent: int = 2) -> str:
    """Format one ``--name: value;`` line with an optional inline comment."""
    line = f"{' ' * indent}--{name}: {value};"
    if comment:
        # A literal */ would close the comment early
        comment = comment.replace("*/", "*\\/")
        line += f" /* {comment} */"
    return line


def _generate_token_lines(
    tokens: Iterable[FlattenedToken],
    context: FormatContext,
    scheme: Scheme,
    indent: int,
) -> list[str]:
    """
    Generate CSS custom property lines, skipping tokens that fail to resolve.

    Args:
        tokens: Tokens in output order
        context: Reference mode and resolution dictionary
        scheme: Scheme whose tokens are visible to alias resolution
        indent: Number of spaces for indentation

    Returns:
        List of CSS property lines
    """
    scope = context.scope(scheme) if context.reference_mode == ReferenceMode.RESOLVE else None
    lines: list[str] = []
    for token in tokens:
        value = resolve_reference(token.value, context.reference_mode, scope)
        if value is None:
            logger.warning("Omitting --%s from %s", token.name, token.source or "output")
            continue
        lines.append(format_declaration(token.name, value, token.comment, indent))
    return lines


def _root_block(buckets: SchemeBuckets, context: FormatContext) -> list[str]:
    lines = [":root {"]
    lines.extend(_generate_token_lines(buckets.light.values(), context, Scheme.LIGHT, 2))
    lines.append("}")
    return lines


def _dark_block(buckets: SchemeBuckets, context: FormatContext) -> list[str]:
    lines = [f"{DARK_MEDIA_QUERY} {{", "  :root {"]
    lines.extend(_generate_token_lines(buckets.dark.values(), context, Scheme.DARK, 4))
    lines.append("  }")
    lines.append("}")
    return lines


def _join(context: FormatContext, *blocks: list[str]) -> str:
    body = "\n\n".join("\n".join(block) for block in blocks)
    return f"{context.header}{body}\n"


def format_variables(tokens: list[FlattenedToken], context: FormatContext) -> str:
    """Light tokens in :root, dark tokens in the media block when present."""
    buckets = partition_tokens(tokens)
    if not buckets.dark:
        return _join(context, _root_block(buckets, context))
    return _join(context, _root_block(buckets, context), _dark_block(buckets, context))


def format_variables_combined(tokens: list[FlattenedToken], context: FormatContext) -> str:
    """Semantic tokens: light in :root, dark in the media block."""
    buckets = partition_tokens(tokens, Layer.SEMANTIC)
    return _join(context, _root_block(buckets, context), _dark_block(buckets, context))


def format_variables_dark(tokens: list[FlattenedToken], context: FormatContext) -> str:
    """Only the dark media block."""
    buckets = partition_tokens(tokens)
    return _join(context, _dark_block(buckets, context))


FORMATTERS: dict[str, Formatter] = {
    "css/variables": format_variables,
    "css/variables-combined": format_variables_combined,
    "css/variables-dark": format_variables_dark,
}


def reference_mode_for(file: FileConfig) -> ReferenceMode:
    """
    Pick the reference mode for an output file.

    An explicit ``reference_mode`` wins. Otherwise ``output_references``
    switches css/variables from literal resolution to var() references.
    """
    if file.reference_mode is not None:
        return file.reference_mode
    if file.format == "css/variables" and file.output_references:
        return ReferenceMode.VAR
    return DEFAULT_REFERENCE_MODES[file.format]


def generate_css(format_name: str, tokens: list[FlattenedToken], context: FormatContext) -> str:
    """
    Render tokens with a named format.

    Args:
        format_name: Key of FORMATTERS
        tokens: Tokens selected for this file, in traversal order
        context: Rendering context

    Returns:
        CSS text
    """
    try:
        formatter = FORMATTERS[format_name]
    except KeyError:
        raise ValueError(f"Unknown format: {format_name}") from None
    return formatter(tokens, context)
