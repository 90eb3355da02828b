"""Stylesheet build for design tokens.

Discovers token files under the project root, flattens them and writes one
CSS file per configured output.

Usage::

    from tokenbuild.build import build_tokens
    result = build_tokens(Path("."))

Or via CLI::

    tokenbuild build
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from tokenbuild.core.fileset import discover_token_files
from tokenbuild.core.flatten import flatten_sources
from tokenbuild.core.ir import FlattenedToken
from tokenbuild.core.manifest import FileConfig, ProjectManifest, load_project_manifest
from tokenbuild.core.token_loader import load_token_sources
from tokenbuild.themes.css_generator import FormatContext, generate_css, reference_mode_for

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a build run."""

    written: list[Path] = field(default_factory=list)
    skipped_sources: list[Path] = field(default_factory=list)
    token_count: int = 0


def collect_tokens(
    project_root: Path,
    manifest: ProjectManifest,
    skipped: list[Path] | None = None,
) -> list[FlattenedToken]:
    """Discover, load and flatten every token file of the project."""
    root = project_root.resolve()
    files = discover_token_files(root, manifest)
    if not files:
        logger.warning("No token files matched %s under %s", ", ".join(manifest.source), root)
    sources = load_token_sources(files, root, skipped)
    return flatten_sources(sources)


def select_tokens(tokens: list[FlattenedToken], file: FileConfig) -> list[FlattenedToken]:
    """Apply an output file's source path filter."""
    return [token for token in tokens if file.filter.matches(token.source)]


def render_file(
    file: FileConfig,
    tokens: list[FlattenedToken],
    header: str,
) -> str:
    """Render one output file from the full token dictionary."""
    context = FormatContext(
        reference_mode=reference_mode_for(file),
        dictionary=tokens,
        header=header,
    )
    return generate_css(file.format, select_tokens(tokens, file), context)


def build_tokens(
    project_root: Path,
    manifest: ProjectManifest | None = None,
) -> BuildResult:
    """Build every configured stylesheet.

    Args:
        project_root: Directory containing tokens.toml and the token sources.
        manifest: Configuration; loaded from the project when omitted.

    Returns:
        BuildResult listing written files and skipped sources.

    Raises:
        ManifestError: If the project's tokens.toml is invalid.
    """
    if manifest is None:
        manifest = load_project_manifest(project_root)

    result = BuildResult()
    tokens = collect_tokens(project_root, manifest, result.skipped_sources)
    result.token_count = len(tokens)

    for platform in manifest.platforms:
        build_dir = project_root / platform.build_path
        for file in platform.files:
            css = render_file(file, tokens, manifest.header)
            output_path = build_dir / file.destination
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(css, encoding="utf-8")
            logger.info("[%s] wrote %s (%s)", platform.name, output_path, file.format)
            result.written.append(output_path)

    logger.info("Build completed: %d token(s), %d file(s)", len(tokens), len(result.written))
    return result
