"""
Token source loading.

Reads token files discovered under the project root. JSON is used for
``*.json`` and ``*.tokens`` files, YAML for ``*.yaml`` / ``*.yml``.

Loading is best effort at the collection level: a file that cannot be read
or parsed is logged and skipped so the rest of the build still runs.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from .errors import TokenSourceError, make_source_error
from .ir import TokenSource

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _parse(path: Path, content: str) -> Any:
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            raise make_source_error(
                f"Invalid YAML: {e}",
                path,
                line=mark.line + 1 if mark else None,
                column=mark.column + 1 if mark else None,
            ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise make_source_error(f"Invalid JSON: {e.msg}", path, e.lineno, e.colno) from e


def load_token_source(path: Path, root: Path | None = None) -> TokenSource:
    """Load a single token file.

    Args:
        path: File to read.
        root: Project root; when given the source is recorded relative to it
            so that partitioning only sees the project-relative path.

    Returns:
        TokenSource with the parsed tree.

    Raises:
        TokenSourceError: If the file is unreadable, invalid, or not a mapping.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise make_source_error(f"Cannot read token file: {e}", path) from e

    data = _parse(path, content)
    if not isinstance(data, dict):
        raise make_source_error(
            f"Token file must contain an object, got {type(data).__name__}", path
        )

    recorded = path
    if root is not None:
        try:
            recorded = path.relative_to(root)
        except ValueError:
            pass

    return TokenSource(path=recorded, tree=data)


def load_token_sources(
    paths: Iterable[Path],
    root: Path | None = None,
    skipped: list[Path] | None = None,
) -> list[TokenSource]:
    """Load token files, skipping any that fail.

    Args:
        paths: Files to read, in build order.
        root: Project root passed through to load_token_source.
        skipped: Optional list collecting the paths that were skipped.

    Returns:
        Successfully parsed sources, in input order.
    """
    sources: list[TokenSource] = []
    for path in paths:
        try:
            sources.append(load_token_source(path, root))
        except TokenSourceError as e:
            logger.warning("Skipping token file: %s", e)
            if skipped is not None:
                skipped.append(path)
    logger.debug("Loaded %d token file(s)", len(sources))
    return sources
