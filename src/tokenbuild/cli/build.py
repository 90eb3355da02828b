"""
Build commands for tokenbuild CLI.

- build:  Generate every configured stylesheet
- tokens: List flattened tokens
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tokenbuild.build import build_tokens, collect_tokens
from tokenbuild.cli.utils import configure_logging
from tokenbuild.core.errors import ManifestError
from tokenbuild.core.ir import Layer, Scheme
from tokenbuild.core.manifest import ProjectManifest, load_project_manifest

console = Console()


def _load_manifest(project_dir: Path, config: Path | None) -> ProjectManifest:
    try:
        return load_project_manifest(project_dir, config)
    except ManifestError as e:
        console.print(f"[red]Error loading manifest: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def build_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Manifest file (default: <project>/tokens.toml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Generate CSS custom property stylesheets from token files.

    Examples:
        tokenbuild build                  # Build the current directory
        tokenbuild build -p design/       # Build another project
    """
    configure_logging(verbose)
    project_path = project_dir.resolve()
    manifest = _load_manifest(project_path, config)

    result = build_tokens(project_path, manifest)

    for path in result.skipped_sources:
        console.print(f"[yellow]Skipped unreadable token file: {escape(str(path))}[/yellow]")
    for path in result.written:
        console.print(f"  {escape(str(path))}")
    console.print(
        f"[green]Build completed![/green] {result.token_count} tokens, "
        f"{len(result.written)} files"
    )


def tokens_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Manifest file (default: <project>/tokens.toml)",
    ),
    layer: Layer | None = typer.Option(None, "--layer", help="Only base or semantic tokens"),
    scheme: Scheme | None = typer.Option(None, "--scheme", help="Only light or dark tokens"),
) -> None:
    """List flattened tokens with their source files."""
    configure_logging()
    project_path = project_dir.resolve()
    manifest = _load_manifest(project_path, config)

    tokens = collect_tokens(project_path, manifest)
    if layer is not None:
        tokens = [t for t in tokens if t.layer == layer]
    if scheme is not None:
        tokens = [t for t in tokens if t.scheme == scheme]

    if not tokens:
        console.print("No tokens found.")
        return

    table = Table(title=escape(f"{manifest.name} tokens"))
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    table.add_column("Comment", style="dim")
    table.add_column("Source")
    for token in tokens:
        table.add_row(
            escape(f"--{token.name}"),
            escape(token.value),
            escape(token.comment),
            escape(token.source),
        )
    console.print(table)
    console.print(f"{len(tokens)} token(s)")
