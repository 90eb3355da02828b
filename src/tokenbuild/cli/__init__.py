"""
tokenbuild CLI Package.

- build.py: build and tokens commands
- utils.py: Shared utilities
"""

import typer

from tokenbuild.cli.build import build_command, tokens_command
from tokenbuild.cli.utils import version_callback

app = typer.Typer(
    help="tokenbuild - design tokens to CSS custom properties",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """tokenbuild CLI main callback for global options."""
    pass


app.command(name="build")(build_command)
app.command(name="tokens")(tokens_command)


def main() -> None:
    app()


__all__ = ["app", "main", "version_callback"]
