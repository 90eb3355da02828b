"""
tokenbuild CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform
from pathlib import Path

import typer

import tokenbuild


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()
        install_location = Path(tokenbuild.__file__).parent

        typer.echo(f"tokenbuild version {tokenbuild.__version__}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")

        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from --verbose or the LOG_LEVEL environment variable."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
