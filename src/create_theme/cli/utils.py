"""
create-theme CLI utilities.

Shared helpers for version output and logging setup.
"""

import logging
import os
import platform

import typer

from create_theme._version import get_version

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Configure root logging from ``LOG_LEVEL`` (default WARNING)."""
    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING), format=LOG_FORMAT)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"create-theme version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()
