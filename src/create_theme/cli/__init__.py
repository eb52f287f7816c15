"""
create-theme CLI package.

- main.py: the typer app and entry point
- utils.py: version output and logging setup
"""

from create_theme.cli.main import app, main
from create_theme.cli.utils import configure_logging, version_callback

__all__ = [
    "app",
    "main",
    "configure_logging",
    "version_callback",
]
