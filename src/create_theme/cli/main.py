"""
create-theme CLI entry point.

A single command: ask for a package and its widgets, write one stylesheet per
widget under ``src/themes`` and render ``src/themes/theme.ts``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import typer

from create_theme.cli.utils import configure_logging, version_callback
from create_theme.cli_ui import print_success
from create_theme.core.constants import THEME_FILE_NAME
from create_theme.core.errors import CreateThemeError
from create_theme.core.models import RenderHook
from create_theme.core.render import TemplateRenderer
from create_theme.core.run import run

app = typer.Typer(
    help="""create-theme – scaffold CSS theme files for a package's widgets

Run from your project root. The package must be installed in node_modules
and ship a theme/ directory of compiled CSS modules.
""",
    add_completion=False,
)


@dataclass
class ThemeCommand:
    """What the pipeline needs from the CLI: the hook that renders theme.ts."""

    render_files: RenderHook = field(default_factory=TemplateRenderer)


@app.command()
def create_theme(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Scaffold CSS theme files for the widgets of an installed package."""
    configure_logging()

    try:
        config = asyncio.run(run(ThemeCommand()))
    except CreateThemeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for entry in config.themed_widgets:
        print_success(f"{config.themes_directory}/{entry.theme_key}/{entry.file_name}")
    print_success(f"{config.themes_directory}/{THEME_FILE_NAME}")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)
