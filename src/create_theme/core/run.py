"""
Theme generation pipeline.

Sequence: resolve package -> select widgets -> for each selected widget in
order, resolve it and emit its stylesheet -> assemble the theme file once.
The first error aborts the run; stylesheets written before it are kept.
"""

from __future__ import annotations

import logging
from typing import Any

from .css_compiler import SelectorCompiler, convert_selectors_to_css
from .emitter import emit_widget_css
from .errors import CreateThemeError, NoWidgetsSelectedError
from .filesystem import FileSystem, LocalFileSystem
from .loader import AutoLoader, WidgetModuleLoader
from .models import GenerationConfig, TargetPackage, WidgetFileRecord
from .package import resolve_package
from .questions import Prompter, get_file_questions
from .theme_file import ThemeFileWriter, assemble_theme, create_theme_file
from .widgets import check_unique_theme_keys, resolve_widget

logger = logging.getLogger(__name__)


async def select_widgets(prompter: Prompter, fs: FileSystem) -> tuple[TargetPackage, list[str]]:
    """
    Ask for the package, check it, then ask which of its widget files to theme.

    Only the first package name is used.
    """
    names = await prompter.ask_for_package_names()
    if not names:
        raise CreateThemeError("No package name was given")
    if len(names) > 1:
        logger.warning("Only one package is themed per run; ignoring %s", ", ".join(names[1:]))

    package = resolve_package(names[0], fs)
    selection = await prompter.ask_for_desired_files(get_file_questions(package, fs))
    return package, list(selection)


async def run(
    command: Any = None,
    *,
    prompter: Prompter | None = None,
    fs: FileSystem | None = None,
    loader: WidgetModuleLoader | None = None,
    compiler: SelectorCompiler = convert_selectors_to_css,
    theme_writer: ThemeFileWriter = create_theme_file,
) -> GenerationConfig:
    """
    Run the full generation pipeline.

    Args:
        command: Object exposing ``render_files``, the hook used to render the
            theme file. Passed through to the theme writer unchanged.
        prompter: Question source; defaults to the interactive console prompter
        fs: Filesystem; defaults to the working directory
        loader: Widget module loader; defaults to ``AutoLoader``
        compiler: Selector map -> CSS text
        theme_writer: Writes the aggregate theme file from the config

    Returns:
        The ``GenerationConfig`` handed to the theme writer

    Raises:
        PackageNotFoundError: The package has no theme directory
        NoWidgetsSelectedError: The selection was empty
        DuplicateThemeKeyError: Two selected files map to one theme key
        WidgetModuleLoadError: A widget module could not be loaded
        FileWriteError: A stylesheet could not be written
    """
    if prompter is None:
        from create_theme.cli_ui import ConsolePrompter

        prompter = ConsolePrompter()
    fs = fs or LocalFileSystem()
    loader = loader or AutoLoader(getattr(fs, "base", None))

    package, selection = await select_widgets(prompter, fs)
    if not selection:
        raise NoWidgetsSelectedError()
    check_unique_theme_keys(package.name, selection)

    logger.info("Theming %d widget(s) from %s", len(selection), package.name)

    records: list[WidgetFileRecord] = []
    for file_id in selection:
        theme_key, descriptor, output_path = resolve_widget(package, file_id, loader)
        records.append(emit_widget_css(descriptor, theme_key, output_path, fs, compiler))

    render_hook = getattr(command, "render_files", None)
    return assemble_theme(records, render_hook, theme_writer)
