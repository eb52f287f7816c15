"""
Theme file writer and assembler.

After every widget stylesheet is written, a single ``theme.ts`` is rendered
that imports each CSS module and exports them keyed by theme key.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .constants import CSS_MODULE_EXTENSION, THEME_FILE_NAME, THEMES_DIRECTORY
from .models import GenerationConfig, RenderFile, ThemeManifestEntry, WidgetFileRecord
from .render import TEMPLATES_DIR, render_files

logger = logging.getLogger(__name__)

ThemeFileWriter = Callable[[GenerationConfig], None]

THEME_TEMPLATE = TEMPLATES_DIR / "theme.ts.jinja"


def _identifier(theme_key: str, taken: set[str]) -> str:
    """camelCase JS identifier for a theme key, unique within ``taken``."""
    words = [w for w in re.split(r"[^0-9A-Za-z]+", theme_key) if w]
    if not words:
        words = ["theme"]
    ident = words[0][:1].lower() + words[0][1:] + "".join(w[:1].upper() + w[1:] for w in words[1:])
    if ident[0].isdigit():
        ident = f"_{ident}"

    candidate, n = ident, 2
    while candidate in taken:
        candidate = f"{ident}{n}"
        n += 1
    taken.add(candidate)
    return candidate


def build_theme_context(config: GenerationConfig) -> dict[str, Any]:
    taken: set[str] = set()
    imports = [
        {
            "identifier": _identifier(entry.theme_key, taken),
            "theme_key": entry.theme_key,
            "path": f"./{entry.theme_key}/{entry.file_name}",
        }
        for entry in config.themed_widgets
    ]
    return {"imports": imports, "css_module_extension": config.css_module_extension}


def create_theme_file(config: GenerationConfig) -> None:
    """Render ``<themes_directory>/theme.ts`` through the config's render hook."""
    hook = config.render_files or render_files
    dest = Path(config.themes_directory) / THEME_FILE_NAME
    hook([RenderFile(src=THEME_TEMPLATE, dest=dest)], build_theme_context(config))
    logger.info("Theme file written to %s (%d widgets)", dest, len(config.themed_widgets))


def assemble_theme(
    records: Sequence[WidgetFileRecord],
    render_hook: Any,
    theme_writer: ThemeFileWriter = create_theme_file,
) -> GenerationConfig:
    """Build the generation config from all widget records and write the theme once."""
    config = GenerationConfig(
        render_files=render_hook,
        themes_directory=THEMES_DIRECTORY.as_posix(),
        themed_widgets=[ThemeManifestEntry.from_record(r) for r in records],
        css_module_extension=CSS_MODULE_EXTENSION,
    )
    theme_writer(config)
    return config
