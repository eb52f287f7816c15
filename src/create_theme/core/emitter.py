"""Write one widget's generated stylesheet."""

from __future__ import annotations

import logging
from pathlib import Path

from .constants import THEMES_DIRECTORY
from .css_compiler import SelectorCompiler, convert_selectors_to_css
from .errors import FileWriteError
from .filesystem import FileSystem
from .models import WidgetDescriptor, WidgetFileRecord

logger = logging.getLogger(__name__)


def emit_widget_css(
    descriptor: WidgetDescriptor,
    theme_key: str,
    output_path: Path,
    fs: FileSystem,
    compiler: SelectorCompiler = convert_selectors_to_css,
) -> WidgetFileRecord:
    """
    Create ``src/themes/<theme_key>`` and write the compiled CSS to ``output_path``.

    An existing file at ``output_path`` is overwritten.

    Raises:
        FileWriteError: The directory or the file could not be written
    """
    theme_dir = THEMES_DIRECTORY / theme_key
    try:
        fs.ensure_dir(theme_dir)
    except OSError as e:
        raise FileWriteError(theme_dir, e.strerror or str(e)) from e

    css = compiler(descriptor.selector_map)

    try:
        fs.write_text(output_path, css)
    except OSError as e:
        raise FileWriteError(output_path, e.strerror or str(e)) from e

    logger.info("Generated %s", output_path)
    return WidgetFileRecord(theme_key=theme_key, output_path=output_path)
