"""
Jinja2 rendering for generated project files.

A render hook takes a list of ``RenderFile`` (template -> destination) and a
shared context, renders each template and writes the result. The default
hook below is what the CLI passes to the theme file writer.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .models import RenderFile

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class TemplateRenderer:
    """Render templates to files below ``base`` (defaults to the working directory)."""

    def __init__(self, base: Path | None = None) -> None:
        self.base = base

    def __call__(self, files: list[RenderFile], context: dict[str, Any]) -> None:
        base = self.base or Path.cwd()
        for item in files:
            env = Environment(
                loader=FileSystemLoader(str(item.src.parent)),
                undefined=StrictUndefined,
                keep_trailing_newline=True,
                autoescape=False,
            )
            content = env.get_template(item.src.name).render(**context)

            dest = item.dest if item.dest.is_absolute() else base / item.dest
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(content, encoding="utf-8")
            logger.info("Rendered %s", item.dest)


render_files = TemplateRenderer()
