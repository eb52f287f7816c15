"""
Widget module loaders.

A widget module declares the CSS classes the widget can be themed with as a
flat mapping of selector name to generated class name. Packages ship these
as compiled CSS modules (``button.m.css.js``) whose default export is that
mapping; Python widget modules expose it as a module-level ``selectors``
dict.

Loaders are injected into the pipeline so a run never depends on a global
module cache: every ``load`` reads the file afresh.
"""

from __future__ import annotations

import importlib.util
import json
import logging
import re
from pathlib import Path
from typing import Any, Protocol

from .errors import WidgetModuleLoadError

logger = logging.getLogger(__name__)

# Matches up to the opening brace of the exported object; the object itself
# is decoded with raw_decode so code after it is ignored.
_EXPORT_RE = re.compile(r"(?:module\.exports\s*=|exports\.default\s*=|export\s+default)\s*(\{)")
_DECODER = json.JSONDecoder()


class WidgetModuleLoader(Protocol):
    def load(self, path: Path) -> dict[str, str]: ...


def _resolve(base: Path | None, path: Path) -> Path:
    if base is None or path.is_absolute():
        return path
    return base / path


def _as_selector_map(path: Path, value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        raise WidgetModuleLoadError(path, f"expected a mapping, got {type(value).__name__}")
    for name, selector in value.items():
        if not isinstance(name, str) or not isinstance(selector, str):
            raise WidgetModuleLoadError(path, f"selector {name!r} is not a string mapping")
    return dict(value)


class CSSModuleExportLoader:
    """Load the exported object literal of a compiled ``*.m.css.js`` module."""

    def __init__(self, base: Path | None = None) -> None:
        self.base = base

    def load(self, path: Path) -> dict[str, str]:
        file_path = _resolve(self.base, path)
        try:
            source = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise WidgetModuleLoadError(path, e.strerror or str(e)) from e

        match = _EXPORT_RE.search(source)
        if match is None:
            raise WidgetModuleLoadError(path, "no exported selector object found")

        try:
            exported, _ = _DECODER.raw_decode(source, match.start(1))
        except json.JSONDecodeError as e:
            raise WidgetModuleLoadError(path, f"malformed selector object ({e.msg})") from e

        selectors = _as_selector_map(path, exported)
        logger.debug("Loaded %d selectors from %s", len(selectors), path)
        return selectors


class PythonModuleLoader:
    """Load the ``selectors`` mapping of a Python widget module."""

    attribute = "selectors"

    def __init__(self, base: Path | None = None) -> None:
        self.base = base

    def load(self, path: Path) -> dict[str, str]:
        file_path = _resolve(self.base, path)
        if not file_path.is_file():
            raise WidgetModuleLoadError(path, "file not found")

        spec = importlib.util.spec_from_file_location(f"_widget_{file_path.stem}", file_path)
        if spec is None or spec.loader is None:
            raise WidgetModuleLoadError(path, "not an importable module")

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise WidgetModuleLoadError(path, f"{type(e).__name__}: {e}") from e

        if not hasattr(module, self.attribute):
            raise WidgetModuleLoadError(path, f"module has no '{self.attribute}' attribute")
        return _as_selector_map(path, getattr(module, self.attribute))


class AutoLoader:
    """Pick a loader by file suffix: ``.py`` modules or compiled CSS modules."""

    def __init__(self, base: Path | None = None) -> None:
        self.python = PythonModuleLoader(base)
        self.css_module = CSSModuleExportLoader(base)

    def load(self, path: Path) -> dict[str, str]:
        if path.suffix == ".py":
            return self.python.load(path)
        return self.css_module.load(path)
