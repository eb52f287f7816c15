"""
Data models for a theme generation run.

A run resolves one ``TargetPackage``, loads a ``WidgetDescriptor`` per
selected file, records a ``WidgetFileRecord`` per generated stylesheet and
hands a single ``GenerationConfig`` to the theme file writer.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TargetPackage(BaseModel):
    """
    The package being themed.

    Attributes:
        name: Package name as typed by the user (may be scoped, e.g. ``@org/widgets``)
        theme_directory_path: ``node_modules/<name>/theme``
    """

    name: str
    theme_directory_path: Path

    model_config = ConfigDict(frozen=True)


class WidgetDescriptor(BaseModel):
    """A loaded widget module: where it lives and its selector map."""

    module_path: Path
    selector_map: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class WidgetFileRecord(BaseModel):
    """Result of emitting one widget's stylesheet."""

    theme_key: str
    output_path: Path

    model_config = ConfigDict(frozen=True)


class ThemeManifestEntry(BaseModel):
    """One line of the theme manifest."""

    theme_key: str
    file_name: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_record(cls, record: WidgetFileRecord) -> ThemeManifestEntry:
        return cls(theme_key=record.theme_key, file_name=record.output_path.name)


class GenerationConfig(BaseModel):
    """
    Everything the theme file writer needs, built once per run.

    Attributes:
        render_files: Caller-supplied render hook, passed through untouched
        themes_directory: Root of the generated themes (``src/themes``)
        themed_widgets: Manifest entries in selection order
        css_module_extension: Extension of generated CSS modules (``.m.css``)
    """

    render_files: Any = None
    themes_directory: str
    themed_widgets: list[ThemeManifestEntry] = Field(default_factory=list)
    css_module_extension: str

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def as_payload(self) -> dict[str, Any]:
        """Return the config in its external (camelCase) shape."""
        return {
            "renderFiles": self.render_files,
            "themesDirectory": self.themes_directory,
            "themedWidgets": [
                {"themeKey": entry.theme_key, "fileName": entry.file_name}
                for entry in self.themed_widgets
            ],
            "CSSModuleExtension": self.css_module_extension,
        }


class RenderFile(BaseModel):
    """A template to render and the file it should be written to."""

    src: Path
    dest: Path

    model_config = ConfigDict(frozen=True)


RenderHook = Callable[[list[RenderFile], dict[str, Any]], None]
