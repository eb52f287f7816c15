"""
Core theme generation pipeline.

- package.py: package resolution
- widgets.py: per-widget path derivation and loading
- emitter.py: stylesheet emission
- theme_file.py: theme file assembly
- run.py: the orchestrator
"""

from .css_compiler import convert_selectors_to_css
from .errors import (
    CreateThemeError,
    DuplicateThemeKeyError,
    FileWriteError,
    NoWidgetsSelectedError,
    PackageNotFoundError,
    WidgetModuleLoadError,
)
from .models import (
    GenerationConfig,
    RenderFile,
    TargetPackage,
    ThemeManifestEntry,
    WidgetDescriptor,
    WidgetFileRecord,
)
from .run import run, select_widgets

__all__ = [
    "run",
    "select_widgets",
    "convert_selectors_to_css",
    # Errors
    "CreateThemeError",
    "DuplicateThemeKeyError",
    "PackageNotFoundError",
    "NoWidgetsSelectedError",
    "WidgetModuleLoadError",
    "FileWriteError",
    # Models
    "TargetPackage",
    "WidgetDescriptor",
    "WidgetFileRecord",
    "ThemeManifestEntry",
    "GenerationConfig",
    "RenderFile",
]
