"""
create-theme - scaffold CSS theme files for the widgets of an installed package.

Pick a package, pick its widgets, and get one starter stylesheet per widget
plus a ``theme.ts`` that wires them together.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    CreateThemeError,
    FileWriteError,
    NoWidgetsSelectedError,
    PackageNotFoundError,
    WidgetModuleLoadError,
)
from .core.run import run

__version__ = get_version()

__all__ = [
    "__version__",
    "run",
    "CreateThemeError",
    "PackageNotFoundError",
    "NoWidgetsSelectedError",
    "WidgetModuleLoadError",
    "FileWriteError",
]
