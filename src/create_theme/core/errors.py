"""
Error types for theme generation.

Every error is fatal to a run. The CLI prints ``Error: <message>`` and exits
with code 1; nothing in the core retries or recovers.
"""

from pathlib import Path


class CreateThemeError(Exception):
    """Base exception for all create-theme errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PackageNotFoundError(CreateThemeError):
    """
    Raised when the target package has no theme directory.

    The message always names the computed path, e.g.
    ``node_modules/some-package/theme``.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"This package path does not exist: {self.path.as_posix()}")


class NoWidgetsSelectedError(CreateThemeError):
    """Raised when the user's widget file selection is empty."""

    def __init__(self) -> None:
        super().__init__("No widgets were selected")


class WidgetModuleLoadError(CreateThemeError):
    """
    Raised when a selected widget module cannot be resolved or loaded.

    Examples:
    - File missing or unreadable
    - No exported selector object
    - Exported object is not a flat string mapping
    """

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not load widget module {self.path.as_posix()}: {reason}")


class FileWriteError(CreateThemeError):
    """
    Raised when a generated stylesheet cannot be written.

    Covers both creating the per-widget theme directory and writing the
    CSS file itself.
    """

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not write {self.path.as_posix()}: {reason}")


class DuplicateThemeKeyError(CreateThemeError):
    """Raised when two different selected files would share a theme key."""

    def __init__(self, theme_key: str, first: str, second: str):
        self.theme_key = theme_key
        super().__init__(f"Widgets {first} and {second} both map to theme key {theme_key}")
