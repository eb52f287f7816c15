"""
Per-widget path derivation and loading.

Each selected file needs three values: its theme key, the path of its
module inside the package, and where its stylesheet is written. They are
computed by separate functions from explicit arguments so the result never
depends on what was derived for a previous widget.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from .constants import COMPILED_MODULE_SUFFIX, CSS_MODULE_EXTENSION, THEMES_DIRECTORY
from .errors import DuplicateThemeKeyError, WidgetModuleLoadError
from .loader import WidgetModuleLoader
from .models import TargetPackage, WidgetDescriptor

logger = logging.getLogger(__name__)


def widget_name(file_id: str) -> str:
    """Base name of a widget file without its module suffix.

    ``"button/button.m.css.js"`` -> ``"button"``
    """
    name = PurePosixPath(file_id.replace("\\", "/")).name
    for suffix in (COMPILED_MODULE_SUFFIX, ".py"):
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def derive_theme_key(package_name: str, file_id: str) -> str:
    """Theme key for a widget, always ``/``-separated.

    The file's directories inside the theme directory are kept so widgets
    in different folders never share a key. A folder named after its widget
    is folded in: ``button/button.m.css.js`` -> ``<package>/button``.
    """
    parts = list(PurePosixPath(file_id.replace("\\", "/")).parent.parts)
    name = widget_name(file_id)
    if not parts or parts[-1] != name:
        parts.append(name)
    return "/".join([package_name, *parts])


def check_unique_theme_keys(package_name: str, selection: Sequence[str]) -> None:
    """
    Raises:
        DuplicateThemeKeyError: Two different selected files map to one key
    """
    seen: dict[str, str] = {}
    for file_id in selection:
        theme_key = derive_theme_key(package_name, file_id)
        first = seen.setdefault(theme_key, file_id)
        if first != file_id:
            raise DuplicateThemeKeyError(theme_key, first, file_id)


def derive_module_path(package: TargetPackage, file_id: str) -> Path:
    return package.theme_directory_path / file_id


def derive_output_path(theme_key: str, file_id: str) -> Path:
    return THEMES_DIRECTORY / theme_key / f"{widget_name(file_id)}{CSS_MODULE_EXTENSION}"


def resolve_widget(
    package: TargetPackage,
    file_id: str,
    loader: WidgetModuleLoader,
) -> tuple[str, WidgetDescriptor, Path]:
    """
    Derive paths for one selected file and load its selector map.

    Returns:
        ``(theme_key, descriptor, output_path)``

    Raises:
        WidgetModuleLoadError: The module could not be loaded
    """
    theme_key = derive_theme_key(package.name, file_id)
    module_path = derive_module_path(package, file_id)
    output_path = derive_output_path(theme_key, file_id)

    try:
        selector_map = loader.load(module_path)
    except WidgetModuleLoadError:
        raise
    except Exception as e:
        raise WidgetModuleLoadError(module_path, f"{type(e).__name__}: {e}") from e

    logger.debug("Resolved widget %s -> %s", file_id, theme_key)
    return theme_key, WidgetDescriptor(module_path=module_path, selector_map=selector_map), output_path
