"""Resolve the package being themed."""

from __future__ import annotations

import logging

from .constants import MODULE_ROOT, THEME_SEGMENT
from .errors import PackageNotFoundError
from .filesystem import FileSystem
from .models import TargetPackage

logger = logging.getLogger(__name__)


def resolve_package(name: str, fs: FileSystem) -> TargetPackage:
    """
    Check that ``name`` exposes a theme directory.

    Raises:
        PackageNotFoundError: ``node_modules/<name>/theme`` does not exist
    """
    theme_dir = MODULE_ROOT / name / THEME_SEGMENT
    if not fs.exists(theme_dir):
        raise PackageNotFoundError(theme_dir)

    logger.debug("Resolved package %s at %s", name, theme_dir)
    return TargetPackage(name=name, theme_directory_path=theme_dir)
