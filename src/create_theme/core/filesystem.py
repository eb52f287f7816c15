"""
Filesystem access used by the generation pipeline.

The pipeline only needs four operations, so they are gathered behind a
small protocol that tests can replace with a recording fake.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def ensure_dir(self, path: Path) -> None: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def glob(self, root: Path, pattern: str) -> list[Path]: ...


class LocalFileSystem:
    """FileSystem backed by the real disk, relative to ``base``."""

    def __init__(self, base: Path | None = None) -> None:
        self.base = base or Path.cwd()

    def _abs(self, path: Path) -> Path:
        return path if path.is_absolute() else self.base / path

    def exists(self, path: Path) -> bool:
        return self._abs(path).exists()

    def ensure_dir(self, path: Path) -> None:
        self._abs(path).mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        self._abs(path).write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (%d bytes)", path, len(content))

    def glob(self, root: Path, pattern: str) -> list[Path]:
        """Return matches under ``root`` as paths relative to ``root``, sorted."""
        base = self._abs(root)
        return sorted(p.relative_to(base) for p in base.glob(pattern) if p.is_file())
