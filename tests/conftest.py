"""Shared pytest fixtures for create-theme tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_theme.core.questions import FileQuestion


class RecordingFileSystem:
    """In-memory FileSystem that records every mutation."""

    def __init__(self, existing: set[Path] | None = None, files: list[str] | None = None):
        self.existing = existing or set()
        self.files = files or []
        self.ensured: list[Path] = []
        self.writes: list[tuple[Path, str]] = []

    def exists(self, path: Path) -> bool:
        return path in self.existing

    def ensure_dir(self, path: Path) -> None:
        self.ensured.append(path)

    def write_text(self, path: Path, content: str) -> None:
        self.writes.append((path, content))

    def glob(self, root: Path, pattern: str) -> list[Path]:
        return [Path(f) for f in self.files]


class StubPrompter:
    """Prompter returning canned answers."""

    def __init__(self, package_names: list[str], files: list[str]):
        self.package_names = package_names
        self.files = files
        self.questions: list[FileQuestion] = []

    async def ask_for_package_names(self) -> list[str]:
        return list(self.package_names)

    async def ask_for_desired_files(self, question: FileQuestion) -> list[str]:
        self.questions.append(question)
        return list(self.files)


class StubLoader:
    """Loader serving selector maps keyed by posix module path."""

    def __init__(self, maps: dict[str, dict[str, str]]):
        self.maps = maps
        self.calls: list[Path] = []

    def load(self, path: Path) -> dict[str, str]:
        self.calls.append(path)
        return self.maps[path.as_posix()]


THEME_DIR = Path("node_modules/package-1/theme")


@pytest.fixture
def theme_dir() -> Path:
    return THEME_DIR


@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    """Filesystem where package-1 exposes a theme directory with two widgets."""
    return RecordingFileSystem(
        existing={THEME_DIR},
        files=["button.m.css.js", "tab-controller.m.css.js"],
    )


@pytest.fixture
def stub_loader() -> StubLoader:
    return StubLoader(
        {
            f"{THEME_DIR.as_posix()}/button.m.css.js": {" _key": "@pkg/button", "root": "button-m__root"},
            f"{THEME_DIR.as_posix()}/tab-controller.m.css.js": {"root": "tab-m__root", "tab": "tab-m__tab"},
        }
    )


@pytest.fixture
def widget_package(tmp_path: Path) -> Path:
    """A project directory with an installed package shipping compiled CSS modules."""
    theme = tmp_path / "node_modules" / "@dojo" / "widgets" / "theme"
    (theme / "button").mkdir(parents=True)
    (theme / "button" / "button.m.css.js").write_text(
        'require("./button.m.css");\n'
        'module.exports = {" _key": "@dojo/widgets/button", "root": "button-m__root__1", '
        '"pressed": "button-m__pressed__1"};\n'
    )
    (theme / "label.m.css.js").write_text(
        'export default {"root": "label-m__root__1", "secondary": "label-m__secondary__1"};\n'
    )
    return tmp_path


@pytest.fixture
def make_prompter() -> type[StubPrompter]:
    return StubPrompter


@pytest.fixture
def make_fs() -> type[RecordingFileSystem]:
    return RecordingFileSystem
