"""Tests for widget path derivation, package resolution and loading."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from create_theme.core.errors import (
    DuplicateThemeKeyError,
    PackageNotFoundError,
    WidgetModuleLoadError,
)
from create_theme.core.models import TargetPackage
from create_theme.core.package import resolve_package
from create_theme.core.widgets import (
    check_unique_theme_keys,
    derive_module_path,
    derive_output_path,
    derive_theme_key,
    resolve_widget,
    widget_name,
)

PACKAGE = TargetPackage(name="@dojo/widgets", theme_directory_path=Path("node_modules/@dojo/widgets/theme"))


class TestWidgetName:
    @pytest.mark.parametrize(
        "file_id,expected",
        [
            ("button.m.css.js", "button"),
            ("button/button.m.css.js", "button"),
            ("label.py", "label"),
            ("file-1", "file-1"),
            ("nested\\tab.m.css.js", "tab"),
        ],
    )
    def test_strips_module_suffix(self, file_id: str, expected: str) -> None:
        assert widget_name(file_id) == expected


class TestDerivations:
    def test_theme_key(self) -> None:
        assert derive_theme_key("@dojo/widgets", "button/button.m.css.js") == "@dojo/widgets/button"

    def test_theme_key_keeps_directories(self) -> None:
        assert derive_theme_key("pkg", "a/root.m.css.js") == "pkg/a/root"
        assert derive_theme_key("pkg", "b\\root.m.css.js") == "pkg/b/root"

    def test_same_basename_in_different_directories_gives_distinct_keys(self) -> None:
        file_ids = ["a/root.m.css.js", "b/root.m.css.js", "root.m.css.js", "a/b/root.m.css.js"]

        keys = [derive_theme_key("pkg", f) for f in file_ids]
        outputs = [derive_output_path(k, f) for k, f in zip(keys, file_ids)]

        assert len(set(keys)) == len(file_ids)
        assert len(set(outputs)) == len(file_ids)

    def test_theme_key_is_deterministic(self) -> None:
        keys = {derive_theme_key("pkg", "tab.m.css.js") for _ in range(5)}
        assert keys == {"pkg/tab"}

    def test_module_path(self) -> None:
        assert derive_module_path(PACKAGE, "button/button.m.css.js") == Path(
            "node_modules/@dojo/widgets/theme/button/button.m.css.js"
        )

    def test_output_path(self) -> None:
        assert derive_output_path("@dojo/widgets/button", "button/button.m.css.js") == Path(
            "src/themes/@dojo/widgets/button/button.m.css"
        )


class TestResolvePackage:
    def test_returns_target_package(self, recording_fs, theme_dir) -> None:
        package = resolve_package("package-1", recording_fs)
        assert package == TargetPackage(name="package-1", theme_directory_path=theme_dir)

    def test_missing_theme_directory(self, make_fs) -> None:
        with pytest.raises(PackageNotFoundError) as exc_info:
            resolve_package("some-package", make_fs())

        assert exc_info.value.message == (
            "This package path does not exist: node_modules/some-package/theme"
        )


class TestResolveWidget:
    def test_returns_key_descriptor_and_output(self) -> None:
        loader = MagicMock()
        loader.load.return_value = {"root": "button-m__root"}

        theme_key, descriptor, output_path = resolve_widget(PACKAGE, "button/button.m.css.js", loader)

        assert theme_key == "@dojo/widgets/button"
        assert descriptor.module_path == Path("node_modules/@dojo/widgets/theme/button/button.m.css.js")
        assert descriptor.selector_map == {"root": "button-m__root"}
        assert output_path == Path("src/themes/@dojo/widgets/button/button.m.css")
        loader.load.assert_called_once_with(descriptor.module_path)

    def test_unexpected_loader_error_is_wrapped(self) -> None:
        loader = MagicMock()
        loader.load.side_effect = KeyError("missing")

        with pytest.raises(WidgetModuleLoadError, match="KeyError"):
            resolve_widget(PACKAGE, "button.m.css.js", loader)

    def test_failure_does_not_affect_later_widgets(self) -> None:
        loader = MagicMock()
        loader.load.side_effect = [OSError("boom"), {"root": "tab-m__root"}]

        with pytest.raises(WidgetModuleLoadError):
            resolve_widget(PACKAGE, "button.m.css.js", loader)
        theme_key, _, output_path = resolve_widget(PACKAGE, "tab.m.css.js", loader)

        assert theme_key == "@dojo/widgets/tab"
        assert output_path == Path("src/themes/@dojo/widgets/tab/tab.m.css")


class TestCheckUniqueThemeKeys:
    def test_distinct_files_pass(self) -> None:
        check_unique_theme_keys("pkg", ["a/root.m.css.js", "b/root.m.css.js"])

    def test_repeated_file_is_accepted(self) -> None:
        check_unique_theme_keys("pkg", ["tab.m.css.js", "tab.m.css.js"])

    def test_folded_directory_collision_is_rejected(self) -> None:
        with pytest.raises(DuplicateThemeKeyError) as exc_info:
            check_unique_theme_keys("pkg", ["button.m.css.js", "button/button.m.css.js"])

        assert exc_info.value.theme_key == "pkg/button"
