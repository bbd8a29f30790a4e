from __future__ import annotations

from pathlib import Path

import pytest

from macbundle.common import (
    find_marked_root,
    is_swift_package,
    resolve_directory,
    resolve_under,
    xdg_config_home,
    xdg_data_home,
)


@pytest.fixture
def swift_package(tmp_path: Path) -> Path:
    root = tmp_path / "Pensive"
    (root / "Sources" / "Pensive").mkdir(parents=True)
    (root / "Package.swift").write_text("// swift-tools-version: 5.9\n")
    return root


class TestResolveDirectory:
    def test_defaults_to_cwd(self, swift_package: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(swift_package)

        assert resolve_directory(None) == Path.cwd()

    def test_manifest_path_stands_for_package(self, swift_package: Path) -> None:
        assert resolve_directory(swift_package / "Package.swift") == swift_package

    def test_relative_path_becomes_absolute(self, swift_package: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(swift_package.parent)

        resolved = resolve_directory(Path("Pensive"))

        assert resolved.is_absolute()
        assert resolved == Path.cwd() / "Pensive"

    def test_missing_directory_is_returned_as_is(self, tmp_path: Path) -> None:
        missing = tmp_path / "not-there"

        assert resolve_directory(missing) == missing


class TestResolveUnder:
    def test_relative_output_dir_lands_in_package(self, swift_package: Path) -> None:
        assert resolve_under(swift_package, Path("dist")) == swift_package / "dist"

    def test_absolute_output_dir_is_kept(self, swift_package: Path, tmp_path: Path) -> None:
        elsewhere = tmp_path / "apps"

        assert resolve_under(swift_package, elsewhere) == elsewhere

    def test_home_is_expanded(self, swift_package: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path / "home"))

        assert resolve_under(swift_package, Path("~/Applications")) == tmp_path / "home" / "Applications"


class TestFindMarkedRoot:
    def test_finds_marker_above_nested_source_dir(self, swift_package: Path) -> None:
        (swift_package / ".macbundle").mkdir()

        root = find_marked_root(swift_package / "Sources" / "Pensive", ".macbundle")

        assert root == swift_package

    def test_marker_must_be_a_directory(self, swift_package: Path) -> None:
        (swift_package / ".macbundle").write_text("not a directory")

        assert find_marked_root(swift_package, ".macbundle") is None

    def test_returns_none_without_marker(self, swift_package: Path) -> None:
        assert find_marked_root(swift_package, ".macbundle") is None


def test_is_swift_package(swift_package: Path) -> None:
    assert is_swift_package(swift_package)
    assert not is_swift_package(swift_package / "Sources")


def test_xdg_homes_prefer_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    assert xdg_config_home() == tmp_path / "config"
    assert xdg_data_home() == tmp_path / "data"


def test_xdg_homes_fall_back_to_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert xdg_config_home() == tmp_path / ".config"
    assert xdg_data_home() == tmp_path / ".local" / "share"
