"""Filesystem locations: XDG homes, package directories, marker lookup."""

from __future__ import annotations

import os
from pathlib import Path

PACKAGE_MANIFEST = "Package.swift"


def xdg_config_home() -> Path:
    """`$XDG_CONFIG_HOME`, or ~/.config when unset."""
    return _xdg_home("XDG_CONFIG_HOME", Path(".config"))


def xdg_data_home() -> Path:
    """`$XDG_DATA_HOME`, or ~/.local/share when unset."""
    return _xdg_home("XDG_DATA_HOME", Path(".local") / "share")


def resolve_directory(path: Path | None) -> Path:
    """Absolute directory for `path`.

    None means the current directory. A file, such as a Package.swift given
    on the command line, stands for the directory holding it.
    """
    directory = (path or Path.cwd()).expanduser()
    if directory.is_file():
        directory = directory.parent
    return directory.absolute()


def resolve_under(base: Path, path: Path) -> Path:
    """Resolve a configured `path` relative to `base` unless it is absolute."""
    path = path.expanduser()
    return path if path.is_absolute() else base / path


def find_marked_root(start: Path, marker: str) -> Path | None:
    """Closest directory at or above `start` that holds a `marker` directory."""
    for candidate in (start, *start.parents):
        if (candidate / marker).is_dir():
            return candidate
    return None


def is_swift_package(directory: Path) -> bool:
    return (directory / PACKAGE_MANIFEST).is_file()


def _xdg_home(variable: str, fallback: Path) -> Path:
    value = os.getenv(variable)
    if value:
        return Path(value).expanduser()
    return Path.home() / fallback
