"""Path layout of a macOS application bundle."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BundleLayout:
    """Paths of `<output_dir>/<app_name>.app`.

    Every path is derived from the application name and the output directory;
    nothing here touches the filesystem.
    """

    app_name: str
    output_dir: Path

    @property
    def bundle_name(self) -> str:
        return f"{self.app_name}.app"

    @property
    def bundle_root(self) -> Path:
        return self.output_dir / self.bundle_name

    @property
    def contents_dir(self) -> Path:
        return self.bundle_root / "Contents"

    @property
    def executable_dir(self) -> Path:
        return self.contents_dir / "MacOS"

    @property
    def resources_dir(self) -> Path:
        return self.contents_dir / "Resources"

    @property
    def binary_path(self) -> Path:
        return self.executable_dir / self.app_name

    @property
    def info_plist_path(self) -> Path:
        return self.contents_dir / "Info.plist"

    def directories(self) -> tuple[Path, ...]:
        """Directories that must exist before anything is copied in."""
        return (self.executable_dir, self.resources_dir)
