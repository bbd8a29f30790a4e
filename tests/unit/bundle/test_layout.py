from __future__ import annotations

from pathlib import Path

from macbundle.bundle import BundleLayout


def test_layout_derives_paths_from_app_name() -> None:
    layout = BundleLayout(app_name="Pensive", output_dir=Path("/work"))

    assert layout.bundle_name == "Pensive.app"
    assert layout.bundle_root == Path("/work/Pensive.app")
    assert layout.contents_dir == Path("/work/Pensive.app/Contents")
    assert layout.executable_dir == Path("/work/Pensive.app/Contents/MacOS")
    assert layout.resources_dir == Path("/work/Pensive.app/Contents/Resources")
    assert layout.binary_path == Path("/work/Pensive.app/Contents/MacOS/Pensive")
    assert layout.info_plist_path == Path("/work/Pensive.app/Contents/Info.plist")


def test_layout_directories_cover_executable_and_resources() -> None:
    layout = BundleLayout(app_name="Pensive", output_dir=Path("/work"))

    assert layout.directories() == (layout.executable_dir, layout.resources_dir)
