"""Info.plist generation."""

from __future__ import annotations

import plistlib
from pathlib import Path
from typing import Any

from macbundle.config.models import InfoPlistSection

from .layout import BundleLayout

ICON_FILENAME = "AppIcon.icns"


def default_bundle_identifier(app_name: str) -> str:
    safe_name = "".join(c for c in app_name if c.isalnum() or c in "-.") or "app"
    return f"local.{safe_name.lower()}"


def build_info_plist(layout: BundleLayout, section: InfoPlistSection) -> dict[str, Any]:
    plist: dict[str, Any] = {
        "CFBundleDevelopmentRegion": "en",
        "CFBundleExecutable": layout.app_name,
        "CFBundleIdentifier": section.bundle_identifier or default_bundle_identifier(layout.app_name),
        "CFBundleInfoDictionaryVersion": "6.0",
        "CFBundleName": layout.app_name,
        "CFBundleDisplayName": layout.app_name,
        "CFBundlePackageType": section.package_type,
        "CFBundleShortVersionString": section.short_version,
        "CFBundleVersion": section.version,
        "LSMinimumSystemVersion": section.minimum_system_version,
        "NSHighResolutionCapable": True,
    }
    if (layout.resources_dir / ICON_FILENAME).is_file():
        plist["CFBundleIconFile"] = ICON_FILENAME
    return plist


def write_info_plist(layout: BundleLayout, section: InfoPlistSection) -> Path:
    """Write Contents/Info.plist, replacing any previous one. Raises OSError."""
    path = layout.info_plist_path
    with path.open("wb") as fh:
        plistlib.dump(build_info_plist(layout, section), fh, sort_keys=True)
    return path
