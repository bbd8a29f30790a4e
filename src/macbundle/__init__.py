"""macbundle - package Swift executables into macOS application bundles.

By default, macbundle's internal logging is disabled when used as a library.
Library users can enable logging by calling macbundle.enable_logging().
"""

from macbundle.bundle import BundleInfo, BundleLayout, BundlePackager, PackageOptions
from macbundle.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "BundleInfo",
    "BundleLayout",
    "BundlePackager",
    "PackageOptions",
    "enable_logging",
]
