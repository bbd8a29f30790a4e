"""Application bundle packaging."""

from .layout import BundleLayout
from .models import (
    BinaryNotFoundError,
    BundleError,
    BundleInfo,
    BundleIOError,
    PackageOptions,
    PackageStep,
)
from .packager import BundlePackager, ProgressCallback

__all__ = [
    "BinaryNotFoundError",
    "BundleError",
    "BundleIOError",
    "BundleInfo",
    "BundleLayout",
    "BundlePackager",
    "PackageOptions",
    "PackageStep",
    "ProgressCallback",
]
