"""Compiler toolchain boundary used by the bundle packager."""

from .models import (
    BinPathError,
    BuildConfiguration,
    BuildFailedError,
    ToolchainError,
    ToolchainNotInstalledError,
)
from .protocol import Toolchain
from .swift import SwiftToolchain

__all__ = [
    "BinPathError",
    "BuildConfiguration",
    "BuildFailedError",
    "SwiftToolchain",
    "Toolchain",
    "ToolchainError",
    "ToolchainNotInstalledError",
]
