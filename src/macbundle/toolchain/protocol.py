"""Toolchain protocol."""

from pathlib import Path
from typing import Protocol

from result import Result

from .models import BuildConfiguration, ToolchainError


class Toolchain(Protocol):
    """External compiler toolchain consumed by the packager."""

    def build(self, configuration: BuildConfiguration) -> Result[None, ToolchainError]:
        """Compile the package for the given configuration."""
        ...

    def bin_path(self, configuration: BuildConfiguration) -> Result[Path, ToolchainError]:
        """Report the directory holding the built binaries for the configuration."""
        ...
