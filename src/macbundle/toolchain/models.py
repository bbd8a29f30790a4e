"""Toolchain configuration selectors and error models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class BuildConfiguration(str, Enum):
    """Named toolchain build configuration."""

    RELEASE = "release"
    DEBUG = "debug"


class ToolchainNotInstalledError(BaseModel):
    """Toolchain executable not found."""

    executable: str
    message: str


class BuildFailedError(BaseModel):
    """The toolchain reported a failed build."""

    configuration: BuildConfiguration
    exit_code: int
    message: str


class BinPathError(BaseModel):
    """The toolchain could not report its output binary directory."""

    configuration: BuildConfiguration
    message: str


type ToolchainError = ToolchainNotInstalledError | BuildFailedError | BinPathError
