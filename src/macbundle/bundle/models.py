"""Models for bundle packaging options, results and errors."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from macbundle.common import resolve_under
from macbundle.config.models import InfoPlistSection, MacbundleConfig
from macbundle.toolchain import BuildConfiguration, ToolchainError

from .layout import BundleLayout

_AppName = Annotated[StrictStr, Field(min_length=1)]


class PackageStep(str, Enum):
    """Filesystem steps of a packaging run, in execution order."""

    CREATE_DIRECTORIES = "create_directories"
    COPY_BINARY = "copy_binary"
    COPY_RESOURCES = "copy_resources"
    WRITE_INFO_PLIST = "write_info_plist"
    SET_PERMISSIONS = "set_permissions"


class BinaryNotFoundError(BaseModel):
    """The toolchain reported a bin path that holds no binary for the app."""

    path: Path
    message: str


class BundleIOError(BaseModel):
    """A filesystem operation on the bundle failed."""

    step: PackageStep
    path: Path
    message: str


type BundleError = ToolchainError | BinaryNotFoundError | BundleIOError


class PackageOptions(BaseModel):
    """Inputs of a packaging run.

    `output_dir` defaults to the package directory and `resources_dir` to
    `Sources/<app_name>/Resources` inside it. Relative paths are resolved
    against `package_dir`.
    """

    model_config = ConfigDict(frozen=True)

    app_name: _AppName
    configuration: BuildConfiguration = BuildConfiguration.RELEASE
    package_dir: Path
    output_dir: Path | None = None
    resources_dir: Path | None = None
    info_plist: InfoPlistSection = Field(default_factory=InfoPlistSection)

    @field_validator("app_name")
    @classmethod
    def _validate_app_name(cls, value: str) -> str:
        if "/" in value or value in {".", ".."}:
            raise ValueError("Application name must not contain path separators")
        return value

    @classmethod
    def from_config(
        cls,
        config: MacbundleConfig,
        package_dir: Path,
        **overrides: object,
    ) -> PackageOptions:
        """Build options from effective config; non-None overrides win."""
        data: dict[str, object] = {
            "app_name": config.bundle.app_name,
            "configuration": config.bundle.configuration,
            "package_dir": package_dir,
            "output_dir": config.bundle.output_dir,
            "resources_dir": config.bundle.resources_dir,
            "info_plist": config.info_plist,
        }
        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls.model_validate(data)

    @property
    def resolved_output_dir(self) -> Path:
        if self.output_dir is None:
            return self.package_dir
        return resolve_under(self.package_dir, self.output_dir)

    @property
    def resolved_resources_dir(self) -> Path:
        if self.resources_dir is not None:
            return resolve_under(self.package_dir, self.resources_dir)
        return self.package_dir / "Sources" / self.app_name / "Resources"

    def layout(self) -> BundleLayout:
        return BundleLayout(app_name=self.app_name, output_dir=self.resolved_output_dir)


class BundleInfo(BaseModel):
    """Outcome of a successful packaging run."""

    app_name: str
    configuration: BuildConfiguration
    bundle_path: Path
    binary_path: Path
    resources_copied: bool
    resource_count: int = 0
    info_plist_written: bool = False
