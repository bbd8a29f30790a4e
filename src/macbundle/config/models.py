"""Pydantic models for macbundle configuration scopes and errors."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator

from macbundle.common import LoggingConfig
from macbundle.constants import DEFAULT_APP_NAME, DEFAULT_MINIMUM_SYSTEM_VERSION
from macbundle.toolchain import BuildConfiguration

_NonEmptyString = Annotated[StrictStr, Field(min_length=1)]
_PlistString = Annotated[str, Field(min_length=1)]


class ConfigScope(str, Enum):
    """Where a configuration value came from."""

    GLOBAL = "global"
    PROJECT = "project"
    USER = "user"
    EFFECTIVE = "effective"


class _ScopeError(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    message: str


class ConfigNotFoundError(_ScopeError):
    """No file where the scope's configuration was expected."""

    expected_path: Path


class ConfigYamlError(_ScopeError):
    """The file is not valid YAML; line and column are 1-based."""

    path: Path
    line: int | None = None
    column: int | None = None


class ConfigValidationError(_ScopeError):
    """The YAML parsed but does not fit the scope's schema."""

    path: Path
    field: str | None = None


class ConfigIOError(_ScopeError):
    path: Path


type ConfigError = ConfigNotFoundError | ConfigYamlError | ConfigValidationError | ConfigIOError


class BundleSection(BaseModel):
    """Where the bundle comes from and where it goes.

    Relative paths are resolved against the Swift package directory.
    """

    model_config = ConfigDict(extra="forbid")

    app_name: _NonEmptyString = DEFAULT_APP_NAME
    configuration: BuildConfiguration = BuildConfiguration.RELEASE
    output_dir: Path | None = None
    resources_dir: Path | None = None
    swift_executable: _NonEmptyString = "swift"


class InfoPlistSection(BaseModel):
    """Values written to Contents/Info.plist."""

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    enabled: bool = True
    bundle_identifier: str | None = None
    version: _PlistString = "1"
    short_version: _PlistString = "1.0"
    minimum_system_version: _PlistString = DEFAULT_MINIMUM_SYSTEM_VERSION
    package_type: _PlistString = "APPL"


class ScopeConfig(BaseModel):
    """Sections a single configuration file may set.

    Only the keys actually written in the file count as set, which is what
    lets a higher scope override one key of a section without resetting the
    rest of it.
    """

    model_config = ConfigDict(extra="allow")

    scope: ClassVar[ConfigScope]

    bundle: BundleSection | None = None
    info_plist: InfoPlistSection | None = None


class GlobalConfig(ScopeConfig):
    """~/.config/macbundle/config.yaml"""

    scope: ClassVar[ConfigScope] = ConfigScope.GLOBAL

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class _PackageScopeConfig(ScopeConfig):
    @model_validator(mode="before")
    @classmethod
    def _reject_logging(cls, data: Any) -> Any:
        if isinstance(data, dict) and "logging" in data:
            raise ValueError(
                f"'logging' is only read from the global config file; remove it from the {cls.scope.value} config"
            )
        return data


class ProjectConfig(_PackageScopeConfig):
    """.macbundle/config.yaml, shared with everyone working on the package."""

    scope: ClassVar[ConfigScope] = ConfigScope.PROJECT


class UserConfig(_PackageScopeConfig):
    """.macbundle/config.local.yaml, personal overrides kept out of version control."""

    scope: ClassVar[ConfigScope] = ConfigScope.USER


class MacbundleConfig(BaseModel):
    """Effective configuration: every scope merged over the defaults."""

    model_config = ConfigDict(extra="allow")

    bundle: BundleSection = Field(default_factory=BundleSection)
    info_plist: InfoPlistSection = Field(default_factory=InfoPlistSection)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
