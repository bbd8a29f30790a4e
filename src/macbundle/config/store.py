"""YAML file configuration store."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError
from result import Err, Ok, Result

from macbundle.common import LoggingConfig, create_logger, find_marked_root, resolve_directory
from macbundle.settings import Settings, get_settings
from macbundle.utils import first_error

from .loader import read_scope
from .merger import merge_scopes
from .models import (
    ConfigError,
    ConfigScope,
    ConfigValidationError,
    GlobalConfig,
    MacbundleConfig,
    ProjectConfig,
    ScopeConfig,
    UserConfig,
)
from .protocol import ConfigStore
from .resolver import apply_env_overrides

logger = create_logger("config")


@dataclass(frozen=True, slots=True)
class ConfigLocations:
    """Candidate files of each scope; project and user are None outside a project."""

    global_path: Path
    project_path: Path | None = None
    user_path: Path | None = None

    @classmethod
    def discover(cls, working_dir: Path, settings: Settings) -> ConfigLocations:
        project_root = find_marked_root(working_dir, settings.project_marker)
        if project_root is None:
            return cls(global_path=settings.global_config_path)

        project_dir = project_root / settings.project_marker
        return cls(
            global_path=settings.global_config_path,
            project_path=project_dir / settings.project_config_file,
            user_path=project_dir / settings.user_config_file,
        )

    def existing(self) -> list[tuple[type[ScopeConfig], Path]]:
        """Files that exist, lowest precedence first."""
        candidates: list[tuple[type[ScopeConfig], Path | None]] = [
            (GlobalConfig, self.global_path),
            (ProjectConfig, self.project_path),
            (UserConfig, self.user_path),
        ]
        return [(model_cls, path) for model_cls, path in candidates if path is not None and path.is_file()]


class FileConfigStore(ConfigStore):
    """Merges the global, project and user YAML files, then environment overrides.

    Missing files are skipped. The first file that cannot be read, parsed or
    validated ends loading with its error.
    """

    def __init__(self, working_dir: Path | None = None, settings: Settings | None = None) -> None:
        self.working_dir = resolve_directory(working_dir)
        self.settings = settings or get_settings()

    def load(self) -> Result[MacbundleConfig, ConfigError]:
        files = ConfigLocations.discover(self.working_dir, self.settings).existing()
        logger.debug(
            "Loading config",
            working_dir=str(self.working_dir),
            files={model_cls.scope.value: str(path) for model_cls, path in files},
        )

        return (
            self._read_all(files)
            .map(merge_scopes)
            .and_then(self._apply_env_overrides)
            .inspect_err(lambda error: logger.error("Config load failed", scope=error.scope.value, error=error.message))
        )

    def load_logging(self) -> Result[LoggingConfig, ConfigError]:
        path = self.settings.global_config_path
        if not path.is_file():
            return Ok(LoggingConfig())
        return read_scope(path, GlobalConfig).map(lambda config: config.logging)

    @staticmethod
    def _read_all(files: list[tuple[type[ScopeConfig], Path]]) -> Result[list[ScopeConfig], ConfigError]:
        configs: list[ScopeConfig] = []
        for model_cls, path in files:
            match read_scope(path, model_cls):
                case Ok(config):
                    configs.append(config)
                case Err(error):
                    return Err(error)
        return Ok(configs)

    def _apply_env_overrides(self, config: MacbundleConfig) -> Result[MacbundleConfig, ConfigError]:
        try:
            return Ok(apply_env_overrides(config))
        except ValidationError as exc:
            field, message = first_error(exc)
            return Err(
                ConfigValidationError(
                    scope=ConfigScope.EFFECTIVE,
                    path=self.working_dir,
                    field=field,
                    message=f"Invalid environment override: {message}",
                )
            )
