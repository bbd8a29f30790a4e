from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from macbundle.common import xdg_config_home, xdg_data_home
from macbundle.constants import APP_NAME


class Settings(BaseSettings):
    """Process settings, overridable through `MACBUNDLE_*` variables.

    These decide where configuration and logs live; what gets built is the
    business of the YAML config files.
    """

    model_config = SettingsConfigDict(
        env_prefix="MACBUNDLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["test", "dev", "prod"] = "prod"
    app_dir_name: str = APP_NAME
    project_marker: str = f".{APP_NAME}"
    global_config_file: str = "config.yaml"
    project_config_file: str = "config.yaml"
    user_config_file: str = "config.local.yaml"
    log_file_name: str = f"{APP_NAME}.log"

    @property
    def global_config_path(self) -> Path:
        return xdg_config_home() / self.app_dir_name / self.global_config_file

    @property
    def default_log_path(self) -> Path:
        return xdg_data_home() / self.app_dir_name / "logs" / self.log_file_name


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


settings = get_settings()
