"""Configuration storage protocol."""

from typing import Protocol

from result import Result

from macbundle.common import LoggingConfig

from .models import ConfigError, MacbundleConfig


class ConfigStore(Protocol):
    def load(self) -> Result[MacbundleConfig, ConfigError]:
        """Effective configuration for the store's working directory."""
        ...

    def load_logging(self) -> Result[LoggingConfig, ConfigError]:
        """The `logging` section of the global scope, or its defaults."""
        ...
