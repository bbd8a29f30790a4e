"""Layered YAML configuration: global, project and user scopes plus environment overrides."""

from __future__ import annotations

from .models import (
    BundleSection,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigScope,
    ConfigValidationError,
    ConfigYamlError,
    InfoPlistSection,
    MacbundleConfig,
)
from .protocol import ConfigStore
from .store import ConfigLocations, FileConfigStore

__all__ = [
    "BundleSection",
    "ConfigError",
    "ConfigIOError",
    "ConfigLocations",
    "ConfigNotFoundError",
    "ConfigScope",
    "ConfigStore",
    "ConfigValidationError",
    "ConfigYamlError",
    "FileConfigStore",
    "InfoPlistSection",
    "MacbundleConfig",
]
