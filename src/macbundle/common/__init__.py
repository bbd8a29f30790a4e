"""Logging and filesystem helpers shared by every macbundle module."""

from .logging import (
    LoggingConfig,
    configure_cli_logging,
    create_logger,
    disable_library_logging,
    enable_library_logging,
)
from .paths import (
    find_marked_root,
    is_swift_package,
    resolve_directory,
    resolve_under,
    xdg_config_home,
    xdg_data_home,
)

__all__ = [
    "LoggingConfig",
    "configure_cli_logging",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "find_marked_root",
    "is_swift_package",
    "resolve_directory",
    "resolve_under",
    "xdg_config_home",
    "xdg_data_home",
]
