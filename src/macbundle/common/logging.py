"""Loguru setup.

macbundle logs nothing while it is used as a library until the caller opts in
with `macbundle.enable_logging()`. The CLI writes to a rotating log file whose
level and format come from the `logging` section of the global config.
"""

import sys
from pathlib import Path
from typing import Any, Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict

from macbundle.constants import APP_NAME

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[scope]: <9} | {message} | {extra}\n{exception}"


class LoggingConfig(BaseModel):
    """The `logging` section; only read from the global config file."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    log_level: LogLevel = "INFO"
    log_file: Path | None = None
    rotation: str = "1 MB"
    retention: str = "7 days"
    format: Literal["json", "text"] = "text"


def configure_cli_logging(config: LoggingConfig, log_path: Path, environment: str = "prod") -> int:
    """Route all macbundle records to `log_path` and return the handler id."""
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli"})

    log_path.parent.mkdir(parents=True, exist_ok=True)

    sink_options: dict[str, Any] = {
        "level": config.log_level,
        "rotation": config.rotation,
        "retention": config.retention,
        "diagnose": environment == "dev",
    }
    if config.format == "json":
        sink_options["serialize"] = True
    else:
        sink_options["format"] = TEXT_FORMAT

    handler_id = logger.add(log_path, **sink_options)
    logger.debug("File logging configured", log_file=str(log_path), level=config.log_level)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel = "INFO") -> int:
    """Send macbundle records to stderr; meant for library users."""
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": APP_NAME})
    return logger.add(sys.stderr, level=level, format=TEXT_FORMAT, colorize=False)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)
