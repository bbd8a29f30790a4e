"""Reading a single configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from macbundle.common import create_logger
from macbundle.utils import first_error

from .models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    ScopeConfig,
)

logger = create_logger("config")


def read_scope[T: ScopeConfig](path: Path, model_cls: type[T]) -> Result[T, ConfigError]:
    """Read, parse and validate the file of one scope.

    An empty file is a valid, empty configuration.
    """
    logger.debug("Reading config file", scope=model_cls.scope.value, path=str(path))
    return (
        _read_text(path, model_cls)
        .and_then(lambda text: _parse_mapping(text, path, model_cls))
        .and_then(lambda data: _validate(data, path, model_cls))
        .inspect_err(lambda error: logger.error("Config file rejected", path=str(path), error=error.message))
    )


def _read_text(path: Path, model_cls: type[ScopeConfig]) -> Result[str, ConfigError]:
    if not path.is_file():
        return Err(
            ConfigNotFoundError(
                scope=model_cls.scope,
                expected_path=path,
                message=f"No {model_cls.scope.value} configuration file.",
            )
        )
    try:
        return Ok(path.read_text(encoding="utf-8"))
    except OSError as exc:
        return Err(ConfigIOError(scope=model_cls.scope, path=path, message=str(exc)))


def _parse_mapping(text: str, path: Path, model_cls: type[ScopeConfig]) -> Result[dict[str, Any], ConfigError]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        return Err(
            ConfigYamlError(
                scope=model_cls.scope,
                path=path,
                line=mark.line + 1 if mark is not None else None,
                column=mark.column + 1 if mark is not None else None,
                message=str(exc),
            )
        )

    if data is None:
        return Ok({})
    if not isinstance(data, dict):
        return Err(
            ConfigValidationError(
                scope=model_cls.scope,
                path=path,
                message="Configuration root must be a mapping of keys to values.",
            )
        )
    return Ok(data)


def _validate[T: ScopeConfig](data: dict[str, Any], path: Path, model_cls: type[T]) -> Result[T, ConfigError]:
    try:
        return Ok(model_cls.model_validate(data))
    except ValidationError as exc:
        field, message = first_error(exc)
        return Err(ConfigValidationError(scope=model_cls.scope, path=path, field=field, message=message))
