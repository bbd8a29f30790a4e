"""Configuration overrides taken from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import yaml

from macbundle.constants import ENV_PREFIX
from macbundle.utils import deep_merge

from .models import MacbundleConfig


def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Nested overrides from `MACBUNDLE_CONFIG__<SECTION>__<KEY>` variables.

    Values are read as YAML scalars, so `false` and `2` arrive typed; a value
    YAML cannot parse is kept as the raw string.
    """
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        keys = [part.lower() for part in name.removeprefix(ENV_PREFIX).split("__") if part]
        if not keys:
            continue

        *sections, leaf = keys
        target = overrides
        for section in sections:
            child = target.get(section)
            if not isinstance(child, dict):
                child = target[section] = {}
            target = child
        if not isinstance(target.get(leaf), dict):
            target[leaf] = _scalar(raw)

    return overrides


def apply_env_overrides(config: MacbundleConfig, environ: Mapping[str, str] | None = None) -> MacbundleConfig:
    """Return `config` with environment overrides applied.

    Raises pydantic's ValidationError when an override does not fit the schema.
    """
    overrides = env_overrides(environ)
    if not overrides:
        return config
    return MacbundleConfig.model_validate(deep_merge(config.model_dump(), overrides))


def _scalar(raw: str) -> Any:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
