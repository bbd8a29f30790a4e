"""Folding scope configurations into the effective configuration."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from macbundle.utils import deep_merge

from .models import MacbundleConfig, ScopeConfig


def merge_scopes(scopes: Iterable[ScopeConfig]) -> MacbundleConfig:
    """Merge `scopes`, given lowest precedence first, over the defaults.

    Only keys set in each file take part, so a section's defaults never mask
    a value from a lower scope.
    """
    layers = (scope.model_dump(exclude_unset=True) for scope in scopes)
    return MacbundleConfig.model_validate(reduce(deep_merge, layers, {}))
