"""Terminal output helpers shared by CLI commands."""

from __future__ import annotations

import typer

from macbundle.bundle import BundleError, BundleIOError
from macbundle.config import ConfigError
from macbundle.toolchain import BuildFailedError


def echo_progress(message: str) -> None:
    typer.secho(message, fg=typer.colors.CYAN)


def echo_error(message: str) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)


def format_config_error(error: ConfigError) -> str:
    message = f"[{error.scope.value}] {error.message}"
    expected_path = getattr(error, "expected_path", None)
    error_path = getattr(error, "path", None)
    if expected_path is not None:
        message = f"{message} (expected at {expected_path})"
    elif error_path is not None:
        message = f"{message} ({error_path})"
    return message


def format_bundle_error(error: BundleError) -> str:
    if isinstance(error, BuildFailedError):
        return f"Build failed: {error.message}"
    if isinstance(error, BundleIOError):
        return f"Packaging failed at step '{error.step.value}' ({error.path}): {error.message}"
    return f"Packaging failed: {error.message}"


def exit_code_for(error: BundleError) -> int:
    """Build failures exit with the toolchain's own status; everything else with 1."""
    if isinstance(error, BuildFailedError) and error.exit_code > 0:
        return error.exit_code
    return 1
