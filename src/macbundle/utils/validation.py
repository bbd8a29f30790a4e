"""Helpers for reporting pydantic validation errors."""

from __future__ import annotations

from pydantic import ValidationError

__all__ = ["first_error", "format_validation_error"]


def first_error(error: ValidationError) -> tuple[str | None, str]:
    """Dotted location and message of the first error in `error`."""
    details = error.errors()
    if not details:
        return None, str(error)

    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or None
    return location, first.get("msg", str(error))


def format_validation_error(kind: str, error: ValidationError) -> str:
    location, message = first_error(error)
    if location is None:
        return f"Invalid {kind}: {message}"
    return f"Invalid {kind}: {location}: {message}"
