from .dicts import deep_merge
from .validation import first_error, format_validation_error

__all__ = ["deep_merge", "first_error", "format_validation_error"]
