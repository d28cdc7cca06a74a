"""Domain layer: errors, schemas and constants."""

from .errors import ErrorCodes, FormError
from .schemas import (
    FieldOptions,
    HorizontalCssClasses,
    Layout,
)

__all__ = [
    "ErrorCodes",
    "FormError",
    "FieldOptions",
    "HorizontalCssClasses",
    "Layout",
]
