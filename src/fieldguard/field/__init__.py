"""Field paths and validation error values."""

from .path import FieldPath
from .errors import (
    ErrorType,
    FieldGuardError,
    ValidationAggregateError,
    ValidationError,
    ValidationErrorList,
    invalid,
    required,
)

__all__ = [
    "FieldPath",
    "ErrorType",
    "FieldGuardError",
    "ValidationAggregateError",
    "ValidationError",
    "ValidationErrorList",
    "invalid",
    "required",
]
