"""Integer-or-percentage union values and their resolution helpers."""

from .model import (
    INT_PATTERN,
    IntOrPercent,
    IntOrPercentError,
    ValueKind,
    get_int_or_percent_value,
    get_percent_value,
    get_scaled_value,
)

__all__ = [
    "INT_PATTERN",
    "IntOrPercent",
    "IntOrPercentError",
    "ValueKind",
    "get_int_or_percent_value",
    "get_percent_value",
    "get_scaled_value",
]
