"""
Validation errors as first-class values.

Checks never raise for bad input; they return a ValidationErrorList that the
caller aggregates. ``to_aggregate`` is the single point where a list turns
into an exception the caller may choose to raise.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional

from .path import FieldPath


class FieldGuardError(Exception):
    """Base class for fieldguard exceptions."""


class ErrorType(Enum):
    REQUIRED = "FieldValueRequired"
    INVALID = "FieldValueInvalid"

    @property
    def label(self) -> str:
        if self is ErrorType.REQUIRED:
            return "Required value"
        return "Invalid value"


@dataclass(frozen=True)
class ValidationError:
    """A single violation attached to a field path."""
    type: ErrorType
    field: FieldPath
    bad_value: Any          # None marks an omission
    detail: str

    def body(self) -> str:
        if self.type is ErrorType.REQUIRED:
            text = self.type.label
        else:
            text = f"{self.type.label}: {_format_value(self.bad_value)}"
        if self.detail:
            text += f": {self.detail}"
        return text

    def __str__(self) -> str:
        return f"{self.field}: {self.body()}"


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if value is None:
        return "null"
    return str(value)


def required(field: FieldPath, detail: str) -> ValidationError:
    return ValidationError(ErrorType.REQUIRED, field, None, detail)


def invalid(field: FieldPath, value: Any, detail: str) -> ValidationError:
    return ValidationError(ErrorType.INVALID, field, value, detail)


class ValidationAggregateError(FieldGuardError):
    """Raised by callers that want a ValidationErrorList as an exception."""

    def __init__(self, errors: List[ValidationError]):
        self.errors = list(errors)
        messages: List[str] = []
        for error in self.errors:
            message = str(error)
            if message not in messages:
                messages.append(message)
        if len(messages) == 1:
            text = messages[0]
        else:
            text = "[" + ", ".join(messages) + "]"
        super().__init__(text)


class ValidationErrorList(list):
    """Ordered collection of violations, in discovery order."""

    def __init__(self, errors: Iterable[ValidationError] = ()):
        super().__init__(errors)

    def to_aggregate(self) -> Optional[ValidationAggregateError]:
        if not self:
            return None
        return ValidationAggregateError(self)
