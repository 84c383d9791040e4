"""
Integer-or-percentage union values.

Fields such as rollout surge limits accept either an absolute count (``3``)
or a share of some total (``"25%"``). The helpers here tell the two apart
and resolve them.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Pattern, Tuple

from ..conformance.percent import is_valid_percent
from ..field.errors import FieldGuardError

# optional sign and ASCII digits only; no whitespace or "_" separators
INT_PATTERN: Pattern[str] = re.compile(r"[+-]?[0-9]+")


class IntOrPercentError(FieldGuardError):
    """Raised when a union value cannot be built or resolved."""


class ValueKind(Enum):
    INT = "int"
    STRING = "string"


@dataclass(frozen=True)
class IntOrPercent:
    kind: ValueKind
    int_val: int = 0
    str_val: str = ""

    @classmethod
    def from_int(cls, value: int) -> "IntOrPercent":
        return cls(ValueKind.INT, int_val=value)

    @classmethod
    def from_str(cls, value: str) -> "IntOrPercent":
        return cls(ValueKind.STRING, str_val=value)

    @classmethod
    def parse(cls, value: Any) -> "IntOrPercent":
        """Wrap a raw int or str; bool and other types are rejected."""
        if isinstance(value, bool):
            raise IntOrPercentError(f"expected int or string, got bool {value!r}")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, str):
            return cls.from_str(value)
        raise IntOrPercentError(f"expected int or string, got {type(value).__name__}")

    @property
    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING

    def int_value(self) -> int:
        """The integer payload; strings parse base-10 and fall back to 0."""
        if self.is_string:
            if INT_PATTERN.fullmatch(self.str_val) is None:
                return 0
            return int(self.str_val, 10)
        return self.int_val

    def __str__(self) -> str:
        return self.str_val if self.is_string else str(self.int_val)


def get_percent_value(value: IntOrPercent) -> Tuple[int, bool]:
    """
    Extract the raw percentage number.

    Returns:
        ``(percent, True)`` for a string value like ``"42%"``, otherwise
        ``(0, False)``
    """
    if not value.is_string:
        return 0, False
    if is_valid_percent(value.str_val):
        return 0, False
    return int(value.str_val[:-1], 10), True


def get_int_or_percent_value(value: IntOrPercent) -> int:
    percent, is_percent = get_percent_value(value)
    if is_percent:
        return percent
    return value.int_value()


def get_scaled_value(value: IntOrPercent, total: int, round_up: bool) -> int:
    """
    Resolve a union value to an absolute integer against ``total``.

    Args:
        value: Integer or percentage
        total: The base a percentage refers to
        round_up: Round fractional results up instead of down

    Returns:
        The integer itself, or ``total * percent / 100`` rounded

    Raises:
        IntOrPercentError: If the value is a string that is not a percentage
    """
    if not value.is_string:
        return value.int_val

    percent, is_percent = get_percent_value(value)
    if not is_percent:
        raise IntOrPercentError(f"invalid value for IntOrPercent: {value.str_val!r}")

    # integer arithmetic keeps e.g. 10% of 30 at exactly 3
    scaled, remainder = divmod(percent * total, 100)
    if round_up and remainder:
        return scaled + 1
    return scaled
