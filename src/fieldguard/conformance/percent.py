"""Percentage string syntax: one or more digits followed by a single '%'."""

import re
from typing import List, Pattern

from .messages import regex_error

PERCENT_FMT = "[0-9]+%"
PERCENT_ERROR_MSG = "a valid percent string must be a numeric string followed by an ending '%'"
PERCENT_PATTERN: Pattern[str] = re.compile("^" + PERCENT_FMT + "$")


def is_valid_percent(value: str) -> List[str]:
    if PERCENT_PATTERN.fullmatch(value) is None:
        return [regex_error(PERCENT_ERROR_MSG, PERCENT_FMT, "1%", "93%")]
    return []
