"""
Syntactic conformance predicates.

Every predicate returns a list of violation messages and never raises;
validators wrap those messages into field errors.
"""

from .dns import is_dns1123_label, is_dns1123_subdomain, name_is_dns_subdomain
from .messages import max_len_error, regex_error
from .percent import is_valid_percent

__all__ = [
    "is_dns1123_label",
    "is_dns1123_subdomain",
    "name_is_dns_subdomain",
    "is_valid_percent",
    "max_len_error",
    "regex_error",
]
