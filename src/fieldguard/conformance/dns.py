"""
RFC 1123 DNS name conformance checks.

Each predicate returns a list of violation messages; an empty list means
the value conforms. Length and pattern are checked independently, so an
over-long malformed value yields two messages.
"""

import re
from typing import List, Pattern

from .messages import max_len_error, regex_error

DNS1123_LABEL_FMT = "[a-z0-9]([-a-z0-9]*[a-z0-9])?"
DNS1123_LABEL_ERROR_MSG = (
    "a lowercase RFC 1123 label must consist of lower case alphanumeric "
    "characters or '-', and must start and end with an alphanumeric character"
)
DNS1123_LABEL_MAX_LENGTH = 63

DNS1123_SUBDOMAIN_FMT = DNS1123_LABEL_FMT + r"(\." + DNS1123_LABEL_FMT + ")*"
DNS1123_SUBDOMAIN_ERROR_MSG = (
    "a lowercase RFC 1123 subdomain must consist of lower case alphanumeric "
    "characters, '-' or '.', and must start and end with an alphanumeric character"
)
DNS1123_SUBDOMAIN_MAX_LENGTH = 253

DNS1123_LABEL_PATTERN: Pattern[str] = re.compile("^" + DNS1123_LABEL_FMT + "$")
DNS1123_SUBDOMAIN_PATTERN: Pattern[str] = re.compile("^" + DNS1123_SUBDOMAIN_FMT + "$")


def is_dns1123_label(value: str, max_length: int = DNS1123_LABEL_MAX_LENGTH) -> List[str]:
    """Check that value is a single RFC 1123 label, e.g. ``my-name``."""
    errors = []
    if len(value) > max_length:
        errors.append(max_len_error(max_length))
    if DNS1123_LABEL_PATTERN.fullmatch(value) is None:
        errors.append(regex_error(DNS1123_LABEL_ERROR_MSG, DNS1123_LABEL_FMT, "my-name", "123-abc"))
    return errors


def is_dns1123_subdomain(value: str, max_length: int = DNS1123_SUBDOMAIN_MAX_LENGTH) -> List[str]:
    """Check that value is a dot-separated RFC 1123 subdomain, e.g. ``example.com``."""
    errors = []
    if len(value) > max_length:
        errors.append(max_len_error(max_length))
    if DNS1123_SUBDOMAIN_PATTERN.fullmatch(value) is None:
        errors.append(regex_error(DNS1123_SUBDOMAIN_ERROR_MSG, DNS1123_SUBDOMAIN_FMT, "example.com"))
    return errors


def mask_trailing_dash(name: str) -> str:
    # "web-" is a fine generate-name prefix; the generated suffix replaces
    # the dash and the character before it
    if len(name) > 1 and name.endswith("-"):
        return name[:-2] + "a"
    return name


def name_is_dns_subdomain(
    name: str,
    prefix: bool,
    max_length: int = DNS1123_SUBDOMAIN_MAX_LENGTH,
) -> List[str]:
    """
    Validate an object name as a DNS subdomain.

    Args:
        name: The object name, or a name prefix when ``prefix`` is set
        prefix: Whether a generated suffix will be appended to ``name``

    Returns:
        Violation messages, empty when the name is acceptable
    """
    if prefix:
        name = mask_trailing_dash(name)
    return is_dns1123_subdomain(name, max_length=max_length)
