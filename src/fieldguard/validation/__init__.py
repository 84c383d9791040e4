"""
Field validation: syntax checks for name-like fields and the append-only
policy for ordered list fields.
"""

from .immutability import should_enforce_immutability
from .syntax import (
    FieldSyntaxValidator,
    SecretReference,
    validate_dns1123_label,
    validate_dns1123_subdomain,
    validate_name,
    validate_name_consecutive_hyphens,
    validate_secret_reference,
)

__all__ = [
    "FieldSyntaxValidator",
    "SecretReference",
    "should_enforce_immutability",
    "validate_dns1123_label",
    "validate_dns1123_subdomain",
    "validate_name",
    "validate_name_consecutive_hyphens",
    "validate_secret_reference",
]
