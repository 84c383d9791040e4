"""
Syntactic checks for name-like string fields.

The DNS predicates are injected so callers (and tests) can swap in their
own conformance rules; the module-level functions use the defaults from
``fieldguard.conformance``.
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional, Protocol

from ..config import Settings
from ..conformance import dns
from ..field import FieldPath, ValidationErrorList, invalid, required
from ..logging import get_logger

logger = get_logger(__name__)

ValueCheck = Callable[[str], List[str]]
NameCheck = Callable[[str, bool], List[str]]


class SecretReference(Protocol):
    name: str
    namespace: str


@dataclass(frozen=True)
class FieldSyntaxValidator:
    """Field checks backed by pluggable conformance predicates."""
    subdomain_check: ValueCheck = dns.is_dns1123_subdomain
    label_check: ValueCheck = dns.is_dns1123_label
    name_check: NameCheck = dns.name_is_dns_subdomain

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "FieldSyntaxValidator":
        settings = settings or Settings()
        return cls(
            subdomain_check=partial(dns.is_dns1123_subdomain, max_length=settings.dns1123_subdomain_max_length),
            label_check=partial(dns.is_dns1123_label, max_length=settings.dns1123_label_max_length),
            name_check=partial(dns.name_is_dns_subdomain, max_length=settings.dns1123_subdomain_max_length),
        )

    def validate_name(self, name: str, prefix: bool) -> List[str]:
        """Return the name predicate's messages unchanged."""
        return self.name_check(name, prefix)

    def validate_secret_reference(self, ref: SecretReference, fld_path: FieldPath) -> ValidationErrorList:
        all_errs = ValidationErrorList()

        if len(ref.name) == 0:
            all_errs.append(required(fld_path.child("name"), "must provide a name"))
        if len(ref.namespace) == 0:
            all_errs.append(required(fld_path.child("namespace"), "must provide a namespace"))

        return all_errs

    def validate_name_consecutive_hyphens(self, name: str, fld_path: FieldPath) -> ValidationErrorList:
        all_errs = ValidationErrorList()

        if "--" in name:
            all_errs.append(invalid(fld_path, name, "name may not contain two consecutive hyphens"))

        return all_errs

    def validate_dns1123_subdomain(self, value: str, fld_path: FieldPath) -> ValidationErrorList:
        return self._wrap(self.subdomain_check, value, fld_path)

    def validate_dns1123_label(self, value: str, fld_path: FieldPath) -> ValidationErrorList:
        return self._wrap(self.label_check, value, fld_path)

    def _wrap(self, check: ValueCheck, value: str, fld_path: FieldPath) -> ValidationErrorList:
        all_errs = ValidationErrorList(invalid(fld_path, value, msg) for msg in check(value))
        if all_errs:
            logger.debug(f"{fld_path}: {len(all_errs)} violation(s) for {value!r}")
        return all_errs


_default = FieldSyntaxValidator()


def validate_name(name: str, prefix: bool) -> List[str]:
    """Validate an object name (or generate-name prefix) as a DNS subdomain."""
    return _default.validate_name(name, prefix)


def validate_secret_reference(ref: SecretReference, fld_path: FieldPath) -> ValidationErrorList:
    return _default.validate_secret_reference(ref, fld_path)


def validate_name_consecutive_hyphens(name: str, fld_path: FieldPath) -> ValidationErrorList:
    return _default.validate_name_consecutive_hyphens(name, fld_path)


def validate_dns1123_subdomain(value: str, fld_path: FieldPath) -> ValidationErrorList:
    """Validate that a value is a proper DNS subdomain."""
    return _default.validate_dns1123_subdomain(value, fld_path)


def validate_dns1123_label(value: str, fld_path: FieldPath) -> ValidationErrorList:
    """Validate that a value is a proper RFC 1123 DNS label."""
    return _default.validate_dns1123_label(value, fld_path)
