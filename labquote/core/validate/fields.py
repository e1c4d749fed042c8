"""Field validators for the quote-request form.

Every validator is total: malformed input yields an invalid
``ValidationResult`` instead of raising.
"""

from __future__ import annotations

import re
from typing import Any

from .report import ValidationResult

# Taxpayer-category prefixes: 10 natural person, 15 public entity,
# 17 non-profit entity, 20 legal person.
TAX_ID_PREFIXES = frozenset({10, 15, 17, 20})
TAX_ID_WEIGHTS = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)
TAX_ID_LENGTH = 11

_TAX_ID_RE = re.compile(r"[0-9]{11}")
_PHONE_STRIP_RE = re.compile(r"[\s\-+()]")
_PHONE_RE = re.compile(r"[0-9]{7,15}")
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

TAX_ID_FORMAT_ERROR = "Tax ID must be exactly 11 numeric digits"
TAX_ID_PREFIX_ERROR = "Invalid tax ID prefix. Must start with 10, 15, 17 or 20"
TAX_ID_CHECKSUM_ERROR = "Tax ID check digit is not valid"
PHONE_ERROR = "Phone must contain between 7 and 15 digits"
EMAIL_ERROR = "Enter a valid email"


def tax_id_check_digit(digits: list[int] | tuple[int, ...]) -> int:
    """Modulus-11 check digit over the first ten digits of a tax ID."""
    total = sum(digit * weight for digit, weight in zip(digits[:10], TAX_ID_WEIGHTS))
    remainder = 11 - (total % 11)
    if remainder == 10:
        return 0
    if remainder == 11:
        return 1
    return remainder


def validate_tax_id(value: Any) -> ValidationResult:
    if not isinstance(value, str) or not _TAX_ID_RE.fullmatch(value):
        return ValidationResult.fail("tax_id_format", TAX_ID_FORMAT_ERROR)

    digits = [int(char) for char in value]
    prefix = digits[0] * 10 + digits[1]
    if prefix not in TAX_ID_PREFIXES:
        return ValidationResult.fail("tax_id_prefix", TAX_ID_PREFIX_ERROR)

    if tax_id_check_digit(digits) != digits[10]:
        return ValidationResult.fail("tax_id_checksum", TAX_ID_CHECKSUM_ERROR)

    return ValidationResult.ok()


def validate_phone(value: Any) -> ValidationResult:
    if not isinstance(value, str):
        return ValidationResult.fail("phone_length", PHONE_ERROR)
    cleaned = _PHONE_STRIP_RE.sub("", value)
    if not _PHONE_RE.fullmatch(cleaned):
        return ValidationResult.fail("phone_length", PHONE_ERROR)
    return ValidationResult.ok()


def validate_email(value: Any) -> ValidationResult:
    # Syntactic shape only: local@domain.tail
    if not isinstance(value, str) or not _EMAIL_RE.fullmatch(value):
        return ValidationResult.fail("email_shape", EMAIL_ERROR)
    return ValidationResult.ok()


def validate_required(value: Any, field_name: str, min_length: int = 2) -> ValidationResult:
    trimmed = value.strip() if isinstance(value, str) else ""
    if not trimmed:
        return ValidationResult.fail("required_empty", f"{field_name} is required")
    if len(trimmed) < min_length:
        return ValidationResult.fail(
            "required_too_short",
            f"{field_name} must be at least {min_length} characters",
        )
    return ValidationResult.ok()


__all__ = [
    "EMAIL_ERROR",
    "PHONE_ERROR",
    "TAX_ID_CHECKSUM_ERROR",
    "TAX_ID_FORMAT_ERROR",
    "TAX_ID_PREFIXES",
    "TAX_ID_PREFIX_ERROR",
    "TAX_ID_WEIGHTS",
    "tax_id_check_digit",
    "validate_email",
    "validate_phone",
    "validate_required",
    "validate_tax_id",
]
