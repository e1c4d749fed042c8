from .fields import (
    tax_id_check_digit,
    validate_email,
    validate_phone,
    validate_required,
    validate_tax_id,
)
from .report import ValidationIssue, ValidationReport, ValidationResult
from .rules import validate_quote_form

__all__ = [
    "ValidationIssue",
    "ValidationReport",
    "ValidationResult",
    "tax_id_check_digit",
    "validate_email",
    "validate_phone",
    "validate_quote_form",
    "validate_required",
    "validate_tax_id",
]
