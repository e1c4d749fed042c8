"""Form-level validation for quote requests."""

from __future__ import annotations

from typing import Iterable

from ..canonical.entities import QuoteForm
from .fields import validate_email, validate_phone, validate_required, validate_tax_id
from .report import ValidationIssue, ValidationReport, ValidationResult


def _issue(result: ValidationResult, field: str) -> ValidationIssue | None:
    if result.valid:
        return None
    return ValidationIssue(code=result.code or "invalid", message=result.error, field=field)


def validate_quote_form(form: QuoteForm, product_ids: Iterable[int] = ()) -> ValidationReport:
    checks = (
        ("company_name", validate_required(form.company_name, "Company name")),
        ("company_tax_id", validate_tax_id(form.company_tax_id)),
        ("contact_name", validate_required(form.contact_name, "Contact name")),
        ("email", validate_email(form.email)),
        ("phone", validate_phone(form.phone)),
    )
    issues: list[ValidationIssue] = []
    for field, result in checks:
        issue = _issue(result, field)
        if issue is not None:
            issues.append(issue)

    if not list(product_ids):
        issues.append(
            ValidationIssue(
                code="empty_selection",
                message="Select at least one product",
                field="product_ids",
            )
        )

    return ValidationReport(valid=not issues, issues=issues)


__all__ = ["validate_quote_form"]
