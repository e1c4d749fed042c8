"""Validation result and report types for quote-form checks."""


from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Verdict for a single field. ``error`` is empty iff ``valid`` is true."""

    valid: bool
    error: str = ""
    code: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, code: str, error: str) -> "ValidationResult":
        return cls(valid=False, error=error, code=code)


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    field: str | None = None


@dataclass
class ValidationReport:
    valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    def errors_by_field(self) -> dict[str, str]:
        """First message per field, for display next to each input."""
        errors: dict[str, str] = {}
        for issue in self.issues:
            key = issue.field or ""
            errors.setdefault(key, issue.message)
        return errors


__all__ = ["ValidationIssue", "ValidationReport", "ValidationResult"]
