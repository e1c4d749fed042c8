"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and other frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "CatalogApiError": ("labquote.core.catalog", "CatalogApiError"),
    "CatalogClient": ("labquote.core.catalog", "CatalogClient"),
    "CatalogProduct": ("labquote.core.catalog", "CatalogProduct"),
    "CoreConfig": ("labquote.core.config", "CoreConfig"),
    "CorruptSelectionError": ("labquote.core.selection", "CorruptSelectionError"),
    "QuoteForm": ("labquote.core.canonical", "QuoteForm"),
    "QuoteSubmission": ("labquote.core.quote", "QuoteSubmission"),
    "SelectionItem": ("labquote.core.canonical", "SelectionItem"),
    "SelectionStore": ("labquote.core.selection", "SelectionStore"),
    "ValidationResult": ("labquote.core.validate", "ValidationResult"),
    "config_from_env": ("labquote.core.config", "config_from_env"),
    "open_selection_store": ("labquote.core.selection", "open_selection_store"),
    "submit_quote": ("labquote.core.quote", "submit_quote"),
    "validate_email": ("labquote.core.validate", "validate_email"),
    "validate_phone": ("labquote.core.validate", "validate_phone"),
    "validate_quote_form": ("labquote.core.validate", "validate_quote_form"),
    "validate_required": ("labquote.core.validate", "validate_required"),
    "validate_tax_id": ("labquote.core.validate", "validate_tax_id"),
}

__all__ = sorted(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
