"""Public package entrypoint for labquote.

Client-side logic of a B2B catalog storefront: quote-form validation, a
persistent product selection, and a thin catalog API client, plus a CLI.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "CatalogClient": ("labquote.core", "CatalogClient"),
    "SelectionItem": ("labquote.core", "SelectionItem"),
    "SelectionStore": ("labquote.core", "SelectionStore"),
    "open_selection_store": ("labquote.core", "open_selection_store"),
    "submit_quote": ("labquote.core", "submit_quote"),
    "validate_email": ("labquote.core", "validate_email"),
    "validate_phone": ("labquote.core", "validate_phone"),
    "validate_required": ("labquote.core", "validate_required"),
    "validate_tax_id": ("labquote.core", "validate_tax_id"),
}

try:
    __version__ = version("labquote")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "CatalogClient",
    "SelectionItem",
    "SelectionStore",
    "__version__",
    "open_selection_store",
    "submit_quote",
    "validate_email",
    "validate_phone",
    "validate_required",
    "validate_tax_id",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
