"""Quote-request submission: validate the form, attach the selection, send."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .canonical.entities import QuoteForm
from .catalog.client import CatalogClient
from .catalog.schemas import QuoteReceipt, QuoteRequestPayload
from .logging import quote_payload_to_loggable
from .selection.store import SelectionStore
from .validate import ValidationReport, validate_quote_form

logger = logging.getLogger(__name__)


@dataclass
class QuoteSubmission:
    submitted: bool
    report: ValidationReport
    receipt: QuoteReceipt | None = None
    product_ids: list[int] = field(default_factory=list)


def _optional(value: str) -> str | None:
    text = (value or "").strip()
    return text or None


def build_quote_payload(form: QuoteForm, product_ids: list[int]) -> QuoteRequestPayload:
    return QuoteRequestPayload(
        company_name=form.company_name.strip(),
        company_tax_id=form.company_tax_id.strip(),
        contact_name=form.contact_name.strip(),
        email=form.email.strip(),
        phone=form.phone.strip(),
        product_ids=list(product_ids),
        estimated_quantity=_optional(form.estimated_quantity),
        message=_optional(form.message),
    )


def submit_quote(
    form: QuoteForm,
    store: SelectionStore,
    client: CatalogClient,
    *,
    clear_on_success: bool = True,
    debug_enabled: bool = False,
    log_verbosity: str = "medium",
) -> QuoteSubmission:
    """Submit ``form`` with the store's product ids.

    Nothing is sent when the form or the selection is invalid. Transport and
    API failures propagate as ``CatalogApiError`` and leave the cart intact.
    With ``debug_enabled`` a redacted payload is logged at ``log_verbosity``.
    """
    product_ids = store.list_ids()
    report = validate_quote_form(form, product_ids)
    if not report.valid:
        logger.info("Quote not submitted: %d validation issue(s)", len(report.issues))
        return QuoteSubmission(submitted=False, report=report, product_ids=product_ids)

    payload = build_quote_payload(form, product_ids)
    loggable = quote_payload_to_loggable(payload, verbosity=log_verbosity, debug_enabled=debug_enabled)
    if loggable is not None:
        logger.debug("Submitting quote request: %s", loggable)

    receipt = client.submit_quote(payload)
    if clear_on_success:
        store.clear()
    logger.info("Quote submitted for %d product(s)", len(product_ids))
    return QuoteSubmission(submitted=True, report=report, receipt=receipt, product_ids=product_ids)


__all__ = ["QuoteSubmission", "build_quote_payload", "submit_quote"]
