from typing import Any

from ..catalog.schemas import QuoteRequestPayload

_DEFAULT_TEXT_LIMITS = {
    "low": 80,
    "medium": 160,
    "high": 240,
}
_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}


def _truncate_text(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _mask_email(value: str | None) -> str:
    text = str(value or "").strip()
    local, sep, domain = text.partition("@")
    if not sep:
        return "***" if text else ""
    return f"{local[:1]}***@{domain}"


def _mask_phone(value: str | None) -> str:
    digits = "".join(char for char in str(value or "") if char.isdigit())
    if not digits:
        return ""
    return f"***{digits[-3:]}"


def quote_payload_to_loggable(
    payload: QuoteRequestPayload | dict[str, Any],
    *,
    verbosity: str = "medium",
    debug_enabled: bool = False,
) -> dict[str, Any] | None:
    if not debug_enabled:
        return None

    data = payload.model_dump() if isinstance(payload, QuoteRequestPayload) else dict(payload)
    level = _normalize_verbosity(verbosity)
    if level == "extrahigh":
        return data

    product_ids = data.get("product_ids") if isinstance(data.get("product_ids"), list) else []

    if level == "low":
        return {
            "company_name": data.get("company_name"),
            "product_count": len(product_ids),
        }

    limit = _DEFAULT_TEXT_LIMITS[level]
    data["message"] = _truncate_text(data.get("message"), limit=limit)
    data["estimated_quantity"] = _truncate_text(data.get("estimated_quantity"), limit=limit)
    if level == "high":
        return data

    data["email"] = _mask_email(data.get("email"))
    data["phone"] = _mask_phone(data.get("phone"))
    return data


__all__ = ["quote_payload_to_loggable"]
