from .quote_payloads import quote_payload_to_loggable

__all__ = ["quote_payload_to_loggable"]
