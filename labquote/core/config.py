"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_CART_SLOT = "labquote_quote_cart"
DEFAULT_REQUEST_TIMEOUT = 20


@dataclass(frozen=True)
class CoreConfig:
    api_url: str = DEFAULT_API_URL
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT
    storage_dir: str = str(Path.home() / ".labquote")
    cart_slot: str = DEFAULT_CART_SLOT


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        parsed = int(val.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def config_from_env(
    *,
    api_url: str | None = None,
    storage_dir: str | None = None,
) -> CoreConfig:
    return CoreConfig(
        api_url=(api_url or os.getenv("API_URL") or DEFAULT_API_URL).rstrip("/"),
        request_timeout=_env_int("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
        storage_dir=storage_dir or os.getenv("CART_STORAGE_DIR") or str(Path.home() / ".labquote"),
        cart_slot=(os.getenv("CART_SLOT") or DEFAULT_CART_SLOT).strip() or DEFAULT_CART_SLOT,
    )


__all__ = ["CoreConfig", "DEFAULT_API_URL", "DEFAULT_CART_SLOT", "config_from_env"]
