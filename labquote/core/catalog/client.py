"""Thin HTTP client for the public catalog API.

Plain fetch-and-parse: no retry, caching or backoff.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..config import CoreConfig, config_from_env
from .schemas import CatalogProduct, Category, ProductsPage, QuoteReceipt, QuoteRequestPayload

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_CATEGORY_LIST = TypeAdapter(list[Category])


class CatalogApiError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def http_session(timeout: int = 20) -> requests.Session:
    s = requests.Session()
    s.headers.update({"Accept": "application/json"})
    # store desired default timeout on the session for convenience
    s.request_timeout = timeout  # type: ignore[attr-defined]
    return s


def _error_message(response: requests.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return fallback


class CatalogClient:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: int | None = None,
        config: CoreConfig | None = None,
        session: requests.Session | None = None,
    ):
        resolved = config or config_from_env()
        self.base_url = (base_url or resolved.api_url).rstrip("/")
        self._http = session or http_session(timeout or resolved.request_timeout)
        if not hasattr(self._http, "request_timeout"):
            self._http.request_timeout = timeout or resolved.request_timeout  # type: ignore[attr-defined]

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path.lstrip('/')}"

    def _get_json(self, path: str, *, error: str, params: dict[str, Any] | None = None) -> Any:
        url = self._url(path)
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._http.get(url, params=params, timeout=self._http.request_timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise CatalogApiError(error, status_code=status) from exc
        except (requests.RequestException, ValueError) as exc:
            raise CatalogApiError(error) from exc

    @staticmethod
    def _parse(model: type[ModelT], payload: Any, *, error: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise CatalogApiError(error) from exc

    def get_products(
        self,
        *,
        category: str | None = None,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> ProductsPage:
        params: dict[str, Any] = {}
        if category:
            params["category"] = category
        if search:
            params["search"] = search
        if page:
            params["page"] = str(page)
        if limit:
            params["limit"] = str(limit)
        error = "Error loading products"
        payload = self._get_json("products", error=error, params=params or None)
        return self._parse(ProductsPage, payload, error=error)

    def get_product_by_slug(self, slug: str) -> CatalogProduct:
        error = "Product not found"
        payload = self._get_json(f"products/{quote(slug, safe='')}", error=error)
        return self._parse(CatalogProduct, payload, error=error)

    def get_categories(self) -> list[Category]:
        error = "Error loading categories"
        payload = self._get_json("categories", error=error)
        try:
            return _CATEGORY_LIST.validate_python(payload)
        except ValidationError as exc:
            raise CatalogApiError(error) from exc

    def submit_quote(self, payload: QuoteRequestPayload) -> QuoteReceipt:
        error = "Error submitting quote"
        url = self._url("quotes")
        logger.debug("POST %s (%d product(s))", url, len(payload.product_ids))
        try:
            response = self._http.post(
                url,
                json=payload.model_dump(),
                timeout=self._http.request_timeout,
            )
        except requests.RequestException as exc:
            raise CatalogApiError(error) from exc

        if response.status_code >= 400:
            raise CatalogApiError(_error_message(response, error), status_code=response.status_code)
        try:
            body = response.json()
        except ValueError as exc:
            raise CatalogApiError(error, status_code=response.status_code) from exc
        return self._parse(QuoteReceipt, body, error=error)


__all__ = ["CatalogApiError", "CatalogClient", "http_session"]
