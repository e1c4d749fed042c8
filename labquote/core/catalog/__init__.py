from .client import CatalogApiError, CatalogClient, http_session
from .schemas import CatalogProduct, Category, ProductsPage, QuoteReceipt, QuoteRequestPayload

__all__ = [
    "CatalogApiError",
    "CatalogClient",
    "CatalogProduct",
    "Category",
    "ProductsPage",
    "QuoteReceipt",
    "QuoteRequestPayload",
    "http_session",
]
