from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogProduct(BaseModel):
    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    id: int
    name: str
    slug: str
    description: str | None = None
    category_id: int | None = None
    brand: str = ""
    model_number: str | None = None
    origin_country: str | None = None
    warranty_period: int | None = None
    technical_sheet_url: str | None = None
    registro_sanitario: str | None = None
    # Opaque blobs: passed through untouched, key order preserved.
    specifications: dict[str, Any] = Field(default_factory=dict)
    image_url: str | None = None
    additional_images: list[str] = Field(default_factory=list)
    regulatory_info: dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True
    created_at: str | None = None
    updated_at: str | None = None

    @field_validator("brand", mode="before")
    @classmethod
    def _null_brand(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("specifications", "regulatory_info", mode="before")
    @classmethod
    def _null_mapping(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("additional_images", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value


class Category(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    slug: str
    description: str | None = None
    created_at: str | None = None


class ProductsPage(BaseModel):
    products: list[CatalogProduct] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20


class QuoteRequestPayload(BaseModel):
    company_name: str
    company_tax_id: str
    contact_name: str
    email: str
    phone: str
    product_ids: list[int] = Field(..., min_length=1)
    estimated_quantity: str | None = None
    message: str | None = None


class QuoteReceipt(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = True
    code: str | None = None
    message: str = ""


__all__ = ["CatalogProduct", "Category", "ProductsPage", "QuoteReceipt", "QuoteRequestPayload"]
