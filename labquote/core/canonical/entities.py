from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SelectionItem:
    """A product reference held in the quote cart.

    Identity is ``id``; the other fields are display metadata carried so the
    cart can be rendered without fetching the catalog again.
    """

    id: int
    name: str
    brand: str = ""
    slug: str = ""

    @classmethod
    def from_product(cls, product: Any) -> "SelectionItem":
        """Build an item from a catalog product record (model or mapping)."""
        if isinstance(product, dict):
            get = product.get
        else:
            def get(key: str) -> Any:
                return getattr(product, key, None)

        return cls(
            id=int(get("id")),
            name=str(get("name") or ""),
            brand=str(get("brand") or ""),
            slug=str(get("slug") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "brand": self.brand, "slug": self.slug}


@dataclass
class QuoteForm:
    company_name: str = ""
    company_tax_id: str = ""
    contact_name: str = ""
    email: str = ""
    phone: str = ""
    estimated_quantity: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


__all__ = ["QuoteForm", "SelectionItem"]
