"""Command-line frontend for labquote."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from labquote.config import get_settings
from labquote.core.canonical import QuoteForm, SelectionItem
from labquote.core.catalog import CatalogApiError, CatalogClient
from labquote.core.config import config_from_env
from labquote.core.quote import submit_quote
from labquote.core.selection import CorruptSelectionError, SelectionStore, open_selection_store
from labquote.core.validate import (
    ValidationResult,
    validate_email,
    validate_phone,
    validate_required,
    validate_tax_id,
)

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

logger = logging.getLogger(__name__)


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _open_store(*, load: bool = True) -> SelectionStore:
    return open_selection_store(config_from_env(), load=load)


def _open_client() -> CatalogClient:
    return CatalogClient(config=config_from_env())


def _result_dict(result: ValidationResult) -> dict[str, Any]:
    return {"valid": result.valid, "error": result.error, "code": result.code}


def _cmd_validate(args: argparse.Namespace) -> int:
    if args.kind == "tax-id":
        result = validate_tax_id(args.value)
    elif args.kind == "phone":
        result = validate_phone(args.value)
    elif args.kind == "email":
        result = validate_email(args.value)
    else:
        result = validate_required(args.value, args.field, args.min_length)
    _json_dump(_result_dict(result))
    return 0 if result.valid else 1


def _cmd_products(args: argparse.Namespace) -> int:
    page = _open_client().get_products(
        category=args.category,
        search=args.search,
        page=args.page,
        limit=args.limit,
    )
    _json_dump(page.model_dump())
    return 0


def _cmd_product(args: argparse.Namespace) -> int:
    _json_dump(_open_client().get_product_by_slug(args.slug).model_dump())
    return 0


def _cmd_categories(args: argparse.Namespace) -> int:
    _json_dump([category.model_dump() for category in _open_client().get_categories()])
    return 0


def _cart_dump(store: SelectionStore) -> None:
    _json_dump({"count": store.count(), "items": [item.to_dict() for item in store.items()]})


def _cmd_cart_list(args: argparse.Namespace) -> int:
    _cart_dump(_open_store())
    return 0


def _cmd_cart_count(args: argparse.Namespace) -> int:
    _json_dump({"count": _open_store().count()})
    return 0


def _cmd_cart_add(args: argparse.Namespace) -> int:
    store = _open_store()
    product = _open_client().get_product_by_slug(args.slug)
    store.add(SelectionItem.from_product(product))
    _cart_dump(store)
    return 0


def _cmd_cart_remove(args: argparse.Namespace) -> int:
    store = _open_store()
    store.remove(args.id)
    _cart_dump(store)
    return 0


def _cmd_cart_clear(args: argparse.Namespace) -> int:
    store = _open_store(load=False)
    store.clear()
    _cart_dump(store)
    return 0


def _cmd_quote(args: argparse.Namespace) -> int:
    form = QuoteForm(
        company_name=args.company_name,
        company_tax_id=args.tax_id,
        contact_name=args.contact_name,
        email=args.email,
        phone=args.phone,
        estimated_quantity=args.quantity,
        message=args.message,
    )
    settings = get_settings()
    submission = submit_quote(
        form,
        _open_store(),
        _open_client(),
        clear_on_success=not args.keep_cart,
        debug_enabled=settings.debug,
        log_verbosity=settings.log_verbosity,
    )
    if not submission.submitted:
        _json_dump(
            {
                "submitted": False,
                "issues": [issue.__dict__ for issue in submission.report.issues],
            }
        )
        return 1
    _json_dump(
        {
            "submitted": True,
            "product_ids": submission.product_ids,
            "receipt": submission.receipt.model_dump() if submission.receipt else None,
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="labquote", description=f"{settings.app_name} catalog quote-cart CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_cmd = subparsers.add_parser("validate", help="Validate a single quote-form field value")
    validate_cmd.add_argument("kind", choices=["tax-id", "phone", "email", "required"])
    validate_cmd.add_argument("value")
    validate_cmd.add_argument("--field", default="Field", help="Field label for 'required'")
    validate_cmd.add_argument("--min-length", type=int, default=2)
    validate_cmd.set_defaults(func=_cmd_validate)

    products = subparsers.add_parser("products", help="List catalog products")
    products.add_argument("--category", default=None)
    products.add_argument("--search", default=None)
    products.add_argument("--page", type=int, default=None)
    products.add_argument("--limit", type=int, default=None)
    products.set_defaults(func=_cmd_products)

    product = subparsers.add_parser("product", help="Show one product by slug")
    product.add_argument("slug")
    product.set_defaults(func=_cmd_product)

    categories = subparsers.add_parser("categories", help="List catalog categories")
    categories.set_defaults(func=_cmd_categories)

    cart = subparsers.add_parser("cart", help="Inspect or change the persistent product selection")
    cart_sub = cart.add_subparsers(dest="cart_command", required=True)
    cart_sub.add_parser("list", help="Show selected products").set_defaults(func=_cmd_cart_list)
    cart_sub.add_parser("count", help="Show the number of selected products").set_defaults(func=_cmd_cart_count)
    cart_sub.add_parser("clear", help="Empty the selection").set_defaults(func=_cmd_cart_clear)
    cart_add = cart_sub.add_parser("add", help="Select a product by slug")
    cart_add.add_argument("slug")
    cart_add.set_defaults(func=_cmd_cart_add)
    cart_remove = cart_sub.add_parser("remove", help="Deselect a product by id")
    cart_remove.add_argument("id", type=int)
    cart_remove.set_defaults(func=_cmd_cart_remove)

    quote = subparsers.add_parser("quote", help="Submit a quote request for the selected products")
    quote.add_argument("--company-name", required=True)
    quote.add_argument("--tax-id", required=True)
    quote.add_argument("--contact-name", required=True)
    quote.add_argument("--email", required=True)
    quote.add_argument("--phone", required=True)
    quote.add_argument("--quantity", default="")
    quote.add_argument("--message", default="")
    quote.add_argument("--keep-cart", action="store_true", help="Do not clear the selection after submitting")
    quote.set_defaults(func=_cmd_quote)

    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.WARNING)

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args) or 0)
    except CorruptSelectionError as exc:
        parser.exit(status=2, message=f"error: {exc}. Run 'labquote cart clear' to reset the selection.\n")
    except CatalogApiError as exc:
        logger.debug("Catalog API failure (status=%s)", exc.status_code)
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
