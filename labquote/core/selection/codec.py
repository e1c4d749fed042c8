"""JSON encode/decode for the durable selection list."""

from __future__ import annotations

import json
from typing import Any, Iterable

from ..canonical.entities import SelectionItem


class CorruptSelectionError(ValueError):
    """The durable slot holds something other than a JSON array of items."""


def encode_selection(items: Iterable[SelectionItem]) -> str:
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False)


def _item_from_payload(raw: Any, index: int) -> SelectionItem:
    if not isinstance(raw, dict):
        raise CorruptSelectionError(f"Selection entry {index} is not an object")
    raw_id = raw.get("id")
    if not isinstance(raw_id, int) or isinstance(raw_id, bool):
        raise CorruptSelectionError(f"Selection entry {index} has no integer id")
    return SelectionItem(
        id=raw_id,
        name=str(raw.get("name") or ""),
        brand=str(raw.get("brand") or ""),
        slug=str(raw.get("slug") or ""),
    )


def decode_selection(raw: str) -> list[SelectionItem]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CorruptSelectionError(f"Selection payload is not valid JSON: {exc.msg}") from exc
    except RecursionError as exc:
        raise CorruptSelectionError("Selection payload is nested too deeply") from exc
    if not isinstance(payload, list):
        raise CorruptSelectionError("Selection payload is not a JSON array")

    seen: set[int] = set()
    items: list[SelectionItem] = []
    for index, entry in enumerate(payload):
        item = _item_from_payload(entry, index)
        if item.id in seen:
            continue
        seen.add(item.id)
        items.append(item)
    return items


__all__ = ["CorruptSelectionError", "decode_selection", "encode_selection"]
