"""Persistent, ordered, de-duplicated product selection (the quote cart)."""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from ..canonical.entities import SelectionItem
from ..config import DEFAULT_CART_SLOT, CoreConfig, config_from_env
from .codec import decode_selection, encode_selection
from .storage import FileStorage, SlotStorage

logger = logging.getLogger(__name__)

Listener = Callable[[tuple[SelectionItem, ...]], None]


class SelectionStore:
    """Selection list kept in memory and written through to a durable slot.

    The slot is read once, on ``load()`` or on first access. Every mutator
    writes the full list to the slot before swapping the in-memory copy, so a
    failed write leaves both sides at the previous state.
    """

    def __init__(self, storage: SlotStorage, slot: str = DEFAULT_CART_SLOT):
        self._storage = storage
        self.slot = slot
        self._items: list[SelectionItem] | None = None
        self._listeners: list[Listener] = []

    def load(self) -> "SelectionStore":
        """Read the durable slot. Raises ``CorruptSelectionError`` on a bad payload."""
        raw = self._storage.get(self.slot)
        if raw is None:
            self._items = []
        else:
            self._items = decode_selection(raw)
        logger.debug("Loaded %d selected product(s) from slot %s", len(self._items), self.slot)
        return self

    def reload(self) -> "SelectionStore":
        """Re-read the slot, picking up writes made by another process."""
        self.load()
        self._notify()
        return self

    def _current(self) -> list[SelectionItem]:
        if self._items is None:
            self.load()
        return list(self._items or [])

    def _write(self, items: list[SelectionItem]) -> None:
        self._storage.set(self.slot, encode_selection(items))
        self._items = items
        self._notify()

    def _notify(self) -> None:
        snapshot = self.items()
        for listener in list(self._listeners):
            listener(snapshot)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add(self, item: SelectionItem) -> None:
        current = self._current()
        if not any(existing.id == item.id for existing in current):
            current.append(item)
        self._write(current)

    def remove(self, product_id: int) -> None:
        self._write([item for item in self._current() if item.id != product_id])

    def clear(self) -> None:
        self._write([])

    def count(self) -> int:
        return len(self._current())

    def list_ids(self) -> list[int]:
        return [item.id for item in self._current()]

    def items(self) -> tuple[SelectionItem, ...]:
        return tuple(self._current())

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[SelectionItem]:
        return iter(self.items())

    def __contains__(self, product_id: object) -> bool:
        return product_id in self.list_ids()


def open_selection_store(config: CoreConfig | None = None, *, load: bool = True) -> SelectionStore:
    """Build the file-backed store described by ``config``.

    Pass ``load=False`` to skip the initial read, e.g. to ``clear()`` a slot
    whose payload no longer decodes.
    """
    resolved = config or config_from_env()
    store = SelectionStore(FileStorage(resolved.storage_dir), slot=resolved.cart_slot)
    return store.load() if load else store


__all__ = ["SelectionStore", "open_selection_store"]
