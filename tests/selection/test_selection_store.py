import json

import pytest

from labquote.core.canonical import SelectionItem
from labquote.core.config import CoreConfig
from labquote.core.selection import (
    CorruptSelectionError,
    FileStorage,
    MemoryStorage,
    SelectionStore,
    open_selection_store,
)


def test_store_starts_empty_when_slot_has_no_value(memory_store) -> None:
    assert memory_store.count() == 0
    assert memory_store.list_ids() == []
    assert memory_store.items() == ()


def test_add_is_idempotent_on_duplicate_id(memory_store, microscope) -> None:
    memory_store.add(microscope)
    memory_store.add(SelectionItem(id=microscope.id, name="Renamed", brand="Other", slug="other"))

    assert memory_store.count() == 1
    assert memory_store.items() == (microscope,)


def test_add_always_rewrites_the_slot() -> None:
    storage = MemoryStorage()
    store = SelectionStore(storage, slot="cart")
    item = SelectionItem(id=1, name="Pipette")
    store.add(item)
    storage.slots["cart"] = "[]"
    store.add(item)

    assert json.loads(storage.slots["cart"]) == [{"id": 1, "name": "Pipette", "brand": "", "slug": ""}]


def test_remove_keeps_order_of_remaining_items(memory_store, microscope, centrifuge) -> None:
    third = SelectionItem(id=30, name="Autoclave", brand="Tuttnauer", slug="autoclave")
    memory_store.add(microscope)
    memory_store.add(centrifuge)
    memory_store.add(third)

    memory_store.remove(microscope.id)

    assert memory_store.list_ids() == [centrifuge.id, third.id]


def test_remove_missing_id_is_a_no_op(memory_store, microscope) -> None:
    memory_store.add(microscope)
    memory_store.remove(999)

    assert memory_store.list_ids() == [microscope.id]
    assert 999 not in memory_store
    assert microscope.id in memory_store


def test_clear_always_results_in_zero_count(memory_store, microscope, centrifuge) -> None:
    memory_store.clear()
    assert memory_store.count() == 0

    memory_store.add(microscope)
    memory_store.add(centrifuge)
    memory_store.clear()

    assert memory_store.count() == 0
    assert len(memory_store) == 0


def test_every_mutation_is_written_through_to_storage(microscope, centrifuge) -> None:
    storage = MemoryStorage()
    store = SelectionStore(storage, slot="cart")

    store.add(microscope)
    store.add(centrifuge)
    assert [entry["id"] for entry in json.loads(storage.slots["cart"])] == [7, 12]

    store.remove(7)
    assert [entry["id"] for entry in json.loads(storage.slots["cart"])] == [12]

    store.clear()
    assert storage.slots["cart"] == "[]"


def test_state_survives_a_new_store_instance(tmp_path, microscope, centrifuge) -> None:
    config = CoreConfig(storage_dir=str(tmp_path), cart_slot="quote_cart")
    first = open_selection_store(config)
    first.add(microscope)
    first.add(centrifuge)

    second = open_selection_store(config)

    assert second.items() == (microscope, centrifuge)
    assert (tmp_path / "quote_cart.json").exists()


def test_reload_picks_up_writes_from_another_store(tmp_path, microscope, centrifuge) -> None:
    storage = FileStorage(tmp_path)
    page_a = SelectionStore(storage, slot="cart").load()
    page_b = SelectionStore(storage, slot="cart").load()

    page_a.add(microscope)
    assert page_b.count() == 0

    page_b.reload()
    assert page_b.list_ids() == [microscope.id]

    # last write wins, no merge
    page_b.add(centrifuge)
    page_a.clear()
    assert SelectionStore(storage, slot="cart").load().count() == 0


def test_corrupt_payload_fails_loudly_and_clear_recovers() -> None:
    storage = MemoryStorage({"cart": "{not json"})
    store = SelectionStore(storage, slot="cart")

    with pytest.raises(CorruptSelectionError):
        store.load()
    with pytest.raises(CorruptSelectionError):
        store.count()

    store.clear()

    assert store.count() == 0
    assert storage.slots["cart"] == "[]"


def test_open_selection_store_without_load_allows_clearing_corrupt_slot(tmp_path) -> None:
    config = CoreConfig(storage_dir=str(tmp_path), cart_slot="cart")
    (tmp_path / "cart.json").write_text('{"id": 1}', encoding="utf-8")

    with pytest.raises(CorruptSelectionError):
        open_selection_store(config)

    store = open_selection_store(config, load=False)
    store.clear()

    assert open_selection_store(config).count() == 0


class _FailingStorage(MemoryStorage):
    fail = False

    def set(self, slot: str, value: str) -> None:
        if self.fail:
            raise OSError("disk full")
        super().set(slot, value)


def test_failed_write_leaves_memory_and_storage_unchanged(microscope, centrifuge) -> None:
    storage = _FailingStorage()
    store = SelectionStore(storage, slot="cart")
    store.add(microscope)
    storage.fail = True

    with pytest.raises(OSError):
        store.add(centrifuge)

    assert store.list_ids() == [microscope.id]
    assert [entry["id"] for entry in json.loads(storage.slots["cart"])] == [microscope.id]


def test_subscribers_see_each_write_until_unsubscribed(memory_store, microscope, centrifuge) -> None:
    seen: list[list[int]] = []
    unsubscribe = memory_store.subscribe(lambda items: seen.append([item.id for item in items]))

    memory_store.add(microscope)
    memory_store.add(centrifuge)
    unsubscribe()
    memory_store.clear()

    assert seen == [[7], [7, 12]]


def test_selection_item_from_catalog_product_mapping() -> None:
    item = SelectionItem.from_product(
        {"id": 3, "name": "Incubator", "brand": None, "slug": "incubator", "specifications": {"volume": "50L"}}
    )

    assert item == SelectionItem(id=3, name="Incubator", brand="", slug="incubator")


def test_file_with_invalid_utf8_is_reported_as_corrupt(tmp_path) -> None:
    config = CoreConfig(storage_dir=str(tmp_path), cart_slot="cart")
    (tmp_path / "cart.json").write_bytes(b'[{"id": 1, "name": "\xff\xfe"}]')

    with pytest.raises(CorruptSelectionError):
        open_selection_store(config)

    store = open_selection_store(config, load=False)
    store.clear()
    assert open_selection_store(config).count() == 0


def test_deeply_nested_payload_is_reported_as_corrupt() -> None:
    store = SelectionStore(MemoryStorage({"cart": "[" * 200000}), slot="cart")

    with pytest.raises(CorruptSelectionError):
        store.load()
