"""Unit tests for the in-memory record store."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from core.errors import CatalogStoreError
from core.types import HistoryAction, Product
from store.record_store import RecordStore

_FIXED_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _products() -> list[Product]:
    return [
        Product(id="1", sku="A-1", name="First"),
        Product(id="2", sku="B-2", name="Second"),
        Product(id="3", sku="C-3", name="Third"),
    ]


def _store() -> RecordStore:
    counter = iter(range(1000))
    return RecordStore(clock=lambda: _FIXED_TIME, id_factory=lambda: f"new-{next(counter)}")


def test_replace_all_swaps_contents_and_records_bulk_load() -> None:
    """Replacing should store the new products and one audit entry."""
    store = _store()

    entry = store.replace_all(_products(), actor="Maria", source_label="parts.csv")

    assert [product.sku for product in store.products()] == ["A-1", "B-2", "C-3"]
    assert (entry.action, entry.sku, entry.details) == (
        HistoryAction.BULK_LOAD,
        "SYSTEM",
        "3 products loaded from parts.csv",
    )


def test_upsert_existing_sku_replaces_in_place() -> None:
    """Updating should keep the product position and add one UPDATE entry."""
    store = _store()
    store.replace_all(_products(), actor="Maria", source_label="parts.csv")

    entry = store.upsert(Product(id="2", sku="B-2", name="Second v2"), actor="Luis")

    assert [product.name for product in store.products()] == ["First", "Second v2", "Third"]
    assert entry.action is HistoryAction.UPDATE and len(store.history()) == 2


def test_upsert_keeps_existing_id_when_edit_has_none() -> None:
    """An edit without an id should inherit the replaced product id."""
    store = _store()
    store.replace_all(_products(), actor="Maria", source_label="parts.csv")

    store.upsert(Product(sku="C-3", name="Third v2"), actor="Luis")

    assert store.find("C-3").id == "3"


def test_upsert_new_sku_appends_with_fresh_id() -> None:
    """Creating should append the product and add one CREATE entry."""
    store = _store()
    store.replace_all(_products(), actor="Maria", source_label="parts.csv")

    entry = store.upsert(Product(id="client-id", sku="D-4", name="Fourth"), actor="Luis")
    created = store.products()[-1]

    assert (created.sku, created.id) == ("D-4", "new-0")
    assert entry.action is HistoryAction.CREATE and entry.user == "Luis"


def test_history_timestamps_strictly_increase_with_frozen_clock() -> None:
    """Entries made within one clock tick should still be ordered."""
    store = _store()
    store.replace_all(_products(), actor="Maria", source_label="parts.csv")
    store.upsert(replace(_products()[0], name="v2"), actor="Maria")
    store.upsert(replace(_products()[0], name="v3"), actor="Maria")

    dates = [entry.date for entry in store.history()]

    assert dates == sorted(dates) and len(set(dates)) == 3


def test_history_for_is_newest_first() -> None:
    """Per-sku history should be sorted strictly descending by date."""
    times = iter([_FIXED_TIME + timedelta(minutes=minute) for minute in range(10)])
    store = RecordStore(clock=lambda: next(times))
    store.replace_all(_products(), actor="Maria", source_label="parts.csv")
    store.upsert(Product(sku="A-1", name="v2"), actor="Maria")
    store.upsert(Product(sku="B-2", name="other"), actor="Maria")
    store.upsert(Product(sku="A-1", name="v3"), actor="Luis")

    entries = store.history_for("A-1")

    assert [entry.user for entry in entries] == ["Luis", "Maria"]
    assert entries[0].date > entries[1].date


def test_history_for_bulk_loads_uses_system_marker() -> None:
    """Bulk loads should be filed under the system sku."""
    store = _store()
    store.replace_all(_products(), actor="Maria", source_label="parts.csv")

    assert len(store.history_for("SYSTEM")) == 1 and store.history_for("A-1") == []


def test_last_modified_returns_newest_entry() -> None:
    """The newest audit entry should be reported per sku."""
    store = _store()
    store.replace_all(_products(), actor="Maria", source_label="parts.csv")
    store.upsert(Product(sku="A-1", name="v2"), actor="Maria")
    store.upsert(Product(sku="A-1", name="v3"), actor="Luis")

    assert store.last_modified("A-1").user == "Luis" and store.last_modified("Z-9") is None


def test_replace_all_history_survives_later_replace() -> None:
    """Audit entries keyed by sku should outlive a bulk replace."""
    store = _store()
    store.replace_all(_products(), actor="Maria", source_label="parts.csv")
    store.upsert(Product(sku="A-1", name="v2"), actor="Maria")

    store.replace_all(_products()[1:], actor="Maria", source_label="next.csv")

    assert len(store.history_for("A-1")) == 1 and store.find("A-1") is None


@pytest.mark.parametrize("sku", ["", "   "])
def test_upsert_rejects_blank_sku(sku: str) -> None:
    """A product without a sku should never reach the store or the audit log."""
    store = _store()
    store.replace_all(_products(), actor="Maria", source_label="parts.csv")

    with pytest.raises(CatalogStoreError):
        store.upsert(Product(sku=sku, name="Nameless"), actor="Luis")

    assert len(store) == 3 and len(store.history()) == 1
