"""In-memory record store and audit log.

This module holds the ordered product collection for one session and
an append-only history of every change. All mutations and snapshot
reads go through one lock so readers never see a partial update.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable

from core.constants import MANUAL_EDIT_DETAILS, SYSTEM_HISTORY_SKU
from core.errors import CatalogStoreError
from core.logging_config import get_logger
from core.types import HistoryAction, HistoryEntry, Product

_LOGGER = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current timezone-aware UTC time."""
    return datetime.now(timezone.utc)


class RecordStore:
    """Single-writer product store with audit history.

    The store keeps products in insertion order. History timestamps are
    strictly increasing even when the clock does not advance between
    two changes.
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Create an empty store.

        Args:
            clock: Source of history timestamps.
            id_factory: Source of ids for manually created products.
        """
        self._clock = clock
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)
        self._lock = threading.RLock()
        self._products: tuple[Product, ...] = ()
        self._history: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._products)

    def products(self) -> tuple[Product, ...]:
        """Return a consistent snapshot of all products in store order."""
        with self._lock:
            return self._products

    def history(self) -> tuple[HistoryEntry, ...]:
        """Return every audit entry in append order."""
        with self._lock:
            return tuple(self._history)

    def find(self, sku: str) -> Product | None:
        """Return the product with this sku, if any."""
        with self._lock:
            index = self._index_of(sku)
            return None if index is None else self._products[index]

    def replace_all(
        self,
        products: Iterable[Product],
        actor: str,
        source_label: str,
    ) -> HistoryEntry:
        """Swap the whole store contents.

        Args:
            products: New products in order.
            actor: User label for the audit entry.
            source_label: File name the products came from.

        Returns:
            The appended bulk-load history entry.
        """
        new_products = tuple(products)
        with self._lock:
            self._products = new_products
            entry = self._append_history(
                actor=actor,
                sku=SYSTEM_HISTORY_SKU,
                action=HistoryAction.BULK_LOAD,
                details=f"{len(new_products)} products loaded from {source_label}",
            )
        _LOGGER.info(
            "catalog_replaced",
            product_count=len(new_products),
            source_label=source_label,
            user=actor,
        )
        return entry

    def upsert(self, product: Product, actor: str) -> HistoryEntry:
        """Update a product in place or append it as new.

        Args:
            product: Product to store, matched by sku.
            actor: User label for the audit entry.

        Returns:
            The appended UPDATE or CREATE history entry.

        Raises:
            CatalogStoreError: If the product sku is blank.
        """
        if not product.sku.strip():
            raise CatalogStoreError(
                "Cannot save product: sku is blank. Every product needs a sku to be stored."
            )
        with self._lock:
            index = self._index_of(product.sku)
            products = list(self._products)
            if index is None:
                action = HistoryAction.CREATE
                products.append(replace(product, id=self._id_factory()))
            else:
                action = HistoryAction.UPDATE
                if not product.id:
                    product = replace(product, id=products[index].id)
                products[index] = product
            self._products = tuple(products)
            entry = self._append_history(
                actor=actor,
                sku=product.sku,
                action=action,
                details=MANUAL_EDIT_DETAILS,
            )
        _LOGGER.info("product_upserted", sku=product.sku, action=action.value, user=actor)
        return entry

    def history_for(self, sku: str) -> list[HistoryEntry]:
        """Return audit entries for a sku, newest first."""
        with self._lock:
            matching = [entry for entry in self._history if entry.sku == sku]
        return sorted(matching, key=lambda entry: entry.date, reverse=True)

    def last_modified(self, sku: str) -> HistoryEntry | None:
        """Return the newest audit entry for a sku, if any."""
        entries = self.history_for(sku)
        return entries[0] if entries else None

    def _index_of(self, sku: str) -> int | None:
        for index, product in enumerate(self._products):
            if product.sku == sku:
                return index
        return None

    def _append_history(
        self,
        actor: str,
        sku: str,
        action: HistoryAction,
        details: str,
    ) -> HistoryEntry:
        entry = HistoryEntry(
            date=self._next_timestamp(),
            user=actor,
            sku=sku,
            action=action,
            details=details,
        )
        self._history.append(entry)
        return entry

    def _next_timestamp(self) -> datetime:
        timestamp = self._clock()
        if self._history and timestamp <= self._history[-1].date:
            timestamp = self._history[-1].date + timedelta(microseconds=1)
        return timestamp
