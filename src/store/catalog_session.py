"""Catalog session state for SDK and CLI workflows.

This module owns the one mutable application state of a run: the
record store, the current user label, and the current filter state.
Callers construct a session explicitly and pass it where needed.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import CatalogConfig
from core.types import FilterOptions, FilterState, HistoryEntry, IngestReport, Product
from ingest.pipeline import IngestionController
from query.cascading_filters import apply_filters, filter_options
from query.filter_state import clear_filters, update_filter
from store.record_store import RecordStore


class CatalogSession:
    """Primary SDK entry point for one catalog session."""

    def __init__(
        self,
        config: CatalogConfig | None = None,
        store: RecordStore | None = None,
    ) -> None:
        """Create a session.

        Args:
            config: Optional runtime configuration.
            store: Optional pre-built record store.
        """
        self._config = config or CatalogConfig.from_env()
        self._store = store or RecordStore()
        self._ingestion = IngestionController(self._store, self._config)
        self._current_user = self._config.default_user
        self._filters = FilterState()

    @property
    def config(self) -> CatalogConfig:
        return self._config

    @property
    def current_user(self) -> str:
        return self._current_user

    @property
    def filters(self) -> FilterState:
        return self._filters

    def set_user(self, user: str) -> None:
        """Change the actor label used for later audit entries."""
        self._current_user = user.strip() or self._config.default_user

    def ingest_file(self, path: str | Path) -> IngestReport:
        """Replace the catalog with the contents of a CSV or JSON file.

        Args:
            path: Upload file path.

        Returns:
            Load summary.

        Raises:
            CatalogIngestError: If the upload is rejected; the catalog
                is left unchanged.
        """
        return self._ingestion.ingest_file(path, actor=self._current_user)

    def ingest_text(self, file_name: str, text: str) -> IngestReport:
        """Replace the catalog with already-read upload content.

        Args:
            file_name: Upload file name used for format dispatch.
            text: File content.

        Returns:
            Load summary.
        """
        return self._ingestion.ingest_text(file_name, text, actor=self._current_user)

    def upsert(self, product: Product) -> HistoryEntry:
        """Save a manual create or edit as the current user."""
        return self._store.upsert(product, actor=self._current_user)

    def set_filter(self, field_name: str, value: str) -> FilterState:
        """Apply one filter change with cascade reset.

        Args:
            field_name: One of make, model, year, category, search.
            value: New selection.

        Returns:
            Updated filter state.
        """
        self._filters = update_filter(self._filters, field_name, value)
        return self._filters

    def clear_filters(self) -> FilterState:
        """Reset every filter selection."""
        self._filters = clear_filters()
        return self._filters

    def results(self) -> list[Product]:
        """Return products matching the current filters, in store order."""
        return apply_filters(self._store.products(), self._filters)

    def options(self) -> FilterOptions:
        """Return the valid option lists for the current filters."""
        return filter_options(self._store.products(), self._filters)

    def products(self) -> tuple[Product, ...]:
        """Return every product in store order."""
        return self._store.products()

    def history(self) -> tuple[HistoryEntry, ...]:
        """Return the full audit log in append order."""
        return self._store.history()

    def history_for(self, sku: str) -> list[HistoryEntry]:
        """Return audit entries for one sku, newest first."""
        return self._store.history_for(sku)

    def last_modified(self, sku: str) -> HistoryEntry | None:
        """Return the newest audit entry for one sku."""
        return self._store.last_modified(sku)

    def with_config(self, **changes: object) -> "CatalogSession":
        """Clone the session with config overrides and an empty store.

        Args:
            **changes: ``CatalogConfig`` field overrides.

        Returns:
            New session instance.
        """
        return CatalogSession(replace(self._config, **changes))
