"""Public SDK surface for the parts catalog.

This module provides a stable import path for catalog users.
It re-exports the session, typed models, filter engine, and errors.
"""

from __future__ import annotations

from core.config import CatalogConfig
from core.errors import (
    CatalogError,
    CatalogIngestError,
    CatalogQueryError,
    CatalogStoreError,
    EmptyResultError,
    ParseFailureError,
    UnsupportedFormatError,
)
from core.localization import new_product_draft
from core.types import (
    CrossReference,
    FilterOptions,
    FilterState,
    HistoryAction,
    HistoryEntry,
    IngestReport,
    Product,
    RowPolicy,
    SpecEntry,
    VehicleApplication,
)
from query.cascading_filters import (
    apply_filters,
    available_categories,
    available_makes,
    available_models,
    available_years,
)
from query.filter_state import active_filters, clear_filters, update_filter
from store.catalog_session import CatalogSession
from store.csv_template import csv_template_text, write_csv_template
from store.record_store import RecordStore

__all__ = [
    "CatalogConfig",
    "CatalogError",
    "CatalogIngestError",
    "CatalogQueryError",
    "CatalogSession",
    "CatalogStoreError",
    "CrossReference",
    "EmptyResultError",
    "FilterOptions",
    "FilterState",
    "HistoryAction",
    "HistoryEntry",
    "IngestReport",
    "ParseFailureError",
    "Product",
    "RecordStore",
    "RowPolicy",
    "SpecEntry",
    "UnsupportedFormatError",
    "VehicleApplication",
    "active_filters",
    "apply_filters",
    "available_categories",
    "available_makes",
    "available_models",
    "available_years",
    "clear_filters",
    "csv_template_text",
    "new_product_draft",
    "update_filter",
    "write_csv_template",
]
