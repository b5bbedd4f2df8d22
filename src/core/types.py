"""Shared typed models.

This module defines immutable data models used by ingest, store,
query, and session layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Mapping

from core.constants import PLACEHOLDER_IMAGE_URL


class HistoryAction(str, Enum):
    """Audit log action kinds."""

    BULK_LOAD = "BULK_LOAD"
    UPDATE = "UPDATE"
    CREATE = "CREATE"


class RowPolicy(str, Enum):
    """Handling of CSV rows that carry no sku.

    Attributes:
        LENIENT: Drop the row silently.
        WARN: Drop the row and report it in the ingest report.
        STRICT: Reject the whole file.
    """

    LENIENT = "lenient"
    WARN = "warn"
    STRICT = "strict"


@dataclass(frozen=True)
class VehicleApplication:
    """Vehicle compatibility entry for a part.

    Attributes:
        make: Vehicle manufacturer.
        model: Vehicle model.
        engine: Engine label.
        years: Free-form year or range label, not parsed.
    """

    make: str
    model: str
    engine: str = ""
    years: str = ""


@dataclass(frozen=True)
class SpecEntry:
    """One labelled technical specification row."""

    label: str
    value: str


@dataclass(frozen=True)
class CrossReference:
    """Competing brand part number mapped to a product."""

    brand: str
    part: str


@dataclass(frozen=True)
class Product:
    """Canonical catalog record.

    Attributes:
        id: Synthetic identifier assigned at ingestion or creation.
        sku: Unique catalog key used for upserts and audit lookups.
        name: Display name.
        brand: Manufacturer brand.
        category: Catalog category.
        oem_ref: Original equipment manufacturer reference.
        line: Product line.
        description: Free-text description.
        image_preview: Preview image URL.
        quick_specs: Short key/value highlights.
        specs: Ordered technical specifications.
        applications: Vehicles this part fits.
        cross_reference: Equivalent part numbers from other brands.
        images: Additional image URLs.
    """

    sku: str
    id: str = ""
    name: str = ""
    brand: str = ""
    category: str = ""
    oem_ref: str = ""
    line: str = ""
    description: str = ""
    image_preview: str = PLACEHOLDER_IMAGE_URL
    quick_specs: Mapping[str, str] = field(default_factory=dict)
    specs: tuple[SpecEntry, ...] = ()
    applications: tuple[VehicleApplication, ...] = ()
    cross_reference: tuple[CrossReference, ...] = ()
    images: tuple[str, ...] = ()


@dataclass(frozen=True)
class HistoryEntry:
    """Append-only audit log row.

    Attributes:
        date: UTC timestamp of the change.
        user: Actor label that made the change.
        sku: Affected product sku, or the system marker for bulk loads.
        action: Kind of change.
        details: Human-readable description.
    """

    date: datetime
    user: str
    sku: str
    action: HistoryAction
    details: str


@dataclass(frozen=True)
class FilterState:
    """Current catalog filter selections.

    Empty strings mean the dimension is unconstrained.
    """

    make: str = ""
    model: str = ""
    year: str = ""
    category: str = ""
    search: str = ""


@dataclass(frozen=True)
class FilterOptions:
    """Valid option lists for the current filter state."""

    makes: tuple[str, ...]
    models: tuple[str, ...]
    years: tuple[str, ...]
    categories: tuple[str, ...]


@dataclass(frozen=True)
class CsvRow:
    """Normalized CSV data row.

    Attributes:
        line_number: One-based line number where the row starts.
        values: Header name to trimmed value mapping.
    """

    line_number: int
    values: Mapping[str, str]


@dataclass(frozen=True)
class DroppedRow:
    """CSV row discarded during mapping.

    Attributes:
        line_number: One-based line number where the row starts.
        reason: Why the row was dropped.
    """

    line_number: int
    reason: str


@dataclass(frozen=True)
class ParsedCatalog:
    """Products parsed from one upload before store replacement.

    Attributes:
        products: Mapped products in file order.
        dropped_rows: Rows reported under the warn policy.
    """

    products: tuple[Product, ...]
    dropped_rows: tuple[DroppedRow, ...] = ()


@dataclass(frozen=True)
class IngestReport:
    """Outcome of a successful ingestion.

    Attributes:
        source_label: File name the products were loaded from.
        product_count: Number of products now in the store.
        dropped_rows: Rows reported under the warn policy.
    """

    source_label: str
    product_count: int
    dropped_rows: tuple[DroppedRow, ...] = ()
