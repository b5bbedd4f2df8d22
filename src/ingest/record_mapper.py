"""CSV row to product mapping.

This module rebuilds nested product records from flat spreadsheet rows.
Missing values are filled with localized placeholders in one place.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from core.constants import PLACEHOLDER_IMAGE_URL
from core.errors import ParseFailureError
from core.localization import placeholder
from core.logging_config import get_logger
from core.types import (
    CsvRow,
    DroppedRow,
    ParsedCatalog,
    Product,
    RowPolicy,
    SpecEntry,
    VehicleApplication,
)

_LOGGER = get_logger(__name__)
_MISSING_SKU_REASON = "missing sku"


def map_csv_rows(
    rows: Iterable[CsvRow],
    locale: str,
    row_policy: RowPolicy,
    batch_stamp: int,
) -> ParsedCatalog:
    """Map normalized CSV rows into products.

    Args:
        rows: Header-keyed data rows in file order.
        locale: Locale used for placeholder texts.
        row_policy: How rows without a sku are handled.
        batch_stamp: Ingestion timestamp used to build batch-unique ids.

    Returns:
        Parsed products and any reported dropped rows.

    Raises:
        ParseFailureError: If the strict policy rejects a row.
    """
    products: list[Product] = []
    dropped_rows: list[DroppedRow] = []
    for row_index, row in enumerate(rows, 1):
        sku = row.values.get("sku", "").strip()
        if not sku:
            dropped_rows.append(DroppedRow(line_number=row.line_number, reason=_MISSING_SKU_REASON))
            continue
        products.append(
            map_csv_row(row.values, locale, record_id=f"{batch_stamp}-{row_index}")
        )
    return _apply_row_policy(products, dropped_rows, row_policy)


def map_csv_row(values: Mapping[str, str], locale: str, record_id: str) -> Product:
    """Build one product from a row that carries a sku.

    Args:
        values: Header-keyed row values.
        locale: Locale used for placeholder texts.
        record_id: Synthetic identifier for the product.

    Returns:
        Product with defaults applied.
    """
    return Product(
        id=record_id,
        sku=_value(values, "sku"),
        name=_value(values, "name") or placeholder(locale, "new_product"),
        brand=_value(values, "brand") or placeholder(locale, "generic"),
        category=_value(values, "category") or placeholder(locale, "general"),
        oem_ref=_value(values, "oem_ref"),
        line=_value(values, "line"),
        description=_value(values, "description"),
        image_preview=_value(values, "image_url") or PLACEHOLDER_IMAGE_URL,
        quick_specs={"info": _value(values, "specs_info")},
        specs=(
            SpecEntry(
                label=placeholder(locale, "origin_label"),
                value=placeholder(locale, "imported_value"),
            ),
        ),
        applications=_build_applications(values, locale),
    )


def _build_applications(
    values: Mapping[str, str],
    locale: str,
) -> tuple[VehicleApplication, ...]:
    make = _value(values, "make")
    if not make:
        return ()
    return (
        VehicleApplication(
            make=make,
            model=_value(values, "model") or placeholder(locale, "various"),
            engine=_value(values, "engine"),
            years=_value(values, "year") or placeholder(locale, "all"),
        ),
    )


def _apply_row_policy(
    products: list[Product],
    dropped_rows: list[DroppedRow],
    row_policy: RowPolicy,
) -> ParsedCatalog:
    if not dropped_rows or row_policy is RowPolicy.LENIENT:
        return ParsedCatalog(products=tuple(products))
    if row_policy is RowPolicy.STRICT:
        line_numbers = ", ".join(str(row.line_number) for row in dropped_rows)
        raise ParseFailureError(
            f"CSV rows without a sku at lines {line_numbers}. "
            "Fill the sku column or switch the row policy to lenient."
        )
    for dropped_row in dropped_rows:
        _LOGGER.warning(
            "csv_row_dropped",
            line_number=dropped_row.line_number,
            reason=dropped_row.reason,
        )
    return ParsedCatalog(products=tuple(products), dropped_rows=tuple(dropped_rows))


def _value(values: Mapping[str, str], key: str) -> str:
    return values.get(key, "").strip()
