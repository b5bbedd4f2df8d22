"""Shared JSON serialization for Product payloads.

This module centralizes Product and HistoryEntry JSON conversion.
It is reused by JSON ingestion, session scripts, and CLI output.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.constants import PLACEHOLDER_IMAGE_URL
from core.types import CrossReference, HistoryEntry, Product, SpecEntry, VehicleApplication


def product_to_payload(product: Product) -> dict[str, object]:
    """Serialize Product into JSON-safe payload.

    Args:
        product: Product instance.

    Returns:
        Dictionary payload using the catalog export key names.
    """
    return {
        "id": product.id,
        "sku": product.sku,
        "name": product.name,
        "brand": product.brand,
        "category": product.category,
        "oem_ref": product.oem_ref,
        "line": product.line,
        "description": product.description,
        "image_preview": product.image_preview,
        "quickSpecs": dict(product.quick_specs),
        "specs": [{"label": spec.label, "value": spec.value} for spec in product.specs],
        "applications": [
            {
                "make": application.make,
                "model": application.model,
                "engine": application.engine,
                "years": application.years,
            }
            for application in product.applications
        ],
        "crossReference": [
            {"brand": reference.brand, "part": reference.part}
            for reference in product.cross_reference
        ],
        "images": list(product.images),
    }


def product_from_payload(payload: Mapping[str, Any], fallback_id: str = "") -> Product:
    """Deserialize a JSON object into Product.

    Absent or null fields take the schema defaults; no further
    validation is applied.

    Args:
        payload: Decoded JSON object.
        fallback_id: Identifier used when the payload has none.

    Returns:
        Parsed Product.
    """
    raw_id = payload.get("id")
    return Product(
        id=fallback_id if raw_id is None or raw_id == "" else str(raw_id),
        sku=_text(payload, "sku"),
        name=_text(payload, "name"),
        brand=_text(payload, "brand"),
        category=_text(payload, "category"),
        oem_ref=_text(payload, "oem_ref"),
        line=_text(payload, "line"),
        description=_text(payload, "description"),
        image_preview=_text(payload, "image_preview") or PLACEHOLDER_IMAGE_URL,
        quick_specs={
            str(key): _as_text(value) for key, value in _mapping(payload.get("quickSpecs")).items()
        },
        specs=tuple(
            SpecEntry(label=_text(item, "label"), value=_text(item, "value"))
            for item in _mapping_rows(payload.get("specs"))
        ),
        applications=tuple(
            VehicleApplication(
                make=_text(item, "make"),
                model=_text(item, "model"),
                engine=_text(item, "engine"),
                years=_text(item, "years"),
            )
            for item in _mapping_rows(payload.get("applications"))
        ),
        cross_reference=tuple(
            CrossReference(brand=_text(item, "brand"), part=_text(item, "part"))
            for item in _mapping_rows(payload.get("crossReference"))
        ),
        images=tuple(_as_text(item) for item in _list(payload.get("images")) if item is not None),
    )


def history_entry_to_payload(entry: HistoryEntry) -> dict[str, str]:
    """Serialize HistoryEntry into JSON-safe payload."""
    return {
        "date": entry.date.isoformat(),
        "user": entry.user,
        "sku": entry.sku,
        "action": entry.action.value,
        "details": entry.details,
    }


def _text(payload: Mapping[str, Any], key: str) -> str:
    return _as_text(payload.get(key))


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _mapping(value: object) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _list(value: object) -> list[Any]:
    return value if isinstance(value, list) else []


def _mapping_rows(value: object) -> list[Mapping[str, Any]]:
    return [item for item in _list(value) if isinstance(item, Mapping)]
