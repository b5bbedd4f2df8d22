"""Localized placeholder texts.

This module owns the default strings written into records when an
import leaves a field empty, plus the empty draft used for manual
product creation.
"""

from __future__ import annotations

from core.constants import NEW_PRODUCT_IMAGE_URL
from core.errors import CatalogConfigError
from core.types import Product

_PLACEHOLDERS: dict[str, dict[str, str]] = {
    "en": {
        "new_product": "New Product",
        "generic": "Generic",
        "general": "General",
        "various": "Various",
        "all": "All",
        "origin_label": "Origin",
        "imported_value": "Imported (CSV)",
    },
    "es": {
        "new_product": "Producto Nuevo",
        "generic": "Genérico",
        "general": "General",
        "various": "Varios",
        "all": "Todos",
        "origin_label": "Origen",
        "imported_value": "Importado (CSV)",
    },
}


def placeholder(locale: str, key: str) -> str:
    """Look up a placeholder text.

    Args:
        locale: Locale code, e.g. ``en``.
        key: Placeholder key.

    Returns:
        Localized placeholder string.

    Raises:
        CatalogConfigError: If locale or key is unknown.
    """
    texts = _PLACEHOLDERS.get(locale)
    if texts is None:
        raise CatalogConfigError(
            f"No placeholder texts for locale '{locale}'. "
            f"Use one of: {', '.join(sorted(_PLACEHOLDERS))}."
        )
    try:
        return texts[key]
    except KeyError as error:
        raise CatalogConfigError(f"Unknown placeholder key '{key}'.") from error


def new_product_draft() -> Product:
    """Return the empty product used to start a manual creation."""
    return Product(sku="", image_preview=NEW_PRODUCT_IMAGE_URL)
