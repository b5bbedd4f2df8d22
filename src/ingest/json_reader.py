"""JSON catalog dump reader.

This module decodes a top-level JSON array of product objects.
Element shapes are trusted; missing fields take schema defaults.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from core.errors import ParseFailureError
from core.types import ParsedCatalog, Product
from store.product_payload import product_from_payload


def parse_json_products(text: str, source_label: str, batch_stamp: int) -> ParsedCatalog:
    """Decode JSON text into products.

    Args:
        text: Raw JSON document.
        source_label: File name used in error messages.
        batch_stamp: Ingestion timestamp used for missing ids.

    Returns:
        Parsed products in array order.

    Raises:
        ParseFailureError: If JSON is invalid, not an array, or holds
            a non-object element.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise ParseFailureError(
            f"Failed to parse JSON catalog {source_label} at line {error.lineno}: "
            f"{error.msg}. Fix the JSON syntax and upload again."
        ) from error
    if not isinstance(payload, list):
        raise ParseFailureError(
            f"Invalid JSON catalog {source_label}: expected a top-level array, "
            f"got {type(payload).__name__}. Wrap products in a JSON array."
        )
    products: list[Product] = []
    for index, item in enumerate(payload, 1):
        if not isinstance(item, Mapping):
            raise ParseFailureError(
                f"Invalid JSON catalog {source_label}: element #{index} is "
                f"{type(item).__name__}, expected an object."
            )
        products.append(product_from_payload(item, fallback_id=f"{batch_stamp}-{index}"))
    return ParsedCatalog(products=tuple(products))
