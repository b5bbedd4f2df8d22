"""Unit tests for the JSON catalog reader."""

from __future__ import annotations

import pytest

from core.errors import ParseFailureError
from core.types import CrossReference, VehicleApplication
from ingest.json_reader import parse_json_products
from tests.fixture_paths import fixture_text


def test_parse_json_products_keeps_nested_fields() -> None:
    """Rich records should round into typed products."""
    parsed = parse_json_products(fixture_text("catalog/parts.json"), "parts.json", 5)
    product = parsed.products[0]

    assert product.id == "101"
    assert product.quick_specs == {"position": "Front", "type": "Gas"}
    assert product.applications[1] == VehicleApplication(
        make="TOYOTA", model="Auris", engine="1.6L", years="2013-2018"
    )
    assert product.cross_reference == (CrossReference(brand="KYB", part="339095"),)


def test_parse_json_products_fills_missing_fields() -> None:
    """Absent fields should take schema defaults and a batch id."""
    parsed = parse_json_products(fixture_text("catalog/parts.json"), "parts.json", 5)
    product = parsed.products[1]

    assert product.id == "5-2" and product.line == "" and product.specs == ()


def test_parse_json_products_rejects_non_array() -> None:
    """A top-level object should be a parse failure."""
    with pytest.raises(ParseFailureError, match="top-level array"):
        parse_json_products(fixture_text("catalog/not_array.json"), "not_array.json", 1)
    assert True


def test_parse_json_products_rejects_invalid_json() -> None:
    """Truncated JSON should be a parse failure."""
    with pytest.raises(ParseFailureError):
        parse_json_products(fixture_text("catalog/broken.json"), "broken.json", 1)
    assert True


def test_parse_json_products_rejects_non_object_element() -> None:
    """Array elements must be objects."""
    with pytest.raises(ParseFailureError, match="element #2"):
        parse_json_products(fixture_text("catalog/mixed_elements.json"), "mixed.json", 1)
    assert True


def test_parse_json_products_empty_array() -> None:
    """An empty array parses to zero products."""
    assert parse_json_products("[]", "empty.json", 1).products == ()
