"""Unit tests for the ingestion controller."""

from __future__ import annotations

from dataclasses import replace
import pytest

from core.config import CatalogConfig
from core.errors import EmptyResultError, ParseFailureError, UnsupportedFormatError
from core.types import HistoryAction, RowPolicy
from ingest.pipeline import IngestionController
from store.record_store import RecordStore
from tests.fixture_paths import fixture_path


def _controller(row_policy: RowPolicy = RowPolicy.LENIENT) -> tuple[IngestionController, RecordStore]:
    config = replace(CatalogConfig.from_env(), locale="en", row_policy=row_policy)
    store = RecordStore()
    return IngestionController(store, config, batch_stamp=lambda: 42), store


def test_ingest_csv_replaces_store_and_logs_bulk_load() -> None:
    """A CSV upload should fill the store and add one audit entry."""
    controller, store = _controller()

    report = controller.ingest_file(fixture_path("catalog/parts_full.csv"), actor="Maria")
    entry = store.history()[-1]

    assert report.product_count == 4 and len(store) == 4
    assert (entry.action, entry.sku, entry.user) == (HistoryAction.BULK_LOAD, "SYSTEM", "Maria")
    assert entry.details == "4 products loaded from parts_full.csv"


def test_ingest_json_replaces_store() -> None:
    """A JSON upload should become the store contents."""
    controller, store = _controller()

    controller.ingest_file(fixture_path("catalog/parts.json"), actor="Maria")

    assert [product.sku for product in store.products()] == ["AMR-500", "UNI-001"]


def test_ingest_never_merges_with_previous_contents() -> None:
    """A second upload should replace, not extend, the store."""
    controller, store = _controller()
    controller.ingest_file(fixture_path("catalog/parts_full.csv"), actor="Maria")

    controller.ingest_file(fixture_path("catalog/parts.json"), actor="Maria")

    assert len(store) == 2


def test_extension_match_is_case_insensitive() -> None:
    """Upper-case extensions should dispatch like lower-case ones."""
    controller, store = _controller()

    controller.ingest_text("EXPORT.CSV", "sku\nA-1\n", actor="Maria")

    assert store.products()[0].sku == "A-1"


@pytest.mark.parametrize(
    ("relative_path", "error_type"),
    [
        ("catalog/parts.txt", UnsupportedFormatError),
        ("catalog/header_only.csv", EmptyResultError),
        ("catalog/not_array.json", ParseFailureError),
        ("catalog/broken.json", ParseFailureError),
        ("catalog/missing.csv", ParseFailureError),
    ],
)
def test_rejected_upload_leaves_store_untouched(relative_path: str, error_type: type) -> None:
    """Every rejection should keep the previous products and history."""
    controller, store = _controller()
    controller.ingest_file(fixture_path("catalog/parts_full.csv"), actor="Maria")
    products_before = store.products()
    history_before = store.history()

    with pytest.raises(error_type):
        controller.ingest_file(fixture_path(relative_path), actor="Maria")

    assert store.products() == products_before and store.history() == history_before


def test_empty_json_array_is_empty_result() -> None:
    """An empty JSON array should be rejected, not loaded."""
    controller, store = _controller()

    with pytest.raises(EmptyResultError):
        controller.ingest_text("empty.json", "[]", actor="Maria")

    assert len(store) == 0 and store.history() == ()


def test_csv_with_only_skuless_rows_is_empty_result() -> None:
    """Rows that all lack a sku should produce an empty result."""
    controller, store = _controller()

    with pytest.raises(EmptyResultError):
        controller.ingest_text("bad.csv", "sku,name\n,Ghost\n", actor="Maria")

    assert len(store) == 0


def test_warn_policy_report_lists_dropped_rows() -> None:
    """The warn policy should surface dropped rows in the report."""
    controller, _ = _controller(RowPolicy.WARN)

    report = controller.ingest_file(fixture_path("catalog/parts_sparse.csv"), actor="Maria")

    assert report.product_count == 3 and report.dropped_rows[0].line_number == 4


def test_strict_policy_rejects_without_mutation() -> None:
    """The strict policy should reject sparse files and keep the store empty."""
    controller, store = _controller(RowPolicy.STRICT)

    with pytest.raises(ParseFailureError):
        controller.ingest_file(fixture_path("catalog/parts_sparse.csv"), actor="Maria")

    assert len(store) == 0


def test_batch_stamp_feeds_csv_ids() -> None:
    """CSV ids should use the controller batch stamp."""
    controller, store = _controller()

    controller.ingest_file(fixture_path("catalog/parts_full.csv"), actor="Maria")

    assert store.products()[0].id == "42-1"


def test_strict_policy_rejects_unclosed_quote() -> None:
    """An unclosed quote under the strict policy should leave the store empty."""
    controller, store = _controller(RowPolicy.STRICT)

    with pytest.raises(ParseFailureError):
        controller.ingest_text("parts.csv", 'sku,name\nA-1,"Oil\nB-2,Belt\n', actor="Maria")

    assert len(store) == 0 and store.history() == ()
