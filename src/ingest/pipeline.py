"""Ingest orchestration for catalog uploads.

This module dispatches uploads by file type, maps their contents into
products, and replaces the record store only when the whole file
produced at least one product.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

from core.config import CatalogConfig
from core.constants import CSV_EXTENSION, JSON_EXTENSION, SUPPORTED_UPLOAD_EXTENSIONS
from core.errors import (
    CatalogIngestError,
    EmptyResultError,
    ParseFailureError,
    UnsupportedFormatError,
)
from core.logging_config import get_logger
from core.types import IngestReport, ParsedCatalog
from ingest.csv_tokenizer import read_csv_rows
from ingest.json_reader import parse_json_products
from ingest.record_mapper import map_csv_rows
from store.record_store import RecordStore

_LOGGER = get_logger(__name__)


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class IngestionController:
    """Replace-or-reject ingestion of one upload into a record store."""

    def __init__(
        self,
        store: RecordStore,
        config: CatalogConfig,
        batch_stamp: Callable[[], int] = _epoch_millis,
    ) -> None:
        self._store = store
        self._config = config
        self._batch_stamp = batch_stamp

    def ingest_file(self, path: str | Path, actor: str) -> IngestReport:
        """Read a local file and load it into the store.

        Args:
            path: Path to a ``.csv`` or ``.json`` file.
            actor: User label for the audit entry.

        Returns:
            Summary of the completed load.

        Raises:
            UnsupportedFormatError: If the extension is not supported.
            ParseFailureError: If the file cannot be read or decoded.
            EmptyResultError: If no products were produced.
        """
        file_path = Path(path).expanduser()
        source_label = file_path.name
        try:
            _check_extension(source_label)
        except UnsupportedFormatError:
            _log_rejection(source_label, "UnsupportedFormatError")
            raise
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            _log_rejection(source_label, "ParseFailureError")
            raise ParseFailureError(
                f"Failed to read upload at {file_path}: {error}. "
                "Check that the file exists and is UTF-8 text."
            ) from error
        return self.ingest_text(source_label, text, actor)

    def ingest_text(self, source_label: str, text: str, actor: str) -> IngestReport:
        """Load already-read upload content into the store.

        Args:
            source_label: Upload file name; its extension selects the parser.
            text: Full file content.
            actor: User label for the audit entry.

        Returns:
            Summary of the completed load.

        Raises:
            CatalogIngestError: If the upload is rejected. The store is
                left unchanged.
        """
        try:
            parsed = self._parse(source_label, text)
        except CatalogIngestError as error:
            _log_rejection(source_label, type(error).__name__)
            raise
        if not parsed.products:
            _log_rejection(source_label, "EmptyResultError")
            raise EmptyResultError(
                f"Upload {source_label} produced no products. "
                "Check that the file has data rows with a sku."
            )
        self._store.replace_all(parsed.products, actor=actor, source_label=source_label)
        _LOGGER.info(
            "catalog_loaded",
            source_label=source_label,
            product_count=len(parsed.products),
            dropped_rows=len(parsed.dropped_rows),
            user=actor,
        )
        return IngestReport(
            source_label=source_label,
            product_count=len(parsed.products),
            dropped_rows=parsed.dropped_rows,
        )

    def _parse(self, source_label: str, text: str) -> ParsedCatalog:
        extension = _check_extension(source_label)
        batch_stamp = self._batch_stamp()
        if extension == CSV_EXTENSION:
            _, rows = read_csv_rows(text, row_policy=self._config.row_policy)
            return map_csv_rows(
                rows,
                locale=self._config.locale,
                row_policy=self._config.row_policy,
                batch_stamp=batch_stamp,
            )
        return parse_json_products(text, source_label, batch_stamp)


def _check_extension(source_label: str) -> str:
    """Return the lowercased upload extension or reject the upload."""
    extension = Path(source_label).suffix.lower()
    if extension not in SUPPORTED_UPLOAD_EXTENSIONS:
        raise UnsupportedFormatError(
            f"Unsupported upload format for {source_label}. "
            f"Use {CSV_EXTENSION} (spreadsheet export) or {JSON_EXTENSION}."
        )
    return extension


def _log_rejection(source_label: str, reason: str) -> None:
    _LOGGER.warning("ingest_rejected", source_label=source_label, reason=reason)
