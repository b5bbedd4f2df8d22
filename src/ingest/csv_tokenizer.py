"""Quote-aware CSV tokenizer and row normalizer.

This module turns raw spreadsheet export text into header-keyed rows.
Quoted fields may contain delimiters, doubled quotes, and newlines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from core.constants import CSV_DELIMITER, CSV_QUOTE, UTF8_BOM
from core.errors import ParseFailureError
from core.logging_config import get_logger
from core.types import CsvRow, RowPolicy

_LOGGER = get_logger(__name__)


class _State(Enum):
    FIELD_START = "field_start"
    UNQUOTED = "unquoted"
    QUOTED = "quoted"
    QUOTE_IN_QUOTED = "quote_in_quoted"
    AFTER_QUOTED = "after_quoted"


@dataclass(frozen=True)
class TokenizedRecord:
    """One logical CSV record.

    Attributes:
        line_number: One-based line where the record starts.
        fields: Trimmed field values with quotes removed.
    """

    line_number: int
    fields: tuple[str, ...]


@dataclass
class _Tokenizer:
    """Character-level state machine over normalized text."""

    records: list[TokenizedRecord] = field(default_factory=list)
    unterminated_quote_line: int | None = None
    _state: _State = _State.FIELD_START
    _buffer: list[str] = field(default_factory=list)
    _fields: list[str] = field(default_factory=list)
    _line_number: int = 1
    _record_start: int = 1
    _quote_start: int = 1

    def feed(self, text: str) -> list[TokenizedRecord]:
        for char in text:
            self._consume(char)
            if char == "\n":
                self._line_number += 1
        self._finish()
        return self.records

    def _consume(self, char: str) -> None:
        state = self._state
        if state is _State.QUOTED:
            if char == CSV_QUOTE:
                self._state = _State.QUOTE_IN_QUOTED
            else:
                self._buffer.append(char)
            return
        if state is _State.QUOTE_IN_QUOTED and char == CSV_QUOTE:
            self._buffer.append(char)
            self._state = _State.QUOTED
            return
        if char == CSV_DELIMITER:
            self._emit_field()
            return
        if char == "\n":
            self._emit_field()
            self._emit_record()
            return
        if state is _State.FIELD_START:
            if char == CSV_QUOTE:
                # leading whitespace before an opening quote is not content
                self._buffer.clear()
                self._state = _State.QUOTED
                self._quote_start = self._line_number
                return
            self._buffer.append(char)
            if not char.isspace():
                self._state = _State.UNQUOTED
            return
        if state is _State.QUOTE_IN_QUOTED:
            self._state = _State.AFTER_QUOTED
        self._buffer.append(char)

    def _emit_field(self) -> None:
        self._fields.append("".join(self._buffer).strip())
        self._buffer.clear()
        self._state = _State.FIELD_START

    def _emit_record(self) -> None:
        fields = tuple(self._fields)
        self._fields = []
        if not _is_blank_record(fields):
            self.records.append(TokenizedRecord(line_number=self._record_start, fields=fields))
        self._record_start = self._line_number + 1

    def _finish(self) -> None:
        if self._state is _State.QUOTED:
            self.unterminated_quote_line = self._quote_start
        if self._buffer or self._fields or self._state is not _State.FIELD_START:
            self._emit_field()
            self._emit_record()


def tokenize_csv(text: str) -> list[TokenizedRecord]:
    """Split CSV text into records of trimmed fields.

    Args:
        text: Raw CSV text, any newline convention.

    Returns:
        Non-blank records in file order.
    """
    return _Tokenizer().feed(_normalize_newlines(text))


def _tokenize_checked(text: str, row_policy: RowPolicy) -> list[TokenizedRecord]:
    tokenizer = _Tokenizer()
    records = tokenizer.feed(_normalize_newlines(text))
    line_number = tokenizer.unterminated_quote_line
    if line_number is None:
        return records
    if row_policy is RowPolicy.STRICT:
        raise ParseFailureError(
            f"CSV quoted field opened at line {line_number} is never closed. "
            "Add the missing closing quote or switch the row policy to lenient."
        )
    _LOGGER.warning("csv_unterminated_quote", line_number=line_number)
    return records


def normalize_header(token: str) -> str:
    """Normalize one header token.

    Args:
        token: Raw header field.

    Returns:
        Trimmed, lowercased header with one quote layer removed.
    """
    normalized = token.strip().lower()
    if len(normalized) >= 2 and normalized[0] == CSV_QUOTE and normalized[-1] == CSV_QUOTE:
        normalized = normalized[1:-1].strip()
    return normalized


def read_csv_rows(
    text: str,
    row_policy: RowPolicy = RowPolicy.LENIENT,
) -> tuple[tuple[str, ...], list[CsvRow]]:
    """Parse CSV text into normalized headers and keyed rows.

    Rows shorter than the header are padded with empty strings;
    extra trailing fields are ignored. A quoted field left open at the
    end of the text keeps the rest of the file as its value; this is
    logged, or rejected under the strict policy.

    Args:
        text: Raw CSV text with a header line.
        row_policy: Policy deciding whether an unclosed quote is fatal.

    Returns:
        Tuple of normalized headers and data rows.

    Raises:
        ParseFailureError: If the strict policy rejects an unclosed quote.
    """
    records = _tokenize_checked(text, row_policy)
    if not records:
        return (), []
    headers = tuple(normalize_header(token) for token in records[0].fields)
    rows: list[CsvRow] = []
    for record in records[1:]:
        values: dict[str, str] = {}
        for index, header in enumerate(headers):
            values[header] = record.fields[index] if index < len(record.fields) else ""
        rows.append(CsvRow(line_number=record.line_number, values=values))
    return headers, rows


def _normalize_newlines(text: str) -> str:
    if text.startswith(UTF8_BOM):
        text = text[len(UTF8_BOM):]
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _is_blank_record(fields: tuple[str, ...]) -> bool:
    return len(fields) == 1 and fields[0] == ""
