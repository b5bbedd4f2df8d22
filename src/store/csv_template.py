"""Reference CSV upload template.

This module renders the fixed example file users fill in before a
bulk load. The ingestion pipeline never reads it.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import CSV_DELIMITER, CSV_TEMPLATE_HEADERS, CSV_TEMPLATE_SAMPLE_ROW


def csv_template_text() -> str:
    """Return the template header line plus one illustrative row."""
    lines = [CSV_DELIMITER.join(CSV_TEMPLATE_HEADERS), CSV_DELIMITER.join(CSV_TEMPLATE_SAMPLE_ROW)]
    return "\n".join(lines) + "\n"


def write_csv_template(output_path: str | Path) -> Path:
    """Write the template to disk.

    Args:
        output_path: Destination file path.

    Returns:
        Resolved path of the written file.
    """
    path = Path(output_path).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(csv_template_text(), encoding="utf-8")
    return path
