"""Plain-text rendering of catalog data.

This module formats products, option lists, and audit entries as
printable lines shared by the CLI and session script execution.
"""

from __future__ import annotations

from core.types import FilterOptions, FilterState, HistoryEntry, IngestReport, Product
from query.filter_state import active_filters


def format_product_line(product: Product) -> str:
    """Render one product as ``sku, name, brand, category`` columns."""
    return f"{product.sku}\t{product.name}\t{product.brand}\t{product.category}"


def format_option_lines(options: FilterOptions) -> tuple[str, ...]:
    """Render each option list on its own line."""
    return (
        f"makes: {', '.join(options.makes) or '-'}",
        f"models: {', '.join(options.models) or '-'}",
        f"years: {', '.join(options.years) or '-'}",
        f"categories: {', '.join(options.categories) or '-'}",
    )


def format_history_line(entry: HistoryEntry) -> str:
    """Render one audit entry as tab-separated columns."""
    return f"{entry.date.isoformat()}\t{entry.action.value}\t{entry.user}\t{entry.details}"


def format_filter_line(state: FilterState) -> str:
    """Render the active filter selections."""
    selections = active_filters(state)
    if not selections:
        return "filters: none"
    return "filters: " + " ".join(f"{name}={value}" for name, value in selections)


def format_ingest_lines(report: IngestReport) -> tuple[str, ...]:
    """Render a load summary plus one line per reported dropped row."""
    lines = [f"loaded {report.product_count} products from {report.source_label}"]
    for dropped_row in report.dropped_rows:
        lines.append(f"dropped line {dropped_row.line_number}: {dropped_row.reason}")
    return tuple(lines)
