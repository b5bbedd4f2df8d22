"""Session script execution engine.

This module maps validated session script steps onto one catalog
session so CLI and SDK entry points run the same workflow path.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import FILTER_FIELDS
from core.errors import CatalogSessionSpecError
from core.logging_config import get_logger
from core.session_spec import SessionSpec, SessionStep, load_session_spec
from core.session_spec_fields import (
    optional_label,
    reject_unknown_fields,
    required_mapping,
    required_string,
)
from store.catalog_format import (
    format_filter_line,
    format_history_line,
    format_ingest_lines,
    format_option_lines,
    format_product_line,
)
from store.catalog_session import CatalogSession
from store.product_payload import product_from_payload

_LOGGER = get_logger(__name__)


def execute_session_spec_file(session: CatalogSession, spec_file: str) -> tuple[str, ...]:
    """Load and execute a session script, returning printable output lines."""
    spec = load_session_spec(spec_file)
    return execute_session_spec(session, spec)


def execute_session_spec(session: CatalogSession, spec: SessionSpec) -> tuple[str, ...]:
    """Execute a parsed session script and return output lines.

    Args:
        session: Session the steps operate on.
        spec: Validated session script.

    Returns:
        Output lines of every step in order.

    Raises:
        CatalogError: If any step fails; later steps do not run.
    """
    if spec.defaults.user:
        session.set_user(spec.defaults.user)
    output_lines: list[str] = []
    for step in spec.steps:
        output_lines.extend(_execute_step(session, step, spec.base_dir))
    _LOGGER.info(
        "session_spec_executed",
        step_count=len(spec.steps),
        product_count=len(session.products()),
    )
    return tuple(output_lines)


def _execute_step(session: CatalogSession, step: SessionStep, base_dir: Path) -> tuple[str, ...]:
    if step.command == "load":
        return _execute_load_step(session, step, base_dir)
    if step.command == "set-user":
        reject_unknown_fields(step.args, ("user",), step.command)
        session.set_user(required_string(step.args, "user"))
        return (f"user={session.current_user}",)
    if step.command == "filter":
        return (_execute_filter_step(session, step),)
    if step.command == "clear-filters":
        reject_unknown_fields(step.args, (), step.command)
        return (format_filter_line(session.clear_filters()),)
    if step.command == "search":
        reject_unknown_fields(step.args, (), step.command)
        results = session.results()
        return tuple(format_product_line(product) for product in results) + (
            f"results={len(results)}",
        )
    if step.command == "options":
        reject_unknown_fields(step.args, (), step.command)
        return format_option_lines(session.options())
    if step.command == "upsert":
        reject_unknown_fields(step.args, ("product",), step.command)
        entry = session.upsert(product_from_payload(required_mapping(step.args, "product")))
        return (f"{entry.action.value} {entry.sku}",)
    if step.command == "history":
        reject_unknown_fields(step.args, ("sku",), step.command)
        entries = session.history_for(required_string(step.args, "sku"))
        return tuple(format_history_line(entry) for entry in entries)
    raise CatalogSessionSpecError(f"Unsupported session command '{step.command}'.")


def _execute_load_step(
    session: CatalogSession,
    step: SessionStep,
    base_dir: Path,
) -> tuple[str, ...]:
    reject_unknown_fields(step.args, ("source",), step.command)
    source_path = Path(required_string(step.args, "source")).expanduser()
    if not source_path.is_absolute():
        source_path = base_dir / source_path
    report = session.ingest_file(source_path)
    return format_ingest_lines(report)


def _execute_filter_step(session: CatalogSession, step: SessionStep) -> str:
    reject_unknown_fields(step.args, FILTER_FIELDS, step.command)
    for field_name in FILTER_FIELDS:
        value = optional_label(step.args, field_name)
        if value is not None:
            session.set_filter(field_name, value)
    return format_filter_line(session.filters)
