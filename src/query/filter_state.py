"""Filter state transitions.

This module applies one filter change at a time and clears dependent
selections in the same step, following the make, model, year chain.
"""

from __future__ import annotations

from dataclasses import replace

from core.constants import FILTER_FIELDS
from core.errors import CatalogQueryError
from core.types import FilterState

_DEPENDENT_FIELDS: dict[str, tuple[str, ...]] = {
    "make": ("model", "year"),
    "model": ("year",),
}
_PARENT_FIELDS: dict[str, str] = {
    "model": "make",
    "year": "model",
}


def update_filter(state: FilterState, field_name: str, value: str) -> FilterState:
    """Return a new state with one field changed.

    Setting ``make`` clears ``model`` and ``year``; setting ``model``
    clears ``year``. Other fields clear nothing. A ``model`` or ``year``
    can only be selected while its parent is set; clearing is always
    allowed.

    Args:
        state: Current filter state.
        field_name: One of make, model, year, category, search.
        value: New selection; empty string clears the field.

    Returns:
        Consistent updated filter state.

    Raises:
        CatalogQueryError: If the field name is unknown or the selection
            has no parent selection.
    """
    if field_name not in FILTER_FIELDS:
        raise CatalogQueryError(
            f"Unknown filter field '{field_name}'. Use one of: {', '.join(FILTER_FIELDS)}."
        )
    parent = _PARENT_FIELDS.get(field_name)
    if value and parent and not getattr(state, parent):
        raise CatalogQueryError(
            f"Cannot select {field_name} '{value}': no {parent} is selected. "
            f"Select a {parent} first."
        )
    changes = {field_name: value}
    for dependent in _DEPENDENT_FIELDS.get(field_name, ()):
        changes[dependent] = ""
    return replace(state, **changes)


def clear_filters() -> FilterState:
    """Return the unconstrained filter state."""
    return FilterState()


def active_filters(state: FilterState) -> list[tuple[str, str]]:
    """List non-empty selections in chain order.

    Args:
        state: Current filter state.

    Returns:
        ``(field, value)`` pairs for every set field.
    """
    return [
        (field_name, getattr(state, field_name))
        for field_name in FILTER_FIELDS
        if getattr(state, field_name)
    ]
