"""Type-safe field parsing helpers for session script execution.

This module centralizes primitive parsing so step executors stay
concise and produce consistent validation errors.
"""

from __future__ import annotations

from typing import Mapping

from core.errors import CatalogSessionSpecError


def required_string(args: Mapping[str, object], field_name: str) -> str:
    """Read a required non-empty string field from a step."""
    value = optional_string(args, field_name)
    if not value:
        raise CatalogSessionSpecError(
            f"Session step is missing required field '{field_name}'."
        )
    return value


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip()
    raise CatalogSessionSpecError(
        f"Session field '{field_name}' must be a string when provided."
    )


def optional_label(args: Mapping[str, object], field_name: str) -> str | None:
    """Read a filter label that YAML may have decoded as a number.

    ``year: 2015`` decodes to an integer; it is accepted as ``"2015"``.
    """
    value = args.get(field_name)
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return optional_string(args, field_name)


def required_mapping(args: Mapping[str, object], field_name: str) -> Mapping[str, object]:
    """Read a required mapping field from a step."""
    value = args.get(field_name)
    if not isinstance(value, Mapping):
        raise CatalogSessionSpecError(
            f"Session field '{field_name}' must be a mapping."
        )
    return value


def reject_unknown_fields(
    args: Mapping[str, object],
    allowed_fields: tuple[str, ...],
    command: str,
) -> None:
    """Fail when a step carries fields its command does not accept."""
    unknown_fields = sorted(set(args) - set(allowed_fields))
    if unknown_fields:
        raise CatalogSessionSpecError(
            f"Session step '{command}' has unknown fields: {', '.join(unknown_fields)}."
        )
