"""Runtime configuration model for the parts catalog.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_ACTOR,
    DEFAULT_LOCALE,
    DEFAULT_ROW_POLICY,
    SUPPORTED_LOCALES,
    SUPPORTED_ROW_POLICIES,
)
from core.errors import CatalogConfigError
from core.types import RowPolicy


@dataclass(frozen=True)
class CatalogConfig:
    """Validated runtime configuration.

    Attributes:
        default_user: Actor label attached to audit entries.
        locale: Language used for ingestion placeholder texts.
        row_policy: Handling of CSV rows dropped for a missing sku.
    """

    default_user: str
    locale: str
    row_policy: RowPolicy

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CatalogConfigError: If environment values are invalid.
        """
        default_user = os.getenv("PARTS_CATALOG_USER", DEFAULT_ACTOR).strip() or DEFAULT_ACTOR
        locale = parse_locale(os.getenv("PARTS_CATALOG_LOCALE", DEFAULT_LOCALE))
        row_policy = parse_row_policy(os.getenv("PARTS_CATALOG_ROW_POLICY", DEFAULT_ROW_POLICY))
        return cls(default_user=default_user, locale=locale, row_policy=row_policy)


def parse_locale(raw_value: str) -> str:
    """Parse and validate a placeholder locale code.

    Args:
        raw_value: Raw locale string from environment or CLI.

    Returns:
        Normalized locale code.

    Raises:
        CatalogConfigError: If the locale is not supported.
    """
    locale = raw_value.strip().lower()
    if locale not in SUPPORTED_LOCALES:
        raise CatalogConfigError(
            "Invalid PARTS_CATALOG_LOCALE value: "
            f"expected one of {SUPPORTED_LOCALES}, got '{raw_value}'. "
            "Set PARTS_CATALOG_LOCALE to a supported locale."
        )
    return locale


def parse_row_policy(raw_value: str) -> RowPolicy:
    """Parse and validate the dropped-row policy.

    Args:
        raw_value: Raw policy string from environment or CLI.

    Returns:
        Parsed row policy.

    Raises:
        CatalogConfigError: If the policy is unknown.
    """
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_ROW_POLICIES:
        raise CatalogConfigError(
            "Invalid PARTS_CATALOG_ROW_POLICY value: "
            f"expected one of {SUPPORTED_ROW_POLICIES}, got '{raw_value}'. "
            "Set PARTS_CATALOG_ROW_POLICY to lenient, warn, or strict."
        )
    return RowPolicy(normalized)
