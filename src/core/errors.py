"""Parts catalog exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all parts catalog failures."""


class CatalogConfigError(CatalogError):
    """Raised for invalid runtime configuration."""


class CatalogIngestError(CatalogError):
    """Raised when an uploaded file is rejected.

    The record store is never mutated when this error (or a subclass)
    is raised.
    """


class UnsupportedFormatError(CatalogIngestError):
    """Raised when the file extension is neither .csv nor .json."""


class ParseFailureError(CatalogIngestError):
    """Raised when a file cannot be read or decoded into records."""


class EmptyResultError(CatalogIngestError):
    """Raised when a file parses but yields zero usable records."""


class CatalogQueryError(CatalogError):
    """Raised for invalid filter state transitions."""


class CatalogStoreError(CatalogError):
    """Raised for invalid record store mutations."""


class CatalogSessionSpecError(CatalogError):
    """Raised for invalid or unsupported session script configuration."""
