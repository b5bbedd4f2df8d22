"""Session record store.

This module keeps the in-memory product collection and audit log.
It powers the catalog session used by the SDK and CLI.
"""
