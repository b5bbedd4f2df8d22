"""Structured logging configuration.

This module initializes structlog with a stable JSON event format
shared by ingestion, store, and session modules. Rendered events are
handed to stdlib logging so the CLI can route them to stderr and keep
result lines on stdout machine-readable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def configure_cli_logging(level: int = logging.INFO) -> None:
    """Attach a stderr handler for CLI runs.

    Does nothing when the root logger already has handlers.

    Args:
        level: Minimum stdlib level to emit.
    """
    logging.basicConfig(stream=sys.stderr, level=level, format="%(message)s")
