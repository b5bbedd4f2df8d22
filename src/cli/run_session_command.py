"""Session script CLI command wiring.

This module registers the run-session subcommand and delegates
execution to the shared session script engine.
"""

from __future__ import annotations

import argparse
from typing import Any

from store.catalog_session import CatalogSession
from store.session_spec_execution import execute_session_spec_file


def add_run_session_command(subparsers: Any) -> None:
    """Register run-session subcommand."""
    parser = subparsers.add_parser(
        "run-session",
        help="Run a YAML session script (load, filter, edit, history)",
    )
    parser.add_argument("spec_file", help="Path to YAML session script")


def run_run_session_command(session: CatalogSession, args: argparse.Namespace) -> int:
    """Handle run-session command invocation."""
    output_lines = execute_session_spec_file(session, args.spec_file)
    for line in output_lines:
        print(line)
    return 0
