"""Parts catalog CLI entry points.

This module exposes commands for loading, filtering, and scripting
catalog sessions. It maps argparse commands onto session calls.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from cli.run_session_command import add_run_session_command, run_run_session_command
from core.config import CatalogConfig, parse_locale, parse_row_policy
from core.constants import SUPPORTED_LOCALES, SUPPORTED_ROW_POLICIES
from core.errors import CatalogError
from core.logging_config import configure_cli_logging
from store.catalog_format import format_option_lines, format_product_line
from store.catalog_session import CatalogSession
from store.csv_template import csv_template_text, write_csv_template
from store.product_payload import product_to_payload


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="parts-catalog", description="Auto parts catalog CLI")
    parser.add_argument("--user", help="Override PARTS_CATALOG_USER for audit entries")
    parser.add_argument(
        "--locale",
        choices=SUPPORTED_LOCALES,
        help="Override PARTS_CATALOG_LOCALE for import placeholders",
    )
    parser.add_argument(
        "--row-policy",
        choices=SUPPORTED_ROW_POLICIES,
        help="Override PARTS_CATALOG_ROW_POLICY for CSV rows without a sku",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_search_command(subparsers)
    _add_options_command(subparsers)
    add_run_session_command(subparsers)
    _add_template_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the parts catalog CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    configure_cli_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        session = _build_session(args)
        return _dispatch(parser, session, args)
    except CatalogError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    session: CatalogSession,
    args: argparse.Namespace,
) -> int:
    if args.command == "search":
        return _run_search_command(session, args)
    if args.command == "options":
        return _run_options_command(session, args)
    if args.command == "run-session":
        return run_run_session_command(session, args)
    if args.command == "template":
        return _run_template_command(args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_session(args: argparse.Namespace) -> CatalogSession:
    """Build a session with optional CLI config overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Configured empty session.
    """
    session = CatalogSession(CatalogConfig.from_env())
    overrides: dict[str, object] = {}
    if args.locale:
        overrides["locale"] = parse_locale(args.locale)
    if args.row_policy:
        overrides["row_policy"] = parse_row_policy(args.row_policy)
    if overrides:
        session = session.with_config(**overrides)
    if args.user:
        session.set_user(args.user)
    return session


def _run_search_command(session: CatalogSession, args: argparse.Namespace) -> int:
    """Handle search command.

    Args:
        session: Catalog session.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    session.ingest_file(args.source)
    _apply_filter_args(session, args, ("make", "model", "year", "category", "search"))
    results = session.results()
    if args.json:
        print(json.dumps([product_to_payload(product) for product in results], indent=2))
        return 0
    for product in results:
        print(format_product_line(product))
    return 0


def _run_options_command(session: CatalogSession, args: argparse.Namespace) -> int:
    """Handle options command.

    Args:
        session: Catalog session.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    session.ingest_file(args.source)
    _apply_filter_args(session, args, ("make", "model"))
    for line in format_option_lines(session.options()):
        print(line)
    return 0


def _run_template_command(args: argparse.Namespace) -> int:
    """Handle template command."""
    if args.output:
        print(write_csv_template(args.output))
        return 0
    print(csv_template_text(), end="")
    return 0


def _apply_filter_args(
    session: CatalogSession,
    args: argparse.Namespace,
    field_names: tuple[str, ...],
) -> None:
    """Apply filter flags in chain order so cascade resets cannot drop them."""
    for field_name in field_names:
        value = getattr(args, field_name)
        if value:
            session.set_filter(field_name, value)


def _add_search_command(subparsers: Any) -> None:
    """Register search subcommand."""
    parser = subparsers.add_parser("search", help="Load a catalog file and list matching parts")
    parser.add_argument("source", help="Catalog .csv or .json file")
    parser.add_argument("--make", help="Vehicle make")
    parser.add_argument("--model", help="Vehicle model (requires --make)")
    parser.add_argument("--year", help="Year or range label (requires --make and --model)")
    parser.add_argument("--category", help="Part category")
    parser.add_argument("--search", help="Text matched against sku, name, OEM ref, cross refs")
    parser.add_argument("--json", action="store_true", help="Print matching parts as JSON")


def _add_options_command(subparsers: Any) -> None:
    """Register options subcommand."""
    parser = subparsers.add_parser("options", help="List valid filter options for a catalog file")
    parser.add_argument("source", help="Catalog .csv or .json file")
    parser.add_argument("--make", help="Vehicle make")
    parser.add_argument("--model", help="Vehicle model (requires --make)")


def _add_template_command(subparsers: Any) -> None:
    """Register template subcommand."""
    parser = subparsers.add_parser("template", help="Print or write the CSV upload template")
    parser.add_argument("--output", help="Optional file path to write the template to")
