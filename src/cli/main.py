"""People list CLI entry points.

This module loads bootstrap documents, applies later updates and filter
toggles, and prints the resulting filter list and visible table.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from typing import Any, Sequence

from cli.text_render import TextRenderer
from core.config import PeopleListConfig, parse_log_level
from core.errors import PeopleListError
from core.logging_config import configure_logging
from ingest.bootstrap_reader import read_bootstrap
from view.app_context import PeopleListApp


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="peoplelist", description="Filterable people list")
    parser.add_argument("--sort-field", help="Override PEOPLELIST_SORT_FIELD for this command")
    parser.add_argument("--log-level", help="Override PEOPLELIST_LOG_LEVEL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_show_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the people list CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.sort_field, args.log_level)
        configure_logging(config.log_level)
        if args.command == "show":
            return _run_show_command(config, args)
    except PeopleListError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(sort_field: str | None, log_level: str | None) -> PeopleListConfig:
    """Build config with optional CLI overrides.

    Args:
        sort_field: Optional comparator field override.
        log_level: Optional log level override.

    Returns:
        Validated configuration.
    """
    config = PeopleListConfig.from_env()
    if sort_field:
        config = replace(config, sort_field=sort_field)
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config


def _run_show_command(config: PeopleListConfig, args: argparse.Namespace) -> int:
    """Handle show command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    renderer = TextRenderer(config.display_fields)
    app = PeopleListApp(
        render_records=renderer.render_records,
        render_filters=renderer.render_filters,
        config=config,
    )
    skipped = app.run(read_bootstrap(args.bootstrap)).skipped
    for update_path in args.update:
        skipped += app.deliver(read_bootstrap(update_path)).skipped
    for rule_id in args.toggle:
        if app.toggle_filter(rule_id) is None:
            print(f"warning: unknown filter id '{rule_id}'", file=sys.stderr)
    if skipped:
        print(f"warning: skipped {skipped} malformed item(s)", file=sys.stderr)
    if not args.no_filters:
        for line in renderer.filter_lines():
            print(line)
        print()
    for line in renderer.record_lines():
        print(line)
    return 0


def _add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser("show", help="Print the filtered people list")
    parser.add_argument("bootstrap", help="Bootstrap .json/.yaml file with persons and filters")
    parser.add_argument(
        "--update",
        action="append",
        default=[],
        help="Later data file to upsert after bootstrap (repeatable)",
    )
    parser.add_argument(
        "--toggle",
        action="append",
        default=[],
        help="Filter id to toggle, applied in order (repeatable)",
    )
    parser.add_argument("--no-filters", action="store_true", help="Omit the filter list")
