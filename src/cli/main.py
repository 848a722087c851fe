"""Eventload CLI entry points.
This module exposes the batch run command and schema provisioning.
It maps argparse commands onto pipeline and store calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from cli.status_command import (
    add_status_command,
    add_unlock_command,
    run_status_command,
    run_unlock_command,
)
from core.config import EventLoadConfig
from core.constants import EXIT_FAILURE, EXIT_LOCK_CONTENTION, EXIT_OK
from core.errors import EventLoadConfigError, EventLoadError
from core.logging_config import configure_logging, get_logger
from core.types import RunSummary
from ingest.pipeline import run_event_load
from store.sql_record_store import SqlRecordStore

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="eventload",
        description="Load delimited event files into the relational store",
    )
    parser.add_argument("--config", help="Optional YAML config file")
    parser.add_argument("--base-dir", help="Override EVENTLOAD_BASE_DIR for this command")
    parser.add_argument("--database-url", help="Override EVENTLOAD_DATABASE_URL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_run_command(subparsers)
    _add_init_db_command(subparsers)
    add_status_command(subparsers)
    add_unlock_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the eventload CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code: 0 on success or no-op, 1 on failure,
        3 when another run holds the lock.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args)
        logging_session = configure_logging(config)
    except EventLoadConfigError as error:
        print(f"config_error={error}", file=sys.stderr)
        return EXIT_FAILURE
    try:
        return _dispatch(parser, config, args)
    except EventLoadError as error:
        _LOGGER.error("command_failed", command=args.command, error=str(error))
        return EXIT_FAILURE
    finally:
        logging_session.close()


def _dispatch(
    parser: argparse.ArgumentParser,
    config: EventLoadConfig,
    args: argparse.Namespace,
) -> int:
    if args.command == "run":
        return _run_run_command(config)
    if args.command == "init-db":
        return _run_init_db_command(config)
    if args.command == "status":
        return run_status_command(config)
    if args.command == "unlock":
        return run_unlock_command(config)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(args: argparse.Namespace) -> EventLoadConfig:
    """Build config with optional command-line overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated config.
    """
    overrides: dict[str, str] = {}
    if args.base_dir:
        overrides["base_dir"] = args.base_dir
    if args.database_url:
        overrides["database_url"] = args.database_url
    return EventLoadConfig.from_env(config_file=args.config, overrides=overrides)


def _run_run_command(config: EventLoadConfig) -> int:
    """Handle run command.

    Args:
        config: Runtime configuration.

    Returns:
        Exit code.
    """
    store = SqlRecordStore.from_config(config)
    try:
        summary = run_event_load(config, store)
    finally:
        store.close()
    _print_summary(summary)
    if summary.status == "already_running":
        return EXIT_LOCK_CONTENTION
    return EXIT_OK


def _run_init_db_command(config: EventLoadConfig) -> int:
    store = SqlRecordStore.from_config(config)
    try:
        store.ensure_schema()
    finally:
        store.close()
    print("schema=ready")
    return EXIT_OK


def _print_summary(summary: RunSummary) -> None:
    print(f"status={summary.status}")
    print(f"files_processed={summary.files_processed}")
    print(f"rows_inserted={summary.rows_inserted}")
    print(f"rows_rejected={summary.rows_rejected}")
    print(f"rows_malformed={summary.rows_malformed}")
    print(f"rows_failed={summary.rows_failed}")


def _add_run_command(subparsers: Any) -> None:
    """Register run subcommand."""
    subparsers.add_parser("run", help="Process every intake file once and archive it")


def _add_init_db_command(subparsers: Any) -> None:
    """Register init-db subcommand."""
    subparsers.add_parser("init-db", help="Create the database and event table if absent")
