"""Operator commands for lock and intake inspection.

The run lock never expires on its own, so a marker left by a crashed
run must be cleared with ``unlock`` after checking ``status``.
"""

from __future__ import annotations

from typing import Any

from core.config import EventLoadConfig
from core.constants import EXIT_OK
from ingest.file_discovery import discover_input_files
from ingest.run_lock import RunLock
from store.sql_record_store import SqlRecordStore


def add_status_command(subparsers: Any) -> None:
    """Register status subcommand."""
    subparsers.add_parser("status", help="Show lock state, pending files, and stored events")


def add_unlock_command(subparsers: Any) -> None:
    """Register unlock subcommand."""
    subparsers.add_parser("unlock", help="Remove a stale run lock marker")


def run_status_command(config: EventLoadConfig) -> int:
    """Print lock, intake, and store status lines."""
    lock = RunLock(config.lock_path)
    pending_files = discover_input_files(config.intake_dir, config.file_extension)
    store = SqlRecordStore.from_config(config)
    try:
        stored_events = store.count()
    finally:
        store.close()
    print(f"lock_held={str(lock.is_held()).lower()}")
    print(f"lock_holder={lock.describe() or '-'}")
    print(f"pending_files={len(pending_files)}")
    print(f"stored_events={stored_events}")
    return EXIT_OK


def run_unlock_command(config: EventLoadConfig) -> int:
    """Remove the lock marker and report whether one existed."""
    lock = RunLock(config.lock_path)
    was_held = lock.is_held()
    lock.release()
    print(f"lock_released={str(was_held).lower()}")
    return EXIT_OK
