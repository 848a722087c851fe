"""Filesystem run lock.

This module provides advisory mutual exclusion across process invocations
through a marker file. A marker left behind by a crashed run is never
expired automatically; an operator removes it with ``eventload unlock``.
"""

from __future__ import annotations

from datetime import datetime, timezone
import os
from pathlib import Path

from core.errors import EventLoadLockError


class RunLock:
    """Marker-file lock guarding one pipeline run at a time."""

    def __init__(self, lock_path: Path) -> None:
        self._lock_path = lock_path

    @property
    def path(self) -> Path:
        return self._lock_path

    def is_held(self) -> bool:
        """Return whether a lock marker currently exists."""
        return self._lock_path.exists()

    def try_acquire(self) -> bool:
        """Create the lock marker if absent.

        Creation is exclusive, so two racing processes cannot both succeed.

        Returns:
            True when this call created the marker, False if it already existed.

        Raises:
            EventLoadLockError: If the marker cannot be written.
        """
        try:
            descriptor = os.open(self._lock_path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
        except FileExistsError:
            return False
        except OSError as error:
            raise EventLoadLockError(
                f"Failed to create lock marker at {self._lock_path}: {error}. "
                "Check that the directory exists and is writable."
            ) from error
        with os.fdopen(descriptor, "w", encoding="utf-8") as marker:
            marker.write(_build_marker_payload())
        return True

    def release(self) -> None:
        """Remove the lock marker if present.

        Raises:
            EventLoadLockError: If an existing marker cannot be removed.
        """
        try:
            self._lock_path.unlink(missing_ok=True)
        except OSError as error:
            raise EventLoadLockError(
                f"Failed to remove lock marker at {self._lock_path}: {error}. "
                "Remove it manually before the next run."
            ) from error

    def describe(self) -> str | None:
        """Return the marker payload, or None when no lock is held."""
        try:
            return self._lock_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None


def _build_marker_payload() -> str:
    created_at = datetime.now(timezone.utc).isoformat()
    return f"LOCKED pid={os.getpid()} created_at={created_at}\n"
