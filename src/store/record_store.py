"""Record store contract consumed by the ingest pipeline."""

from __future__ import annotations

from typing import Protocol

from core.types import EventRecord


class RecordStore(Protocol):
    """Persistence boundary for validated event records."""

    def ensure_schema(self) -> None:
        """Create the target database and event table if absent."""

    def insert(self, record: EventRecord) -> None:
        """Persist one validated record.

        Raises:
            EventLoadStoreError: If the record cannot be stored.
        """
