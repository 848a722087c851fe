"""Shared typed models.

This module defines immutable data models used by the ingest, validation,
and store layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Mapping

from core.constants import (
    CALL_REF_FIELD,
    EVENT_ACTION_FIELD,
    EVENT_CURRENCY_CODE_FIELD,
    EVENT_DATETIME_FIELD,
    EVENT_VALUE_FIELD,
)

RunStatus = Literal["completed", "already_running", "no_files"]


@dataclass(frozen=True)
class ParsedRow:
    """One data line mapped onto the header row.

    Attributes:
        source_path: Input file the row was read from.
        line_number: One-based physical line number in the file.
        fields: Header name to raw, untrimmed field value.
    """

    source_path: Path
    line_number: int
    fields: Mapping[str, str]


@dataclass(frozen=True)
class MalformedRow:
    """Data line whose field count differs from the header's.

    Attributes:
        source_path: Input file the row was read from.
        line_number: One-based physical line number in the file.
        expected_count: Field count of the header row.
        actual_count: Field count of the data row.
    """

    source_path: Path
    line_number: int
    expected_count: int
    actual_count: int


@dataclass(frozen=True)
class RowValidation:
    """Outcome of validating one row.

    Attributes:
        failures: Names of every field that failed its rule.
    """

    failures: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Return whether every applicable check passed."""
        return not self.failures


@dataclass(frozen=True)
class EventRecord:
    """Validated event ready for persistence.

    Values are the raw strings from the input file; conversion to column
    types happens in the store.

    Attributes:
        event_datetime: Timestamp text ``YYYY-MM-DD HH:MM:SS``.
        event_action: Action name.
        call_ref: Decimal digit string.
        event_value: Decimal amount text, or None when absent.
        event_currency_code: Currency code, or None when no value is present.
    """

    event_datetime: str
    event_action: str
    call_ref: str
    event_value: str | None = None
    event_currency_code: str | None = None

    @classmethod
    def from_fields(cls, fields: Mapping[str, str]) -> "EventRecord":
        """Build a record from a validated header-keyed row.

        Args:
            fields: Row fields that passed validation.

        Returns:
            Immutable event record.
        """
        event_value = fields.get(EVENT_VALUE_FIELD) or None
        currency_code = fields.get(EVENT_CURRENCY_CODE_FIELD) if event_value else None
        return cls(
            event_datetime=fields[EVENT_DATETIME_FIELD],
            event_action=fields[EVENT_ACTION_FIELD],
            call_ref=fields[CALL_REF_FIELD],
            event_value=event_value,
            event_currency_code=currency_code,
        )


@dataclass(frozen=True)
class FileOutcome:
    """Row counters for one processed input file."""

    source_path: Path
    archived_path: Path
    rows_inserted: int
    rows_rejected: int
    rows_malformed: int
    rows_failed: int


@dataclass(frozen=True)
class RunSummary:
    """Result of one pipeline invocation.

    Attributes:
        status: Terminal pipeline state.
        files: Per-file outcomes in processing order.
    """

    status: RunStatus
    files: tuple[FileOutcome, ...] = field(default_factory=tuple)

    @property
    def files_processed(self) -> int:
        return len(self.files)

    @property
    def rows_inserted(self) -> int:
        return sum(outcome.rows_inserted for outcome in self.files)

    @property
    def rows_rejected(self) -> int:
        return sum(outcome.rows_rejected for outcome in self.files)

    @property
    def rows_malformed(self) -> int:
        return sum(outcome.rows_malformed for outcome in self.files)

    @property
    def rows_failed(self) -> int:
        return sum(outcome.rows_failed for outcome in self.files)
