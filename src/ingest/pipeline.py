"""Event load orchestration.

This module coordinates the run lock, intake discovery, row parsing,
validation, persistence, and archiving for one batch invocation.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
import shutil
from typing import Any

from core.config import EventLoadConfig
from core.errors import EventLoadIngestError, EventLoadStoreError
from core.logging_config import get_logger
from core.types import EventRecord, FileOutcome, MalformedRow, ParsedRow, RunSummary
from ingest.file_discovery import discover_input_files
from ingest.row_reader import read_rows
from ingest.run_lock import RunLock
from store.record_store import RecordStore
from validation.row_validator import validate_row

_INSERTED = "inserted"
_REJECTED = "rejected"
_MALFORMED = "malformed"
_FAILED = "failed"


class EventLoadPipeline:
    """Single-pass runner that loads every intake file once."""

    def __init__(
        self,
        config: EventLoadConfig,
        store: RecordStore,
        lock: RunLock | None = None,
        logger: Any | None = None,
    ) -> None:
        self._config = config
        self._store = store
        self._lock = lock or RunLock(config.lock_path)
        self._logger = logger or get_logger(__name__)

    def run(self) -> RunSummary:
        """Process all intake files under the run lock.

        Returns:
            Summary with the terminal status and per-file row counts.

        Raises:
            EventLoadIngestError: If a file cannot be read or archived. The
                lock is released and the failing file stays in intake.
            EventLoadLockError: If the lock marker cannot be written or removed.
        """
        self._logger.info("run_started", intake_dir=str(self._config.intake_dir))
        if self._lock.is_held():
            return self._report_contention()
        input_files = discover_input_files(self._config.intake_dir, self._config.file_extension)
        if not input_files:
            self._logger.info("no_files_available", intake_dir=str(self._config.intake_dir))
            return RunSummary(status="no_files")
        if not self._lock.try_acquire():
            return self._report_contention()
        try:
            _ensure_directory(self._config.archive_dir)
            outcomes = tuple(self._process_file(file_path) for file_path in input_files)
        finally:
            self._lock.release()
        summary = RunSummary(status="completed", files=outcomes)
        _log_run_completion(self._logger, summary)
        return summary

    def _report_contention(self) -> RunSummary:
        self._logger.info(
            "run_already_in_progress",
            lock_path=str(self._lock.path),
            holder=self._lock.describe(),
        )
        return RunSummary(status="already_running")

    def _process_file(self, file_path: Path) -> FileOutcome:
        """Load one file's rows, then move it into the archive."""
        self._logger.info("processing_file", path=str(file_path))
        counts: Counter[str] = Counter()
        for row in read_rows(file_path, self._config.delimiter):
            counts[self._process_row(row)] += 1
        archived_path = _archive_file(file_path, self._config.archive_dir)
        outcome = FileOutcome(
            source_path=file_path,
            archived_path=archived_path,
            rows_inserted=counts[_INSERTED],
            rows_rejected=counts[_REJECTED],
            rows_malformed=counts[_MALFORMED],
            rows_failed=counts[_FAILED],
        )
        self._logger.info(
            "file_archived",
            path=str(file_path),
            archived_path=str(archived_path),
            rows_inserted=outcome.rows_inserted,
            rows_rejected=outcome.rows_rejected,
            rows_malformed=outcome.rows_malformed,
            rows_failed=outcome.rows_failed,
        )
        return outcome

    def _process_row(self, row: ParsedRow | MalformedRow) -> str:
        """Validate and store one row, returning its outcome key."""
        if isinstance(row, MalformedRow):
            self._logger.debug(
                "row_malformed",
                path=str(row.source_path),
                line=row.line_number,
                expected_fields=row.expected_count,
                actual_fields=row.actual_count,
            )
            return _MALFORMED
        validation = validate_row(row.fields)
        if not validation.is_valid:
            self._logger.debug(
                "row_invalid",
                path=str(row.source_path),
                line=row.line_number,
                failed_fields=list(validation.failures),
            )
            return _REJECTED
        try:
            self._store.insert(EventRecord.from_fields(row.fields))
        except EventLoadStoreError as error:
            self._logger.error(
                "row_store_failed",
                path=str(row.source_path),
                line=row.line_number,
                error=str(error),
            )
            return _FAILED
        return _INSERTED


def run_event_load(
    config: EventLoadConfig,
    store: RecordStore,
    logger: Any | None = None,
) -> RunSummary:
    """Provision the schema and run one pipeline pass.

    Args:
        config: Runtime configuration.
        store: Record store receiving valid rows.
        logger: Optional structured logger.

    Returns:
        Run summary.

    Raises:
        EventLoadStoreError: If the schema cannot be provisioned.
        EventLoadIngestError: If a file cannot be read or archived.
    """
    store.ensure_schema()
    pipeline = EventLoadPipeline(config, store, logger=logger)
    return pipeline.run()


def _ensure_directory(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise EventLoadIngestError(
            f"Failed to create archive directory {directory}: {error}. "
            "Check permissions on the base directory."
        ) from error


def _archive_file(file_path: Path, archive_dir: Path) -> Path:
    """Move a processed file into the archive, keeping its name."""
    archived_path = archive_dir / file_path.name
    try:
        shutil.move(str(file_path), str(archived_path))
    except OSError as error:
        raise EventLoadIngestError(
            f"Failed to archive {file_path} to {archived_path}: {error}. "
            "Move the file out of the intake directory before the next run."
        ) from error
    return archived_path


def _log_run_completion(logger: Any, summary: RunSummary) -> None:
    """Log run completion with aggregate counters."""
    logger.info(
        "run_completed",
        files_processed=summary.files_processed,
        rows_inserted=summary.rows_inserted,
        rows_rejected=summary.rows_rejected,
        rows_malformed=summary.rows_malformed,
        rows_failed=summary.rows_failed,
    )
