"""Public SDK surface for eventload.

This module provides a stable import path for library users.
It re-exports the config, pipeline, validators, and store.
"""

from __future__ import annotations

from core.config import EventLoadConfig
from core.types import EventRecord, RowValidation, RunSummary
from ingest.pipeline import EventLoadPipeline, run_event_load
from ingest.run_lock import RunLock
from store.record_store import RecordStore
from store.sql_record_store import SqlRecordStore
from validation.field_validators import FIELD_VALIDATORS, validate_field
from validation.row_validator import is_valid_row, validate_row

__all__ = [
    "EventLoadConfig",
    "EventLoadPipeline",
    "EventRecord",
    "FIELD_VALIDATORS",
    "RecordStore",
    "RowValidation",
    "RunLock",
    "RunSummary",
    "SqlRecordStore",
    "is_valid_row",
    "run_event_load",
    "validate_field",
    "validate_row",
]
