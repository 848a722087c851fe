"""Core constants used across eventload modules.

This module centralizes defaults, file names, and the event table layout.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_BASE_DIR = Path(".")
INTAKE_DIR_NAME = "uploaded"
ARCHIVE_DIR_NAME = "processed"
LOCK_FILE_NAME = "LOCKFILE"
DEFAULT_DATABASE_FILE_NAME = "events.db"
DEFAULT_FILE_EXTENSION = ".csv"
DEFAULT_DELIMITER = ","
DEFAULT_SYSLOG_ADDRESS = "/dev/log"
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
SYSLOG_IDENT = "eventload"
FILE_ENCODING = "utf-8-sig"

EVENT_TABLE_NAME = "event"
EVENT_DATETIME_FIELD = "eventDatetime"
EVENT_ACTION_FIELD = "eventAction"
CALL_REF_FIELD = "callRef"
EVENT_VALUE_FIELD = "eventValue"
EVENT_CURRENCY_CODE_FIELD = "eventCurrencyCode"
REQUIRED_FIELDS = (EVENT_DATETIME_FIELD, EVENT_ACTION_FIELD, CALL_REF_FIELD)
EVENT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
EVENT_ACTION_MAX_LENGTH = 20
CURRENCY_CODE_LENGTH = 3
EVENT_VALUE_PRECISION = 10
EVENT_VALUE_SCALE = 2

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_LOCK_CONTENTION = 3
