"""Runtime configuration model for eventload.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from core.config_file import load_config_file
from core.constants import (
    ARCHIVE_DIR_NAME,
    DEFAULT_BASE_DIR,
    DEFAULT_DATABASE_FILE_NAME,
    DEFAULT_DELIMITER,
    DEFAULT_FILE_EXTENSION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SYSLOG_ADDRESS,
    INTAKE_DIR_NAME,
    LOCK_FILE_NAME,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import EventLoadConfigError

ENV_PREFIX = "EVENTLOAD_"
CONFIG_KEYS = (
    "base_dir",
    "intake_dir",
    "archive_dir",
    "lock_file",
    "file_extension",
    "delimiter",
    "database_url",
    "database_name",
    "syslog",
    "syslog_address",
    "log_level",
)
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class EventLoadConfig:
    """Validated runtime configuration.

    Attributes:
        base_dir: Root directory holding intake, archive, and lock marker.
        intake_dir: Directory polled for new input files.
        archive_dir: Directory receiving processed input files.
        lock_path: Run lock marker file path.
        file_extension: Suffix of files picked up from intake.
        delimiter: Single-character field delimiter for input files.
        database_url: SQLAlchemy URL of the relational store.
        database_name: Optional database created and selected at startup.
        syslog_enabled: Whether log lines are sent to the system log.
        syslog_address: Unix socket path or ``host:port`` of the syslog daemon.
        log_level: Minimum log level name.
    """

    base_dir: Path
    intake_dir: Path
    archive_dir: Path
    lock_path: Path
    file_extension: str
    delimiter: str
    database_url: str
    database_name: str | None
    syslog_enabled: bool
    syslog_address: str
    log_level: str

    @classmethod
    def from_env(
        cls,
        config_file: str | None = None,
        overrides: Mapping[str, str] | None = None,
    ) -> "EventLoadConfig":
        """Build config from an optional YAML file and environment variables.

        Precedence is file, then environment, then explicit overrides.

        Args:
            config_file: Optional YAML config file path.
            overrides: Setting name to value, applied last.

        Returns:
            A validated config object.

        Raises:
            EventLoadConfigError: If file or environment values are invalid.
        """
        raw_values: dict[str, str] = {}
        if config_file:
            raw_values.update(load_config_file(config_file, CONFIG_KEYS))
        raw_values.update(_read_env_values())
        raw_values.update(overrides or {})
        return build_config(raw_values)


def build_config(raw_values: Mapping[str, str]) -> EventLoadConfig:
    """Build a validated config from raw string settings.

    Args:
        raw_values: Setting name to raw string value.

    Returns:
        A validated config object.

    Raises:
        EventLoadConfigError: If any value is invalid.
    """
    base_dir = _resolve_path(raw_values.get("base_dir", str(DEFAULT_BASE_DIR)))
    return EventLoadConfig(
        base_dir=base_dir,
        intake_dir=_resolve_path(raw_values.get("intake_dir", str(base_dir / INTAKE_DIR_NAME))),
        archive_dir=_resolve_path(
            raw_values.get("archive_dir", str(base_dir / ARCHIVE_DIR_NAME))
        ),
        lock_path=_resolve_path(raw_values.get("lock_file", str(base_dir / LOCK_FILE_NAME))),
        file_extension=_parse_file_extension(
            raw_values.get("file_extension", DEFAULT_FILE_EXTENSION)
        ),
        delimiter=_parse_delimiter(raw_values.get("delimiter", DEFAULT_DELIMITER)),
        database_url=raw_values.get(
            "database_url", f"sqlite:///{base_dir / DEFAULT_DATABASE_FILE_NAME}"
        ),
        database_name=raw_values.get("database_name") or None,
        syslog_enabled=_parse_bool(raw_values.get("syslog", "true"), "syslog"),
        syslog_address=raw_values.get("syslog_address", DEFAULT_SYSLOG_ADDRESS),
        log_level=_parse_log_level(raw_values.get("log_level", DEFAULT_LOG_LEVEL)),
    )


def _read_env_values() -> dict[str, str]:
    """Collect EVENTLOAD_* variables keyed by setting name."""
    values: dict[str, str] = {}
    for key in CONFIG_KEYS:
        env_value = os.getenv(f"{ENV_PREFIX}{key.upper()}")
        if env_value is not None:
            values[key] = env_value
    return values


def _resolve_path(raw_value: str) -> Path:
    return Path(raw_value).expanduser().resolve()


def _parse_file_extension(raw_value: str) -> str:
    """Parse the intake file extension.

    Args:
        raw_value: Raw extension such as ``.csv``.

    Returns:
        Extension including its leading dot.

    Raises:
        EventLoadConfigError: If value is not a dotted suffix.
    """
    if len(raw_value) < 2 or not raw_value.startswith(".") or "/" in raw_value:
        raise EventLoadConfigError(
            f"Invalid file extension '{raw_value}': expected a suffix like '.csv'. "
            "Set EVENTLOAD_FILE_EXTENSION to a dotted suffix."
        )
    return raw_value


def _parse_delimiter(raw_value: str) -> str:
    if len(raw_value) != 1:
        raise EventLoadConfigError(
            f"Invalid delimiter '{raw_value}': expected exactly one character. "
            "Set EVENTLOAD_DELIMITER to a single character such as ','."
        )
    return raw_value


def _parse_bool(raw_value: str, key: str) -> bool:
    """Parse a boolean flag value.

    Raises:
        EventLoadConfigError: If value is not a recognised boolean word.
    """
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise EventLoadConfigError(
        f"Invalid {ENV_PREFIX}{key.upper()} value: expected true/false, got '{raw_value}'."
    )


def _parse_log_level(raw_value: str) -> str:
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        raise EventLoadConfigError(
            f"Invalid log level '{raw_value}'. Supported levels: {SUPPORTED_LOG_LEVELS}."
        )
    return normalized
