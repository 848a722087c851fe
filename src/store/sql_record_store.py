"""SQLAlchemy-backed event store.

This module provisions the event table and inserts one record per
transaction. Any database reachable through a SQLAlchemy URL works;
a configured database name is created on the server first.
"""

from __future__ import annotations

from sqlalchemy import create_engine, func, insert, select, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from core.config import EventLoadConfig
from core.errors import EventLoadConfigError, EventLoadStoreError
from core.logging_config import get_logger
from core.types import EventRecord
from store.event_table import EVENT_METADATA, EVENT_TABLE
from store.record_params import record_to_params

_LOGGER = get_logger(__name__)


class SqlRecordStore:
    """Relational store for validated event records."""

    def __init__(self, database_url: str, database_name: str | None = None) -> None:
        self._server_url = _parse_url(database_url)
        self._database_name = database_name
        target_url = self._server_url
        if database_name:
            target_url = self._server_url.set(database=database_name)
        self._engine: Engine = create_engine(target_url)

    @classmethod
    def from_config(cls, config: EventLoadConfig) -> "SqlRecordStore":
        """Build a store from runtime configuration."""
        return cls(config.database_url, config.database_name)

    def ensure_schema(self) -> None:
        """Create the database and event table when they do not exist.

        Safe to call on every run.

        Raises:
            EventLoadStoreError: If DDL execution fails.
        """
        try:
            if self._database_name:
                self._create_database()
            EVENT_METADATA.create_all(self._engine, checkfirst=True)
        except SQLAlchemyError as error:
            raise EventLoadStoreError(
                f"Failed to provision event schema at {self._describe_target()}: {error}. "
                "Check database connectivity and privileges."
            ) from error
        _LOGGER.info("schema_ready", database=self._describe_target())

    def insert(self, record: EventRecord) -> None:
        """Insert one record in its own transaction.

        Args:
            record: Validated event record.

        Raises:
            EventLoadStoreError: If conversion or the INSERT fails, including
                integers the driver cannot bind.
        """
        try:
            params = record_to_params(record)
            with self._engine.begin() as connection:
                connection.execute(insert(EVENT_TABLE), params)
        except (SQLAlchemyError, OverflowError) as error:
            raise EventLoadStoreError(
                f"Failed to insert event for callRef {record.call_ref[:40]}: {error}."
            ) from error

    def count(self) -> int:
        """Return the number of stored events.

        Raises:
            EventLoadStoreError: If the query fails.
        """
        query = select(func.count()).select_from(EVENT_TABLE)
        try:
            with self._engine.connect() as connection:
                return int(connection.execute(query).scalar_one())
        except SQLAlchemyError as error:
            raise EventLoadStoreError(
                f"Failed to count events at {self._describe_target()}: {error}. "
                "Run 'eventload init-db' if the schema has not been created."
            ) from error

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    def _create_database(self) -> None:
        """Issue CREATE DATABASE IF NOT EXISTS on the server connection."""
        server_engine = create_engine(self._server_url)
        try:
            quoted_name = server_engine.dialect.identifier_preparer.quote_identifier(
                str(self._database_name)
            )
            with server_engine.begin() as connection:
                connection.execute(text(f"CREATE DATABASE IF NOT EXISTS {quoted_name}"))
        finally:
            server_engine.dispose()

    def _describe_target(self) -> str:
        return self._engine.url.render_as_string(hide_password=True)


def _parse_url(database_url: str) -> URL:
    try:
        return make_url(database_url)
    except ArgumentError as error:
        raise EventLoadConfigError(
            f"Invalid database URL '{database_url}': {error}. "
            "Set EVENTLOAD_DATABASE_URL to a SQLAlchemy URL such as sqlite:///events.db."
        ) from error
