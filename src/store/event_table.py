"""Event table definition.

Column names match the input header names exactly.
"""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, MetaData, Numeric, String, Table

from core.constants import (
    CALL_REF_FIELD,
    CURRENCY_CODE_LENGTH,
    EVENT_ACTION_FIELD,
    EVENT_ACTION_MAX_LENGTH,
    EVENT_CURRENCY_CODE_FIELD,
    EVENT_DATETIME_FIELD,
    EVENT_TABLE_NAME,
    EVENT_VALUE_FIELD,
    EVENT_VALUE_PRECISION,
    EVENT_VALUE_SCALE,
)

EVENT_METADATA = MetaData()

EVENT_TABLE = Table(
    EVENT_TABLE_NAME,
    EVENT_METADATA,
    Column(EVENT_DATETIME_FIELD, DateTime, nullable=False),
    Column(EVENT_ACTION_FIELD, String(EVENT_ACTION_MAX_LENGTH), nullable=False),
    Column(CALL_REF_FIELD, Integer, nullable=False),
    Column(EVENT_VALUE_FIELD, Numeric(EVENT_VALUE_PRECISION, EVENT_VALUE_SCALE), nullable=True),
    Column(EVENT_CURRENCY_CODE_FIELD, String(CURRENCY_CODE_LENGTH), nullable=True),
)
