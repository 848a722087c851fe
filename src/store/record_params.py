"""Conversion of event records into bound column parameters.

This module turns the raw validated strings into column-typed values.
It is the only place where record text is interpreted.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation

from core.constants import (
    CALL_REF_FIELD,
    EVENT_ACTION_FIELD,
    EVENT_CURRENCY_CODE_FIELD,
    EVENT_DATETIME_FIELD,
    EVENT_DATETIME_FORMAT,
    EVENT_VALUE_FIELD,
)
from core.errors import EventLoadStoreError
from core.types import EventRecord


def record_to_params(record: EventRecord) -> dict[str, object]:
    """Convert a record into column-keyed insert parameters.

    Args:
        record: Validated event record.

    Returns:
        Column name to typed value. Absent value and currency map to None.

    Raises:
        EventLoadStoreError: If a validated string is not a real value,
            such as a timestamp with month 13 or a
            call reference too long to convert.
    """
    return {
        EVENT_DATETIME_FIELD: _parse_event_datetime(record.event_datetime),
        EVENT_ACTION_FIELD: record.event_action,
        CALL_REF_FIELD: _parse_call_ref(record.call_ref),
        EVENT_VALUE_FIELD: _parse_event_value(record.event_value),
        EVENT_CURRENCY_CODE_FIELD: record.event_currency_code,
    }


def _parse_event_datetime(raw_value: str) -> datetime:
    try:
        return datetime.strptime(raw_value, EVENT_DATETIME_FORMAT)
    except ValueError as error:
        raise EventLoadStoreError(
            f"Invalid event timestamp '{raw_value}': {error}."
        ) from error


def _parse_call_ref(raw_value: str) -> int:
    try:
        return int(raw_value)
    except ValueError as error:
        raise EventLoadStoreError(
            f"Invalid call reference '{raw_value[:40]}': {error}."
        ) from error


def _parse_event_value(raw_value: str | None) -> Decimal | None:
    """Parse ``digits.digits`` text where either side may be empty."""
    if raw_value is None:
        return None
    whole, _, fraction = raw_value.partition(".")
    try:
        return Decimal(f"{whole or '0'}.{fraction or '0'}")
    except InvalidOperation as error:
        raise EventLoadStoreError(f"Invalid event value '{raw_value}'.") from error
