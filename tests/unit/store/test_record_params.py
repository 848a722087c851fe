"""Unit tests for record to column parameter conversion."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from core.errors import EventLoadStoreError
from core.types import EventRecord
from store.record_params import record_to_params


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("12.50", Decimal("12.50")),
        ("12.", Decimal("12.0")),
        (".5", Decimal("0.5")),
        (".", Decimal("0.0")),
    ],
)
def test_record_to_params_parses_dotted_values(raw_value: str, expected: Decimal) -> None:
    """Every dotted form accepted by validation converts to a decimal."""
    record = EventRecord("2023-01-01 10:00:00", "refund", "9", raw_value, "EUR")

    params = record_to_params(record)

    assert params["eventValue"] == expected


def test_record_to_params_converts_required_fields() -> None:
    """Timestamp and call reference become typed values."""
    params = record_to_params(EventRecord("2023-01-01 10:00:00", "login", "0042"))

    assert params == {
        "eventDatetime": datetime(2023, 1, 1, 10, 0, 0),
        "eventAction": "login",
        "callRef": 42,
        "eventValue": None,
        "eventCurrencyCode": None,
    }


def test_record_to_params_rejects_impossible_timestamp() -> None:
    """Calendar-invalid timestamps raise a store error."""
    with pytest.raises(EventLoadStoreError):
        record_to_params(EventRecord("2023-02-30 10:00:00", "login", "1"))


def test_record_to_params_rejects_call_ref_beyond_conversion_limit() -> None:
    """Digit strings too long for int conversion raise a store error."""
    with pytest.raises(EventLoadStoreError):
        record_to_params(EventRecord("2023-01-01 10:00:00", "login", "9" * 5000))
