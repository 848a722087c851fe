"""Unit tests for per-field validation rules."""

from __future__ import annotations

import pytest

from core.errors import EventLoadValidationError
from validation.currency_codes import CURRENCY_CODES
from validation.field_validators import (
    FIELD_VALIDATORS,
    is_valid_call_ref,
    is_valid_event_action,
    is_valid_event_currency_code,
    is_valid_event_datetime,
    is_valid_event_value,
    validate_field,
)


@pytest.mark.parametrize("value", ["2023-01-01 10:00:00", "9999-99-99 99:99:99"])
def test_event_datetime_accepts_pattern(value: str) -> None:
    """Any digits in the timestamp shape pass; calendar checks are not applied."""
    assert is_valid_event_datetime(value)


@pytest.mark.parametrize(
    "value",
    [
        "bad-date",
        "2023-01-01T10:00:00",
        "2023-01-01 10:00",
        " 2023-01-01 10:00:00",
        "2023-01-01 10:00:00\n",
        "٢٠٢٣-01-01 10:00:00",
        "",
    ],
)
def test_event_datetime_rejects_other_text(value: str) -> None:
    """Timestamps must match exactly with ASCII digits and no padding."""
    assert not is_valid_event_datetime(value)


@pytest.mark.parametrize("value", ["login", "purchase", "a" * 20])
def test_event_action_accepts_lowercase_words(value: str) -> None:
    """Lowercase ASCII words up to 20 letters are accepted."""
    assert is_valid_event_action(value)


@pytest.mark.parametrize("value", ["Xlogin", "42 login", "a" * 25])
def test_event_action_tolerates_any_prefix(value: str) -> None:
    """Only the end of the value is anchored, so prefixes are accepted."""
    assert is_valid_event_action(value)


@pytest.mark.parametrize("value", ["", "LOGIN", "login1", "login ", "log-"])
def test_event_action_rejects_values_without_trailing_letters(value: str) -> None:
    """Values must end with at least one lowercase letter."""
    assert not is_valid_event_action(value)


@pytest.mark.parametrize("value", ["0", "1001", "12345678901234567890"])
def test_call_ref_accepts_digit_strings(value: str) -> None:
    """Any run of decimal digits is a call reference."""
    assert is_valid_call_ref(value)


@pytest.mark.parametrize("value", ["", "-1", "1.0", " 1", "1e3", "١"])
def test_call_ref_rejects_non_digit_text(value: str) -> None:
    """Signs, spaces, and non-ASCII digits are rejected."""
    assert not is_valid_call_ref(value)


@pytest.mark.parametrize("value", ["12.50", "12.", ".5", "."])
def test_event_value_accepts_dotted_amounts(value: str) -> None:
    """Either side of the dot may be empty, but the dot is required."""
    assert is_valid_event_value(value)


@pytest.mark.parametrize("value", ["12", "1,50", "-1.00", "1.2.3", "a.b"])
def test_event_value_rejects_other_text(value: str) -> None:
    """Amounts without exactly one dot between digits are rejected."""
    assert not is_valid_event_value(value)


def test_currency_code_membership_is_exact() -> None:
    """Currency codes match case-sensitively against the code set."""
    assert is_valid_event_currency_code("GBP")
    assert not is_valid_event_currency_code("gbp")
    assert not is_valid_event_currency_code("XXX")
    assert not is_valid_event_currency_code("GBP ")


def test_currency_code_set_contains_three_letter_codes() -> None:
    """The code set holds only uppercase three-letter codes."""
    assert len(CURRENCY_CODES) == 162
    assert all(len(code) == 3 and code.isupper() for code in CURRENCY_CODES)


def test_validate_field_dispatches_through_table() -> None:
    """Known field names resolve to their rule."""
    assert set(FIELD_VALIDATORS) == {
        "eventDatetime",
        "eventAction",
        "callRef",
        "eventValue",
        "eventCurrencyCode",
    }
    assert validate_field("callRef", "1001")
    assert not validate_field("callRef", "abc")


def test_validate_field_raises_for_unknown_field() -> None:
    """A field without a rule is an error rather than a silent pass."""
    with pytest.raises(EventLoadValidationError):
        validate_field("eventDateTime", "2023-01-01 10:00:00")
