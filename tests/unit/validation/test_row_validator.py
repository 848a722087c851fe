"""Unit tests for row-level validation."""

from __future__ import annotations

from validation.row_validator import is_valid_row, validate_row


def _row(**overrides: str) -> dict[str, str]:
    fields = {
        "eventDatetime": "2023-01-01 10:00:00",
        "eventAction": "login",
        "callRef": "1001",
        "eventValue": "",
        "eventCurrencyCode": "",
    }
    fields.update(overrides)
    return fields


def test_row_without_value_is_valid() -> None:
    """Required fields alone are enough when no value is present."""
    assert is_valid_row(_row())


def test_row_with_value_and_known_currency_is_valid() -> None:
    """A well-formed value with a listed currency passes."""
    assert is_valid_row(_row(eventValue="12.50", eventCurrencyCode="GBP"))


def test_row_with_value_and_unknown_currency_is_invalid() -> None:
    """A value with an unlisted currency fails on the currency."""
    validation = validate_row(_row(eventValue="12.50", eventCurrencyCode="XXX"))

    assert validation.failures == ("eventCurrencyCode",)


def test_empty_value_skips_currency_check() -> None:
    """An empty value means the currency is not checked at all."""
    assert is_valid_row(_row(eventValue="", eventCurrencyCode="garbage"))


def test_every_failure_is_reported() -> None:
    """All applicable checks run so every failing field is listed."""
    validation = validate_row(
        _row(eventDatetime="bad-date", callRef="x", eventValue="12", eventCurrencyCode="usd")
    )

    assert validation.failures == (
        "eventDatetime",
        "callRef",
        "eventValue",
        "eventCurrencyCode",
    )
    assert validation.is_valid is False


def test_missing_required_column_is_invalid() -> None:
    """A required field absent from the header fails its check."""
    fields = _row()
    del fields["callRef"]

    assert validate_row(fields).failures == ("callRef",)


def test_missing_currency_column_with_value_is_invalid() -> None:
    """A value without any currency column fails the currency check."""
    fields = _row(eventValue="9.99")
    del fields["eventCurrencyCode"]

    assert validate_row(fields).failures == ("eventCurrencyCode",)


def test_missing_optional_columns_are_valid() -> None:
    """Rows without value and currency columns only need required fields."""
    fields = {"eventDatetime": "2023-01-01 10:00:00", "eventAction": "login", "callRef": "7"}

    assert is_valid_row(fields)


def test_unknown_columns_are_ignored() -> None:
    """Extra header columns do not affect the outcome."""
    assert is_valid_row(_row(agentName="Not Validated", notes="!!"))


def test_values_are_not_trimmed() -> None:
    """Surrounding whitespace makes an otherwise valid value fail."""
    assert validate_row(_row(callRef=" 1001")).failures == ("callRef",)
