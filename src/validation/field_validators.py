"""Per-field validation rules for event rows.

Each rule is a pure function over the raw field text. Values are never
trimmed or cast first: the literal string must satisfy the rule.
"""

from __future__ import annotations

import re
from typing import Callable, Mapping

from core.constants import (
    CALL_REF_FIELD,
    EVENT_ACTION_FIELD,
    EVENT_CURRENCY_CODE_FIELD,
    EVENT_DATETIME_FIELD,
    EVENT_VALUE_FIELD,
)
from core.errors import EventLoadValidationError
from validation.currency_codes import CURRENCY_CODES

FieldValidator = Callable[[str], bool]

_EVENT_DATETIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)
# Only the end is anchored: any prefix before the trailing letters is accepted.
_EVENT_ACTION_PATTERN = re.compile(r"[a-z]{1,20}\Z")
_CALL_REF_PATTERN = re.compile(r"\d+", re.ASCII)
_EVENT_VALUE_PATTERN = re.compile(r"\d*\.\d*", re.ASCII)


def is_valid_event_datetime(value: str) -> bool:
    """Return whether value is a ``YYYY-MM-DD HH:MM:SS`` timestamp."""
    return _EVENT_DATETIME_PATTERN.fullmatch(value) is not None


def is_valid_event_action(value: str) -> bool:
    """Return whether value ends with 1-20 lowercase ASCII letters."""
    return _EVENT_ACTION_PATTERN.search(value) is not None


def is_valid_call_ref(value: str) -> bool:
    """Return whether value is a non-empty run of decimal digits."""
    return _CALL_REF_PATTERN.fullmatch(value) is not None


def is_valid_event_value(value: str) -> bool:
    """Return whether value is ``digits.digits`` with either side optional."""
    return _EVENT_VALUE_PATTERN.fullmatch(value) is not None


def is_valid_event_currency_code(value: str) -> bool:
    """Return whether value is one of the accepted currency codes."""
    return value in CURRENCY_CODES


FIELD_VALIDATORS: Mapping[str, FieldValidator] = {
    EVENT_DATETIME_FIELD: is_valid_event_datetime,
    EVENT_ACTION_FIELD: is_valid_event_action,
    CALL_REF_FIELD: is_valid_call_ref,
    EVENT_VALUE_FIELD: is_valid_event_value,
    EVENT_CURRENCY_CODE_FIELD: is_valid_event_currency_code,
}


def validate_field(field_name: str, value: str) -> bool:
    """Apply the rule registered for a field.

    Args:
        field_name: Header name of the field.
        value: Raw field text.

    Returns:
        True when value satisfies the field rule.

    Raises:
        EventLoadValidationError: If no rule exists for field_name.
    """
    validator = FIELD_VALIDATORS.get(field_name)
    if validator is None:
        raise EventLoadValidationError(
            f"No validation rule registered for field '{field_name}'. "
            f"Known fields: {', '.join(FIELD_VALIDATORS)}."
        )
    return validator(value)
