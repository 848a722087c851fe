"""Row-level accept/reject decisions.

This module composes field rules across required and conditional fields.
Every applicable rule is evaluated so all failure reasons can be logged.
"""

from __future__ import annotations

from typing import Mapping

from core.constants import EVENT_CURRENCY_CODE_FIELD, EVENT_VALUE_FIELD, REQUIRED_FIELDS
from core.types import RowValidation
from validation.field_validators import validate_field

CONDITIONAL_FIELDS = (EVENT_VALUE_FIELD, EVENT_CURRENCY_CODE_FIELD)


def validate_row(fields: Mapping[str, str]) -> RowValidation:
    """Validate a header-keyed row.

    Required fields are always checked. The value and currency fields are
    checked only when the value is present and non-empty. A missing column
    fails its check. Columns without a rule are ignored.

    Args:
        fields: Header name to raw field value.

    Returns:
        Validation outcome listing every failed field.
    """
    checked_fields = list(REQUIRED_FIELDS)
    if fields.get(EVENT_VALUE_FIELD):
        checked_fields.extend(CONDITIONAL_FIELDS)
    failures = [
        field_name
        for field_name in checked_fields
        if not _check_field(field_name, fields.get(field_name))
    ]
    return RowValidation(failures=tuple(failures))


def is_valid_row(fields: Mapping[str, str]) -> bool:
    """Return whether a row passes every applicable rule."""
    return validate_row(fields).is_valid


def _check_field(field_name: str, value: str | None) -> bool:
    if value is None:
        return False
    return validate_field(field_name, value)
