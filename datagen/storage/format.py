"""Flat-record text format shared by the writer and the parser."""
from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID

from datagen.errors import UnsupportedValueError

COLUMN_DELIMITER = "\t"
ROW_DELIMITER = "\n"
STRING_QUALIFIER = "###"
HAS_HEADER_ROW = True
ENCODING = "utf-8"

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def qualify(text: str) -> str:
    return f"{STRING_QUALIFIER}{text}{STRING_QUALIFIER}"


def unqualify(field: str) -> str:
    """Strip surrounding string qualifiers, leaving other fields untouched."""

    width = len(STRING_QUALIFIER)
    if len(field) >= 2 * width and field.startswith(STRING_QUALIFIER) and field.endswith(STRING_QUALIFIER):
        return field[width:-width]
    return field


def format_value(value: object) -> str:
    """Render one field value for the flat-record format.

    Text and enum members are wrapped in qualifiers, decimals keep exactly
    two fraction digits and date-times are written in UTC.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return qualify(str(value.value))
    if isinstance(value, str):
        return qualify(value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (float, Decimal)):
        return f"{value:.2f}"
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime(DATETIME_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    raise UnsupportedValueError(value)


def format_row(values: tuple[object, ...] | list[object]) -> str:
    return COLUMN_DELIMITER.join(format_value(value) for value in values) + ROW_DELIMITER
