"""Column layouts of the persisted record files and typed conversion of parsed fields.

Two layouts differ from the older six-column export: ``transactions.txt`` carries
a seventh ``transaction_date`` column, and ``price_series.txt`` names its date column
``price_date`` rather than ``date``. Readers of the older files must map both.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Sequence
from uuid import UUID

from datagen.storage.format import DATE_FORMAT, DATETIME_FORMAT


class ColumnType(Enum):
    IDENTIFIER = "identifier"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"
    DATETIME = "datetime"
    STRING = "string"


def convert_field(raw: str, column_type: ColumnType) -> object:
    """Convert an unqualified text field back to its semantic type."""

    try:
        if column_type is ColumnType.IDENTIFIER:
            return UUID(raw)
        if column_type is ColumnType.INTEGER:
            return int(raw)
        if column_type is ColumnType.DECIMAL:
            return Decimal(raw)
        if column_type is ColumnType.DATE:
            return datetime.strptime(raw, DATE_FORMAT).date()
        if column_type is ColumnType.DATETIME:
            return datetime.strptime(raw, DATETIME_FORMAT).replace(tzinfo=timezone.utc)
    except (ValueError, InvalidOperation) as exc:
        raise ValueError(f"Cannot read {raw!r} as {column_type.value}") from exc
    return raw


@dataclass(frozen=True, slots=True)
class Column:
    name: str
    type: ColumnType


@dataclass(frozen=True, slots=True)
class RecordSchema:
    """Ordered column definitions of one record file."""

    name: str
    columns: tuple[Column, ...]

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.columns)

    def convert(self, fields: Sequence[str]) -> dict[str, object]:
        if len(fields) != len(self.columns):
            raise ValueError(
                f"{self.name}: expected {len(self.columns)} fields, got {len(fields)}"
            )
        return {
            column.name: convert_field(raw, column.type)
            for column, raw in zip(self.columns, fields)
        }


def _schema(name: str, *columns: tuple[str, ColumnType]) -> RecordSchema:
    return RecordSchema(name, tuple(Column(col_name, col_type) for col_name, col_type in columns))


ASSET_SCHEMA = _schema(
    "assets",
    ("asset_id", ColumnType.IDENTIFIER),
    ("asset_class_id", ColumnType.INTEGER),
    ("name", ColumnType.STRING),
)

PRICE_SCHEMA = _schema(
    "prices",
    ("asset_id", ColumnType.IDENTIFIER),
    ("price_date", ColumnType.DATE),
    ("price", ColumnType.DECIMAL),
)

USER_SCHEMA = _schema(
    "users",
    ("user_id", ColumnType.IDENTIFIER),
    ("investor_profile_id", ColumnType.INTEGER),
    ("activity_level_id", ColumnType.INTEGER),
    ("country_id", ColumnType.INTEGER),
    ("join_date", ColumnType.DATE),
    ("departure_date", ColumnType.DATE),
    ("customer_status", ColumnType.STRING),
)

TRANSACTION_SCHEMA = _schema(
    "transactions",
    ("transaction_id", ColumnType.IDENTIFIER),
    ("user_id", ColumnType.IDENTIFIER),
    ("asset_id", ColumnType.IDENTIFIER),
    ("transaction_type", ColumnType.STRING),
    ("amount", ColumnType.DECIMAL),
    ("currency_id", ColumnType.INTEGER),
    ("transaction_date", ColumnType.DATE),
)

HOLDING_SCHEMA = _schema(
    "holdings",
    ("user_id", ColumnType.IDENTIFIER),
    ("asset_id", ColumnType.IDENTIFIER),
    ("amount", ColumnType.DECIMAL),
    ("currency_id", ColumnType.INTEGER),
)

