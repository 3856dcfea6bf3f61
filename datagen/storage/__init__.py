"""Flat-record persistence used between pipeline stages."""
from __future__ import annotations

from datagen.storage.parser import FileRecordParser
from datagen.storage.schemas import (
    ASSET_SCHEMA,
    HOLDING_SCHEMA,
    PRICE_SCHEMA,
    TRANSACTION_SCHEMA,
    USER_SCHEMA,
    ColumnType,
    RecordSchema,
)
from datagen.storage.sink import FileRecordSink, RecordSink, SaveError

__all__ = [
    "ASSET_SCHEMA",
    "HOLDING_SCHEMA",
    "PRICE_SCHEMA",
    "TRANSACTION_SCHEMA",
    "USER_SCHEMA",
    "ColumnType",
    "FileRecordParser",
    "FileRecordSink",
    "RecordSchema",
    "RecordSink",
    "SaveError",
]
