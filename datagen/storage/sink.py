"""Record sinks receiving generated rows."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Optional, Sequence

from datagen.storage.format import COLUMN_DELIMITER, ENCODING, ROW_DELIMITER, format_row


@dataclass(frozen=True, slots=True)
class SaveError:
    """A row that could not be persisted, kept for the run report."""

    message: str
    row: tuple[object, ...]
    exception: Optional[BaseException] = None


class RecordSink(ABC):
    """Destination for the rows of one generation stage.

    ``save`` does not raise for problems with an individual row; those are
    collected and returned by ``errors``.
    """

    @abstractmethod
    def prepare(self, column_names: Sequence[str]) -> None:
        ...

    @abstractmethod
    def save(self, row: Sequence[object]) -> None:
        ...

    @abstractmethod
    def complete(self) -> None:
        ...

    @abstractmethod
    def errors(self) -> tuple[SaveError, ...]:
        ...


class FileRecordSink(RecordSink):
    """Write rows to a tab separated flat-record file with a header row."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._columns: tuple[str, ...] = ()
        self._stream: IO[str] | None = None
        self._errors: list[SaveError] = []

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def prepare(self, column_names: Sequence[str]) -> None:
        if not column_names:
            raise ValueError("Column names cannot be empty")
        self._columns = tuple(column_names)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._stream = self.path.open("w", encoding=ENCODING, newline="")
        self._stream.write(COLUMN_DELIMITER.join(self._columns) + ROW_DELIMITER)

    def save(self, row: Sequence[object]) -> None:
        values = tuple(row)
        if self._stream is None:
            self._errors.append(SaveError("Cannot save row: prepare() must be called first", values))
            return
        if len(values) != len(self._columns):
            self._errors.append(
                SaveError(
                    f"Row has {len(values)} values but {len(self._columns)} columns are defined",
                    values,
                )
            )
            return
        # UnsupportedValueError is a programming error and propagates.
        line = format_row(values)
        try:
            self._stream.write(line)
        except OSError as exc:
            self._errors.append(SaveError(f"Failed to write row: {exc}", values, exc))

    def complete(self) -> None:
        if self._stream is None:
            return
        try:
            self._stream.flush()
        finally:
            self._stream.close()
            self._stream = None

    def errors(self) -> tuple[SaveError, ...]:
        return tuple(self._errors)
