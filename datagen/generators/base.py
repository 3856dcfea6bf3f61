"""Pull-based contract shared by every stage generator."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from datagen.errors import NoMoreRowsError

Row = tuple[object, ...]

_EMPTY = object()
_DONE = object()


class DataGenerator(ABC):
    """Produce rows one at a time through ``has_more`` and ``next_row``.

    Subclasses implement ``_rows`` as a generator; it is started on the first
    pull and read one row ahead so ``has_more`` is exact. A generator runs
    once; build a new instance to start over.
    """

    def __init__(self) -> None:
        self._source: Optional[Iterator[Row]] = None
        self._pending: object = _EMPTY

    @abstractmethod
    def column_names(self) -> tuple[str, ...]:
        ...

    @abstractmethod
    def _rows(self) -> Iterator[Row]:
        ...

    @property
    def total_rows(self) -> Optional[int]:
        """Number of rows the generator will produce, when known upfront."""

        return None

    def _fill(self) -> None:
        if self._pending is not _EMPTY:
            return
        if self._source is None:
            self._source = self._rows()
        self._pending = next(self._source, _DONE)

    def has_more(self) -> bool:
        self._fill()
        return self._pending is not _DONE

    def next_row(self) -> Row:
        if not self.has_more():
            raise NoMoreRowsError(f"{type(self).__name__} has no more rows")
        row = self._pending
        self._pending = _EMPTY
        return row  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Row]:
        while self.has_more():
            yield self.next_row()
