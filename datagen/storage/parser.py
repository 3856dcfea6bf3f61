"""Read flat-record files back into rows of text fields."""
from __future__ import annotations

from pathlib import Path
from typing import Iterator

from datagen.storage.format import COLUMN_DELIMITER, ENCODING, HAS_HEADER_ROW, ROW_DELIMITER, unqualify


class FileRecordParser:
    """Parse a file written by :class:`~datagen.storage.sink.FileRecordSink`.

    The header row and blank lines are skipped; string qualifiers are removed.
    Trailing empty columns are preserved.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _lines(self) -> list[str]:
        if not self.path.is_file():
            raise FileNotFoundError(f"Record file does not exist: {self.path}")
        text = self.path.read_text(encoding=ENCODING)
        return text.split(ROW_DELIMITER)

    def header(self) -> tuple[str, ...]:
        for line in self._lines():
            if line.strip():
                return tuple(line.strip().split(COLUMN_DELIMITER))
        return ()

    def iter_rows(self) -> Iterator[list[str]]:
        lines = self._lines()
        if HAS_HEADER_ROW and lines:
            lines = lines[1:]
        for line in lines:
            line = line.rstrip("\r")
            if not line.strip():
                continue
            yield [unqualify(field) for field in line.split(COLUMN_DELIMITER)]

    def read(self) -> list[list[str]]:
        return list(self.iter_rows())
