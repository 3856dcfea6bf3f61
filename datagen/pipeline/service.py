"""Drive one generator into one sink."""
from __future__ import annotations

from dataclasses import dataclass

from datagen.core.log import get_logger, progress_manager, timeit
from datagen.generators.base import DataGenerator
from datagen.storage.sink import RecordSink, SaveError

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StageResult:
    """Outcome of one pipeline stage."""

    name: str
    rows: int
    elapsed: float
    errors: tuple[SaveError, ...] = ()

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)

    @property
    def saved_rows(self) -> int:
        return self.rows - len(self.errors)


def generate_and_save(name: str, generator: DataGenerator, sink: RecordSink) -> StageResult:
    """Pull every row from ``generator`` and hand it to ``sink``.

    Per-row save problems are collected in the result; anything raised by the
    generator or the sink otherwise aborts the stage.
    """

    sink.prepare(generator.column_names())
    try:
        with timeit(name, logger=logger, unit="rows") as timer, progress_manager.task(
            f"Generating {name}", total=generator.total_rows
        ) as task:
            while generator.has_more():
                sink.save(generator.next_row())
                timer.add()
                task.advance()
    finally:
        sink.complete()
    return StageResult(name=name, rows=timer.count, elapsed=timer.elapsed, errors=sink.errors())
