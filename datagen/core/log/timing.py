"""Measure how long a block takes and how many rows it handled."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, Optional


@dataclass
class _Timer:
    label: str
    logger: logging.Logger
    level: int
    unit: str
    count: int = 0
    start: float = field(default_factory=perf_counter)
    stop: Optional[float] = None

    def add(self, amount: int = 1) -> None:
        self.count += amount

    @property
    def elapsed(self) -> float:
        end = self.stop if self.stop is not None else perf_counter()
        return end - self.start

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)

    def finish(self, success: bool = True) -> None:
        self.stop = perf_counter()
        elapsed = self.elapsed
        if success:
            message = f"{self.label} completed in {elapsed:.2f}s ({self.count:,} {self.unit}"
            if elapsed > 0 and self.count:
                message += f" @ {self.count / elapsed:,.0f} {self.unit}/s"
            self.logger.log(self.level, message + ")")
        else:
            self.logger.error(f"{self.label} failed after {elapsed:.2f}s ({self.count:,} {self.unit})")


@contextmanager
def timeit(
    label: str,
    *,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    unit: str = "rows",
) -> Iterator[_Timer]:
    log = logger or logging.getLogger("datagen.timer")
    timer = _Timer(label=label, logger=log, level=level, unit=unit)
    try:
        yield timer
    except Exception:
        timer.finish(success=False)
        raise
    else:
        timer.finish(success=True)
