"""Discrete sampling in proportion to configured percentages."""
from __future__ import annotations

import bisect
import math
import random
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

TOTAL_PERCENT = 100.0


@dataclass(frozen=True, slots=True)
class WeightedItem(Generic[T]):
    """An item paired with its selection probability in percent."""

    item: T
    percent: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.percent):
            raise ValueError(f"Percentage must be finite, got {self.percent}")
        if not 0.0 <= self.percent <= TOTAL_PERCENT:
            raise ValueError(f"Percentage must be within 0-100, got {self.percent}")


class WeightedSampler(Generic[T]):
    """Draw items with probability proportional to their percentage.

    The percentages must add up to exactly 100. A cumulative table is built
    once so every draw is a binary search.
    """

    def __init__(
        self,
        items: Sequence[WeightedItem[T]],
        rng: random.Random | None = None,
    ) -> None:
        if not items:
            raise ValueError("Weighted sampler needs at least one item")
        self._items: tuple[WeightedItem[T], ...] = tuple(items)
        self._rng = rng or random.Random()

        cumulative: list[float] = []
        running = 0.0
        for entry in self._items:
            running += entry.percent
            cumulative.append(running)
        if running != TOTAL_PERCENT:
            raise ValueError(f"Percentages must sum to exactly 100.0, got {running}")
        self._cumulative = cumulative

    @property
    def items(self) -> tuple[WeightedItem[T], ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def draw(self) -> T:
        threshold = self._rng.random() * TOTAL_PERCENT
        # bisect_right never lands on a zero-weight item.
        index = bisect.bisect_right(self._cumulative, threshold)
        return self._items[index].item
