"""Trading activity levels and their expected yearly transaction counts."""
from __future__ import annotations

from dataclasses import dataclass

from datagen.utils.weighted import WeightedItem


@dataclass(frozen=True, slots=True)
class ActivityLevel:
    id: int
    name: str
    annual_transactions: int
    prevalence: float


ACTIVITY_LEVELS: tuple[ActivityLevel, ...] = (
    ActivityLevel(1, "Inactive", 1, 20.0),
    ActivityLevel(2, "Low", 3, 35.0),
    ActivityLevel(3, "Moderate", 8, 30.0),
    ActivityLevel(4, "Active", 32, 12.0),
    ActivityLevel(5, "Hyperactive", 75, 3.0),
)

_BY_ID = {level.id: level for level in ACTIVITY_LEVELS}


def annual_transactions(activity_level_id: int) -> int:
    try:
        return _BY_ID[activity_level_id].annual_transactions
    except KeyError:
        raise KeyError(f"Unknown activity level id {activity_level_id}") from None


def prevalence_weights() -> list[WeightedItem[ActivityLevel]]:
    return [WeightedItem(level, level.prevalence) for level in ACTIVITY_LEVELS]
