"""Generate platform customers."""
from __future__ import annotations

import random
from datetime import date
from typing import Iterator

from datagen.catalogs import activity_levels, countries, investor_profiles
from datagen.errors import ConfigurationError
from datagen.generators.base import DataGenerator, Row
from datagen.generators.lifecycle import (
    DEFAULT_DEPARTURE_RATE,
    DEFAULT_JOIN_AFTER_START_RATE,
    LifecycleSampler,
)
from datagen.models import User
from datagen.storage.schemas import USER_SCHEMA
from datagen.utils.ids import random_uuid
from datagen.utils.weighted import WeightedSampler


class UserDataGenerator(DataGenerator):
    """Draw profile, activity level, country and lifecycle for each user."""

    def __init__(
        self,
        user_count: int,
        start_date: date,
        end_date: date,
        rng: random.Random,
        join_after_start_rate: float = DEFAULT_JOIN_AFTER_START_RATE,
        departure_rate: float = DEFAULT_DEPARTURE_RATE,
    ) -> None:
        super().__init__()
        if user_count <= 0:
            raise ConfigurationError(f"User count must be positive, got {user_count}")
        self.user_count = user_count
        self._rng = rng
        self._profiles = WeightedSampler(investor_profiles.prevalence_weights(), rng)
        self._activity = WeightedSampler(activity_levels.prevalence_weights(), rng)
        self._countries = WeightedSampler(countries.prevalence_weights(), rng)
        self._lifecycle = LifecycleSampler(
            start_date,
            end_date,
            rng,
            join_after_start_rate=join_after_start_rate,
            departure_rate=departure_rate,
        )

    def column_names(self) -> tuple[str, ...]:
        return USER_SCHEMA.column_names

    @property
    def total_rows(self) -> int:
        return self.user_count

    def _rows(self) -> Iterator[Row]:
        for _ in range(self.user_count):
            lifecycle = self._lifecycle.sample()
            user = User(
                user_id=random_uuid(self._rng),
                investor_profile_id=self._profiles.draw().id,
                activity_level_id=self._activity.draw().id,
                country_id=self._countries.draw().id,
                join_date=lifecycle.join_date,
                departure_date=lifecycle.departure_date,
                status=lifecycle.status,
            )
            yield user.as_row()
