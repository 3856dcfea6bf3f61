"""Sample when customers join and whether they leave the platform."""
from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, timedelta

from datagen.errors import ConfigurationError
from datagen.models import SENTINEL_DATE, CustomerStatus

DEFAULT_JOIN_AFTER_START_RATE = 30.0
DEFAULT_DEPARTURE_RATE = 20.0


@dataclass(frozen=True, slots=True)
class CustomerLifecycle:
    join_date: date
    departure_date: date
    status: CustomerStatus


def _day_after(start: date, end: date, rng: random.Random) -> date:
    """Uniform date in ``(start, end]``; requires ``end > start``."""

    return start + timedelta(days=rng.randint(1, (end - start).days))


class LifecycleSampler:
    """Draw join and departure dates inside a generation window.

    Rates are percentages. With ``join_after_start_rate`` the customer joins
    after the first day of the window; with ``departure_rate`` they leave some
    day after joining, provided a later day exists.
    """

    def __init__(
        self,
        start_date: date,
        end_date: date,
        rng: random.Random,
        join_after_start_rate: float = DEFAULT_JOIN_AFTER_START_RATE,
        departure_rate: float = DEFAULT_DEPARTURE_RATE,
    ) -> None:
        if end_date < start_date:
            raise ConfigurationError("End date must not be before start date")
        for label, rate in (("join after start", join_after_start_rate), ("departure", departure_rate)):
            if not 0.0 <= rate <= 100.0:
                raise ConfigurationError(f"The {label} rate must be within 0-100, got {rate}")
        self.start_date = start_date
        self.end_date = end_date
        self.join_after_start_rate = join_after_start_rate
        self.departure_rate = departure_rate
        self._rng = rng

    def sample(self) -> CustomerLifecycle:
        join_draw = self._rng.random() * 100
        if join_draw <= self.join_after_start_rate and self.end_date > self.start_date:
            join_date = _day_after(self.start_date, self.end_date, self._rng)
        else:
            join_date = self.start_date

        departure_draw = self._rng.random() * 100
        if departure_draw <= self.departure_rate and self.end_date > join_date:
            return CustomerLifecycle(
                join_date=join_date,
                departure_date=_day_after(join_date, self.end_date, self._rng),
                status=CustomerStatus.DEPARTED,
            )
        return CustomerLifecycle(join_date=join_date, departure_date=SENTINEL_DATE, status=CustomerStatus.ACTIVE)
