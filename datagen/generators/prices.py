"""Daily price paths following geometric Brownian motion."""
from __future__ import annotations

import math
import random
from datetime import date, timedelta
from typing import Iterator, Mapping, Sequence
from uuid import UUID

from datagen.catalogs.asset_classes import VolatilityLevel
from datagen.catalogs.market_trends import TRADING_DAYS_PER_YEAR, MarketTrendCalendar
from datagen.errors import ConfigurationError
from datagen.generators.base import DataGenerator, Row
from datagen.models import PricePoint
from datagen.storage.schemas import PRICE_SCHEMA

DEFAULT_INITIAL_PRICE = 100.0
DAILY_TIME_STEP = 1.0 / TRADING_DAYS_PER_YEAR


def standard_normal(rng: random.Random) -> float:
    """Box-Muller transform over two uniforms; the first is never zero."""

    u1 = rng.random()
    while u1 == 0.0:
        u1 = rng.random()
    u2 = rng.random()
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def date_range(start: date, end: date) -> Iterator[date]:
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


class PriceSeriesGenerator(DataGenerator):
    """Emit one price per asset per calendar day, date-major.

    Each step multiplies the previous price by
    ``exp(drift + sigma * shock * sqrt(1 / 252))`` where the drift comes from
    the market trend in force on that day and sigma from the asset's
    volatility band. The step is applied on the first day as well.
    """

    def __init__(
        self,
        asset_ids: Sequence[UUID],
        start_date: date,
        end_date: date,
        volatility_by_asset: Mapping[UUID, VolatilityLevel],
        trends: MarketTrendCalendar,
        rng: random.Random,
        initial_price: float = DEFAULT_INITIAL_PRICE,
    ) -> None:
        super().__init__()
        if end_date < start_date:
            raise ConfigurationError("End date must not be before start date")
        if not initial_price > 0:
            raise ConfigurationError(f"Initial price must be positive, got {initial_price}")
        missing = [asset_id for asset_id in asset_ids if asset_id not in volatility_by_asset]
        if missing:
            raise ConfigurationError(f"No volatility level for {len(missing)} asset(s), e.g. {missing[0]}")

        self.asset_ids = tuple(asset_ids)
        self.start_date = start_date
        self.end_date = end_date
        self._volatility = {asset_id: volatility_by_asset[asset_id] for asset_id in self.asset_ids}
        self._trends = trends
        self._rng = rng
        self._prices = {asset_id: initial_price for asset_id in self.asset_ids}

    def column_names(self) -> tuple[str, ...]:
        return PRICE_SCHEMA.column_names

    @property
    def day_count(self) -> int:
        return (self.end_date - self.start_date).days + 1

    @property
    def total_rows(self) -> int:
        return self.day_count * len(self.asset_ids)

    def _step(self, price: float, drift: float, volatility: VolatilityLevel) -> float:
        shock = standard_normal(self._rng)
        return price * math.exp(drift + volatility.annual_volatility * shock * math.sqrt(DAILY_TIME_STEP))

    def _rows(self) -> Iterator[Row]:
        for day in date_range(self.start_date, self.end_date):
            drift = self._trends.drift_on(day)
            for asset_id in self.asset_ids:
                price = self._step(self._prices[asset_id], drift, self._volatility[asset_id])
                self._prices[asset_id] = price
                yield PricePoint(asset_id, day, price).as_row()
