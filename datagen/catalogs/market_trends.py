"""Historical market regimes that steer the drift of generated prices."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

TRADING_DAYS_PER_YEAR = 252


@dataclass(frozen=True, slots=True)
class MarketTrend:
    """A dated market regime.

    ``strength`` is an annualised return in percent; negative for falling
    markets.
    """

    start: date
    end: date
    trend_type: str
    strength: float
    description: str

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Trend {self.description!r} ends before it starts")

    def covers(self, day: date) -> bool:
        return self.start <= day <= self.end

    @property
    def daily_drift(self) -> float:
        return self.strength / 100 / TRADING_DAYS_PER_YEAR


class MarketTrendCalendar:
    """Look up the regime in force on a date; the first listed match wins."""

    def __init__(self, trends: Iterable[MarketTrend]) -> None:
        self._trends = tuple(trends)

    @property
    def trends(self) -> tuple[MarketTrend, ...]:
        return self._trends

    def trend_on(self, day: date) -> Optional[MarketTrend]:
        for trend in self._trends:
            if trend.covers(day):
                return trend
        return None

    def drift_on(self, day: date) -> float:
        trend = self.trend_on(day)
        return trend.daily_drift if trend else 0.0


def _trend(start: str, end: str, trend_type: str, strength: float, description: str) -> MarketTrend:
    return MarketTrend(date.fromisoformat(start), date.fromisoformat(end), trend_type, strength, description)


NORDIC_MARKET_TRENDS: tuple[MarketTrend, ...] = (
    _trend("1990-01-01", "1992-11-01", "Bear", -1.8, "Nordic banking crisis"),
    _trend("1992-11-21", "1995-01-05", "Recovery", 1.3, "Post-crisis restructuring"),
    _trend("1995-01-06", "1997-08-19", "Bull", 1.4, "EU membership boost"),
    _trend("1997-08-19", "1999-10-11", "Correction", -0.7, "Asian financial crisis impact"),
    _trend("1998-10-11", "2000-03-10", "Bull", 1.8, "Dot-com boom"),
    _trend("2000-03-11", "2002-10-10", "Bear", -1.7, "Tech bubble burst"),
    _trend("2002-10-10", "2007-07-17", "Bull", 1.5, "Global expansion"),
    _trend("2007-07-17", "2009-03-09", "Bear", -2.3, "Financial crisis"),
    _trend("2009-03-10", "2011-07-21", "Bull", 1.6, "Recovery phase"),
    _trend("2011-07-22", "2012-05-04", "Correction", -0.8, "Eurozone debt crisis"),
    _trend("2012-06-05", "2015-04-15", "Bull", 1.3, "QE-driven growth"),
    _trend("2015-04-16", "2016-02-11", "Correction", -0.6, "China slowdown fears"),
    _trend("2016-02-12", "2018-01-26", "Bull", 1.4, "Synchronized global growth"),
    _trend("2018-01-27", "2018-12-24", "Correction", -0.7, "Trade war concerns"),
    _trend("2018-12-25", "2020-02-19", "Bull", 1.2, "Late-cycle growth"),
    _trend("2020-02-20", "2020-03-23", "Crash", -2.1, "COVID-19 pandemic"),
    _trend("2020-03-24", "2021-11-08", "Bull", 1.7, "Stimulus recovery"),
    _trend("2021-11-09", "2022-09-30", "Bear", -1.5, "Inflationary fears"),
    _trend("2022-10-01", "2023-07-31", "Recovery", 1.2, "Disinflation hopes"),
    _trend("2023-08-01", "2024-03-25", "Sideways", 0.2, "Soft landing uncertainty"),
    _trend("2024-03-26", "2025-06-30", "Bull", 1.1, "Current phase"),
)


def default_calendar() -> MarketTrendCalendar:
    return MarketTrendCalendar(NORDIC_MARKET_TRENDS)
