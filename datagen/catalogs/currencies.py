"""Currencies a user may trade in."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Currency:
    id: int
    code: str
    name: str
    rate_to_sek: float


SEK, EUR, USD, NOK, DKK = 1, 2, 3, 4, 5

CURRENCIES: tuple[Currency, ...] = (
    Currency(SEK, "SEK", "Swedish krona", 1.0),
    Currency(EUR, "EUR", "Euro", 11.96),
    Currency(USD, "USD", "US dollar", 10.32),
    Currency(NOK, "NOK", "Norwegian krone", 0.90),
    Currency(DKK, "DKK", "Danish krone", 1.55),
    Currency(6, "GBP", "British pound", 13.88),
    Currency(7, "JPY", "Japanese yen", 0.070),
    Currency(8, "CHF", "Swiss franc", 12.08),
)

# Preferred second currencies, in order.
INTERNATIONAL_CURRENCY_IDS: tuple[int, ...] = (EUR, USD)
