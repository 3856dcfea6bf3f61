"""Customer countries with their home currency and share of the user base."""
from __future__ import annotations

from dataclasses import dataclass

from datagen.catalogs.currencies import DKK, EUR, NOK, SEK
from datagen.utils.weighted import WeightedItem


@dataclass(frozen=True, slots=True)
class Country:
    id: int
    code: str
    name: str
    home_currency_id: int
    prevalence: float


COUNTRIES: tuple[Country, ...] = (
    Country(1, "SE", "Sweden", SEK, 60.0),
    Country(2, "NO", "Norway", NOK, 15.0),
    Country(3, "DK", "Denmark", DKK, 12.0),
    Country(4, "FI", "Finland", EUR, 8.0),
    Country(5, "IS", "Iceland", EUR, 5.0),
)

_BY_ID = {country.id: country for country in COUNTRIES}


def get_country(country_id: int) -> Country:
    try:
        return _BY_ID[country_id]
    except KeyError:
        raise KeyError(f"Unknown country id {country_id}") from None


def prevalence_weights() -> list[WeightedItem[Country]]:
    return [WeightedItem(country, country.prevalence) for country in COUNTRIES]
