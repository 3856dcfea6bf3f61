"""Per-user choice of trading currencies."""
from __future__ import annotations

import random

from datagen.catalogs.countries import get_country
from datagen.catalogs.currencies import INTERNATIONAL_CURRENCY_IDS
from datagen.utils.weighted import WeightedItem, WeightedSampler

HOME_WEIGHT_RANGE = (70.0, 80.0)
INTERNATIONAL_SHARE = 0.6


class CurrencyPreferences:
    """Build a currency sampler for a user based on their country.

    The home currency dominates. Some users also trade in one international
    currency, which then receives the remaining weight.
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def for_country(self, country_id: int) -> WeightedSampler[int]:
        home = get_country(country_id).home_currency_id
        low, high = HOME_WEIGHT_RANGE
        home_weight = low + self._rng.random() * (high - low)

        candidates = [currency_id for currency_id in INTERNATIONAL_CURRENCY_IDS if currency_id != home]
        if candidates and self._rng.random() < INTERNATIONAL_SHARE:
            international = self._rng.choice(candidates)
            items = [
                WeightedItem(home, home_weight),
                WeightedItem(international, 100.0 - home_weight),
            ]
        else:
            items = [WeightedItem(home, 100.0)]
        return WeightedSampler(items, self._rng)
