"""Simulate trading behaviour for each user."""
from __future__ import annotations

import math
import random
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Iterator, Optional, Sequence
from uuid import UUID

from datagen.catalogs.activity_levels import annual_transactions
from datagen.generators.base import DataGenerator, Row
from datagen.generators.currency_preferences import CurrencyPreferences
from datagen.generators.price_index import AssetPriceIndex
from datagen.models import PricePoint, Transaction, TransactionType, User
from datagen.storage.schemas import TRANSACTION_SCHEMA
from datagen.utils.ids import random_uuid
from datagen.utils.weighted import WeightedSampler

MIN_TRADE_VALUE = 1_000.0
MAX_TRADE_VALUE = 50_000.0
LIQUIDATION_SCALE = 2.0
LIQUIDATION_ASSETS = (2, 5)
DAYS_PER_YEAR = 365
CENT = Decimal("0.01")


def transaction_count(annual: int, days: int) -> int:
    """Number of regular trades over ``days``; at least one for spans over a day."""

    if days <= 0:
        return 0
    count = int(annual * days / DAYS_PER_YEAR)
    if count == 0 and days > 1:
        return 1
    return count


class TransactionSimulator:
    """Turn a user's profile into BUY and SELL transactions.

    Regular trades are spread over the user's active period. Departed users
    additionally sell off several positions on their departure date.
    """

    def __init__(
        self,
        prices: AssetPriceIndex,
        rng: random.Random,
        preferences: Optional[CurrencyPreferences] = None,
    ) -> None:
        self._prices = prices
        self._rng = rng
        self._preferences = preferences or CurrencyPreferences(rng)

    def _amount(self, price: float, scale: float = 1.0) -> Decimal:
        target = self._rng.uniform(MIN_TRADE_VALUE, MAX_TRADE_VALUE) * scale
        shares = max(1, math.floor(target / price))
        return (Decimal(shares) * Decimal(str(price))).quantize(CENT, rounding=ROUND_HALF_UP)

    def _transaction(
        self,
        user: User,
        asset_id: UUID,
        day: date,
        kind: TransactionType,
        currencies: WeightedSampler[int],
        scale: float = 1.0,
    ) -> Optional[Transaction]:
        price = self._prices.price_on(asset_id, day)
        if price is None:
            return None
        amount = self._amount(price, scale)
        if amount <= 0:
            return None
        return Transaction(
            transaction_id=random_uuid(self._rng),
            user_id=user.user_id,
            asset_id=asset_id,
            transaction_type=kind,
            amount=amount,
            currency_id=currencies.draw(),
            transaction_date=day,
        )

    def _regular(self, user: User, currencies: WeightedSampler[int]) -> Iterator[Transaction]:
        end = user.departure_date if user.is_departed else self._prices.latest_date
        days = (end - user.join_date).days
        for _ in range(transaction_count(annual_transactions(user.activity_level_id), days)):
            day = user.join_date + timedelta(days=self._rng.randrange(days))
            candidates = self._prices.assets_priced_on(day)
            if not candidates:
                continue
            asset_id = self._rng.choice(candidates)
            kind = TransactionType.BUY if self._rng.random() < 0.5 else TransactionType.SELL
            transaction = self._transaction(user, asset_id, day, kind, currencies)
            if transaction is not None:
                yield transaction

    def _liquidation(self, user: User, currencies: WeightedSampler[int]) -> Iterator[Transaction]:
        day = user.departure_date
        candidates = self._prices.assets_priced_on(day)
        if not candidates:
            return
        count = min(self._rng.randint(*LIQUIDATION_ASSETS), len(candidates))
        for asset_id in self._rng.sample(candidates, count):
            transaction = self._transaction(
                user, asset_id, day, TransactionType.SELL, currencies, scale=LIQUIDATION_SCALE
            )
            if transaction is not None:
                yield transaction

    def simulate(self, user: User) -> list[Transaction]:
        currencies = self._preferences.for_country(user.country_id)
        transactions = list(self._regular(user, currencies))
        if user.is_departed:
            transactions.extend(self._liquidation(user, currencies))
        return transactions


class TransactionDataGenerator(DataGenerator):
    """Stream the simulated transactions of all users, one user at a time."""

    def __init__(
        self,
        users: Sequence[User],
        prices: AssetPriceIndex | Iterable[PricePoint],
        rng: random.Random,
        preferences: Optional[CurrencyPreferences] = None,
    ) -> None:
        super().__init__()
        index = prices if isinstance(prices, AssetPriceIndex) else AssetPriceIndex(prices)
        self.users = tuple(users)
        self._simulator = TransactionSimulator(index, rng, preferences)

    def column_names(self) -> tuple[str, ...]:
        return TRANSACTION_SCHEMA.column_names

    def _rows(self) -> Iterator[Row]:
        for user in self.users:
            for transaction in self._simulator.simulate(user):
                yield transaction.as_row()
