"""Stage generators implementing the pull-based row contract."""
from __future__ import annotations

from datagen.generators.assets import AssetDataGenerator
from datagen.generators.base import DataGenerator
from datagen.generators.holdings import HoldingsAggregator
from datagen.generators.lifecycle import CustomerLifecycle, LifecycleSampler
from datagen.generators.price_index import AssetPriceIndex
from datagen.generators.prices import PriceSeriesGenerator
from datagen.generators.transactions import TransactionDataGenerator, TransactionSimulator
from datagen.generators.users import UserDataGenerator

__all__ = [
    "AssetDataGenerator",
    "AssetPriceIndex",
    "CustomerLifecycle",
    "DataGenerator",
    "HoldingsAggregator",
    "LifecycleSampler",
    "PriceSeriesGenerator",
    "TransactionDataGenerator",
    "TransactionSimulator",
    "UserDataGenerator",
]
