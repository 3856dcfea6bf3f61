"""Tests for the asset and user stage generators."""
from __future__ import annotations

import random
from collections import Counter
from datetime import date

import pytest

from datagen.catalogs.asset_classes import ASSET_CLASSES, get_asset_class
from datagen.errors import ConfigurationError
from datagen.generators.assets import AssetDataGenerator
from datagen.generators.users import UserDataGenerator
from datagen.models import Asset, User
from datagen.utils.asset_namer import BANK_PROVIDERS, AssetNamer


def test_asset_generator_produces_requested_rows(rng: random.Random) -> None:
    generator = AssetDataGenerator(25, rng)

    assets = [Asset(*row) for row in generator]

    assert generator.column_names() == ("asset_id", "asset_class_id", "name")
    assert len(assets) == 25
    assert len({asset.asset_id for asset in assets}) == 25
    assert all(asset.name.strip() for asset in assets)
    known_ids = {asset_class.id for asset_class in ASSET_CLASSES}
    assert {asset.asset_class_id for asset in assets} <= known_ids


def test_asset_classes_follow_prevalence(rng: random.Random) -> None:
    counts = Counter(row[1] for row in AssetDataGenerator(4_000, rng))

    # Nordic stocks make up 30% of the universe.
    assert abs(counts[1] / 4_000 - 0.30) < 0.03


def test_asset_generation_is_reproducible() -> None:
    first = list(AssetDataGenerator(10, random.Random(5)))
    second = list(AssetDataGenerator(10, random.Random(5)))

    assert first == second


def test_asset_count_must_be_positive(rng: random.Random) -> None:
    with pytest.raises(ConfigurationError):
        AssetDataGenerator(0, rng)


def test_namer_uses_class_vocabulary(rng: random.Random) -> None:
    namer = AssetNamer(rng)

    bond_names = [namer.name_for(get_asset_class(2)) for _ in range(50)]
    crypto_names = [namer.name_for(get_asset_class(8)) for _ in range(50)]

    assert all(name.endswith(" Bond") for name in bond_names)
    assert all(name.endswith("Digital Assets Fund") for name in crypto_names)
    assert any(name.startswith(BANK_PROVIDERS) for name in bond_names)


def test_user_generator_rows_are_valid_users(rng: random.Random) -> None:
    start, end = date(2020, 1, 1), date(2020, 12, 31)
    generator = UserDataGenerator(300, start, end, rng)

    users = [User(*row) for row in generator]

    assert len(users) == 300
    assert generator.column_names()[0] == "user_id"
    assert generator.column_names()[-1] == "customer_status"
    assert all(start <= user.join_date <= end for user in users)
    assert {user.country_id for user in users} <= {1, 2, 3, 4, 5}
    assert {user.activity_level_id for user in users} <= {1, 2, 3, 4, 5}
    assert {user.investor_profile_id for user in users} <= {1, 2, 3, 4, 5}


def test_user_count_must_be_positive(rng: random.Random) -> None:
    with pytest.raises(ConfigurationError):
        UserDataGenerator(0, date(2020, 1, 1), date(2020, 1, 2), rng)
