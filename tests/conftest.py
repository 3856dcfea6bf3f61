"""Shared fixtures for the generator test-suite."""
from __future__ import annotations

import random
import sys
from datetime import date
from pathlib import Path
from uuid import UUID

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from datagen.core.log import progress_manager
from datagen.models import SENTINEL_DATE, CustomerStatus, User


@pytest.fixture(autouse=True)
def _no_progress_bars():
    progress_manager.enabled = False
    yield
    progress_manager.enabled = True


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def make_user():
    counter = iter(range(1, 10_000))

    def _make(
        join_date: date,
        departure_date: date = SENTINEL_DATE,
        *,
        activity_level_id: int = 3,
        country_id: int = 1,
    ) -> User:
        status = CustomerStatus.ACTIVE if departure_date == SENTINEL_DATE else CustomerStatus.DEPARTED
        return User(
            user_id=UUID(int=next(counter)),
            investor_profile_id=2,
            activity_level_id=activity_level_id,
            country_id=country_id,
            join_date=join_date,
            departure_date=departure_date,
            status=status,
        )

    return _make
