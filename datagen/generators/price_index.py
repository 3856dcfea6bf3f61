"""In-memory lookup of asset prices by date."""
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional
from uuid import UUID

from datagen.models import PricePoint


class AssetPriceIndex:
    """Index price points by date, then asset.

    Assets keep their first-seen order within a date. Non-positive prices are
    treated as unpriced.
    """

    def __init__(self, points: Iterable[PricePoint]) -> None:
        self._by_date: dict[date, dict[UUID, float]] = {}
        asset_ids: dict[UUID, None] = {}
        for point in points:
            asset_ids.setdefault(point.asset_id, None)
            if point.price > 0:
                self._by_date.setdefault(point.price_date, {})[point.asset_id] = point.price
        if not self._by_date:
            raise ValueError("Price index needs at least one positive price")
        self._asset_ids = tuple(asset_ids)
        self._latest = max(self._by_date)

    @property
    def latest_date(self) -> date:
        return self._latest

    @property
    def asset_ids(self) -> tuple[UUID, ...]:
        return self._asset_ids

    def price_on(self, asset_id: UUID, day: date) -> Optional[float]:
        return self._by_date.get(day, {}).get(asset_id)

    def assets_priced_on(self, day: date) -> list[UUID]:
        return list(self._by_date.get(day, {}))
