"""Generate the tradable asset universe."""
from __future__ import annotations

import random
from typing import Iterator, Optional, Sequence

from datagen.catalogs.asset_classes import ASSET_CLASSES, AssetClass
from datagen.errors import ConfigurationError
from datagen.generators.base import DataGenerator, Row
from datagen.models import Asset
from datagen.storage.schemas import ASSET_SCHEMA
from datagen.utils.asset_namer import AssetNamer
from datagen.utils.ids import random_uuid
from datagen.utils.weighted import WeightedItem, WeightedSampler


class AssetDataGenerator(DataGenerator):
    """Draw ``asset_count`` assets with classes in proportion to prevalence."""

    def __init__(
        self,
        asset_count: int,
        rng: random.Random,
        asset_classes: Sequence[AssetClass] = ASSET_CLASSES,
        namer: Optional[AssetNamer] = None,
    ) -> None:
        super().__init__()
        if asset_count <= 0:
            raise ConfigurationError(f"Asset count must be positive, got {asset_count}")
        if not asset_classes:
            raise ConfigurationError("At least one asset class is required")
        self.asset_count = asset_count
        self._rng = rng
        self._classes = WeightedSampler(
            [WeightedItem(asset_class, asset_class.prevalence) for asset_class in asset_classes],
            rng,
        )
        self._namer = namer or AssetNamer(rng)

    def column_names(self) -> tuple[str, ...]:
        return ASSET_SCHEMA.column_names

    @property
    def total_rows(self) -> int:
        return self.asset_count

    def _rows(self) -> Iterator[Row]:
        for _ in range(self.asset_count):
            asset_class = self._classes.draw()
            asset = Asset(
                asset_id=random_uuid(self._rng),
                asset_class_id=asset_class.id,
                name=self._namer.name_for(asset_class),
            )
            yield asset.as_row()
