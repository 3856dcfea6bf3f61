"""Asset classes, their market prevalence and volatility bands."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from datagen.utils.weighted import WeightedItem


class VolatilityLevel(Enum):
    """Annualised volatility band used by the price process."""

    LOW = 0.10
    MEDIUM = 0.20
    HIGH = 0.35
    VERY_HIGH = 0.50

    @property
    def annual_volatility(self) -> float:
        return self.value


@dataclass(frozen=True, slots=True)
class AssetClass:
    id: int
    name: str
    description: str
    risk_level: int
    volatility: VolatilityLevel
    prevalence: float


ASSET_CLASSES: tuple[AssetClass, ...] = (
    AssetClass(1, "Nordic stocks", "Equities listed on Nordic exchanges", 4, VolatilityLevel.HIGH, 30.0),
    AssetClass(2, "Government bond", "Sovereign debt from Nordic governments", 1, VolatilityLevel.LOW, 18.0),
    AssetClass(3, "Corporate Bond", "Investment-grade corporate debt", 2, VolatilityLevel.LOW, 12.0),
    AssetClass(4, "Medium-Risk Fund", "Balanced funds mixing equities and bonds", 3, VolatilityLevel.MEDIUM, 17.0),
    AssetClass(5, "Large-Cap Equity", "Large international companies", 4, VolatilityLevel.HIGH, 15.0),
    AssetClass(6, "Gold / Precious Metals", "Physical metals and metal trackers", 5, VolatilityLevel.VERY_HIGH, 4.0),
    AssetClass(7, "REITs", "Listed real estate investment trusts", 3, VolatilityLevel.MEDIUM, 3.0),
    AssetClass(8, "Crypto", "Digital asset exchange-traded products", 7, VolatilityLevel.VERY_HIGH, 1.0),
)

_BY_ID = {asset_class.id: asset_class for asset_class in ASSET_CLASSES}


def get_asset_class(asset_class_id: int) -> AssetClass:
    try:
        return _BY_ID[asset_class_id]
    except KeyError:
        raise KeyError(f"Unknown asset class id {asset_class_id}") from None


def prevalence_weights() -> list[WeightedItem[AssetClass]]:
    return [WeightedItem(asset_class, asset_class.prevalence) for asset_class in ASSET_CLASSES]
