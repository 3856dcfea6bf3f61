"""Static reference data shared by the generators."""
from __future__ import annotations

from datagen.catalogs.activity_levels import ACTIVITY_LEVELS, ActivityLevel
from datagen.catalogs.asset_classes import ASSET_CLASSES, AssetClass, VolatilityLevel
from datagen.catalogs.countries import COUNTRIES, Country
from datagen.catalogs.currencies import CURRENCIES, Currency
from datagen.catalogs.investor_profiles import INVESTOR_PROFILES, InvestorProfile
from datagen.catalogs.market_trends import MarketTrend, MarketTrendCalendar, default_calendar

__all__ = [
    "ACTIVITY_LEVELS",
    "ASSET_CLASSES",
    "COUNTRIES",
    "CURRENCIES",
    "INVESTOR_PROFILES",
    "ActivityLevel",
    "AssetClass",
    "Country",
    "Currency",
    "InvestorProfile",
    "MarketTrend",
    "MarketTrendCalendar",
    "VolatilityLevel",
    "default_calendar",
]
