"""Generate believable Nordic fund and instrument names for an asset class."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Sequence

from faker import Faker

from datagen.catalogs.asset_classes import AssetClass


@dataclass(frozen=True)
class LocaleConfig:
    """Locale used to coin boutique asset manager names."""

    label: str
    locale: str
    weight: int


PROVIDER_LOCALES: Sequence[LocaleConfig] = (
    LocaleConfig(label="Swedish", locale="sv_SE", weight=6),
    LocaleConfig(label="Norwegian", locale="no_NO", weight=2),
    LocaleConfig(label="Danish", locale="da_DK", weight=1),
    LocaleConfig(label="Finnish", locale="fi_FI", weight=1),
)

_FAKERS: Dict[str, Faker] = {cfg.locale: Faker(cfg.locale) for cfg in PROVIDER_LOCALES}

BANK_PROVIDERS = ("Swedbank", "SEB", "Nordea", "Handelsbanken", "Länsförsäkringar")
BOUTIQUE_SUFFIXES = ("Kapital", "Fonder", "Invest", "Asset Management")
REGIONS = ("Sweden", "Nordic", "Europe", "Global", "Asia", "US")
SECTORS = ("Tech", "Health", "Finance", "Energy", "Real Estate")
EQUITY_FUND_TYPES = ("Index", "Active", "Dividend", "Growth", "Value")
BOND_FUND_TYPES = ("Government", "Corporate", "High-Yield", "Short-Term")
MIXED_FUND_TYPES = ("Balanced", "Strategic", "Defensive", "Opportunity")
ALTERNATIVE_FUND_TYPES = ("Commodity", "Real Estate", "Alternative", "Specialty")

BOUTIQUE_SHARE = 0.3


class AssetNamer:
    """Compose names from provider, region and product vocabulary.

    Most assets are issued by one of the large Nordic banks; the rest get a
    boutique manager named after a locale-appropriate surname.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def _provider(self) -> str:
        if self._rng.random() >= BOUTIQUE_SHARE:
            return self._rng.choice(BANK_PROVIDERS)
        weights = [cfg.weight for cfg in PROVIDER_LOCALES]
        locale = self._rng.choices(PROVIDER_LOCALES, weights=weights, k=1)[0]
        faker = _FAKERS[locale.locale]
        faker.random = self._rng
        return f"{faker.last_name()} {self._rng.choice(BOUTIQUE_SUFFIXES)}"

    def name_for(self, asset_class: AssetClass) -> str:
        if not asset_class.name.strip():
            raise ValueError("Asset class name cannot be blank")

        pick = self._rng.choice
        provider = self._provider()
        region = pick(REGIONS)

        name = asset_class.name
        if name == "Nordic stocks":
            return f"{provider} {region} {pick(SECTORS)} {pick(EQUITY_FUND_TYPES)}"
        if name == "Government bond":
            return f"{provider} {region} {pick(BOND_FUND_TYPES)} Bond"
        if name == "Corporate Bond":
            return f"{provider} {region} Corporate {pick(BOND_FUND_TYPES)}"
        if name == "Medium-Risk Fund":
            return f"{provider} {region} {pick(MIXED_FUND_TYPES)} Fund"
        if name == "Large-Cap Equity":
            return f"{provider} {region} Large-Cap {pick(SECTORS)} {pick(EQUITY_FUND_TYPES)}"
        if name == "Gold / Precious Metals":
            return f"{provider} {region} Precious Metals {pick(ALTERNATIVE_FUND_TYPES)}"
        if name == "REITs":
            return f"{provider} {region} Real Estate {pick(ALTERNATIVE_FUND_TYPES)}"
        if name == "Crypto":
            return f"{provider} Digital Assets Fund"
        return f"{provider} {region} {name} {pick(MIXED_FUND_TYPES)}"
