"""Investor risk profiles."""
from __future__ import annotations

from dataclasses import dataclass

from datagen.utils.weighted import WeightedItem


@dataclass(frozen=True, slots=True)
class InvestorProfile:
    id: int
    name: str
    description: str
    prevalence: float


INVESTOR_PROFILES: tuple[InvestorProfile, ...] = (
    InvestorProfile(1, "Conservative", "Prioritises capital preservation", 25.0),
    InvestorProfile(2, "Balanced", "Mixes growth and stability", 40.0),
    InvestorProfile(3, "Aggressive", "Seeks high growth and accepts large swings", 20.0),
    InvestorProfile(4, "Income", "Focuses on dividends and coupons", 10.0),
    InvestorProfile(5, "Trend", "Follows market momentum", 5.0),
)


def prevalence_weights() -> list[WeightedItem[InvestorProfile]]:
    return [WeightedItem(profile, profile.prevalence) for profile in INVESTOR_PROFILES]
