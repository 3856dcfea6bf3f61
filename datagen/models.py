"""Domain records produced and consumed by the generation stages."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Mapping
from uuid import UUID

SENTINEL_DATE = date(9999, 12, 31)


class CustomerStatus(str, Enum):
    ACTIVE = "ACTIVE"
    DEPARTED = "DEPARTED"


class TransactionType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True, slots=True)
class Asset:
    """Tradable instrument belonging to one asset class."""

    asset_id: UUID
    asset_class_id: int
    name: str

    @classmethod
    def from_row(cls, row: Mapping[str, object]) -> "Asset":
        return cls(
            asset_id=row["asset_id"],  # type: ignore[arg-type]
            asset_class_id=int(row["asset_class_id"]),  # type: ignore[arg-type]
            name=str(row["name"]),
        )

    def as_row(self) -> tuple[object, ...]:
        return (self.asset_id, self.asset_class_id, self.name)


@dataclass(frozen=True, slots=True)
class PricePoint:
    """Closing price of one asset on one calendar day."""

    asset_id: UUID
    price_date: date
    price: float

    @classmethod
    def from_row(cls, row: Mapping[str, object]) -> "PricePoint":
        return cls(
            asset_id=row["asset_id"],  # type: ignore[arg-type]
            price_date=row["price_date"],  # type: ignore[arg-type]
            price=float(row["price"]),  # type: ignore[arg-type]
        )

    def as_row(self) -> tuple[object, ...]:
        return (self.asset_id, self.price_date, self.price)


@dataclass(frozen=True, slots=True)
class User:
    """Platform customer with sampled profile attributes and lifecycle dates.

    ``departure_date`` holds :data:`SENTINEL_DATE` while the customer is
    active; a real date always pairs with ``DEPARTED``.
    """

    user_id: UUID
    investor_profile_id: int
    activity_level_id: int
    country_id: int
    join_date: date
    departure_date: date
    status: CustomerStatus

    def __post_init__(self) -> None:
        if self.departure_date < self.join_date:
            raise ValueError("Departure date cannot be before join date")
        departed = self.departure_date != SENTINEL_DATE
        if departed != (self.status is CustomerStatus.DEPARTED):
            raise ValueError(
                f"Status {self.status.value} does not match departure date {self.departure_date}"
            )

    @property
    def is_departed(self) -> bool:
        return self.status is CustomerStatus.DEPARTED

    @classmethod
    def from_row(cls, row: Mapping[str, object]) -> "User":
        return cls(
            user_id=row["user_id"],  # type: ignore[arg-type]
            investor_profile_id=int(row["investor_profile_id"]),  # type: ignore[arg-type]
            activity_level_id=int(row["activity_level_id"]),  # type: ignore[arg-type]
            country_id=int(row["country_id"]),  # type: ignore[arg-type]
            join_date=row["join_date"],  # type: ignore[arg-type]
            departure_date=row["departure_date"],  # type: ignore[arg-type]
            status=CustomerStatus(row["customer_status"]),
        )

    def as_row(self) -> tuple[object, ...]:
        return (
            self.user_id,
            self.investor_profile_id,
            self.activity_level_id,
            self.country_id,
            self.join_date,
            self.departure_date,
            self.status,
        )


@dataclass(frozen=True, slots=True)
class Transaction:
    """Single BUY or SELL trade in a user's account currency."""

    transaction_id: UUID
    user_id: UUID
    asset_id: UUID
    transaction_type: TransactionType
    amount: Decimal
    currency_id: int
    transaction_date: date

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise ValueError(f"Transaction amount must be positive, got {self.amount}")

    @classmethod
    def from_row(cls, row: Mapping[str, object]) -> "Transaction":
        return cls(
            transaction_id=row["transaction_id"],  # type: ignore[arg-type]
            user_id=row["user_id"],  # type: ignore[arg-type]
            asset_id=row["asset_id"],  # type: ignore[arg-type]
            transaction_type=TransactionType(row["transaction_type"]),
            amount=Decimal(row["amount"]),  # type: ignore[arg-type]
            currency_id=int(row["currency_id"]),  # type: ignore[arg-type]
            transaction_date=row["transaction_date"],  # type: ignore[arg-type]
        )

    def as_row(self) -> tuple[object, ...]:
        return (
            self.transaction_id,
            self.user_id,
            self.asset_id,
            self.transaction_type,
            self.amount,
            self.currency_id,
            self.transaction_date,
        )


@dataclass(frozen=True, slots=True)
class Holding:
    """Net position of one user in one asset, denominated in one currency."""

    user_id: UUID
    asset_id: UUID
    amount: Decimal
    currency_id: int

    def as_row(self) -> tuple[object, ...]:
        return (self.user_id, self.asset_id, self.amount, self.currency_id)
