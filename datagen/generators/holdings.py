"""Net transactions into per-user positions."""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Iterator
from uuid import UUID

from datagen.generators.base import DataGenerator, Row
from datagen.models import Holding, Transaction, TransactionType
from datagen.storage.schemas import HOLDING_SCHEMA

HoldingKey = tuple[UUID, UUID, int]


class HoldingsAggregator(DataGenerator):
    """Sum BUY minus SELL amounts per (user, asset, currency).

    Only strictly positive balances become holdings, in the order their key
    was first seen. Invalid transactions are rejected when the aggregator is
    built.
    """

    def __init__(self, transactions: Iterable[Transaction]) -> None:
        super().__init__()
        balances: dict[HoldingKey, Decimal] = {}
        for transaction in transactions:
            try:
                kind = TransactionType(transaction.transaction_type)
            except ValueError:
                raise ValueError(
                    f"Unknown transaction type {transaction.transaction_type!r} "
                    f"in transaction {transaction.transaction_id}"
                ) from None
            if transaction.amount <= 0:
                raise ValueError(f"Transaction {transaction.transaction_id} has a non-positive amount")
            key = (transaction.user_id, transaction.asset_id, transaction.currency_id)
            delta = transaction.amount if kind is TransactionType.BUY else -transaction.amount
            balances[key] = balances.get(key, Decimal("0")) + delta
        self._holdings = tuple(
            Holding(user_id=user_id, asset_id=asset_id, amount=amount, currency_id=currency_id)
            for (user_id, asset_id, currency_id), amount in balances.items()
            if amount > 0
        )

    def column_names(self) -> tuple[str, ...]:
        return HOLDING_SCHEMA.column_names

    @property
    def holdings(self) -> tuple[Holding, ...]:
        return self._holdings

    @property
    def total_rows(self) -> int:
        return len(self._holdings)

    def _rows(self) -> Iterator[Row]:
        for holding in self._holdings:
            yield holding.as_row()
