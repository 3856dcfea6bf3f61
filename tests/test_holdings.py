"""Tests for netting transactions into holdings."""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from uuid import UUID

import pytest

from datagen.generators.holdings import HoldingsAggregator
from datagen.models import Transaction, TransactionType

USER = UUID(int=1)
OTHER_USER = UUID(int=2)
ASSET = UUID(int=10)
OTHER_ASSET = UUID(int=11)

_ids = iter(range(1_000, 100_000))


def _txn(kind: TransactionType, amount: str, *, user=USER, asset=ASSET, currency=1) -> Transaction:
    return Transaction(
        transaction_id=UUID(int=next(_ids)),
        user_id=user,
        asset_id=asset,
        transaction_type=kind,
        amount=Decimal(amount),
        currency_id=currency,
        transaction_date=date(2021, 1, 1),
    )


BUY, SELL = TransactionType.BUY, TransactionType.SELL


def test_buys_minus_sells_give_the_holding() -> None:
    aggregator = HoldingsAggregator(
        [_txn(BUY, "2000"), _txn(SELL, "500"), _txn(BUY, "300"), _txn(SELL, "200")]
    )

    rows = list(aggregator)

    assert rows == [(USER, ASSET, Decimal("1600"), 1)]
    assert aggregator.column_names() == ("user_id", "asset_id", "amount", "currency_id")


def test_fully_sold_position_is_omitted() -> None:
    aggregator = HoldingsAggregator([_txn(BUY, "1000"), _txn(SELL, "1000")])

    assert list(aggregator) == []
    assert not aggregator.has_more()


def test_negative_balances_are_omitted() -> None:
    aggregator = HoldingsAggregator([_txn(SELL, "750.25"), _txn(BUY, "100.00")])

    assert aggregator.holdings == ()


def test_currencies_are_tracked_separately_in_first_seen_order() -> None:
    aggregator = HoldingsAggregator(
        [
            _txn(BUY, "100.10", currency=2),
            _txn(BUY, "50.05", user=OTHER_USER, asset=OTHER_ASSET),
            _txn(BUY, "200.00", currency=1),
            _txn(SELL, "0.10", currency=2),
        ]
    )

    holdings = aggregator.holdings

    assert [(h.user_id, h.asset_id, h.currency_id, h.amount) for h in holdings] == [
        (USER, ASSET, 2, Decimal("100.00")),
        (OTHER_USER, OTHER_ASSET, 1, Decimal("50.05")),
        (USER, ASSET, 1, Decimal("200.00")),
    ]
    assert aggregator.total_rows == 3


def test_unknown_transaction_type_is_fatal() -> None:
    bogus = SimpleNamespace(
        transaction_id=UUID(int=5),
        user_id=USER,
        asset_id=ASSET,
        transaction_type="HOLD",
        amount=Decimal("10"),
        currency_id=1,
    )

    with pytest.raises(ValueError, match="Unknown transaction type"):
        HoldingsAggregator([_txn(BUY, "10"), bogus])


def test_non_positive_amounts_are_rejected() -> None:
    with pytest.raises(ValueError):
        _txn(BUY, "0")

    bogus = SimpleNamespace(
        transaction_id=UUID(int=6),
        user_id=USER,
        asset_id=ASSET,
        transaction_type=BUY,
        amount=Decimal("-5"),
        currency_id=1,
    )
    with pytest.raises(ValueError, match="non-positive"):
        HoldingsAggregator([bogus])
