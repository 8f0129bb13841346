from __future__ import annotations

from decimal import Decimal

import pandas as pd
import pytest

from aerodrome.domain.monetary.currency_registry import EUR, USD
from aerodrome.domain.monetary.errors import InvalidAmount
from aerodrome.domain.monetary.money import Money
from aerodrome.reports.money_columns import describe_column, money_series, total_money_column


def _settlement_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "order_id": ["a1", "a2", "a3"],
            "merchant_price": ["19.99", "0.10", "0.20"],
            "quantity": [2, 4, 6],
        }
    )


def test_money_series_parses_wire_strings() -> None:
    result = money_series(_settlement_frame(), "merchant_price", USD)
    assert result == [Money("19.99", USD), Money("0.10", USD), Money("0.20", USD)]


def test_total_money_column_is_exact() -> None:
    """Verify that amounts are summed without float noise."""
    total = total_money_column(_settlement_frame(), "merchant_price", "EUR")
    assert total == Money("20.29", EUR)
    assert total.amount == Decimal("20.29")


def test_total_of_empty_frame_is_zero_in_currency() -> None:
    df = pd.DataFrame({"merchant_price": []})
    assert total_money_column(df, "merchant_price", EUR) == Money(0, EUR)


def test_describe_column() -> None:
    acc = describe_column(_settlement_frame(), "quantity")
    assert acc.size() == 3
    assert acc.mean() == pytest.approx(4.0)
    assert acc.variance() == pytest.approx(4.0)


def test_missing_column_raises() -> None:
    with pytest.raises(ValueError, match="missing required column 'fee'"):
        money_series(_settlement_frame(), "fee")


def test_missing_values_raise() -> None:
    df = pd.DataFrame({"merchant_price": ["1.00", None]})
    with pytest.raises(ValueError, match="1 missing value"):
        total_money_column(df, "merchant_price", USD)


def test_not_a_dataframe_raises() -> None:
    with pytest.raises(ValueError, match="pandas DataFrame"):
        describe_column([1, 2, 3], "quantity")


def test_invalid_cell_raises_invalid_amount() -> None:
    df = pd.DataFrame({"merchant_price": ["1.00", "n/a"]})
    with pytest.raises(InvalidAmount):
        money_series(df, "merchant_price", USD)
