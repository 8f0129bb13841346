from __future__ import annotations

# Helpers for report and settlement tables: monetary columns arrive as decimal
# wire strings and are summed exactly as `Money`; numeric columns are described
# with a single-pass `StatsAccumulator`.

import logging

import pandas as pd

from aerodrome.domain.monetary.currency import Currency
from aerodrome.domain.monetary.money import Money
from aerodrome.stats.stats_accumulator import StatsAccumulator

logger = logging.getLogger(__name__)


def _require_column(df: pd.DataFrame, column: str) -> pd.Series:
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}. Please provide your data as a pandas DataFrame.")

    # Check: column present
    if column not in df.columns:
        raise ValueError(f"The provided DataFrame is missing required column '{column}'. Available columns: {list(df.columns)}")

    series = df[column]

    # Check: no missing values
    missing = int(series.isna().sum())
    if missing:
        raise ValueError(f"Column '{column}' has {missing} missing value(s); every row must hold an amount")

    return series


def money_series(df: pd.DataFrame, column: str, currency: Currency | str | None = None) -> list[Money]:
    """Parse $column of $df into `Money` values in $currency.

    Cells may be decimal strings ("19.99"), ints, floats or Decimals.

    Raises:
        ValueError: If $column is missing or has missing values.
        InvalidAmount: If a cell is not a valid amount.
    """
    series = _require_column(df, column)
    result = [Money(value, currency) for value in series.tolist()]
    logger.debug(f"Parsed {len(result)} amount(s) from column '{column}'")
    return result


def total_money_column(df: pd.DataFrame, column: str, currency: Currency | str | None = None) -> Money:
    """Return the exact `Money` total of $column (zero in $currency for an empty frame)."""
    monies = money_series(df, column, currency)
    if not monies:
        return Money(0, currency)
    return Money.sum(monies)


def describe_column(df: pd.DataFrame, column: str) -> StatsAccumulator:
    """Feed numeric $column of $df into a new `StatsAccumulator` and return it."""
    series = _require_column(df, column)
    result = StatsAccumulator()
    result.calculate(series.tolist())
    return result
