from __future__ import annotations

from decimal import Decimal

import pytest

from aerodrome.domain.monetary.errors import InvalidAmount
from aerodrome.domain.monetary.rounding import RoundingMode


@pytest.mark.parametrize("name", ["HALF_UP", "half_up", "ROUND_HALF_UP", " Half_Up "])
def test_from_str_accepts_common_spellings(name) -> None:
    assert RoundingMode.from_str(name) is RoundingMode.HALF_UP


def test_from_str_unknown_raises() -> None:
    with pytest.raises(ValueError, match="not known"):
        RoundingMode.from_str("BANKERS")


def test_ordinal_order() -> None:
    """Verify that ordinals follow the declaration order."""
    assert [mode.ordinal for mode in RoundingMode] == list(range(8))
    assert RoundingMode.UP.ordinal == 0
    assert RoundingMode.HALF_UP.ordinal == 4
    assert RoundingMode.UNNECESSARY.ordinal == 7


@pytest.mark.parametrize(
    "mode, expected",
    [
        (RoundingMode.UP, "2.6"),
        (RoundingMode.DOWN, "2.5"),
        (RoundingMode.CEILING, "2.6"),
        (RoundingMode.FLOOR, "2.5"),
        (RoundingMode.HALF_UP, "2.6"),
        (RoundingMode.HALF_DOWN, "2.5"),
        (RoundingMode.HALF_EVEN, "2.6"),
    ],
)
def test_quantize(mode, expected) -> None:
    """Verify each mode on a value exactly halfway between two steps."""
    assert mode.quantize(Decimal("2.55"), 1) == Decimal(expected)


def test_quantize_unnecessary() -> None:
    assert RoundingMode.UNNECESSARY.quantize(Decimal("2.50"), 1) == Decimal("2.5")
    with pytest.raises(InvalidAmount):
        RoundingMode.UNNECESSARY.quantize(Decimal("2.55"), 1)


@pytest.mark.parametrize(
    "mode, expected",
    [
        (RoundingMode.HALF_UP, "0.13"),
        (RoundingMode.HALF_DOWN, "0.13"),
        (RoundingMode.HALF_EVEN, "0.13"),
        (RoundingMode.DOWN, "0.12"),
    ],
)
def test_divide_rounds_the_exact_quotient(mode, expected) -> None:
    """Verify that digits beyond the truncation point still break a near-tie (1 / 7.99999999 is just above 0.125)."""
    assert mode.divide(Decimal("1"), Decimal("7.99999999"), 2) == Decimal(expected)


def test_divide_keeps_every_integer_digit() -> None:
    result = RoundingMode.HALF_UP.divide(Decimal("1E+40"), Decimal("3"), 2)
    assert result == Decimal("3" * 40 + ".33")
    assert result.as_tuple().exponent == -2


def test_divide_unnecessary() -> None:
    assert RoundingMode.UNNECESSARY.divide(Decimal("10.00"), Decimal("4"), 2) == Decimal("2.50")
    with pytest.raises(InvalidAmount, match="not exact"):
        RoundingMode.UNNECESSARY.divide(Decimal("1"), Decimal("3"), 2)
