from __future__ import annotations

import pytest

from aerodrome.domain.monetary.currency import Currency
from aerodrome.domain.monetary.currency_registry import JPY, KWD, USD


def test_predefined_currencies_are_registered() -> None:
    """Verify that the registry resolves predefined currencies by code."""
    assert Currency.from_str("USD") is USD
    assert Currency.from_str(" jpy ") is JPY
    assert {"USD", "EUR", "JPY", "KWD"} <= set(Currency.registered_codes())


def test_precision_is_iso_fraction_digits() -> None:
    assert USD.precision == 2
    assert JPY.precision == 0
    assert KWD.precision == 3


def test_unknown_code_raises() -> None:
    with pytest.raises(ValueError, match="not found in registry"):
        Currency.from_str("XYZ")


@pytest.mark.parametrize(
    "code, precision, name",
    [("US", 2, "Too short"), ("US1", 2, "Digit"), ("ABC", 5, "Too precise"), ("ABC", -1, "Negative"), ("ABC", 2, " ")],
)
def test_invalid_currency_definition_raises(code, precision, name) -> None:
    with pytest.raises(ValueError):
        Currency(code, precision, name)


def test_register_refuses_duplicates_without_overwrite() -> None:
    """Verify that an existing code is only replaced with overwrite=True."""
    with pytest.raises(ValueError, match="already exists"):
        Currency.register(Currency("USD", 2, "US Dollar", "$"))


def test_equality_and_hash_by_code() -> None:
    other_usd = Currency("usd", 2, "Another Dollar")
    assert other_usd == USD
    assert hash(other_usd) == hash(USD)
    assert other_usd.symbol == "USD"
    assert str(USD) == "USD"
