from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable

from aerodrome.config import get_settings
from aerodrome.domain.monetary.currency import Currency
from aerodrome.domain.monetary.errors import CurrencyMismatch, DivisionByZero, InvalidAmount
from aerodrome.domain.monetary.money_locale import Locale, format_currency, format_percent
from aerodrome.domain.monetary.rounding import RoundingMode
from aerodrome.utils.numeric_tools import (
    DecimalLike,
    as_decimal,
    exact_add,
    exact_multiply,
    exact_remainder,
    exact_scaleb,
    exact_subtract,
)


class Money:
    """Represents an immutable monetary amount with currency.

    Uses Python's Decimal for exact arithmetic. The amount is always stored
    with exactly as many fraction digits as the currency takes, rescaled with
    the instance's rounding mode.

    Operations between two `Money` values require the same currency and raise
    `CurrencyMismatch` otherwise. Scaling by a plain number never checks the
    currency. Every operation returns a new instance that keeps the
    receiver's currency, locale and rounding mode.

    Equality (`==`) is structural and never raises; use `equals` for the
    currency-checked comparison.
    """

    __slots__ = ("_amount", "_currency", "_locale", "_rounding")

    # region Init

    def __init__(
        self,
        amount: DecimalLike = 0,
        currency: Currency | str | None = None,
        locale: Locale | str | None = None,
        rounding: RoundingMode | str | None = None,
    ):
        """Initialize Money with amount, currency, locale and rounding mode.

        Args:
            amount: Decimal-like amount. Strings are the wire format ("19.99").
            currency: Currency or currency code. Defaults to the configured currency.
            locale: Locale used by the display methods. Defaults to the configured locale.
            rounding: Rounding mode applied when rescaling. Defaults to the configured mode.

        Raises:
            InvalidAmount: If $amount is missing or not a finite number, if
                $currency is unknown, or if the amount needs rounding and
                $rounding is `RoundingMode.UNNECESSARY`.
        """
        self._currency = self._resolve_currency(currency)
        self._locale = Locale.parse(locale) if locale is not None else get_settings().locale
        self._rounding = self._resolve_rounding(rounding)

        # Raise: amount is required
        if amount is None:
            raise InvalidAmount("Amount cannot be None")

        # Raise: $amount must be convertible to Decimal
        try:
            decimal_amount = as_decimal(amount)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidAmount(f"Cannot init `Money` because $amount ({amount!r}) cannot be converted to Decimal") from e

        # Raise: NaN and Infinity are not amounts
        if not decimal_amount.is_finite():
            raise InvalidAmount(f"Cannot init `Money` because $amount ({amount!r}) is not a finite number")

        # Round to currency precision
        try:
            self._amount = self._rounding.quantize(decimal_amount, self._currency.precision)
        except InvalidOperation as e:
            raise InvalidAmount(f"Cannot init `Money` because $amount ({amount!r}) is too large to rescale") from e

        # Zero is unsigned on the wire: "-0.00" becomes "0.00"
        if not self._amount:
            self._amount = self._amount.copy_abs()

    @staticmethod
    def _resolve_currency(currency: Currency | str | None) -> Currency:
        if currency is None:
            return get_settings().currency

        if isinstance(currency, Currency):
            return currency

        # Raise: currency code must be registered
        if isinstance(currency, str):
            try:
                return Currency.from_str(currency)
            except ValueError as e:
                raise InvalidAmount(f"Cannot init `Money` because $currency ('{currency}') is not a known currency") from e

        raise InvalidAmount(f"$currency must be a Currency or currency code, but provided value is: {currency!r}")

    @staticmethod
    def _resolve_rounding(rounding: RoundingMode | str | None) -> RoundingMode:
        if rounding is None:
            return get_settings().rounding
        if isinstance(rounding, RoundingMode):
            return rounding
        return RoundingMode.from_str(rounding)

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '1000.50 USD'.

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            InvalidAmount: If string format is invalid.
        """
        value_str = value_str.strip()
        if not value_str:
            raise InvalidAmount("Value string with $value_str = '' cannot be empty")

        # Split by whitespace
        parts = value_str.split()
        if len(parts) != 2:
            raise InvalidAmount(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, currency_part = parts
        return cls(value_part, currency_part)

    @classmethod
    def from_db_integer(
        cls,
        minor_units: int,
        currency: Currency | str | None = None,
        locale: Locale | str | None = None,
        rounding: RoundingMode | str | None = None,
    ) -> Money:
        """Create Money from an integer count of minor units (inverse of `as_db_integer`).

        `Money.from_db_integer(1999, "USD")` is 19.99 USD; for JPY the minor
        unit is the yen itself.
        """
        # Raise: minor units are whole numbers
        if isinstance(minor_units, bool) or not isinstance(minor_units, int):
            raise InvalidAmount(f"$minor_units must be an int, but provided value is: {minor_units!r}")

        resolved = cls._resolve_currency(currency)
        amount = exact_scaleb(Decimal(minor_units), -resolved.precision)
        return cls(amount, resolved, locale, rounding)

    @classmethod
    def sum(cls, monies: Iterable[Money]) -> Money:
        """Add a collection of monies together.

        An empty collection gives zero in the configured default currency.

        Raises:
            CurrencyMismatch: At the first element whose currency differs from
                the running total's.
        """
        result: Money | None = None
        for money in monies:
            # Raise: every element must be Money, including the first
            if not isinstance(money, Money):
                raise TypeError(f"Cannot sum $monies because an element is not Money: {money!r}")
            result = money if result is None else result.plus(money)

        if result is None:
            return cls()
        return result

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount (scaled to the currency's precision)."""
        return self._amount

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def rounding(self) -> RoundingMode:
        return self._rounding

    @property
    def decimals(self) -> int:
        """Number of fraction digits used by the currency."""
        return self._currency.precision

    def as_decimal(self) -> Decimal:
        return self._amount

    def float_value(self) -> float:
        return float(self._amount)

    # endregion

    # region Currency checks

    def currency_match(self, other: Money | None) -> bool:
        """Check whether $other has the same currency. False for non-Money values."""
        if not isinstance(other, Money):
            return False
        return self._currency == other.currency

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatch: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, but provided value is: {other!r}")

        if self._currency != other.currency:
            raise CurrencyMismatch(f"{other.currency} does not match the expected currency {self._currency}")

    # endregion

    # region Sign tests

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    def is_empty(self) -> bool:
        """Check whether the amount is exactly zero."""
        return self._amount == 0

    def greater_than_zero(self) -> bool:
        return self.is_positive()

    def less_than_zero(self) -> bool:
        return self.is_negative()

    def greater_than_or_equal_to_zero(self) -> bool:
        return self._amount >= 0

    def less_than_or_equal_to_zero(self) -> bool:
        return self._amount <= 0

    # endregion

    # region Arithmetic

    def plus(self, other: Money) -> Money:
        self._check_same_currency(other)
        return self._with_amount(exact_add(self._amount, other.amount))

    def minus(self, other: Money) -> Money:
        self._check_same_currency(other)
        return self._with_amount(exact_subtract(self._amount, other.amount))

    def times(self, factor: Money | DecimalLike) -> Money:
        """Multiply by a unitless number, or by Money of the same currency."""
        if isinstance(factor, Money):
            self._check_same_currency(factor)
            return self._with_amount(exact_multiply(self._amount, factor.amount))

        return self._with_amount(exact_multiply(self._amount, as_decimal(factor)))

    def div(self, divisor: Money | DecimalLike) -> Money:
        """Divide by a unitless number, or by Money of the same currency.

        The quotient is rounded once, straight to the currency's precision,
        with the instance's rounding mode. Use `ratio` for an unrounded dimensionless
        quotient of two amounts.

        Raises:
            DivisionByZero: If $divisor is zero.
            CurrencyMismatch: If $divisor is Money in another currency.
        """
        if isinstance(divisor, Money):
            self._check_same_currency(divisor)
            divisor_value = divisor.amount
        else:
            divisor_value = as_decimal(divisor)

        # Raise: division by zero
        if divisor_value == 0:
            raise DivisionByZero(f"Cannot divide {self._currency} amount {self} by zero")

        return self._with_amount(self._rounding.divide(self._amount, divisor_value, self._currency.precision))

    def ratio(self, other: Money) -> Decimal:
        """Return the dimensionless quotient self / $other (same currency required).

        Raises:
            DivisionByZero: If $other is zero.
            CurrencyMismatch: If currencies don't match.
        """
        self._check_same_currency(other)

        # Raise: division by zero
        if other.is_empty():
            raise DivisionByZero(f"Cannot divide {self._currency} amount {self} by zero")

        return self._amount / other.amount

    def mod(self, divisor: int) -> int:
        """Return the integer part of the remainder of the amount divided by $divisor.

        The remainder has the sign of the amount, like `Decimal`'s `%`.
        """
        # Raise: divisor must be a non-zero int
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            raise TypeError(f"$divisor must be an int, but provided value is: {divisor!r}")
        if divisor == 0:
            raise DivisionByZero(f"Cannot compute {self._currency} amount {self} modulo zero")

        return int(exact_remainder(self._amount, Decimal(divisor)))

    def abs(self) -> Money:
        if self.is_negative():
            return self.negate()
        return self

    def negate(self) -> Money:
        return self._with_amount(self._amount.copy_negate())

    def _with_amount(self, amount: Decimal) -> Money:
        return Money(amount, self._currency, self._locale, self._rounding)

    # endregion

    # region Conversions

    def int_val(self) -> int:
        """Return the amount rounded to a whole number with the instance's rounding mode."""
        return int(self._rounding.quantize(self._amount, 0))

    def as_db_integer(self) -> int:
        """Return the amount as an integer count of minor units (cents for USD).

        Uses the currency's precision, so 1.234 KWD is 1234 and 1234 JPY is 1234.
        """
        return int(exact_scaleb(self._amount, self._currency.precision))

    def to_currency_string(self) -> str:
        """Format for display, e.g. "$1,234.50" (en_US) or "1.234,50 €" (de_DE)."""
        return format_currency(self._amount, self._currency, self._locale)

    def to_percent_string(self) -> str:
        """Format the amount as a percentage, e.g. 0.25 -> "25%" (en_US)."""
        return format_percent(self._amount, self._locale)

    # endregion

    # region Comparisons

    def equals(self, other: Money) -> bool:
        """Compare amounts; currencies must match.

        Unlike `==`, this raises `CurrencyMismatch` for different currencies
        and ignores the rounding mode.
        """
        self._check_same_currency(other)
        return self._amount == other.amount

    def greater_than(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._amount > other.amount

    def greater_than_or_equal_to(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._amount >= other.amount

    def less_than(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._amount < other.amount

    def less_than_or_equal_to(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._amount <= other.amount

    def compare_to(self, other: Money) -> int:
        """Total order for deterministic sorting: amount, then currency code, then rounding mode.

        Does not check currencies; use the comparison methods for that.

        Returns:
            -1, 0 or 1.
        """
        if self is other:
            return 0

        mine = self.sort_key()
        theirs = other.sort_key()
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def sort_key(self) -> tuple[Decimal, str, int]:
        """Key for `sorted()` consistent with `compare_to`."""
        return self._amount, self._currency.code, self._rounding.ordinal

    # endregion

    # region Magic

    def __eq__(self, other) -> bool:
        """Structural equality of amount, currency and rounding mode."""
        if self is other:
            return True
        if not isinstance(other, Money):
            return False
        return self._amount == other.amount and self._currency == other.currency and self._rounding == other.rounding

    def __hash__(self) -> int:
        """Hash based on amount, currency code and rounding mode."""
        return hash((self._amount, self._currency.code, self._rounding))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than_or_equal_to(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than_or_equal_to(other)

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other):
        """Right addition; only `0 + Money` so that builtin `sum()` works."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other):
        """Multiply Money by number (returns Money)."""
        if isinstance(other, Money):
            return NotImplemented  # Use `times` for Money * Money
        try:
            return self.times(other)
        except (TypeError, InvalidOperation):
            return NotImplemented

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money) or Money by Money (returns Decimal)."""
        if isinstance(other, Money):
            return self.ratio(other)
        try:
            divisor = as_decimal(other)
        except (TypeError, InvalidOperation):
            return NotImplemented
        return self.div(divisor)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    def __str__(self) -> str:
        """Return the plain decimal amount, e.g. '19.99' (the wire format)."""
        return format(self._amount, "f")

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self}, {self._currency.code})"

    # endregion
