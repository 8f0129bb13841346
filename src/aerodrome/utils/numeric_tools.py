from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)
from typing import TypeAlias

# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | str | Decimal

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise, so
    `as_decimal(19.99)` is `Decimal("19.99")` and not the exact binary value.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool or an unsupported type.
        decimal.InvalidOperation: If $value is a string that is not a number.
    """
    # Raise: bool is an int subclass, but never a meaningful amount
    if isinstance(value, bool):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided value is a bool: {value}")

    if isinstance(value, Decimal):
        return value

    if not isinstance(value, (int, str, float)):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided type is: {type(value).__name__}")

    return Decimal(str(value).strip())


# Note: No 'as_float' or 'as_int' functions are provided.
# Use the Python builtin functions like `float()`, `int()` directly for efficient conversion


def exact_context(digits: int) -> Context:
    """Return a context wide enough to hold a $digits-digit result without rounding.

    `Inexact` is trapped, so an undersized $digits raises instead of rounding silently.
    """
    result = Context(
        prec=max(digits, 1),
        rounding=ROUND_HALF_EVEN,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
    )
    return result


def _coefficient_digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def _span_digits(a: Decimal, b: Decimal) -> int:
    # Digits from the highest leading digit down to the lowest exponent, plus a carry
    highest = max(a.adjusted(), b.adjusted())
    lowest = min(a.as_tuple().exponent, b.as_tuple().exponent)
    return highest - lowest + 2


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    return exact_context(_span_digits(a, b)).add(a, b)


def exact_subtract(a: Decimal, b: Decimal) -> Decimal:
    return exact_context(_span_digits(a, b)).subtract(a, b)


def exact_multiply(a: Decimal, b: Decimal) -> Decimal:
    return exact_context(_coefficient_digits(a) + _coefficient_digits(b)).multiply(a, b)


def exact_scaleb(value: Decimal, places: int) -> Decimal:
    """Multiply $value by 10 ** $places without touching its digits."""
    return value.scaleb(places, context=exact_context(_coefficient_digits(value)))


def exact_remainder(a: Decimal, b: Decimal) -> Decimal:
    """Remainder of $a / $b with the sign of $a (truncating division)."""
    # The integer quotient must fit in the precision
    digits = _span_digits(a, b) + _coefficient_digits(b)
    return exact_context(digits).remainder(a, b)
