from __future__ import annotations

import decimal
from decimal import Decimal
from enum import Enum

from aerodrome.domain.monetary.errors import InvalidAmount
from aerodrome.utils.numeric_tools import exact_add, exact_context


class RoundingMode(Enum):
    """Rounding policy applied whenever an amount is rescaled.

    Member order is significant: `ordinal` is used as the last tie-breaker of
    `Money.compare_to`.
    """

    UP = decimal.ROUND_UP
    DOWN = decimal.ROUND_DOWN
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR
    HALF_UP = decimal.ROUND_HALF_UP
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    # No rounding allowed; rescaling must be exact
    UNNECESSARY = "UNNECESSARY"

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    @classmethod
    def from_str(cls, name: str) -> RoundingMode:
        """Look up a rounding mode by name.

        Accepts the member name in any case ("HALF_UP", "half_up") and the
        `decimal` module constant ("ROUND_HALF_UP").

        Raises:
            ValueError: If $name is not a known rounding mode.
        """
        if not isinstance(name, str):
            raise TypeError(f"$name must be a string, but provided value is: {name}")

        key = name.strip().upper()
        if key.startswith("ROUND_"):
            key = key[len("ROUND_") :]

        # Raise: unknown rounding mode name
        if key not in cls.__members__:
            raise ValueError(f"Rounding mode '{name}' is not known. Available rounding modes: {list(cls.__members__.keys())}")

        return cls.__members__[key]

    def quantize(self, value: Decimal, places: int) -> Decimal:
        """Rescale $value to exactly $places fractional digits using this mode.

        The rescale is the only rounding step; no intermediate context
        precision applies, so amounts of any size keep every integer digit.

        Raises:
            InvalidAmount: For `UNNECESSARY` when $value has more than $places
                fractional digits that are not zero.
        """
        exponent = Decimal((0, (1,), -places))
        # Room for every integer digit, the fraction digits and a carry (9.999 -> 10.00)
        context = exact_context(max(value.adjusted(), 0) + places + 2)

        if self is RoundingMode.UNNECESSARY:
            result = value.quantize(exponent, rounding=decimal.ROUND_DOWN, context=_lenient(context))
            # Raise: rescaling would drop significant digits
            if result != value:
                raise InvalidAmount(f"Number of decimals is {-value.as_tuple().exponent}, but currency only takes {places} decimals.")
            return result

        return value.quantize(exponent, rounding=self.value, context=_lenient(context))

    def divide(self, dividend: Decimal, divisor: Decimal, places: int) -> Decimal:
        """Return $dividend / $divisor rounded once, with this mode, to $places fractional digits.

        The quotient is truncated two digits below $places. When the truncation
        drops digits, a sticky digit is appended below it so that the final
        rescale rounds in the same direction as the exact quotient would.

        Raises:
            InvalidAmount: For `UNNECESSARY` when the quotient does not fit $places.
            decimal.DivisionByZero: If $divisor is zero.
        """
        integer_digits = max(dividend.adjusted() - divisor.adjusted() + 2, 1)
        context = _lenient(exact_context(integer_digits + places + 2))
        context.rounding = decimal.ROUND_DOWN
        context.traps[decimal.DivisionByZero] = True

        quotient = context.divide(dividend, divisor)

        if context.flags[decimal.Inexact]:
            # Raise: the quotient has more digits than the currency takes
            if self is RoundingMode.UNNECESSARY:
                raise InvalidAmount(f"Quotient of {dividend} / {divisor} is not exact at {places} decimals.")

            sign = 1 if quotient.is_signed() else 0
            sticky = Decimal((sign, (1,), quotient.as_tuple().exponent - 1))
            quotient = exact_add(quotient, sticky)

        return self.quantize(quotient, places)

    def __str__(self) -> str:
        return self.name


_ORDINALS = {mode: index for index, mode in enumerate(RoundingMode)}


def _lenient(context: decimal.Context) -> decimal.Context:
    # Rounding to $places is intended here; only an undersized precision must fail
    result = context.copy()
    result.traps[decimal.Inexact] = False
    result.traps[decimal.Rounded] = False
    return result
