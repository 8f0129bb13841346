"""Exceptions raised by the monetary domain.

Every error is raised where the violation happens and is never recovered
internally: a wrong total is worse than a loud failure.
"""


class MonetaryError(Exception):
    """Base class of all monetary errors."""


class InvalidAmount(MonetaryError, ValueError):
    """Raised when an amount or currency cannot back a `Money` value.

    Covers a missing or unparseable amount, an unknown currency, and an amount
    with more fractional digits than the currency takes when rounding is not
    allowed (`RoundingMode.UNNECESSARY`).
    """


class CurrencyMismatch(MonetaryError, ValueError):
    """Raised when a binary operation mixes two different currencies."""


class DivisionByZero(MonetaryError, ZeroDivisionError):
    """Raised when `Money` is divided by a zero scalar or zero `Money`."""


class InvalidLocale(MonetaryError, ValueError):
    """Raised by locale validation helpers for unsupported locales."""
