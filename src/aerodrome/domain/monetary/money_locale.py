from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from aerodrome.domain.monetary.currency import Currency
from aerodrome.domain.monetary.errors import InvalidLocale
from aerodrome.utils.numeric_tools import exact_scaleb

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Locale:
    """Language and region pair used for display formatting.

    A `Locale` is only a name; it is not validated when created. Use
    `check_locale` or `is_valid_locale` to verify it is supported.
    """

    language: str
    country: str = ""

    def __post_init__(self) -> None:
        # Normalize casing: "EN", "us" -> "en", "US"
        object.__setattr__(self, "language", self.language.strip().lower())
        object.__setattr__(self, "country", self.country.strip().upper())

    @classmethod
    def parse(cls, value: str | Locale) -> Locale:
        """Parse a locale string like "en_US" or "en-US".

        Raises:
            InvalidLocale: If $value is empty or has more than two parts.
        """
        if isinstance(value, Locale):
            return value

        if not isinstance(value, str):
            raise TypeError(f"$value must be a string or Locale, but provided value is: {value}")

        parts = value.strip().replace("-", "_").split("_")

        # Raise: locale must have a language and at most a region
        if not parts[0] or len(parts) > 2:
            raise InvalidLocale(f"Cannot parse locale from $value = '{value}'; expected format 'language_COUNTRY'")

        result = cls(parts[0], parts[1] if len(parts) == 2 else "")
        return result

    def __str__(self) -> str:
        if not self.country:
            return self.language
        return f"{self.language}_{self.country}"


@dataclass(frozen=True)
class NumberConventions:
    """Formatting data of one locale.

    Patterns use `{amount}` and `{symbol}` placeholders; the sign is always
    written in front of the whole formatted value.
    """

    decimal_separator: str
    group_separator: str
    currency_pattern: str
    percent_pattern: str
    currency_code: str
    minus_sign: str = "-"


DEFAULT_LOCALE = Locale("en", "US")

_CONVENTIONS: dict[Locale, NumberConventions] = {
    Locale("en", "US"): NumberConventions(".", ",", "{symbol}{amount}", "{amount}%", "USD"),
    Locale("en", "CA"): NumberConventions(".", ",", "{symbol}{amount}", "{amount}%", "CAD"),
    Locale("fr", "CA"): NumberConventions(",", " ", "{amount} {symbol}", "{amount} %", "CAD"),
    Locale("es", "MX"): NumberConventions(".", ",", "{symbol}{amount}", "{amount}%", "MXN"),
    Locale("en", "GB"): NumberConventions(".", ",", "{symbol}{amount}", "{amount}%", "GBP"),
    Locale("de", "DE"): NumberConventions(",", ".", "{amount} {symbol}", "{amount} %", "EUR"),
    Locale("fr", "FR"): NumberConventions(",", " ", "{amount} {symbol}", "{amount} %", "EUR"),
    Locale("it", "IT"): NumberConventions(",", ".", "{amount} {symbol}", "{amount}%", "EUR"),
    Locale("es", "ES"): NumberConventions(",", ".", "{amount} {symbol}", "{amount} %", "EUR"),
    Locale("de", "CH"): NumberConventions(".", "'", "{symbol} {amount}", "{amount}%", "CHF"),
    Locale("sv", "SE"): NumberConventions(",", " ", "{amount} {symbol}", "{amount} %", "SEK"),
    Locale("en", "AU"): NumberConventions(".", ",", "{symbol}{amount}", "{amount}%", "AUD"),
    Locale("ja", "JP"): NumberConventions(".", ",", "{symbol}{amount}", "{amount}%", "JPY"),
    Locale("ko", "KR"): NumberConventions(".", ",", "{symbol}{amount}", "{amount}%", "KRW"),
    Locale("zh", "CN"): NumberConventions(".", ",", "{symbol}{amount}", "{amount}%", "CNY"),
    Locale("en", "IN"): NumberConventions(".", ",", "{symbol}{amount}", "{amount}%", "INR"),
    Locale("pt", "BR"): NumberConventions(",", ".", "{symbol} {amount}", "{amount}%", "BRL"),
}


# region Validation


def valid_locales() -> list[Locale]:
    """Return every supported locale that has both a language and a country."""
    result = [locale for locale in _CONVENTIONS if locale.language and locale.country]
    return result


def valid_locale_strings() -> list[str]:
    """Return the supported locales as strings like "en_US"."""
    return [str(locale) for locale in valid_locales()]


def is_valid_locale(locale: str | Locale) -> bool:
    try:
        parsed = Locale.parse(locale)
    except InvalidLocale:
        return False
    return parsed in _CONVENTIONS


def check_locale(locale: str | Locale) -> Locale:
    """Return the parsed $locale if it is supported.

    Raises:
        InvalidLocale: If $locale cannot be parsed or is not supported.
    """
    parsed = Locale.parse(locale)

    # Raise: locale has no formatting conventions
    if parsed not in _CONVENTIONS:
        raise InvalidLocale(f"Locale '{parsed}' is not supported. Supported locales: {valid_locale_strings()}")

    return parsed


# endregion

# region Lookup


def conventions_for(locale: str | Locale) -> NumberConventions:
    """Return formatting conventions for $locale.

    Falls back to the first supported locale with the same language, then to
    the conventions of `DEFAULT_LOCALE`.
    """
    parsed = Locale.parse(locale)

    result = _CONVENTIONS.get(parsed)
    if result is not None:
        return result

    for candidate, conventions in _CONVENTIONS.items():
        if candidate.language == parsed.language:
            logger.debug(f"No conventions for locale '{parsed}', using '{candidate}' instead")
            return conventions

    logger.debug(f"No conventions for locale '{parsed}', using default locale '{DEFAULT_LOCALE}'")
    return _CONVENTIONS[DEFAULT_LOCALE]


def currency_for_locale(locale: str | Locale) -> Currency:
    """Return the currency used in $locale's region.

    Raises:
        InvalidLocale: If $locale is not supported.
    """
    parsed = check_locale(locale)
    result = Currency.from_str(_CONVENTIONS[parsed].currency_code)
    return result


# endregion

# region Formatting


def format_currency(amount: Decimal, currency: Currency, locale: str | Locale) -> str:
    """Format $amount with $currency's symbol and fraction digits in $locale's style."""
    conventions = conventions_for(locale)
    digits = _group_digits(amount.copy_abs(), currency.precision, conventions)
    result = conventions.currency_pattern.format(amount=digits, symbol=currency.symbol)
    return _signed(result, amount, conventions)


def format_percent(amount: Decimal, locale: str | Locale) -> str:
    """Format $amount as a whole percentage (0.25 -> "25%") in $locale's style."""
    conventions = conventions_for(locale)
    percent = exact_scaleb(amount, 2)
    digits = _group_digits(percent.copy_abs(), 0, conventions)
    result = conventions.percent_pattern.format(amount=digits)
    return _signed(result, percent.to_integral_value(), conventions)


def _group_digits(value: Decimal, places: int, conventions: NumberConventions) -> str:
    # Percentages and currency amounts are both displayed half-even
    text = f"{value:,.{places}f}"
    table = str.maketrans({",": conventions.group_separator, ".": conventions.decimal_separator})
    return text.translate(table)


def _signed(text: str, value: Decimal, conventions: NumberConventions) -> str:
    if value < 0:
        return f"{conventions.minus_sign}{text}"
    return text


# endregion
