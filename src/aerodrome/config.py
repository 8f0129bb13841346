from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from aerodrome.domain.monetary.currency import Currency
from aerodrome.domain.monetary.money_locale import Locale
from aerodrome.domain.monetary.rounding import RoundingMode

# Importing the registry registers the predefined currencies
import aerodrome.domain.monetary.currency_registry  # noqa: F401

logger = logging.getLogger(__name__)

ENV_LOCALE = "AERODROME_LOCALE"
ENV_CURRENCY = "AERODROME_CURRENCY"
ENV_ROUNDING = "AERODROME_ROUNDING"

DEFAULT_LOCALE = "en_US"
DEFAULT_CURRENCY = "USD"
DEFAULT_ROUNDING = "HALF_UP"


@dataclass(frozen=True)
class MoneySettings:
    """Defaults used when `Money` is created without a locale, currency or rounding mode."""

    locale: Locale
    currency: Currency
    rounding: RoundingMode


def load_settings() -> MoneySettings:
    """Read settings from the environment (and an optional `.env` file).

    Variables:
        AERODROME_LOCALE: Display locale, e.g. "en_US".
        AERODROME_CURRENCY: ISO currency code, e.g. "USD".
        AERODROME_ROUNDING: Rounding mode name, e.g. "HALF_UP".

    Raises:
        ValueError: If a variable holds an unknown currency or rounding mode.
    """
    load_dotenv()

    locale = Locale.parse(os.environ.get(ENV_LOCALE, DEFAULT_LOCALE))
    currency = Currency.from_str(os.environ.get(ENV_CURRENCY, DEFAULT_CURRENCY))
    rounding = RoundingMode.from_str(os.environ.get(ENV_ROUNDING, DEFAULT_ROUNDING))

    result = MoneySettings(locale=locale, currency=currency, rounding=rounding)
    logger.debug(f"Loaded money settings: locale={locale}, currency={currency}, rounding={rounding}")
    return result


@lru_cache(maxsize=1)
def get_settings() -> MoneySettings:
    """Return cached settings; call `get_settings.cache_clear()` to reload."""
    return load_settings()
