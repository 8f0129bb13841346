__version__ = "0.1.0"

from aerodrome.domain.monetary.money import Money
from aerodrome.domain.monetary.currency import Currency
from aerodrome.domain.monetary.rounding import RoundingMode
from aerodrome.stats.stats_accumulator import StatsAccumulator

__all__ = ["Money", "Currency", "RoundingMode", "StatsAccumulator"]
