from aerodrome.stats.stats_accumulator import StatsAccumulator

__all__ = ["StatsAccumulator"]
