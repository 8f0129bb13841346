from __future__ import annotations

import math
from decimal import Decimal

import pytest

from aerodrome.stats.stats_accumulator import StatsAccumulator

SAMPLE = [2, 4, 4, 4, 5, 5, 7, 9]


def test_calculate_mean_variance_stdev() -> None:
    """Verify the statistics of a known sample."""
    acc = StatsAccumulator()
    acc.calculate(SAMPLE)

    assert acc.size() == 8
    assert acc.mean() == pytest.approx(5.0)
    # Sample variance: sum of squared deviations (32) / (n - 1)
    assert acc.variance() == pytest.approx(32 / 7)
    assert acc.variance() == pytest.approx(4.571428, rel=1e-6)
    assert acc.stdev() == pytest.approx(math.sqrt(32 / 7))


def test_empty_accumulator_reads_zero() -> None:
    acc = StatsAccumulator()
    assert acc.size() == 0
    assert acc.mean() == 0.0
    assert acc.variance() == 0.0
    assert acc.stdev() == 0.0


def test_single_value_has_zero_variance() -> None:
    acc = StatsAccumulator()
    acc.calculate([42.5])
    assert acc.mean() == 42.5
    assert acc.variance() == 0.0
    assert acc.size() == 1


def test_clear_resets_state() -> None:
    """Verify that clear() empties the accumulator."""
    acc = StatsAccumulator()
    acc.calculate(SAMPLE)
    acc.clear()

    assert acc.mean() == 0.0
    assert acc.variance() == 0.0
    assert acc.size() == 0

    acc.calculate([1, 3])
    assert acc.mean() == pytest.approx(2.0)
    assert acc.variance() == pytest.approx(2.0)


def test_incremental_equals_batch() -> None:
    """Verify that two calls accumulate like one call over the concatenation."""
    batch = StatsAccumulator()
    batch.calculate(SAMPLE + [10.5, -3.25, 0.0])

    incremental = StatsAccumulator()
    incremental.calculate(SAMPLE[:3])
    incremental.calculate(SAMPLE[3:] + [10.5])
    incremental.calculate([-3.25, 0.0])

    assert incremental.size() == batch.size() == 11
    assert incremental.mean() == pytest.approx(batch.mean())
    assert incremental.variance() == pytest.approx(batch.variance())


def test_update_single_values() -> None:
    acc = StatsAccumulator()
    for value in SAMPLE:
        acc.update(value)
    assert acc.mean() == pytest.approx(5.0)
    assert len(acc) == 8


def test_accepts_float_like_values() -> None:
    """Verify that Decimal and numeric strings are converted to float."""
    acc = StatsAccumulator()
    acc.calculate([Decimal("1.5"), "2.5", 3.5])
    assert acc.mean() == pytest.approx(2.5)
    assert acc.variance() == pytest.approx(1.0)


def test_large_offset_is_numerically_stable() -> None:
    """Verify that a large common offset does not destroy the variance."""
    acc = StatsAccumulator()
    acc.calculate([1e9 + 4, 1e9 + 7, 1e9 + 13, 1e9 + 16])
    assert acc.mean() == pytest.approx(1e9 + 10)
    assert acc.variance() == pytest.approx(30.0)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), "-inf"])
def test_non_finite_value_raises(value) -> None:
    acc = StatsAccumulator()
    acc.calculate([1.0])
    with pytest.raises(ValueError, match="not a finite number"):
        acc.update(value)
    assert acc.size() == 1


def test_accepts_generators() -> None:
    acc = StatsAccumulator()
    acc.calculate(x for x in SAMPLE)
    assert acc.size() == 8
    assert "size=8" in repr(acc)
