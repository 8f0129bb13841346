from __future__ import annotations

import logging
import math
from typing import Iterable

from aerodrome.utils.numeric_tools import FloatLike

logger = logging.getLogger(__name__)


class StatsAccumulator:
    """Computes mean, variance and standard deviation in a single pass.

    Uses Welford's online update, so no samples are stored and the result does
    not suffer from the cancellation of the naive sum-of-squares formula.
    Successive calls to `calculate` keep accumulating; call `clear` to start
    over. Variance is the sample variance (N - 1 denominator).

    Instances are not thread-safe; one owner should feed each accumulator.
    """

    # region Init

    def __init__(self):
        self._size = 0
        self._mean = 0.0
        self._m2 = 0.0

    # endregion

    # region Updates

    def calculate(self, data: Iterable[FloatLike]) -> None:
        """Fold every value of $data into the running statistics.

        Args:
            data: Ordered numeric samples.

        Raises:
            ValueError: If a sample is NaN or infinite. Samples before it stay counted.
        """
        count_before = self._size
        for value in data:
            self.update(value)

        logger.debug(f"Accumulated {self._size - count_before} values (size={self._size}, mean={self._mean})")

    def update(self, value: FloatLike) -> None:
        """Fold a single sample into the running statistics."""
        # Performance Boundary: Convert to primitive float once at the entry point
        x = float(value)

        # Raise: a non-finite sample would poison every later result
        if not math.isfinite(x):
            raise ValueError(f"Cannot call `update` because $value ({value}) is not a finite number")

        self._size += 1
        delta = x - self._mean
        self._mean += delta / self._size
        self._m2 += delta * (x - self._mean)

    def clear(self) -> None:
        """Reset the accumulator to its empty state."""
        self._size = 0
        self._mean = 0.0
        self._m2 = 0.0
        logger.info(f"Cleared {self.__class__.__name__}")

    # endregion

    # region Readers

    def size(self) -> int:
        """Number of values seen since creation or the last `clear`."""
        return self._size

    def mean(self) -> float:
        return self._mean if self._size > 0 else 0.0

    def variance(self) -> float:
        """Sample variance; 0.0 when fewer than two values were seen."""
        if self._size < 2:
            return 0.0
        return self._m2 / (self._size - 1)

    def stdev(self) -> float:
        return math.sqrt(self.variance())

    # endregion

    # region Magic

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, mean={self.mean()}, variance={self.variance()})"

    # endregion
