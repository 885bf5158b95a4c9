"""
Variance statistics class.

Extends Mean with a running sum of squares.
"""

from __future__ import annotations

import math

from pyaggregate.errors import NoSamplesError
from pyaggregate.stats.mean import Mean


class Variance(Mean):
    """
    Running variance and standard deviation.

    Both are population moments derived from the running sums:
    ``sum_sq / n - mean ** 2``. This is computed here from the moments
    the accumulator already keeps; it is not a sample (n - 1) estimate.
    """

    def reset(self) -> None:
        """Reset all statistics."""
        super().reset()
        self._sum_sq: float = 0.0

    def set_value(self, value: float) -> None:
        """Add a sample value."""
        super().set_value(value)
        self._sum_sq += value * value

    @property
    def sum_of_squares(self) -> float:
        """Sum of the squared sample values."""
        return self._sum_sq

    @property
    def variance(self) -> float:
        """
        Population variance.

        Clamped at zero, since rounding in the running sums can drive
        the difference slightly negative for near-constant streams.

        Raises:
            NoSamplesError: no sample has been recorded yet.
        """
        if self._number == 0:
            raise NoSamplesError("variance of an empty sample set is undefined")
        mean = self._sum / self._number
        return max(0.0, self._sum_sq / self._number - mean * mean)

    @property
    def std_dev(self) -> float:
        """Population standard deviation."""
        return math.sqrt(self.variance)

    def __str__(self) -> str:
        if self._number:
            lines = [
                f"Variance          : {self.variance}",
                f"Standard Deviation: {self.std_dev}",
            ]
        else:
            lines = [
                "Variance          : n/a",
                "Standard Deviation: n/a",
            ]
        # Mean stats follow
        lines.append(super().__str__())
        return "\n".join(lines)
