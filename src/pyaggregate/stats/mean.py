"""
Running mean statistics class.

Tracks count, sum, minimum and maximum of a sample stream without
keeping the samples themselves.
"""

from __future__ import annotations

from pyaggregate.errors import NoSamplesError


class Mean:
    """
    Running count, sum, min, max and mean.

    Min and max are undefined (None) until the first sample arrives;
    the first sample sets both.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Forget every sample seen so far."""
        self._max: float | None = None
        self._min: float | None = None
        self._sum: float = 0.0
        self._number: int = 0

    def set_value(self, value: float) -> None:
        """Add a sample value."""
        if self._number == 0:
            self._min = value
            self._max = value
        else:
            if value > self._max:
                self._max = value
            if value < self._min:
                self._min = value
        self._sum += value
        self._number += 1

    def __iadd__(self, value: float) -> Mean:
        """Operator += equivalent."""
        self.set_value(value)
        return self

    @property
    def number_of_samples(self) -> int:
        """Number of samples collected."""
        return self._number

    @property
    def count(self) -> int:
        """Alias for number_of_samples."""
        return self._number

    @property
    def min(self) -> float | None:
        """Minimum value seen, or None before the first sample."""
        return self._min

    @property
    def max(self) -> float | None:
        """Maximum value seen, or None before the first sample."""
        return self._max

    @property
    def sum(self) -> float:
        """Sum of all values."""
        return self._sum

    @property
    def mean(self) -> float:
        """
        Current mean value.

        Raises:
            NoSamplesError: no sample has been recorded yet.
        """
        if self._number == 0:
            raise NoSamplesError("mean of an empty sample set is undefined")
        return self._sum / self._number

    def __str__(self) -> str:
        lines = [
            f"Number of samples : {self.number_of_samples}",
            f"Minimum           : {_or_na(self._min)}",
            f"Maximum           : {_or_na(self._max)}",
            f"Sum               : {self.sum}",
            f"Mean              : {self.mean if self._number else 'n/a'}",
        ]
        return "\n".join(lines)


def _or_na(value: float | None) -> str:
    return "n/a" if value is None else str(value)
