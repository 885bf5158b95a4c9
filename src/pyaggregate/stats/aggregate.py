"""
Aggregate statistics with a bounded histogram.

Class hierarchy:
  Aggregate -> Variance -> Mean

The histogram strategy is a Bucketing chosen once at construction.
"""

from __future__ import annotations

import math
from typing import Callable, Iterator

from pyaggregate.errors import ConfigurationError, SampleDomainError
from pyaggregate.stats.bucketing import (
    Bucketing,
    HistogramMode,
    LinearBucketing,
    LogarithmicBucketing,
    Outlier,
)
from pyaggregate.stats.render import DEFAULT_FILL, DEFAULT_WIDTH, Bucket, render_histogram
from pyaggregate.stats.variance import Variance


class Aggregate(Variance):
    """
    Running statistics plus a fixed-size histogram of the samples.

    With no arguments the histogram is binary logarithmic (128 buckets,
    domain [1, 2**127]). Giving ``low``, ``high`` and ``width`` selects
    fixed-width linear buckets instead. Samples outside the histogram
    domain still count towards the statistics and are tallied as low
    or high outliers.

    Not safe for concurrent ``record`` calls; serialize them externally.
    """

    def __init__(
        self,
        low: float | None = None,
        high: float | None = None,
        width: float | None = None,
        *,
        bucketing: Bucketing | None = None,
    ) -> None:
        """
        Args:
            low: Lower edge of the first linear bucket
            high: Upper end of the linear domain
            width: Linear bucket width
            bucketing: Ready-made bucketing strategy, instead of low/high/width

        Raises:
            ConfigurationError: only some of low/high/width are given, they
                are combined with ``bucketing``, or they do not describe a
                valid linear histogram.
        """
        # Bucketing must exist before super().__init__(), which calls reset()
        given = [arg is not None for arg in (low, high, width)]
        if bucketing is not None:
            if any(given):
                raise ConfigurationError("bucketing cannot be combined with low, high and width")
            self._bucketing: Bucketing = bucketing
        elif all(given):
            self._bucketing = LinearBucketing(low, high, width)
        elif any(given):
            raise ConfigurationError("low, high and width must be given together")
        else:
            self._bucketing = LogarithmicBucketing()
        super().__init__()

    def reset(self) -> None:
        """Clear statistics, buckets and outlier counts; keep the configuration."""
        super().reset()
        self._buckets: list[int] = [0] * self._bucketing.bucket_count
        self._outliers_low: int = 0
        self._outliers_high: int = 0

    def set_value(self, value: float) -> None:
        """
        Include a sample.

        The sample is placed before any counter changes, so a rejected
        sample leaves the aggregate untouched.

        Raises:
            SampleDomainError: value is NaN, or not positive in log mode.
            BucketLookupError: an in-range value matched no bucket.
        """
        if isinstance(value, float) and math.isnan(value):
            raise SampleDomainError("NaN cannot be recorded")

        slot = self._bucketing.classify(value)

        super().set_value(value)
        if slot is Outlier.LOW:
            self._outliers_low += 1
        elif slot is Outlier.HIGH:
            self._outliers_high += 1
        else:
            self._buckets[slot] += 1

    def record(self, value: float) -> None:
        """Include a sample; same as set_value."""
        self.set_value(value)

    def __iadd__(self, value: float) -> Aggregate:
        """Operator += equivalent."""
        self.set_value(value)
        return self

    @property
    def mode(self) -> HistogramMode:
        """Histogram bucketing strategy."""
        return self._bucketing.mode

    @property
    def low(self) -> float:
        """Smallest value the histogram buckets."""
        return self._bucketing.low

    @property
    def high(self) -> float:
        """Largest value the histogram buckets."""
        return self._bucketing.high

    @property
    def width(self) -> float | None:
        """Linear bucket width; None for a logarithmic histogram."""
        if isinstance(self._bucketing, LinearBucketing):
            return self._bucketing.width
        return None

    @property
    def number_of_buckets(self) -> int:
        return len(self._buckets)

    @property
    def buckets(self) -> tuple[int, ...]:
        """Snapshot of the bucket counts, lowest bucket first."""
        return tuple(self._buckets)

    @property
    def outliers_low(self) -> int:
        """Samples below the lowest bucket."""
        return self._outliers_low

    @property
    def outliers_high(self) -> int:
        """Samples above the highest bucket."""
        return self._outliers_high

    def each(self) -> Iterator[Bucket]:
        """Iterate every bucket, empty ones included, in ascending order."""
        for index, count in enumerate(self._buckets):
            yield Bucket(self._bucketing.bucket_value(index), count)

    def each_nonzero(self) -> Iterator[Bucket]:
        """Iterate only the buckets holding samples, in ascending order."""
        for bucket in self.each():
            if bucket.count:
                yield bucket

    def __iter__(self) -> Iterator[Bucket]:
        return self.each()

    def for_each(self, fn: Callable[[float, int], object]) -> None:
        """Call ``fn(value, count)`` for every bucket."""
        for value, count in self.each():
            fn(value, count)

    def for_each_nonzero(self, fn: Callable[[float, int], object]) -> None:
        """Call ``fn(value, count)`` for every non-empty bucket."""
        for value, count in self.each_nonzero():
            fn(value, count)

    def render(self, width: int | None = None, fill: str | None = None) -> str:
        """
        ASCII bar chart of the non-empty buckets.

        Args:
            width: Line width in columns (default 80)
            fill: Bar character (default "@")
        """
        return render_histogram(
            list(self.each()),
            width=DEFAULT_WIDTH if width is None else width,
            fill=DEFAULT_FILL if fill is None else fill,
        )

    def __str__(self) -> str:
        """Outlier counts and statistics, followed by the histogram."""
        lines = [
            f"Histogram mode    : {self.mode.name}",
            f"Outliers low      : {self._outliers_low}",
            f"Outliers high     : {self._outliers_high}",
            super().__str__(),
            self.render(),
        ]
        return "\n".join(lines)
