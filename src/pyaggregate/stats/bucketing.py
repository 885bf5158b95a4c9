"""
Histogram bucketing strategies.

A Bucketing maps a sample either to a bucket index or to an outlier
side. It never stores samples or counts; the owning Aggregate does.

Class hierarchy:
  Bucketing -> LogarithmicBucketing
  Bucketing -> LinearBucketing
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from enum import Enum, auto

from pyaggregate.errors import BucketLookupError, ConfigurationError, SampleDomainError

# Number of buckets in the binary logarithmic histogram (2**0 .. 2**127)
LOG_BUCKETS = 128


class HistogramMode(Enum):
    """Bucketing strategy, fixed when the accumulator is created."""

    LOGARITHMIC = auto()
    LINEAR = auto()


class Outlier(Enum):
    """Side of the histogram domain a rejected sample fell on."""

    LOW = auto()
    HIGH = auto()


class Bucketing(ABC):
    """Base class for bucketing strategies over the closed domain [low, high]."""

    mode: HistogramMode

    def __init__(self, low: float, high: float) -> None:
        self._low = low
        self._high = high

    @property
    def low(self) -> float:
        """Smallest in-range value."""
        return self._low

    @property
    def high(self) -> float:
        """Largest in-range value."""
        return self._high

    @property
    @abstractmethod
    def bucket_count(self) -> int:
        """Number of buckets."""

    @abstractmethod
    def bucket_value(self, index: int) -> float:
        """Value (lower edge) represented by bucket ``index``."""

    @abstractmethod
    def index_of(self, value: float) -> int:
        """Bucket index for an in-range value."""

    def classify(self, value: float) -> int | Outlier:
        """
        Place a sample.

        Returns the bucket index, or the Outlier side when the value is
        outside [low, high]. Both ends of the domain are in range.
        """
        if value < self._low:
            return Outlier.LOW
        if value > self._high:
            return Outlier.HIGH
        return self.index_of(value)


class LogarithmicBucketing(Bucketing):
    """
    Binary logarithmic buckets.

    Bucket i holds samples in [2**i, 2**(i+1)); the domain is
    [1, 2**(LOG_BUCKETS - 1)].
    """

    mode = HistogramMode.LOGARITHMIC

    def __init__(self) -> None:
        super().__init__(1, 2 ** (LOG_BUCKETS - 1))

    @property
    def bucket_count(self) -> int:
        return LOG_BUCKETS

    def bucket_value(self, index: int) -> int:
        return 2**index

    def index_of(self, value: float) -> int:
        """
        floor(log2(value)), computed without float log rounding.

        Raises:
            SampleDomainError: value is not positive.
        """
        if not value > 0:
            raise SampleDomainError(f"log bucket undefined for non-positive sample {value!r}")
        if isinstance(value, numbers.Integral):
            index = int(value).bit_length() - 1
        else:
            # frexp gives value = m * 2**e with 0.5 <= m < 1
            index = math.frexp(value)[1] - 1
        if not 0 <= index < LOG_BUCKETS:
            raise BucketLookupError(f"no log bucket for {value!r} (index {index})")
        return index


class LinearBucketing(Bucketing):
    """
    Fixed-width buckets.

    Bucket i covers [low + i*width, low + (i+1)*width). The last bucket
    also takes the top of the domain up to and including ``high``.
    """

    mode = HistogramMode.LINEAR

    def __init__(self, low: float, high: float, width: float) -> None:
        """
        Args:
            low: Lower edge of the first bucket
            high: Upper end of the domain
            width: Width of every bucket

        Raises:
            ConfigurationError: the bounds do not describe at least one bucket.
        """
        if any(isinstance(x, float) and not math.isfinite(x) for x in (low, high, width)):
            raise ConfigurationError("Histogram bounds and width must be finite")
        if high <= low:
            raise ConfigurationError("High bucket must be > Low bucket")
        if width <= 0:
            raise ConfigurationError("Histogram width must be > 0")
        if high - low < width:
            raise ConfigurationError("Histogram width must be <= histogram range")
        super().__init__(low, high)
        self._width = width
        self._bucket_count = math.floor((high - low) / width)

    @property
    def width(self) -> float:
        """Bucket width."""
        return self._width

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    def bucket_value(self, index: int) -> float:
        return self._low + index * self._width

    def index_of(self, value: float) -> int:
        """
        Closed-form bucket lookup.

        Raises:
            BucketLookupError: the computed index falls outside the buckets.
        """
        last = self._bucket_count - 1
        index = math.floor((value - self._low) / self._width)
        if index > last and value <= self._high:
            index = last
        # Division rounding can land one bucket off; re-align on the edges
        # so that a sample on a boundary belongs to the upper bucket.
        if 0 < index <= last and value < self.bucket_value(index):
            index -= 1
        elif 0 <= index < last and value >= self.bucket_value(index + 1):
            index += 1
        if not 0 <= index <= last:
            raise BucketLookupError(f"no linear bucket for {value!r} (index {index})")
        return index
