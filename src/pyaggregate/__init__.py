"""
pyaggregate - streaming statistics with a bounded-memory histogram.

Tracks count, sum, min, max, mean and a logarithmic or linear histogram
of a sample stream without retaining the samples.
"""

from pyaggregate.errors import (
    AggregateError,
    BucketLookupError,
    ConfigurationError,
    NoSamplesError,
    SampleDomainError,
)
from pyaggregate.stats import (
    Aggregate,
    Bucket,
    HistogramMode,
    Mean,
    Variance,
)

__version__ = "0.1.0"
__all__ = [
    # Accumulators
    "Aggregate",
    "Mean",
    "Variance",
    # Histogram
    "Bucket",
    "HistogramMode",
    # Errors
    "AggregateError",
    "BucketLookupError",
    "ConfigurationError",
    "NoSamplesError",
    "SampleDomainError",
]
