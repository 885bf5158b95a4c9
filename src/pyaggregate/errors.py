"""Exceptions raised by pyaggregate."""


class AggregateError(Exception):
    """Base class for all pyaggregate errors."""


class ConfigurationError(AggregateError, ValueError):
    """Invalid histogram or rendering configuration."""


class SampleDomainError(AggregateError, ValueError):
    """Sample cannot be placed in the histogram (NaN, or non-positive for log buckets)."""


class BucketLookupError(AggregateError, LookupError):
    """An in-range sample matched no bucket."""


class NoSamplesError(AggregateError, ZeroDivisionError):
    """Statistic requested from an accumulator holding no samples."""
