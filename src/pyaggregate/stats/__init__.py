"""Statistics collection classes."""

from pyaggregate.stats.mean import Mean
from pyaggregate.stats.variance import Variance
from pyaggregate.stats.bucketing import (
    LOG_BUCKETS,
    Bucketing,
    HistogramMode,
    LinearBucketing,
    LogarithmicBucketing,
    Outlier,
)
from pyaggregate.stats.render import Bucket, format_value, render_histogram
from pyaggregate.stats.aggregate import Aggregate

__all__ = [
    "Mean",
    "Variance",
    "LOG_BUCKETS",
    "Bucketing",
    "HistogramMode",
    "LinearBucketing",
    "LogarithmicBucketing",
    "Outlier",
    "Bucket",
    "format_value",
    "render_histogram",
    "Aggregate",
]
