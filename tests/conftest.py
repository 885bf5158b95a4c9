"""
Pytest configuration and fixtures for pyaggregate.
"""

from typing import Callable, Iterable

import pytest
import simpy

from pyaggregate import Aggregate


@pytest.fixture
def env() -> simpy.Environment:
    """Create a fresh SimPy environment."""
    return simpy.Environment()


@pytest.fixture
def fill() -> Callable[[Aggregate, Iterable[float]], Aggregate]:
    """Record a batch of samples into an aggregate and return it."""

    def _fill(agg: Aggregate, samples: Iterable[float]) -> Aggregate:
        for sample in samples:
            agg.record(sample)
        return agg

    return _fill


@pytest.fixture
def assert_conserved() -> Callable[[Aggregate], None]:
    """Check that every recorded sample is in exactly one bucket or outlier counter."""

    def _check(agg: Aggregate) -> None:
        bucketed = sum(agg.buckets)
        total = bucketed + agg.outliers_low + agg.outliers_high
        assert total == agg.count, (
            f"buckets {bucketed} + outliers {agg.outliers_low}/{agg.outliers_high} != count {agg.count}"
        )

    return _check
