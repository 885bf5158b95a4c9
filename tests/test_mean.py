"""
Tests for the running Mean and Variance accumulators.
"""

import math

import pytest

from pyaggregate import Mean, NoSamplesError, Variance


class TestMean:
    """Tests for Mean."""

    def test_empty(self) -> None:
        """A fresh accumulator has no min, max or mean."""
        mean = Mean()
        assert mean.number_of_samples == 0
        assert mean.sum == 0.0
        assert mean.min is None
        assert mean.max is None

    def test_mean_of_empty_raises(self) -> None:
        """Mean of no samples is an explicit error, not NaN."""
        with pytest.raises(NoSamplesError):
            Mean().mean

    def test_mean_of_empty_is_zero_division(self) -> None:
        """NoSamplesError can be caught as ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            Mean().mean

    def test_first_sample_sets_min_and_max(self) -> None:
        mean = Mean()
        mean += -3.5
        assert mean.min == -3.5
        assert mean.max == -3.5

    def test_running_values(self) -> None:
        """Count, sum, min, max and mean over a short stream."""
        mean = Mean()
        for v in [10, 20, 30, 40, 50]:
            mean += v

        assert mean.number_of_samples == 5
        assert mean.count == 5
        assert mean.sum == 150
        assert mean.min == 10
        assert mean.max == 50
        assert mean.mean == pytest.approx(30.0)

    def test_min_max_bound_all_samples(self) -> None:
        samples = [5.0, -2.0, 7.25, 0.0, 7.25, -2.5, 3.0]
        mean = Mean()
        for v in samples:
            mean.set_value(v)
        assert all(mean.min <= v <= mean.max for v in samples)
        assert mean.min == -2.5
        assert mean.max == 7.25

    def test_reset(self) -> None:
        mean = Mean()
        mean += 1.0
        mean.reset()
        assert mean.number_of_samples == 0
        assert mean.min is None

    def test_str(self) -> None:
        """Summary prints n/a for undefined statistics."""
        mean = Mean()
        assert "Mean              : n/a" in str(mean)
        mean += 4.0
        output = str(mean)
        assert "Number of samples : 1" in output
        assert "Mean              : 4.0" in output


class TestVariance:
    """Tests for Variance."""

    def test_population_variance(self) -> None:
        """Population moments of 2, 4, 4, 4, 5, 5, 7, 9 are variance 4, std dev 2."""
        variance = Variance()
        for v in [2, 4, 4, 4, 5, 5, 7, 9]:
            variance += v

        assert variance.mean == pytest.approx(5.0)
        assert variance.sum_of_squares == pytest.approx(232.0)
        assert variance.variance == pytest.approx(4.0)
        assert variance.std_dev == pytest.approx(2.0)

    def test_single_sample(self) -> None:
        variance = Variance()
        variance += 42.0
        assert variance.variance == 0.0
        assert variance.std_dev == 0.0

    def test_constant_stream_never_negative(self) -> None:
        """Rounding in the running sums must not produce a negative variance."""
        variance = Variance()
        for _ in range(1000):
            variance += 0.1
        assert variance.variance >= 0.0
        assert not math.isnan(variance.std_dev)

    def test_empty_raises(self) -> None:
        variance = Variance()
        with pytest.raises(NoSamplesError):
            variance.variance
        with pytest.raises(NoSamplesError):
            variance.std_dev

    def test_reset_clears_sum_of_squares(self) -> None:
        variance = Variance()
        variance += 3.0
        variance.reset()
        assert variance.sum_of_squares == 0.0

    def test_str(self) -> None:
        variance = Variance()
        assert "Standard Deviation: n/a" in str(variance)
        for v in [1.0, 3.0]:
            variance += v
        output = str(variance)
        assert "Variance          : 1.0" in output
        assert "Standard Deviation: 1.0" in output
        assert "Number of samples : 2" in output
