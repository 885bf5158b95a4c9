"""
Statistics demonstration example.

Demonstrates the accumulator classes:
- Mean: Running count, sum, min, max, mean
- Variance: Mean + population variance and standard deviation
- Aggregate (logarithmic): Response times of a SimPy M/M/1 queue
- Aggregate (linear): The same stream in fixed-width buckets
"""

from __future__ import annotations

import random

import simpy

from pyaggregate import Aggregate, ConfigurationError, Mean, Variance


def demo_mean() -> None:
    """Demonstrate Mean class."""
    print("=" * 60)
    print("MEAN CLASS")
    print("=" * 60)
    print()

    mean = Mean()

    values = [10, 20, 30, 40, 50]
    for v in values:
        mean += v

    print(f"Values: {values}")
    print(mean)
    print()


def demo_variance() -> None:
    """Demonstrate Variance class."""
    print("=" * 60)
    print("VARIANCE CLASS")
    print("=" * 60)
    print()

    variance = Variance()
    rng = random.Random(1)
    n_samples = 100

    print(f"Recording {n_samples} samples from gauss(mean=50, sigma=10)")
    print()

    for _ in range(n_samples):
        variance += rng.gauss(50.0, 10.0)

    print(f"Number of samples: {variance.number_of_samples}")
    print(f"Mean: {variance.mean:.4f}")
    print(f"Variance: {variance.variance:.4f}")
    print(f"Standard Deviation: {variance.std_dev:.4f}")
    print()


def simulate_queue(sinks: list[Aggregate], until: float = 5000.0, seed: int = 42) -> None:
    """M/M/1 queue; every job's response time goes to each sink."""
    env = simpy.Environment()
    rng = random.Random(seed)
    server = simpy.Resource(env, capacity=1)

    def job(env: simpy.Environment):
        arrival = env.now
        with server.request() as req:
            yield req
            yield env.timeout(rng.expovariate(1.0))
        for sink in sinks:
            sink.record(env.now - arrival)

    def source(env: simpy.Environment):
        while True:
            yield env.timeout(rng.expovariate(0.5))
            env.process(job(env))

    env.process(source(env))
    env.run(until=until)


class MillisecondAggregate(Aggregate):
    """Logarithmic aggregate recording seconds as whole milliseconds."""

    def set_value(self, value: float) -> None:
        super().set_value(int(value * 1000))


def demo_latency() -> None:
    """Demonstrate logarithmic and linear Aggregates on simulated response times."""
    print("=" * 60)
    print("AGGREGATE CLASS - Simulated response times")
    print("=" * 60)
    print()

    millis = MillisecondAggregate()
    linear = Aggregate(0.0, 10.0, 0.25)
    simulate_queue([millis, linear])

    print("Logarithmic histogram (milliseconds):")
    print(millis)
    print()
    print("Linear histogram (seconds, 0.25 s buckets):")
    print(f"Outliers above {linear.high}: {linear.outliers_high}")
    print(linear.render())
    print()


def demo_configuration_errors() -> None:
    """Show the construction-time checks for linear histograms."""
    print("=" * 60)
    print("AGGREGATE CLASS - Invalid configurations")
    print("=" * 60)
    print()

    for low, high, width in [(10, 5, 1), (0, 10, 20)]:
        try:
            Aggregate(low, high, width)
        except ConfigurationError as exc:
            print(f"  Aggregate({low}, {high}, {width}): {exc}")
    print()


def main() -> None:
    print()
    print("pyaggregate Statistics Classes Demonstration")
    print("=" * 60)
    print()

    demo_mean()
    demo_variance()
    demo_latency()
    demo_configuration_errors()

    print("=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
