from __future__ import annotations

"""Goodness-of-fit helpers used by the evaluation harness and the test suite."""

import time
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Sequence, Tuple

from seedrng.errors import InvalidArgumentError
from seedrng.rng_engine import RngEngine

# Chi-square critical value for 9 degrees of freedom at alpha = 0.05.
CHI_SQUARE_CRITICAL_9DF_05 = 16.919
MEAN_TOLERANCE = 0.01
VARIANCE_TOLERANCE = 0.01


def bucket_counts(values: Sequence[float], buckets: int = 10) -> List[int]:
    """Histogram ``values`` from [0, 1) into ``buckets`` equal-width bins."""
    if buckets <= 0:
        raise InvalidArgumentError("Bucket count must be positive")
    counts = [0] * buckets
    for value in values:
        # Clamp so a value rounded up to 1.0 lands in the top bucket.
        counts[min(int(value * buckets), buckets - 1)] += 1
    return counts


def chi_square_uniformity(values: Sequence[float], buckets: int = 10) -> float:
    """Pearson chi-square statistic of ``values`` against a flat distribution."""
    if buckets <= 0:
        raise InvalidArgumentError("Bucket count must be positive")
    if not values:
        raise InvalidArgumentError("Need at least one value")
    expected = len(values) / buckets
    return sum((observed - expected) ** 2 / expected for observed in bucket_counts(values, buckets))


def sample_moments(values: Sequence[float]) -> Tuple[float, float]:
    """Return ``(mean, population variance)``."""
    if not values:
        raise InvalidArgumentError("Need at least one value")
    n = len(values)
    mean = sum(values) / n
    variance = sum((v - mean) ** 2 for v in values) / n
    return mean, variance


@dataclass
class UniformityReport:
    engine: str
    draws: int
    buckets: int
    chiSquare: float
    mean: float
    variance: float
    minValue: float
    maxValue: float
    runtimeMs: float
    bucketCounts: List[int] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Whether the sample clears the chi-square and moment checks."""
        # Only the 10-bucket critical value is tabulated.
        chi_ok = self.buckets != 10 or self.chiSquare < CHI_SQUARE_CRITICAL_9DF_05
        return (
            chi_ok
            and abs(self.mean - 0.5) <= MEAN_TOLERANCE
            and abs(self.variance - 1.0 / 12.0) <= VARIANCE_TOLERANCE
            and 0.0 <= self.minValue
            and self.maxValue < 1.0
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["passed"] = self.passed
        return data


def evaluate_uniformity(engine: RngEngine, draws: int = 100_000, buckets: int = 10) -> UniformityReport:
    """Draw ``draws`` values from ``engine`` and summarise how flat they are."""
    if draws <= 0:
        raise InvalidArgumentError("Draw count must be positive")
    start = time.perf_counter()
    values = [engine.next() for _ in range(draws)]
    elapsed = (time.perf_counter() - start) * 1000.0
    mean, variance = sample_moments(values)
    return UniformityReport(
        engine=engine.variant,
        draws=draws,
        buckets=buckets,
        chiSquare=chi_square_uniformity(values, buckets),
        mean=mean,
        variance=variance,
        minValue=min(values),
        maxValue=max(values),
        runtimeMs=elapsed,
        bucketCounts=bucket_counts(values, buckets),
    )
