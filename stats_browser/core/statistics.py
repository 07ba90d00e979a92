from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)

MIN_SAMPLE_SIZE = 2
INSUFFICIENT_MESSAGE = "Please enter at least two numbers"


@dataclass(frozen=True)
class StatsSummary:
    """
    Descriptive statistics for one snapshot of the sample.

    Always built in one go by {@link summarize()} so a summary never mixes
    values from two different samples.
    """

    mean: float
    median: float
    mode: float
    range: float
    standard_deviation: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StatsSummary:
        return cls(
            mean=float(data["mean"]),
            median=float(data["median"]),
            mode=float(data["mode"]),
            range=float(data["range"]),
            standard_deviation=float(data["standard_deviation"]),
        )


@dataclass(frozen=True)
class Insufficient:
    """
    Returned instead of a summary when the sample is too small.
    The caller decides how to surface 'message' to the user.
    """

    count: int
    message: str = INSUFFICIENT_MESSAGE


SummaryResult = Union[StatsSummary, Insufficient]


def mean(sample: Sequence[float]) -> float:
    values = np.asarray(sample, dtype=float)
    # summing equal floats can drift by an ulp (0.1 * 3 / 3 != 0.1)
    if values.min() == values.max():
        return float(values[0])
    return float(np.clip(np.mean(values), values.min(), values.max()))


def median(sample: Sequence[float]) -> float:
    ordered = np.sort(np.asarray(sample, dtype=float), kind="stable")
    mid = len(ordered) // 2
    if len(ordered) % 2 != 0:
        return float(ordered[mid])
    return float((ordered[mid - 1] + ordered[mid]) / 2)


def mode(sample: Sequence[float]) -> float:
    """
    Most frequent value. Ties go to the first value that reached the highest
    count while scanning the sample in its original order.
    """
    counts: Dict[float, int] = {}
    best_count = 0
    best = sample[0]
    for value in sample:
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > best_count:
            best_count = counts[value]
            best = value
    return float(best)


def value_range(sample: Sequence[float]) -> float:
    ordered = np.sort(np.asarray(sample, dtype=float), kind="stable")
    return float(ordered[-1] - ordered[0])


def sample_std(sample: Sequence[float]) -> float:
    """Sample standard deviation (n - 1 denominator). Exactly 0 when all values are equal."""
    values = np.asarray(sample, dtype=float)
    if values.min() == values.max():
        return 0.0
    return float(np.std(values, ddof=1))


def summarize(sample: Sequence[float]) -> SummaryResult:
    """
    Compute mean, median, mode, range and sample standard deviation.

    :param sample: the numbers in their current order; never modified
    :return: a {@link StatsSummary}, or {@link Insufficient} for fewer than two values
    """
    n = len(sample)
    if n < MIN_SAMPLE_SIZE:
        logger.debug("summarize skipped: only %d value(s)", n)
        return Insufficient(count=n)

    return StatsSummary(
        mean=mean(sample),
        median=median(sample),
        mode=mode(sample),
        range=value_range(sample),
        standard_deviation=sample_std(sample),
    )
