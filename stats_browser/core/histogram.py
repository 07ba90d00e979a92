from __future__ import annotations

import logging
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Sequence

logger = logging.getLogger(__name__)

MAX_BINS = 20


@dataclass(frozen=True)
class HistogramBin:
    bin_start: float
    bin_end: float
    frequency: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def bin_count_for(n: int) -> int:
    """Square-root rule, capped so the histogram stays cheap to render."""
    return min(math.ceil(math.sqrt(n)), MAX_BINS)


def bin_sample(sample: Sequence[float]) -> List[HistogramBin]:
    """
    Partition the sample into contiguous, equal-width bins.

    - empty sample -> no bins
    - all values equal -> a single bin [value - 0.5, value + 0.5]
    - otherwise ceil(sqrt(n)) bins (at most MAX_BINS) spanning [min, max]

    Bins are half-open [start, end) except the last one, which also takes the
    maximum. Zero-frequency bins are kept so the x axis stays continuous.
    """
    if len(sample) == 0:
        return []

    lo = min(sample)
    hi = max(sample)

    if lo == hi:
        return [HistogramBin(bin_start=lo - 0.5, bin_end=hi + 0.5, frequency=len(sample))]

    n_bins = bin_count_for(len(sample))
    width = (hi - lo) / n_bins
    counts = [0] * n_bins

    for value in sample:
        # Floating point rounding in 'width' can push the max one bin too far
        idx = n_bins - 1 if value == hi else math.floor((value - lo) / width)
        if 0 <= idx < n_bins:
            counts[idx] += 1
        else:
            logger.debug("Dropping value %r outside bin range (index %d)", value, idx)

    return [
        HistogramBin(
            bin_start=lo + i * width,
            bin_end=lo + (i + 1) * width,
            frequency=counts[i],
        )
        for i in range(n_bins)
    ]
