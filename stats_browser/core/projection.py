from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

import pandas as pd

from .histogram import HistogramBin
from .statistics import StatsSummary

AxisDomain = Tuple[float, float]

EMPTY_DOMAIN: AxisDomain = (0, 1)

# At this zoom the axis hugs the data; smaller values add headroom
FULL_ZOOM = 200


@dataclass(frozen=True)
class ChartPoint:
    index: int
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def to_points(sample: Sequence[float]) -> List[ChartPoint]:
    return [ChartPoint(index=i, value=v) for i, v in enumerate(sample)]


def _field_value(item: Any, field: str) -> float:
    if isinstance(item, Mapping):
        return item.get(field, 0)
    return getattr(item, field, 0)


def y_domain(items: Iterable[Any], field: str, zoom_percent: float) -> AxisDomain:
    """
    Y axis range for a value or frequency chart.

    :param items: ChartPoints (field "value") or HistogramBins (field "frequency");
                  plain dicts with the same keys work too
    :param field: which attribute to scale against
    :param zoom_percent: 200 fits the data exactly, lower values add headroom.
                         Must be positive; callers clamp it before getting here.
    :return: (0, max(field) * 200 / zoom_percent), or (0, 1) when there are no items
    """
    values = [_field_value(item, field) for item in items]
    if not values:
        return EMPTY_DOMAIN
    return 0, max(values) * (FULL_ZOOM / zoom_percent)


def stddev_band(summary: StatsSummary) -> AxisDomain:
    """The mean +/- one standard deviation band shaded on value charts."""
    return (
        summary.mean - summary.standard_deviation,
        summary.mean + summary.standard_deviation,
    )


def points_frame(points: Sequence[ChartPoint]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "index": [p.index for p in points],
            "value": [p.value for p in points],
        }
    )


def bins_frame(bins: Sequence[HistogramBin]) -> pd.DataFrame:
    df = pd.DataFrame(
        {
            "bin_start": [b.bin_start for b in bins],
            "bin_end": [b.bin_end for b in bins],
            "frequency": [b.frequency for b in bins],
        }
    )
    df["bin_mid"] = (df["bin_start"] + df["bin_end"]) / 2
    df["bin_width"] = df["bin_end"] - df["bin_start"]
    return df
