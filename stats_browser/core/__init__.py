"""
Core domain layer: statistics engine, histogram binning, chart projection,
session state, view base class and the view registry
"""

from .statistics import StatsSummary, Insufficient, summarize
from .histogram import HistogramBin, bin_sample
from .projection import ChartPoint, to_points, y_domain
from .state import SessionState, AxisConfig
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = [
    "StatsSummary",
    "Insufficient",
    "summarize",
    "HistogramBin",
    "bin_sample",
    "ChartPoint",
    "to_points",
    "y_domain",
    "SessionState",
    "AxisConfig",
    "BaseView",
    "ViewRegistry",
]
