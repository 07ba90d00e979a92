from .bar_view import BarView
from .line_view import LineView
from .scatter_view import ScatterView
from .histogram_view import HistogramView

__all__ = ["BarView", "LineView", "ScatterView", "HistogramView"]
