from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from .value_view import ValueView


class BarView(ValueView):
    """
    One bar per number, in list order.
    """

    id = "bar"
    label = "Bar Chart"

    def build_trace(self, data: pd.DataFrame) -> go.Bar:
        return go.Bar(x=data["index"], y=data["value"], name="value")
