from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from .value_view import ValueView


class LineView(ValueView):
    id = "line"
    label = "Line Chart"

    def build_trace(self, data: pd.DataFrame) -> go.Scatter:
        return go.Scatter(
            x=data["index"],
            y=data["value"],
            mode="lines+markers",
            name="value",
        )
