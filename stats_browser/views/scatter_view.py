from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from .value_view import ValueView


class ScatterView(ValueView):
    id = "scatter"
    label = "Scatter Plot"

    def build_trace(self, data: pd.DataFrame) -> go.Scatter:
        return go.Scatter(
            x=data["index"],
            y=data["value"],
            mode="markers",
            name="value",
        )
