from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from stats_browser.core.base_view import BaseView
from stats_browser.core.histogram import bin_sample
from stats_browser.core.projection import bins_frame, y_domain
from stats_browser.core.state import SessionState


class HistogramView(BaseView):
    """
    Frequency of the numbers across equal-width bins.

    Bars are drawn at each bin's midpoint with the bin's width so adjacent
    bins touch; hovering shows the bin range to two decimals.
    """

    id = "histogram"
    label = "Histogram"

    def compute_data(self, state: SessionState) -> pd.DataFrame:
        return bins_frame(bin_sample(state.numbers))

    def render_figure(self, data: pd.DataFrame, state: SessionState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No numbers yet - add some values to see the histogram")

        fig = go.Figure(
            go.Bar(
                x=data["bin_mid"],
                y=data["frequency"],
                width=data["bin_width"],
                customdata=data[["bin_start", "bin_end"]].to_numpy(),
                hovertemplate=(
                    "Range: %{customdata[0]:.2f} - %{customdata[1]:.2f}"
                    "<br>Frequency: %{y}<extra></extra>"
                ),
                name="frequency",
            )
        )

        fig.update_xaxes(tickformat=".2f")
        fig.update_yaxes(range=list(y_domain(data.to_dict("records"), "frequency", state.zoom_level)))
        return self.apply_layout(fig, state)
