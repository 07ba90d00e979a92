from __future__ import annotations

from abc import abstractmethod

import pandas as pd
import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from stats_browser.core.base_view import BaseView
from stats_browser.core.projection import points_frame, stddev_band, to_points, y_domain
from stats_browser.core.state import SessionState

NO_DATA_MESSAGE = "No numbers yet - add some values to see the chart"


class ValueView(BaseView):
    """
    Shared behaviour for charts that plot each number against its position.

    Subclasses only pick the trace type. On top of the trace every value chart
    shows the mean as a dashed red line and mean +/- one standard deviation as
    a shaded band, once statistics have been calculated.
    """

    def compute_data(self, state: SessionState) -> pd.DataFrame:
        return points_frame(to_points(state.numbers))

    @abstractmethod
    def build_trace(self, data: pd.DataFrame) -> BaseTraceType:
        raise NotImplementedError()

    def render_figure(self, data: pd.DataFrame, state: SessionState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure(NO_DATA_MESSAGE)

        fig = go.Figure(self.build_trace(data))

        if state.summary is not None:
            low, high = stddev_band(state.summary)
            fig.add_hrect(
                y0=low,
                y1=high,
                fillcolor="yellow",
                opacity=0.2,
                line_width=0,
            )
            fig.add_hline(
                y=state.summary.mean,
                line_color="red",
                line_dash="dash",
            )

        fig.update_yaxes(range=list(y_domain(data.to_dict("records"), "value", state.zoom_level)))
        return self.apply_layout(fig, state)
