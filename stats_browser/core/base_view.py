from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import plotly.graph_objs as go

from .state import SessionState, THEME_DARK, AxisConfig

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - used to project the sample in the current SessionState
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    @abstractmethod
    def compute_data(self, state: SessionState) -> Any:
        """
        Compute the chart data for the current SessionState
        :param state: the current {@link SessionState} - sample, zoom and axis settings
        :return: data: a dataframe ready to be plotted
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: SessionState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param state: the current {@link SessionState}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def timed_compute(self, state: SessionState) -> Any:
        """
        compute_data() wrapped with a timing log line
        """
        start = time.perf_counter()
        data = self.compute_data(state)
        logger.info(
            "compute_done",
            extra={
                "view_id": self.id,
                "n_values": len(state.numbers),
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig

    @staticmethod
    def apply_layout(fig: go.Figure, state: SessionState) -> go.Figure:
        """
        Apply theme and the user's axis customisation to a figure.
        """
        fig.update_layout(
            template="plotly_dark" if state.theme == THEME_DARK else "plotly_white",
            height=500,
            margin=dict(l=60, r=40, t=40, b=60),
            showlegend=False,
        )
        fig.update_xaxes(**_axis_kwargs(state.x_axis))
        fig.update_yaxes(**_axis_kwargs(state.y_axis))

        # Axis titles are annotations so they can be rotated freely
        fig.add_annotation(
            text=state.x_axis.name,
            textangle=state.x_axis.name_rotation,
            xref="paper",
            yref="paper",
            x=0.5,
            y=-0.12,
            showarrow=False,
            name="x-axis-title",
        )
        fig.add_annotation(
            text=state.y_axis.name,
            textangle=state.y_axis.name_rotation,
            xref="paper",
            yref="paper",
            x=-0.07,
            y=0.5,
            showarrow=False,
            name="y-axis-title",
        )
        return fig


def _axis_kwargs(axis: AxisConfig) -> dict:
    return {
        "tickangle": axis.tick_rotation,
        "showgrid": axis.show_grid,
        "nticks": axis.tick_count,
    }
