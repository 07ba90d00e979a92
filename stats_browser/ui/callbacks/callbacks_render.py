from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from stats_browser.core.state import SessionState
from stats_browser.ui.ids import IDs
from stats_browser.ui.layout.build_numbers_panel import build_number_rows
from stats_browser.ui.layout.build_stats_panel import build_summary_table

if TYPE_CHECKING:
    from stats_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this chart.", details)


def render_state_figure(ctx: AppConfig, state_data: dict[str, Any] | None) -> go.Figure:
    """
    SessionState (as stored) -> figure for the active view.
    Never raises: failures are logged and rendered as an error figure.
    """
    try:
        state = SessionState.from_dict(state_data)
    except (TypeError, ValueError, KeyError):
        logger.exception("Invalid session state in main graph callback: %r", state_data)
        return _error_figure("Internal error: invalid session state.")

    registry = ctx.registry
    if registry is None:
        return _error_figure("View registry is not available.")

    try:
        view = registry.create(state.active_view)
    except KeyError:
        return _error_figure(f"Unknown chart type '{state.active_view}'.")

    try:
        data = view.timed_compute(state)
        return view.render_figure(data, state)
    except Exception:
        logger.exception(
            "Error in render_state_figure",
            extra={"view_id": state.active_view, "n_values": len(state.numbers)},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Main figure: SessionState -> figure
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Input(IDs.Store.SESSION_STATE, "data"),
    )
    def update_main_graph(state_data: dict[str, Any] | None):
        return render_state_figure(ctx, state_data)

    # ---------------------------------------------------------
    # Numbers list + count badge
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.NUMBERS_LIST, "children"),
        Output(IDs.Control.NUMBERS_COUNT, "children"),
        Input(IDs.Store.SESSION_STATE, "data"),
    )
    def update_numbers_list(state_data: dict[str, Any] | None):
        state = SessionState.from_dict(state_data)
        return build_number_rows(state.numbers), str(len(state.numbers))

    # ---------------------------------------------------------
    # Statistics summary + notice
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SUMMARY_PANEL, "children"),
        Output(IDs.Control.NOTICE, "children"),
        Output(IDs.Control.NOTICE, "is_open"),
        Input(IDs.Store.SESSION_STATE, "data"),
    )
    def update_summary(state_data: dict[str, Any] | None):
        state = SessionState.from_dict(state_data)
        return build_summary_table(state.summary), state.notice, state.notice is not None
