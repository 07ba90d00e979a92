from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import ALL, Input, Output, State, exceptions, no_update

from stats_browser.core import state as st
from stats_browser.core.state import SessionState
from stats_browser.io.csv_io import parse_number
from stats_browser.ui.helpers import apply_list_action, apply_row_action, axis_changes, step_zoom
from stats_browser.ui.ids import IDs

if TYPE_CHECKING:
    from stats_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

# Shift+Enter or Ctrl+Enter in the entry field presses Calculate instead of
# adding the number. Bound on window in the capture phase so the input's own
# Enter handling (n_submit) never sees the modified key.
CALCULATE_SHORTCUT_JS = """
function(inputId) {
    if (window.statsBrowserShortcutBound) {
        return window.dash_clientside.no_update;
    }
    const handler = function(event) {
        if (event.key !== "Enter" || !(event.shiftKey || event.ctrlKey)) {
            return;
        }
        if (!event.target || event.target.id !== inputId) {
            return;
        }
        event.preventDefault();
        event.stopPropagation();
        if (event.type === "keydown") {
            const button = document.getElementById("__CALCULATE_BTN__");
            if (button) {
                button.click();
            }
        }
    };
    ["keydown", "keypress", "keyup"].forEach(function(type) {
        window.addEventListener(type, handler, true);
    });
    window.statsBrowserShortcutBound = true;
    return true;
}
""".replace("__CALCULATE_BTN__", IDs.Control.CALCULATE_BTN)


def register_state_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    c = IDs.Control

    # ---------------------------------------------------------
    # 1. Typed entry: Add button or Enter in the input
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SESSION_STATE, "data", allow_duplicate=True),
        Output(c.NUMBER_INPUT, "value"),
        Output(c.STATUS_BAR, "children", allow_duplicate=True),
        Input(c.ADD_BTN, "n_clicks"),
        Input(c.NUMBER_INPUT, "n_submit"),
        State(c.NUMBER_INPUT, "value"),
        State(IDs.Store.SESSION_STATE, "data"),
        prevent_initial_call=True,
    )
    def add_typed_number(_n_clicks, _n_submit, text: Optional[str], state_data: dict[str, Any] | None):
        value = parse_number(text)
        if value is None:
            if text is None or not str(text).strip():
                raise exceptions.PreventUpdate
            return no_update, no_update, f"'{text}' is not a valid number."

        state = st.add_number(SessionState.from_dict(state_data), value)
        return state.to_dict(), "", ""

    app.clientside_callback(
        CALCULATE_SHORTCUT_JS,
        Output(IDs.Store.SHORTCUT_BOUND, "data"),
        Input(c.NUMBER_INPUT, "id"),
    )

    # ---------------------------------------------------------
    # 2. Whole-list buttons: sort, reset order, clear, calculate
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SESSION_STATE, "data", allow_duplicate=True),
        Input(c.SORT_ASC_BTN, "n_clicks"),
        Input(c.SORT_DESC_BTN, "n_clicks"),
        Input(c.RESET_ORDER_BTN, "n_clicks"),
        Input(c.CLEAR_BTN, "n_clicks"),
        Input(c.CALCULATE_BTN, "n_clicks"),
        State(IDs.Store.SESSION_STATE, "data"),
        prevent_initial_call=True,
    )
    def list_action(*args):
        state_data = args[-1]
        button_id = dash.ctx.triggered_id
        if button_id is None:
            raise exceptions.PreventUpdate
        return apply_list_action(SessionState.from_dict(state_data), button_id).to_dict()

    # ---------------------------------------------------------
    # 3. Per-number controls (pattern-matching ids)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SESSION_STATE, "data", allow_duplicate=True),
        Input({"type": IDs.Pattern.DELETE, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.MOVE_UP, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.MOVE_DOWN, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.EDIT, "index": ALL}, "value"),
        State(IDs.Store.SESSION_STATE, "data"),
        prevent_initial_call=True,
    )
    def row_action(_deletes, _ups, _downs, _edits, state_data):
        trigger = dash.ctx.triggered_id
        if not isinstance(trigger, dict):
            raise exceptions.PreventUpdate

        # Re-rendering the list re-fires this with fresh (unclicked) controls
        value = dash.ctx.triggered[0]["value"] if dash.ctx.triggered else None
        if value is None:
            raise exceptions.PreventUpdate

        kind = trigger["type"]
        new_state = apply_row_action(
            SessionState.from_dict(state_data),
            kind,
            int(trigger["index"]),
            value if kind == IDs.Pattern.EDIT else None,
        )
        if new_state is None:
            raise exceptions.PreventUpdate
        return new_state.to_dict()

    # ---------------------------------------------------------
    # 4. Display settings: zoom, active chart, theme
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SESSION_STATE, "data", allow_duplicate=True),
        Input(c.ZOOM_SLIDER, "value"),
        Input(c.VIEW_TABS, "active_tab"),
        Input(c.THEME_SWITCH, "value"),
        State(IDs.Store.SESSION_STATE, "data"),
        prevent_initial_call=True,
    )
    def display_settings(zoom, view_id, dark, state_data):
        state = SessionState.from_dict(state_data)
        if zoom is not None:
            state = st.set_zoom(state, zoom)
        if view_id:
            state = st.set_view(state, view_id)
        state = st.set_theme(state, bool(dark))
        return state.to_dict()

    @app.callback(
        Output(c.ZOOM_SLIDER, "value"),
        Input(c.ZOOM_IN_BTN, "n_clicks"),
        Input(c.ZOOM_OUT_BTN, "n_clicks"),
        State(c.ZOOM_SLIDER, "value"),
        prevent_initial_call=True,
    )
    def zoom_buttons(_zoom_in, _zoom_out, current):
        direction = 1 if dash.ctx.triggered_id == c.ZOOM_IN_BTN else -1
        return step_zoom(current, ctx.settings.zoom_step, direction)

    # ---------------------------------------------------------
    # 5. Axis customisation
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SESSION_STATE, "data", allow_duplicate=True),
        Input(c.X_NAME, "value"),
        Input(c.X_NAME_ROTATION, "value"),
        Input(c.X_TICK_ROTATION, "value"),
        Input(c.X_SHOW_GRID, "value"),
        Input(c.X_TICK_COUNT, "value"),
        Input(c.Y_NAME, "value"),
        Input(c.Y_NAME_ROTATION, "value"),
        Input(c.Y_TICK_ROTATION, "value"),
        Input(c.Y_SHOW_GRID, "value"),
        Input(c.Y_TICK_COUNT, "value"),
        State(IDs.Store.SESSION_STATE, "data"),
        prevent_initial_call=True,
    )
    def axis_settings(*args):
        x_values, y_values, state_data = args[:5], args[5:10], args[10]
        state = SessionState.from_dict(state_data)
        state = st.set_axis_config(state, "x", **axis_changes(*x_values, current=state.x_axis))
        state = st.set_axis_config(state, "y", **axis_changes(*y_values, current=state.y_axis))
        return state.to_dict()
