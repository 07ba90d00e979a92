from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List

import dash
from dash import Input, Output, State, exceptions, no_update

from stats_browser.core.state import SessionState
from stats_browser.ui.helpers import CONTROL_PROPS, control_values
from stats_browser.ui.ids import IDs

if TYPE_CHECKING:
    from stats_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def pending_control_updates(state: SessionState, current: List[Any]) -> List[Any]:
    """
    Control values that differ from the state, in CONTROL_PROPS order.
    Controls already showing the right value get no_update.
    """
    return [
        no_update if shown == wanted else wanted
        for shown, wanted in zip(current, control_values(state))
    ]


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # Controls are built from a fresh state, but the session store may come
    # back from sessionStorage after a reload. Push it into the controls once
    # per page load; afterwards the controls drive the store.
    outputs = [
        Output(control_id, prop, allow_duplicate=control_id == IDs.Control.ZOOM_SLIDER)
        for control_id, prop in CONTROL_PROPS
    ]
    outputs.append(Output(IDs.Store.CONTROLS_SYNCED, "data"))

    @app.callback(
        output=outputs,
        inputs=[Input(IDs.Store.SESSION_STATE, "modified_timestamp")],
        state=[
            State(IDs.Store.SESSION_STATE, "data"),
            State(IDs.Store.CONTROLS_SYNCED, "data"),
            *[State(control_id, prop) for control_id, prop in CONTROL_PROPS],
        ],
        prevent_initial_call="initial_duplicate",
    )
    def sync_controls_from_store(timestamp, state_data, synced, *current):
        if synced or timestamp is None or timestamp < 0:
            raise exceptions.PreventUpdate

        state = SessionState.from_dict(state_data)
        updates = pending_control_updates(state, list(current))
        changed = sum(1 for u in updates if u is not no_update)
        if changed:
            logger.info(
                "Restored display controls from session",
                extra={"view_id": state.active_view, "n_controls": changed},
            )
        return [*updates, True]
