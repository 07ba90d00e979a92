from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions, no_update

from stats_browser.core import state as st
from stats_browser.core.exceptions import SampleImportError
from stats_browser.core.state import SessionState
from stats_browser.io.csv_io import decode_upload, parse_csv_text, samples_to_csv
from stats_browser.ui.ids import IDs

if TYPE_CHECKING:
    from stats_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # 1. CSV import (replaces the current numbers)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SESSION_STATE, "data", allow_duplicate=True),
        Output(IDs.Control.STATUS_BAR, "children", allow_duplicate=True),
        Input(IDs.Control.UPLOAD, "contents"),
        State(IDs.Control.UPLOAD, "filename"),
        State(IDs.Store.SESSION_STATE, "data"),
        prevent_initial_call=True,
    )
    def import_csv(contents, filename, state_data):
        if not contents:
            raise exceptions.PreventUpdate

        try:
            text = decode_upload(contents)
        except SampleImportError as e:
            return no_update, f"{filename}: {e}"

        values = parse_csv_text(text)
        state = st.import_numbers(SessionState.from_dict(state_data), values)
        logger.info("csv_import", extra={"upload_name": filename, "n_values": len(values)})
        return state.to_dict(), f"Imported {len(values)} numbers from {filename}."

    # ---------------------------------------------------------
    # 2. CSV export
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD, "data"),
        Input(IDs.Control.EXPORT_BTN, "n_clicks"),
        State(IDs.Store.SESSION_STATE, "data"),
        prevent_initial_call=True,
    )
    def export_csv(_n_clicks, state_data):
        state = SessionState.from_dict(state_data)
        if not state.numbers:
            raise exceptions.PreventUpdate
        return dcc.send_string(samples_to_csv(state.numbers), ctx.settings.export_filename)
