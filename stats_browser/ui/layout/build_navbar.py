from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from stats_browser.config import AppSettings
from stats_browser.core.state import SessionState, THEME_DARK
from stats_browser.ui.ids import IDs


def build_navbar(settings: AppSettings, initial: SessionState) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(settings.ui_title, className="mb-0"),
                        html.Small(settings.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                dbc.Switch(
                    id=IDs.Control.THEME_SWITCH,
                    label="Dark charts",
                    value=initial.theme == THEME_DARK,
                    className="ms-auto",
                ),
            ],
        ),
        className="mb-3 border-bottom",
    )
