from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from stats_browser.core.state import SessionState
from stats_browser.ui.config import AppConfig
from stats_browser.ui.layout.build_axis_panel import build_axis_panel
from stats_browser.ui.layout.build_entry_panel import build_entry_panel
from stats_browser.ui.layout.build_navbar import build_navbar
from stats_browser.ui.layout.build_numbers_panel import build_numbers_panel
from stats_browser.ui.layout.build_plot_panel import build_plot_panel
from stats_browser.ui.layout.build_stats_panel import build_stats_panel
from stats_browser.ui.ids import IDs


def initial_state(ctx: AppConfig) -> SessionState:
    return SessionState(zoom_level=ctx.settings.default_zoom)


def build_layout(ctx: AppConfig) -> dbc.Container:
    initial = initial_state(ctx)

    return dbc.Container(
        fluid=True,
        className="stats-root",
        children=[
            build_navbar(ctx.settings, initial),

            # Session-scoped store; nothing outlives the browser tab
            dcc.Store(id=IDs.Store.SESSION_STATE, storage_type="session", data=initial.to_dict()),
            dcc.Store(id=IDs.Store.CONTROLS_SYNCED, storage_type="memory", data=False),
            dcc.Store(id=IDs.Store.SHORTCUT_BOUND, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(
                        [
                            build_entry_panel(),
                            build_numbers_panel(),
                            build_stats_panel(),
                        ],
                        md=4,
                    ),
                    dbc.Col(
                        [
                            build_plot_panel(ctx.registry, ctx.settings, initial),
                            html.H6("Customize axes", className="text-muted"),
                            build_axis_panel(initial),
                        ],
                        md=8,
                    ),
                ]
            ),
        ],
    )
