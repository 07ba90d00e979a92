from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from stats_browser.config import AppSettings
from stats_browser.core.state import SessionState, ZOOM_MAX, ZOOM_MIN
from stats_browser.core.view_registry import ViewRegistry
from stats_browser.ui.ids import IDs


def build_plot_panel(registry: ViewRegistry, settings: AppSettings, initial: SessionState) -> dbc.Card:
    tabs = [dbc.Tab(label=cls.label, tab_id=cls.id) for cls in registry.all_classes()]

    return dbc.Card(
        [
            dbc.CardHeader(
                dbc.Tabs(
                    tabs,
                    id=IDs.Control.VIEW_TABS,
                    active_tab=initial.active_view,
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    html.Div(
                        [
                            dbc.Button("−", id=IDs.Control.ZOOM_OUT_BTN, size="sm", color="light", n_clicks=0),
                            html.Div(
                                dcc.Slider(
                                    id=IDs.Control.ZOOM_SLIDER,
                                    min=ZOOM_MIN,
                                    max=ZOOM_MAX,
                                    step=settings.zoom_step,
                                    value=initial.zoom_level,
                                    marks={ZOOM_MIN: f"{ZOOM_MIN}%", 100: "100%", ZOOM_MAX: f"{ZOOM_MAX}%"},
                                    tooltip={"placement": "bottom"},
                                ),
                                className="flex-grow-1",
                            ),
                            dbc.Button("+", id=IDs.Control.ZOOM_IN_BTN, size="sm", color="light", n_clicks=0),
                        ],
                        className="d-flex align-items-center gap-2 mb-2",
                    ),
                    dcc.Loading(
                        id="main-graph-loading",
                        type="default",
                        children=dcc.Graph(
                            id=IDs.Control.MAIN_GRAPH,
                            style={"height": "520px"},
                            config={"responsive": True},
                        ),
                    ),
                ]
            ),
        ],
        className="mb-3",
    )
