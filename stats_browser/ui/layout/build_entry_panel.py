from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from stats_browser.ui.ids import IDs


def build_entry_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Add numbers", className="fw-semibold"),
            dbc.CardBody(
                [
                    dbc.InputGroup(
                        [
                            dbc.Input(
                                id=IDs.Control.NUMBER_INPUT,
                                type="text",
                                placeholder="Enter a number and press Enter",
                                n_submit=0,
                            ),
                            dbc.Button("Add", id=IDs.Control.ADD_BTN, color="primary", n_clicks=0),
                        ],
                        className="mb-2",
                    ),
                    html.Div(
                        [
                            dcc.Upload(
                                id=IDs.Control.UPLOAD,
                                accept=".csv,text/csv,text/plain",
                                children=dbc.Button(
                                    "Import CSV",
                                    color="secondary",
                                    outline=True,
                                    size="sm",
                                ),
                            ),
                            dbc.Button(
                                "Export CSV",
                                id=IDs.Control.EXPORT_BTN,
                                color="secondary",
                                outline=True,
                                size="sm",
                                n_clicks=0,
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD),
                        ],
                        className="d-flex gap-2",
                    ),
                    html.Small(id=IDs.Control.STATUS_BAR, className="text-muted d-block mt-2"),
                ]
            ),
        ],
        className="mb-3",
    )
