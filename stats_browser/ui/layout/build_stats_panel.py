from __future__ import annotations

from typing import Optional

import dash_bootstrap_components as dbc
from dash import html

from stats_browser.core.statistics import StatsSummary
from stats_browser.ui.helpers import summary_rows
from stats_browser.ui.ids import IDs


def build_summary_table(summary: Optional[StatsSummary]):
    if summary is None:
        return html.P(
            "Press Calculate to compute statistics.",
            className="text-muted mb-0",
        )

    return dbc.Table(
        html.Tbody(
            [
                html.Tr([html.Th(label), html.Td(value, className="text-end font-monospace")])
                for label, value in summary_rows(summary)
            ]
        ),
        bordered=False,
        size="sm",
        className="mb-0",
    )


def build_stats_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Statistics"),
                        dbc.Button(
                            "Calculate",
                            id=IDs.Control.CALCULATE_BTN,
                            color="primary",
                            size="sm",
                            n_clicks=0,
                            className="ms-auto",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dbc.Alert(
                        id=IDs.Control.NOTICE,
                        color="warning",
                        is_open=False,
                        className="py-2",
                    ),
                    html.Div(id=IDs.Control.SUMMARY_PANEL, children=build_summary_table(None)),
                ]
            ),
        ],
        className="mb-3",
    )
