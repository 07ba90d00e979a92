from __future__ import annotations

from typing import Any, List, Sequence

import dash_bootstrap_components as dbc
from dash import html

from stats_browser.io.csv_io import format_number
from stats_browser.ui.ids import IDs, row_id


def build_number_rows(numbers: Sequence[float]) -> List[Any]:
    """
    One row per number: editable value plus move/delete controls.
    Editing commits on blur or Enter (debounced input).
    """
    if not numbers:
        return [html.P("No numbers entered yet.", className="text-muted mb-0")]

    rows: List[Any] = []
    last = len(numbers) - 1
    for i, value in enumerate(numbers):
        rows.append(
            dbc.InputGroup(
                [
                    dbc.InputGroupText(f"#{i + 1}"),
                    dbc.Input(
                        id=row_id(IDs.Pattern.EDIT, i),
                        type="text",
                        value=format_number(value),
                        debounce=True,
                    ),
                    dbc.Button("↑", id=row_id(IDs.Pattern.MOVE_UP, i), color="light", disabled=i == 0),
                    dbc.Button("↓", id=row_id(IDs.Pattern.MOVE_DOWN, i), color="light", disabled=i == last),
                    dbc.Button("✕", id=row_id(IDs.Pattern.DELETE, i), color="danger", outline=True),
                ],
                size="sm",
                className="mb-1",
            )
        )
    return rows


def build_numbers_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Entered numbers"),
                        dbc.Badge("0", id=IDs.Control.NUMBERS_COUNT, color="secondary", className="ms-2"),
                        dbc.ButtonGroup(
                            [
                                dbc.Button("Sort ↑", id=IDs.Control.SORT_ASC_BTN, n_clicks=0),
                                dbc.Button("Sort ↓", id=IDs.Control.SORT_DESC_BTN, n_clicks=0),
                                dbc.Button("Original order", id=IDs.Control.RESET_ORDER_BTN, n_clicks=0),
                                dbc.Button("Clear all", id=IDs.Control.CLEAR_BTN, color="danger", n_clicks=0),
                            ],
                            size="sm",
                            className="ms-auto",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                html.Div(
                    id=IDs.Control.NUMBERS_LIST,
                    children=build_number_rows([]),
                    style={"maxHeight": "320px", "overflowY": "auto"},
                )
            ),
        ],
        className="mb-3",
    )
