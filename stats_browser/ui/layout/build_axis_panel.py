from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from stats_browser.core.state import AxisConfig, SessionState
from stats_browser.ui.ids import IDs


def _axis_controls(
        axis: AxisConfig,
        name_id: str,
        name_rotation_id: str,
        tick_rotation_id: str,
        show_grid_id: str,
        tick_count_id: str,
) -> html.Div:
    return html.Div(
        [
            dbc.Label("Axis name", html_for=name_id),
            dbc.Input(id=name_id, value=axis.name, debounce=True, className="mb-2"),
            dbc.Label("Name rotation (degrees)", html_for=name_rotation_id),
            dbc.Input(id=name_rotation_id, type="number", value=axis.name_rotation, step=15, className="mb-2"),
            dbc.Label("Tick rotation (degrees)", html_for=tick_rotation_id),
            dbc.Input(id=tick_rotation_id, type="number", value=axis.tick_rotation, step=15, className="mb-2"),
            dbc.Label("Tick count", html_for=tick_count_id),
            dbc.Input(id=tick_count_id, type="number", value=axis.tick_count, min=2, max=20, className="mb-2"),
            dbc.Switch(id=show_grid_id, label="Show grid", value=axis.show_grid),
        ]
    )


def build_axis_panel(initial: SessionState) -> dbc.Accordion:
    c = IDs.Control
    return dbc.Accordion(
        [
            dbc.AccordionItem(
                _axis_controls(
                    initial.x_axis,
                    c.X_NAME,
                    c.X_NAME_ROTATION,
                    c.X_TICK_ROTATION,
                    c.X_SHOW_GRID,
                    c.X_TICK_COUNT,
                ),
                title="X axis",
            ),
            dbc.AccordionItem(
                _axis_controls(
                    initial.y_axis,
                    c.Y_NAME,
                    c.Y_NAME_ROTATION,
                    c.Y_TICK_ROTATION,
                    c.Y_SHOW_GRID,
                    c.Y_TICK_COUNT,
                ),
                title="Y axis",
            ),
        ],
        start_collapsed=True,
        className="mb-3",
    )
