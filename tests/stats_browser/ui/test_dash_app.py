from __future__ import annotations

import plotly.graph_objs as go
from dash import Dash, no_update

from stats_browser.config import AppSettings
from stats_browser.core import state as st
from stats_browser.core.state import SessionState
from stats_browser.ui.callbacks.callbacks_render import render_state_figure
from stats_browser.ui.callbacks.callbacks_state import CALCULATE_SHORTCUT_JS
from stats_browser.ui.callbacks.callbacks_sync import pending_control_updates
from stats_browser.ui.config import AppConfig
from stats_browser.ui.dash_app import build_view_registry, create_dash_app
from stats_browser.ui.helpers import control_values
from stats_browser.ui.ids import IDs
from stats_browser.ui.layout.build_numbers_panel import build_number_rows


def _make_ctx() -> AppConfig:
    return AppConfig(registry=build_view_registry())


def test_build_view_registry_has_all_charts():
    ids = [c.id for c in build_view_registry().all_classes()]
    assert ids == ["bar", "line", "scatter", "histogram"]


def test_create_dash_app():
    app = create_dash_app(AppSettings(ui_title="My Stats", default_zoom=50))

    assert isinstance(app, Dash)
    assert app.title == "My Stats"
    assert app.layout is not None
    assert len(app.callback_map) > 0


def test_render_state_figure_uses_active_view():
    state = st.set_view(st.import_numbers(SessionState(), [1, 2, 3, 4]), "histogram")

    fig = render_state_figure(_make_ctx(), state.to_dict())

    assert isinstance(fig, go.Figure)
    assert fig.data[0].type == "bar"
    assert list(fig.data[0].y) == [2, 2]


def test_render_state_figure_unknown_view():
    state = st.set_view(SessionState(), "pie")

    fig = render_state_figure(_make_ctx(), state.to_dict())

    assert len(fig.data) == 0
    assert "Unknown chart type" in fig.layout.annotations[0].text


def test_render_state_figure_invalid_state():
    fig = render_state_figure(_make_ctx(), {"numbers": ["abc"]})

    assert "invalid session state" in fig.layout.annotations[0].text


def test_render_state_figure_without_registry():
    fig = render_state_figure(AppConfig(), None)

    assert "registry" in fig.layout.annotations[0].text


def test_build_number_rows():
    assert len(build_number_rows([])) == 1
    assert len(build_number_rows([1.5, 2, 3])) == 3


def test_create_dash_app_restores_controls_and_binds_calculate_shortcut():
    app = create_dash_app()
    outputs = " ".join(app.callback_map)

    assert f"{IDs.Store.CONTROLS_SYNCED}.data" in outputs
    assert f"{IDs.Control.VIEW_TABS}.active_tab" in outputs
    assert f"{IDs.Control.THEME_SWITCH}.value" in outputs
    assert f"{IDs.Control.Y_TICK_COUNT}.value" in outputs
    assert f"{IDs.Store.SHORTCUT_BOUND}.data" in outputs


def test_calculate_shortcut_targets_calculate_button():
    assert IDs.Control.CALCULATE_BTN in CALCULATE_SHORTCUT_JS
    assert "shiftKey" in CALCULATE_SHORTCUT_JS
    assert "ctrlKey" in CALCULATE_SHORTCUT_JS


def test_pending_control_updates_for_reloaded_session():
    stored = st.set_view(st.set_zoom(st.set_theme(SessionState(), dark=True), 30), "histogram")
    shown = control_values(SessionState())

    updates = pending_control_updates(stored, shown)

    assert updates[:3] == ["histogram", 30, True]
    assert all(u is no_update for u in updates[3:])


def test_pending_control_updates_when_controls_match():
    stored = st.set_axis_config(SessionState(), "x", name="Trial")

    updates = pending_control_updates(stored, control_values(stored))

    assert all(u is no_update for u in updates)
