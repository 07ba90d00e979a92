from __future__ import annotations

import pytest

from stats_browser.core import state as st
from stats_browser.core.state import DEFAULT_X_AXIS, SessionState
from stats_browser.core.statistics import summarize
from stats_browser.ui.helpers import (
    apply_list_action,
    apply_row_action,
    CONTROL_PROPS,
    axis_changes,
    control_values,
    format_stat,
    step_zoom,
    summary_rows,
)
from stats_browser.ui.ids import IDs


def _state_with(*numbers: float) -> SessionState:
    return st.import_numbers(SessionState(), numbers)


def test_format_stat_rounds_to_four_decimals():
    assert format_stat(2.138089935299395) == "2.1381"
    assert format_stat(5) == "5.0000"


def test_summary_rows():
    rows = summary_rows(summarize([2, 4, 4, 4, 5, 5, 7, 9]))

    assert rows == [
        ("Standard Deviation", "2.1381"),
        ("Mean", "5.0000"),
        ("Median", "4.5000"),
        ("Mode", "4.0000"),
        ("Range", "7.0000"),
    ]


def test_apply_list_action():
    state = _state_with(3, 1, 2)
    c = IDs.Control

    assert apply_list_action(state, c.SORT_ASC_BTN).numbers == [1, 2, 3]
    assert apply_list_action(state, c.SORT_DESC_BTN).numbers == [3, 2, 1]
    assert apply_list_action(state, c.CLEAR_BTN).numbers == []
    assert apply_list_action(state, c.CALCULATE_BTN).summary is not None

    sorted_state = apply_list_action(state, c.SORT_ASC_BTN)
    assert apply_list_action(sorted_state, c.RESET_ORDER_BTN).numbers == [3, 1, 2]

    with pytest.raises(KeyError):
        apply_list_action(state, "mystery-btn")


def test_apply_row_action_delete_and_move():
    state = _state_with(1, 2, 3)
    p = IDs.Pattern

    assert apply_row_action(state, p.DELETE, 1).numbers == [1, 3]
    assert apply_row_action(state, p.MOVE_UP, 2).numbers == [1, 3, 2]
    assert apply_row_action(state, p.MOVE_DOWN, 0).numbers == [2, 1, 3]


def test_apply_row_action_noops():
    state = _state_with(1, 2, 3)
    p = IDs.Pattern

    assert apply_row_action(state, p.MOVE_UP, 0) is None
    assert apply_row_action(state, p.MOVE_DOWN, 2) is None
    assert apply_row_action(state, p.DELETE, 7) is None
    assert apply_row_action(state, p.EDIT, 0, "not a number") is None
    assert apply_row_action(state, p.EDIT, 0, "1") is None


def test_apply_row_action_edit():
    state = _state_with(1, 2, 3)

    edited = apply_row_action(state, IDs.Pattern.EDIT, 2, " 4.5 ")

    assert edited.numbers == [1, 2, 4.5]
    assert edited.original_numbers == [1, 2, 4.5]


def test_axis_changes_keeps_blank_values():
    changes = axis_changes("Position", None, 30, None, None, current=DEFAULT_X_AXIS)

    assert changes == {
        "name": "Position",
        "name_rotation": DEFAULT_X_AXIS.name_rotation,
        "tick_rotation": 30,
        "show_grid": DEFAULT_X_AXIS.show_grid,
        "tick_count": DEFAULT_X_AXIS.tick_count,
    }


def test_axis_changes_tick_count_floor():
    assert axis_changes(None, None, None, False, 0, current=DEFAULT_X_AXIS)["tick_count"] == 2


def test_step_zoom():
    assert step_zoom(100, 10, 1) == 110
    assert step_zoom(100, 10, -1) == 90
    assert step_zoom(200, 10, 1) == 200
    assert step_zoom(10, 10, -1) == 10
    assert step_zoom(None, 10, 1) == 110


def test_control_values_follow_restored_state():
    state = st.set_view(st.set_zoom(st.set_theme(SessionState(), dark=True), 30), "histogram")
    state = st.set_axis_config(state, "x", name="Trial", tick_rotation=45, tick_count=8)
    state = st.set_axis_config(state, "y", name="Score", show_grid=False)

    values = dict(zip(CONTROL_PROPS, control_values(state)))

    assert len(values) == len(CONTROL_PROPS)
    assert values[(IDs.Control.VIEW_TABS, "active_tab")] == "histogram"
    assert values[(IDs.Control.ZOOM_SLIDER, "value")] == 30
    assert values[(IDs.Control.THEME_SWITCH, "value")] is True
    assert values[(IDs.Control.X_NAME, "value")] == "Trial"
    assert values[(IDs.Control.X_TICK_ROTATION, "value")] == 45
    assert values[(IDs.Control.X_TICK_COUNT, "value")] == 8
    assert values[(IDs.Control.Y_NAME, "value")] == "Score"
    assert values[(IDs.Control.Y_NAME_ROTATION, "value")] == -90
    assert values[(IDs.Control.Y_SHOW_GRID, "value")] is False
