from __future__ import annotations

import pytest

from stats_browser.core import state as st
from stats_browser.core.state import (
    DEFAULT_X_AXIS,
    DEFAULT_Y_AXIS,
    AxisConfig,
    SessionState,
)
from stats_browser.core.statistics import INSUFFICIENT_MESSAGE


def _state_with(*numbers: float) -> SessionState:
    return st.import_numbers(SessionState(), numbers)


def test_defaults():
    state = SessionState()

    assert state.numbers == []
    assert state.zoom_level == 100
    assert state.active_view == "bar"
    assert state.x_axis == DEFAULT_X_AXIS
    assert state.y_axis == DEFAULT_Y_AXIS
    assert state.y_axis.name_rotation == -90


def test_add_number_tracks_insertion_order():
    state = st.add_number(SessionState(), 3)
    state = st.add_number(state, 1)

    assert state.numbers == [3.0, 1.0]
    assert state.original_numbers == [3.0, 1.0]


def test_transitions_do_not_mutate_previous_state():
    before = _state_with(1, 2)
    after = st.add_number(before, 3)

    assert before.numbers == [1.0, 2.0]
    assert after.numbers == [1.0, 2.0, 3.0]


def test_sort_then_reset_restores_original_order():
    state = _state_with(3, 1, 2)

    ascending = st.sort_numbers(state)
    descending = st.sort_numbers(state, descending=True)

    assert ascending.numbers == [1, 2, 3]
    assert descending.numbers == [3, 2, 1]
    assert ascending.original_numbers == [3, 1, 2]
    assert st.reset_order(descending).numbers == [3, 1, 2]


def test_move_number_is_a_permutation():
    state = _state_with(10, 20, 30, 40)

    moved = st.move_number(state, 0, 2)

    assert moved.numbers == [20, 30, 10, 40]
    assert moved.original_numbers == [10, 20, 30, 40]


def test_edit_and_delete_update_original_order():
    state = _state_with(1, 2, 3)

    edited = st.edit_number(state, 1, 5)
    deleted = st.delete_number(edited, 0)

    assert edited.numbers == [1, 5, 3]
    assert deleted.numbers == [5, 3]
    assert deleted.original_numbers == [5, 3]


def test_out_of_range_index_raises():
    state = _state_with(1, 2)

    with pytest.raises(IndexError):
        st.delete_number(state, 2)
    with pytest.raises(IndexError):
        st.edit_number(state, -1, 0)
    with pytest.raises(IndexError):
        st.move_number(state, 0, 5)


def test_clear_numbers():
    state = st.clear_numbers(_state_with(1, 2))

    assert state.numbers == []
    assert state.original_numbers == []


def test_calculate_stores_summary():
    state = st.calculate(_state_with(2, 4, 4, 4, 5, 5, 7, 9))

    assert state.summary is not None
    assert state.summary.mean == 5.0
    assert state.notice is None


def test_calculate_with_too_few_numbers_sets_notice():
    state = st.calculate(_state_with(5))

    assert state.summary is None
    assert state.notice == INSUFFICIENT_MESSAGE


def test_any_mutation_clears_results():
    calculated = st.calculate(_state_with(1, 2, 3))
    assert calculated.summary is not None

    assert st.add_number(calculated, 4).summary is None
    assert st.sort_numbers(calculated, descending=True).summary is None
    assert st.move_number(calculated, 0, 1).summary is None
    assert st.reset_order(calculated).summary is None


def test_set_zoom_clamps():
    state = SessionState()

    assert st.set_zoom(state, 5).zoom_level == 10
    assert st.set_zoom(state, 500).zoom_level == 200
    assert st.set_zoom(state, 60).zoom_level == 60


def test_set_axis_config():
    state = st.set_axis_config(SessionState(), "x", name="Position", tick_rotation=45)

    assert state.x_axis.name == "Position"
    assert state.x_axis.tick_rotation == 45
    assert state.y_axis == DEFAULT_Y_AXIS

    with pytest.raises(ValueError):
        st.set_axis_config(state, "z", name="nope")


def test_set_view_and_theme():
    state = st.set_theme(st.set_view(SessionState(), "histogram"), dark=True)

    assert state.active_view == "histogram"
    assert state.theme == st.THEME_DARK


def test_to_from_dict_roundtrip():
    state = st.calculate(_state_with(2, 4, 4, 4, 5, 5, 7, 9))
    state = st.sort_numbers(st.set_zoom(state, 40), descending=True)
    state = st.calculate(state)
    state = st.set_axis_config(state, "y", name="Reading", show_grid=False, tick_count=8)

    rebuilt = SessionState.from_dict(state.to_dict())

    assert rebuilt == state


def test_from_dict_empty_gives_defaults():
    assert SessionState.from_dict(None) == SessionState()
    assert SessionState.from_dict({}) == SessionState()


def test_axis_config_from_partial_dict():
    axis = AxisConfig.from_dict({"name": "Count"}, DEFAULT_Y_AXIS)

    assert axis.name == "Count"
    assert axis.name_rotation == -90
