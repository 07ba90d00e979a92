from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from stats_browser.core import state as st
from stats_browser.core.state import SessionState
from stats_browser.core.statistics import StatsSummary
from stats_browser.io.csv_io import parse_number
from stats_browser.ui.ids import IDs

logger = logging.getLogger(__name__)

DISPLAY_DECIMALS = 4

SUMMARY_LABELS = (
    ("Standard Deviation", "standard_deviation"),
    ("Mean", "mean"),
    ("Median", "median"),
    ("Mode", "mode"),
    ("Range", "range"),
)


def format_stat(value: float) -> str:
    return f"{value:.{DISPLAY_DECIMALS}f}"


def summary_rows(summary: StatsSummary) -> List[Tuple[str, str]]:
    return [(label, format_stat(getattr(summary, attr))) for label, attr in SUMMARY_LABELS]


def apply_list_action(state: SessionState, button_id: str) -> SessionState:
    """
    Apply one of the whole-list buttons (sort, reset, clear, calculate).

    Raises:
        KeyError: if button_id is not one of the list buttons
    """
    if button_id == IDs.Control.SORT_ASC_BTN:
        return st.sort_numbers(state)
    if button_id == IDs.Control.SORT_DESC_BTN:
        return st.sort_numbers(state, descending=True)
    if button_id == IDs.Control.RESET_ORDER_BTN:
        return st.reset_order(state)
    if button_id == IDs.Control.CLEAR_BTN:
        return st.clear_numbers(state)
    if button_id == IDs.Control.CALCULATE_BTN:
        return st.calculate(state)
    raise KeyError(f"Unknown list action '{button_id}'")


def apply_row_action(
        state: SessionState,
        kind: str,
        index: int,
        value: Optional[str] = None,
) -> Optional[SessionState]:
    """
    Apply a per-number control (delete, edit, move up/down).

    Returns None when the action is a no-op: moving past either end of the
    list, an edit that does not parse, an edit that leaves the value as is,
    or an index that no longer exists.
    """
    if not 0 <= index < len(state.numbers):
        logger.debug("Ignoring %s for stale index %d", kind, index)
        return None

    if kind == IDs.Pattern.DELETE:
        return st.delete_number(state, index)

    if kind == IDs.Pattern.EDIT:
        parsed = parse_number(value)
        if parsed is None or parsed == state.numbers[index]:
            return None
        return st.edit_number(state, index, parsed)

    if kind == IDs.Pattern.MOVE_UP:
        if index == 0:
            return None
        return st.move_number(state, index, index - 1)

    if kind == IDs.Pattern.MOVE_DOWN:
        if index == len(state.numbers) - 1:
            return None
        return st.move_number(state, index, index + 1)

    raise KeyError(f"Unknown row action '{kind}'")


def axis_changes(
        name: Optional[str],
        name_rotation: Optional[float],
        tick_rotation: Optional[float],
        show_grid: Optional[bool],
        tick_count: Optional[float],
        current: st.AxisConfig,
) -> dict:
    """
    Turn raw axis control values into AxisConfig overrides.
    Blank numeric inputs keep the current setting.
    """
    return {
        "name": name if name is not None else current.name,
        "name_rotation": int(name_rotation) if name_rotation is not None else current.name_rotation,
        "tick_rotation": int(tick_rotation) if tick_rotation is not None else current.tick_rotation,
        "show_grid": bool(show_grid) if show_grid is not None else current.show_grid,
        "tick_count": max(int(tick_count), 2) if tick_count is not None else current.tick_count,
    }


def step_zoom(current: Optional[float], step: int, direction: int) -> int:
    """Nudge the zoom slider one step in or out, staying inside its bounds."""
    base = current if current is not None else st.DEFAULT_ZOOM
    return st.clamp_zoom(base + direction * step)


def control_values(state: SessionState) -> List[object]:
    """
    Values for the display controls, in CONTROL_PROPS order, so a restored
    session shows the view, zoom, theme and axes it was saved with.
    """
    values: List[object] = [state.active_view, state.zoom_level, state.theme == st.THEME_DARK]
    for axis in (state.x_axis, state.y_axis):
        values.extend([axis.name, axis.name_rotation, axis.tick_rotation, axis.show_grid, axis.tick_count])
    return values


CONTROL_PROPS: Tuple[Tuple[str, str], ...] = (
    (IDs.Control.VIEW_TABS, "active_tab"),
    (IDs.Control.ZOOM_SLIDER, "value"),
    (IDs.Control.THEME_SWITCH, "value"),
    (IDs.Control.X_NAME, "value"),
    (IDs.Control.X_NAME_ROTATION, "value"),
    (IDs.Control.X_TICK_ROTATION, "value"),
    (IDs.Control.X_SHOW_GRID, "value"),
    (IDs.Control.X_TICK_COUNT, "value"),
    (IDs.Control.Y_NAME, "value"),
    (IDs.Control.Y_NAME_ROTATION, "value"),
    (IDs.Control.Y_TICK_ROTATION, "value"),
    (IDs.Control.Y_SHOW_GRID, "value"),
    (IDs.Control.Y_TICK_COUNT, "value"),
)
