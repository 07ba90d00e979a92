from __future__ import annotations

import logging
from dataclasses import dataclass, field, asdict, replace
from typing import Any, Dict, Iterable, List, Optional

from .statistics import Insufficient, StatsSummary, summarize

logger = logging.getLogger(__name__)

ZOOM_MIN = 10
ZOOM_MAX = 200
DEFAULT_ZOOM = 100

THEME_LIGHT = "light"
THEME_DARK = "dark"

DEFAULT_VIEW = "bar"


@dataclass(frozen=True)
class AxisConfig:
    """
    User-facing axis customisation.

    - name: axis title
    - name_rotation: rotation of the title, in degrees
    - tick_rotation: rotation of tick labels, in degrees
    - show_grid: draw grid lines for this axis
    - tick_count: approximate number of ticks
    """

    name: str
    name_rotation: int = 0
    tick_rotation: int = 0
    show_grid: bool = True
    tick_count: int = 5

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default: AxisConfig) -> AxisConfig:
        return cls(
            name=str(data.get("name", default.name)),
            name_rotation=int(data.get("name_rotation", default.name_rotation)),
            tick_rotation=int(data.get("tick_rotation", default.tick_rotation)),
            show_grid=bool(data.get("show_grid", default.show_grid)),
            tick_count=int(data.get("tick_count", default.tick_count)),
        )


DEFAULT_X_AXIS = AxisConfig(name="Index", name_rotation=0)
DEFAULT_Y_AXIS = AxisConfig(name="Value", name_rotation=-90)


@dataclass(frozen=True)
class SessionState:
    """
    Everything the UI knows about the current session.

    Fields:

    - numbers: the sample in its current display order
    - original_numbers: the sample in insertion order, used by "reset order"
    - zoom_level: percentage in [ZOOM_MIN, ZOOM_MAX]; lower means more headroom
    - active_view: id of the selected chart view
    - theme: "light" or "dark"
    - x_axis / y_axis: axis customisation
    - summary: last computed statistics, cleared whenever the sample changes
    - notice: user-facing message from the last calculation (e.g. too few numbers)

    Transition functions below never mutate a state, they return a new one.
    """

    numbers: List[float] = field(default_factory=list)
    original_numbers: List[float] = field(default_factory=list)

    zoom_level: int = DEFAULT_ZOOM
    active_view: str = DEFAULT_VIEW
    theme: str = THEME_LIGHT

    x_axis: AxisConfig = DEFAULT_X_AXIS
    y_axis: AxisConfig = DEFAULT_Y_AXIS

    summary: Optional[StatsSummary] = None
    notice: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "numbers": list(self.numbers),
            "original_numbers": list(self.original_numbers),
            "zoom_level": self.zoom_level,
            "active_view": self.active_view,
            "theme": self.theme,
            "x_axis": self.x_axis.to_dict(),
            "y_axis": self.y_axis.to_dict(),
            "summary": self.summary.to_dict() if self.summary is not None else None,
            "notice": self.notice,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> SessionState:
        if not data:
            return cls()
        summary = data.get("summary")
        return cls(
            numbers=[float(v) for v in data.get("numbers", [])],
            original_numbers=[float(v) for v in data.get("original_numbers", [])],
            zoom_level=int(data.get("zoom_level", DEFAULT_ZOOM)),
            active_view=data.get("active_view", DEFAULT_VIEW),
            theme=data.get("theme", THEME_LIGHT),
            x_axis=AxisConfig.from_dict(data.get("x_axis") or {}, DEFAULT_X_AXIS),
            y_axis=AxisConfig.from_dict(data.get("y_axis") or {}, DEFAULT_Y_AXIS),
            summary=StatsSummary.from_dict(summary) if summary else None,
            notice=data.get("notice"),
        )


# ------------------------------------------------------------------
# Sample mutations
# ------------------------------------------------------------------
def _with_numbers(
        state: SessionState,
        numbers: List[float],
        keep_original: bool = False,
) -> SessionState:
    """
    Swap in a new sample and drop results computed from the old one.

    Reorders (sort, move) keep the insertion-order copy; edits replace it.
    """
    original = state.original_numbers if keep_original else list(numbers)
    return replace(
        state,
        numbers=numbers,
        original_numbers=original,
        summary=None,
        notice=None,
    )


def _check_index(state: SessionState, index: int) -> None:
    if not 0 <= index < len(state.numbers):
        raise IndexError(f"No number at position {index} (have {len(state.numbers)})")


def add_number(state: SessionState, value: float) -> SessionState:
    return _with_numbers(state, [*state.numbers, float(value)])


def delete_number(state: SessionState, index: int) -> SessionState:
    _check_index(state, index)
    numbers = [v for i, v in enumerate(state.numbers) if i != index]
    return _with_numbers(state, numbers)


def edit_number(state: SessionState, index: int, value: float) -> SessionState:
    _check_index(state, index)
    numbers = list(state.numbers)
    numbers[index] = float(value)
    return _with_numbers(state, numbers)


def move_number(state: SessionState, src: int, dst: int) -> SessionState:
    """Move the number at 'src' so it ends up at position 'dst'."""
    _check_index(state, src)
    _check_index(state, dst)
    numbers = list(state.numbers)
    numbers.insert(dst, numbers.pop(src))
    return _with_numbers(state, numbers, keep_original=True)


def sort_numbers(state: SessionState, descending: bool = False) -> SessionState:
    numbers = sorted(state.numbers, reverse=descending)
    return _with_numbers(state, numbers, keep_original=True)


def reset_order(state: SessionState) -> SessionState:
    return _with_numbers(state, list(state.original_numbers), keep_original=True)


def clear_numbers(state: SessionState) -> SessionState:
    return _with_numbers(state, [])


def import_numbers(state: SessionState, values: Iterable[float]) -> SessionState:
    numbers = [float(v) for v in values]
    logger.info("Imported %d numbers", len(numbers))
    return _with_numbers(state, numbers)


# ------------------------------------------------------------------
# Display settings
# ------------------------------------------------------------------
def clamp_zoom(percent: float) -> int:
    return int(min(max(percent, ZOOM_MIN), ZOOM_MAX))


def set_zoom(state: SessionState, percent: float) -> SessionState:
    return replace(state, zoom_level=clamp_zoom(percent))


def set_view(state: SessionState, view_id: str) -> SessionState:
    return replace(state, active_view=view_id)


def set_theme(state: SessionState, dark: bool) -> SessionState:
    return replace(state, theme=THEME_DARK if dark else THEME_LIGHT)


def set_axis_config(state: SessionState, axis: str, **changes: Any) -> SessionState:
    """
    Update the X or Y axis config.

    :param axis: "x" or "y"
    :param changes: AxisConfig fields to override

    Raises:
        ValueError: if axis is not "x" or "y"
    """
    if axis == "x":
        return replace(state, x_axis=replace(state.x_axis, **changes))
    if axis == "y":
        return replace(state, y_axis=replace(state.y_axis, **changes))
    raise ValueError(f"Unknown axis '{axis}'")


# ------------------------------------------------------------------
# Statistics
# ------------------------------------------------------------------
def calculate(state: SessionState) -> SessionState:
    result = summarize(state.numbers)
    if isinstance(result, Insufficient):
        return replace(state, summary=None, notice=result.message)
    return replace(state, summary=result, notice=None)
