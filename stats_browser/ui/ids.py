from __future__ import annotations

__all__ = ["IDs", "row_id"]


class IDs:
    class Store:
        SESSION_STATE = "session-state"
        # memory-only flags, reset on every page load
        CONTROLS_SYNCED = "controls-synced"
        SHORTCUT_BOUND = "shortcut-bound"

    class Control:
        # Entry
        NUMBER_INPUT = "number-input"
        ADD_BTN = "add-btn"
        UPLOAD = "csv-upload"
        EXPORT_BTN = "export-btn"
        DOWNLOAD = "csv-download"

        # Numbers list
        NUMBERS_LIST = "numbers-list"
        NUMBERS_COUNT = "numbers-count"
        SORT_ASC_BTN = "sort-asc-btn"
        SORT_DESC_BTN = "sort-desc-btn"
        RESET_ORDER_BTN = "reset-order-btn"
        CLEAR_BTN = "clear-btn"

        # Statistics
        CALCULATE_BTN = "calculate-btn"
        SUMMARY_PANEL = "summary-panel"
        NOTICE = "notice"

        # Chart
        VIEW_TABS = "view-tabs"
        MAIN_GRAPH = "main-graph"
        ZOOM_SLIDER = "zoom-slider"
        ZOOM_IN_BTN = "zoom-in-btn"
        ZOOM_OUT_BTN = "zoom-out-btn"

        # Axis customisation
        X_NAME = "x-axis-name"
        X_NAME_ROTATION = "x-axis-name-rotation"
        X_TICK_ROTATION = "x-axis-tick-rotation"
        X_SHOW_GRID = "x-axis-show-grid"
        X_TICK_COUNT = "x-axis-tick-count"
        Y_NAME = "y-axis-name"
        Y_NAME_ROTATION = "y-axis-name-rotation"
        Y_TICK_ROTATION = "y-axis-tick-rotation"
        Y_SHOW_GRID = "y-axis-show-grid"
        Y_TICK_COUNT = "y-axis-tick-count"

        # Theme
        THEME_SWITCH = "theme-switch"

        # Status bar
        STATUS_BAR = "status-bar"

    class Pattern:
        # pattern-matching "type" strings for per-number controls
        DELETE = "number-delete"
        EDIT = "number-edit"
        MOVE_UP = "number-move-up"
        MOVE_DOWN = "number-move-down"


def row_id(kind: str, index: int) -> dict:
    return {"type": kind, "index": index}
