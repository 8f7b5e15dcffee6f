from __future__ import annotations

__all__ = ["IDs", "action_button_id"]


class IDs:
    class Store:
        REVISION = "workbench-revision"

    class Control:
        # Navbar
        DATASET_SELECT = "dataset-select"
        RELOAD_BTN = "reload-dataset-btn"
        PAGE_TABS = "page-tabs"

        # Summary bar
        BACK_BTN = "back-btn"
        SUMMARY_TITLE = "summary-title"
        SUMMARY_COLUMNS = "summary-columns"
        SUMMARY_ROWS = "summary-rows"
        SUMMARY_MISSING = "summary-missing"

        # Data grid
        PREVIEW_GRID = "preview-grid"
        ACTIVE_COLUMN_SELECT = "active-column-select"
        SELECT_ALL_BTN = "select-all-btn"
        CLEAR_SELECTION_BTN = "clear-selection-btn"
        SELECTION_TEXT = "selection-text"

        # Charts
        CHART_VIEW_SELECT = "chart-view-select"
        X_SELECT = "x-col-select"
        Y_SELECT = "y-col-select"
        CHART_GRAPH = "chart-graph"

        # Split viewer
        SPLIT_TOGGLE_BTN = "split-toggle-btn"
        SPLIT_CONTAINER = "split-container"
        SPLIT_BODY = "split-body"

        # Actions
        ACTION_LOG = "action-log"

        # Datasets tab
        DATASET_LIST = "dataset-list"

    class Pattern:
        # pattern-matching "type" strings
        ACTION = "workbench-action"


def action_button_id(action: str, option: str) -> dict:
    return {"type": IDs.Pattern.ACTION, "action": action, "option": option}
