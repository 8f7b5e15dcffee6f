from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import ALL, Input, Output, State, no_update

from data_workbench.core.exceptions import WorkbenchError
from data_workbench.ui.helpers import build_action
from data_workbench.ui.ids import IDs

if TYPE_CHECKING:
    from data_workbench.ui.config import AppConfig

logger = logging.getLogger(__name__)

DATASETS_TAB = "datasets"


def apply_ui_event(ctx: AppConfig, inputs: dict[str, Any]) -> Optional[str]:
    """
    Pure helper: route one UI event to the matching ExplorationContext command.

    ``inputs["triggered_id"]`` is the Dash id of the control that fired
    (None on the initial call). Returns the page tab to switch to, if any.
    """
    triggered_id = inputs.get("triggered_id")
    dataset_name = inputs.get("dataset")

    # Initial load or dataset switch: mount a fresh context
    if triggered_id is None or triggered_id == IDs.Control.DATASET_SELECT:
        if dataset_name and (triggered_id is not None or ctx.active_dataset != dataset_name):
            ctx.open_dataset(dataset_name)
        return None

    if not ctx.provider.is_mounted:
        logger.debug("Ignoring %r, no dataset open", triggered_id)
        return None

    workbench = ctx.workbench

    if triggered_id == IDs.Control.RELOAD_BTN:
        ctx.reload_dataset()
    elif triggered_id == IDs.Control.BACK_BTN:
        workbench.go_back()
        return DATASETS_TAB
    elif triggered_id == IDs.Control.PREVIEW_GRID:
        if inputs.get("trigger_prop") == "active_cell":
            cell = inputs.get("active_cell") or {}
            if cell.get("column_id"):
                workbench.set_active_column(cell["column_id"])
        else:
            workbench.replace_selection(inputs.get("selected_columns") or [])
    elif triggered_id == IDs.Control.ACTIVE_COLUMN_SELECT:
        workbench.set_active_column(inputs.get("active_column"))
    elif triggered_id == IDs.Control.SELECT_ALL_BTN:
        workbench.select_all()
    elif triggered_id == IDs.Control.CLEAR_SELECTION_BTN:
        workbench.clear_selection()
    elif triggered_id == IDs.Control.X_SELECT:
        workbench.set_x_col(inputs.get("x_col"))
    elif triggered_id == IDs.Control.Y_SELECT:
        workbench.set_y_col(inputs.get("y_col"))
    elif triggered_id == IDs.Control.SPLIT_TOGGLE_BTN:
        workbench.set_expand_split(not workbench.expand_split)
    elif isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.ACTION:
        # Freshly rendered buttons fire with n_clicks=None
        if not inputs.get("trigger_value"):
            return None
        action = build_action(
            triggered_id["action"], triggered_id["option"], workbench.selected_columns
        )
        if action.type == "split":
            workbench.set_expand_split(True)
        workbench.on_action(action)
    else:
        logger.debug("Unhandled trigger %r", triggered_id)

    return None


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI -> ExplorationContext (single mutation funnel)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.REVISION, "data"),
        Output(IDs.Control.PAGE_TABS, "value"),
        Output(IDs.Control.PREVIEW_GRID, "selected_columns"),
        Output(IDs.Control.ACTIVE_COLUMN_SELECT, "value"),
        Output(IDs.Control.X_SELECT, "value"),
        Output(IDs.Control.Y_SELECT, "value"),
        Input(IDs.Control.DATASET_SELECT, "value"),
        Input(IDs.Control.RELOAD_BTN, "n_clicks"),
        Input(IDs.Control.BACK_BTN, "n_clicks"),
        Input(IDs.Control.PREVIEW_GRID, "selected_columns"),
        Input(IDs.Control.PREVIEW_GRID, "active_cell"),
        Input(IDs.Control.ACTIVE_COLUMN_SELECT, "value"),
        Input(IDs.Control.SELECT_ALL_BTN, "n_clicks"),
        Input(IDs.Control.CLEAR_SELECTION_BTN, "n_clicks"),
        Input(IDs.Control.X_SELECT, "value"),
        Input(IDs.Control.Y_SELECT, "value"),
        Input(IDs.Control.SPLIT_TOGGLE_BTN, "n_clicks"),
        Input({"type": IDs.Pattern.ACTION, "action": ALL, "option": ALL}, "n_clicks"),
        State(IDs.Store.REVISION, "data"),
    )
    def sync_workbench_from_ui(
            ds_val, _reload, _back, selected_cols, active_cell, active_col,
            _select_all, _clear, x_val, y_val, _split_toggle, _actions, revision,
    ):
        triggered = dash.ctx.triggered[0] if dash.ctx.triggered else {}
        prop_id = triggered.get("prop_id", "")

        inputs = {
            "triggered_id": dash.ctx.triggered_id,
            "trigger_prop": prop_id.rsplit(".", 1)[-1] if prop_id else None,
            "trigger_value": triggered.get("value"),
            "dataset": ds_val,
            "selected_columns": selected_cols,
            "active_cell": active_cell,
            "active_column": active_col,
            "x_col": x_val,
            "y_col": y_val,
        }

        try:
            tab = apply_ui_event(ctx, inputs)
        except (WorkbenchError, OSError, ValueError, KeyError):
            logger.exception("Failed to apply UI event %r", inputs["triggered_id"])
            tab = None

        if not ctx.provider.is_mounted:
            return (revision or 0) + 1, tab or no_update, [], None, None, None

        workbench = ctx.workbench
        return (
            (revision or 0) + 1,
            tab or no_update,
            list(workbench.selected_columns),
            workbench.active_column,
            workbench.x_col,
            workbench.y_col,
        )
