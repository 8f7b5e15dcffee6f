from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output, html

from data_workbench.core.exceptions import MissingContextError
from data_workbench.ui.helpers import (
    action_log_items,
    column_options,
    grid_style_for_selection,
    split_preview_body,
    table_records,
)
from data_workbench.ui.ids import IDs
from data_workbench.ui.layout.build_split_panel import split_container_style

if TYPE_CHECKING:
    from data_workbench.ui.config import AppConfig

logger = logging.getLogger(__name__)

NO_DATASET = "No dataset open. Choose a dataset from the navbar dropdown."


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}\n\n{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Summary bar
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SUMMARY_TITLE, "children"),
        Output(IDs.Control.SUMMARY_COLUMNS, "children"),
        Output(IDs.Control.SUMMARY_ROWS, "children"),
        Output(IDs.Control.SUMMARY_MISSING, "children"),
        Output(IDs.Control.BACK_BTN, "disabled"),
        Input(IDs.Store.REVISION, "data"),
    )
    def update_summary_bar(_revision):
        try:
            workbench = ctx.workbench
        except MissingContextError:
            return NO_DATASET, "0", "0", "0.0%", True

        summary = workbench.summary()
        return (
            summary.title or "",
            str(summary.n_columns),
            str(summary.n_preview_rows),
            f"{summary.missing_pct_text}%",
            not workbench.can_go_back,
        )

    # ---------------------------------------------------------
    # Data grid: preview rows, column options, selection highlight
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PREVIEW_GRID, "data"),
        Output(IDs.Control.PREVIEW_GRID, "columns"),
        Output(IDs.Control.PREVIEW_GRID, "style_data_conditional"),
        Output(IDs.Control.ACTIVE_COLUMN_SELECT, "options"),
        Output(IDs.Control.SELECTION_TEXT, "children"),
        Input(IDs.Store.REVISION, "data"),
    )
    def update_grid(_revision):
        try:
            workbench = ctx.workbench
        except MissingContextError:
            return [], [], [], [], ""

        preview = workbench.preview
        selected = workbench.selected_columns
        columns = [
            {"name": c, "id": c, "selectable": True}
            for c in preview.columns
        ]
        selection_text = f"{len(selected)} selected" if selected else "No columns selected"
        return (
            table_records(preview.columns, preview.rows),
            columns,
            grid_style_for_selection(selected),
            column_options(workbench.columns),
            selection_text,
        )

    # ---------------------------------------------------------
    # Charts: axis options + active view figure
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.X_SELECT, "options"),
        Output(IDs.Control.Y_SELECT, "options"),
        Output(IDs.Control.CHART_GRAPH, "figure"),
        Input(IDs.Store.REVISION, "data"),
        Input(IDs.Control.CHART_VIEW_SELECT, "value"),
    )
    def update_charts(_revision, view_id: str | None):
        try:
            workbench = ctx.workbench
        except MissingContextError:
            return [], [], _message_figure(NO_DATASET)

        axis_options = column_options(workbench.numeric_columns)

        if not view_id:
            return axis_options, axis_options, _message_figure("No chart selected.")

        try:
            view = ctx.registry.create(view_id, workbench)
            fig = view.figure()
        except Exception as e:
            logger.exception("Failed to render chart view %r", view_id)
            fig = _error_figure(str(e))

        return axis_options, axis_options, fig

    # ---------------------------------------------------------
    # Split viewer
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SPLIT_BODY, "children"),
        Output(IDs.Control.SPLIT_CONTAINER, "style"),
        Output(IDs.Control.SPLIT_TOGGLE_BTN, "children"),
        Input(IDs.Store.REVISION, "data"),
    )
    def update_split_viewer(_revision):
        try:
            workbench = ctx.workbench
        except MissingContextError:
            return html.P(NO_DATASET, className="text-muted small"), split_container_style(False), "Expand"

        expanded = workbench.expand_split
        return (
            split_preview_body(workbench),
            split_container_style(expanded),
            "Collapse" if expanded else "Expand",
        )

    # ---------------------------------------------------------
    # Requested actions
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.ACTION_LOG, "children"),
        Input(IDs.Store.REVISION, "data"),
    )
    def update_action_log(_revision):
        return action_log_items(ctx.action_log.entries())
