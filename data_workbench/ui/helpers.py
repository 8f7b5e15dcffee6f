from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from dash import dash_table, html

from data_workbench.core.actions import Action
from data_workbench.core.context import ExplorationContext

TABLE_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'

# (group label, action type, [(option, button label), ...])
ACTION_GROUPS: List[Tuple[str, str, List[Tuple[str, str]]]] = [
    ("Missing Values", "missing", [("drop", "drop"), ("mean", "mean"), ("median", "median"), ("mode", "mode")]),
    ("Scaling", "normalize", [("minmax", "minmax"), ("zscore", "zscore"), ("robust", "robust")]),
    ("Encoding", "encode", [("onehot", "onehot"), ("label", "label"), ("target", "target")]),
    ("Clip Outliers", "clip", [("iqr", "IQR"), ("percentile", "Percentile 1–99")]),
]


def build_action(action_type: str, option: str, selected: Sequence[str]) -> Action:
    """
    Translate an actions-panel button into the Action forwarded to the handler.
    Every transformation targets the currently selected columns.
    """
    targets = list(selected)

    if action_type == "split":
        return Action("split")
    if action_type == "missing":
        return Action("missing", {"strategy": option, "targetColumns": targets})
    if action_type == "clip" and option == "percentile":
        return Action(
            "clip",
            {
                "method": "percentile",
                "lowerPercentile": 1,
                "upperPercentile": 99,
                "targetColumns": targets,
            },
        )
    return Action(action_type, {"method": option, "targetColumns": targets})


def column_options(columns: Sequence[str]) -> List[Dict[str, str]]:
    return [{"label": c, "value": c} for c in columns]


def table_records(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> List[Dict[str, Any]]:
    """Rows as DataTable records, with cells rendered the way they are shown in the grid."""
    return [
        {col: _display_cell(value) for col, value in zip(columns, row)}
        for row in rows
    ]


def _display_cell(value: Any) -> Any:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    return value


def grid_style_for_selection(selected: Sequence[str]) -> List[Dict[str, Any]]:
    """Highlight selected columns in the data grid."""
    return [
        {"if": {"column_id": col}, "backgroundColor": "rgba(17, 115, 212, 0.10)"}
        for col in selected
    ]


def preview_table(
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    table_id: Optional[str] = None,
    page_size: int = 10,
) -> dash_table.DataTable:
    """
    Build a styled, read-only Dash DataTable for a block of preview rows.
    """
    kwargs: Dict[str, Any] = {}
    if table_id is not None:
        kwargs["id"] = table_id

    return dash_table.DataTable(
        data=table_records(columns, rows),
        columns=[{"name": c, "id": c} for c in columns],
        style_table={"overflowX": "auto"},
        style_as_list_view=True,
        style_cell={
            "fontFamily": TABLE_FONT,
            "fontSize": "12px",
            "padding": "4px 6px",
            "border": "none",
            "textAlign": "left",
            "whiteSpace": "nowrap",
        },
        style_header={
            "fontFamily": TABLE_FONT,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={"borderBottom": "1px solid #e5e7eb"},
        page_size=page_size,
        **kwargs,
    )


def split_preview_body(workbench: ExplorationContext):
    """Three side-by-side tables (training / validation / testing) or a hint."""
    if not workbench.has_split_preview:
        return html.P(
            "After splitting, preview train/validation/test groups here.",
            className="text-muted small mb-0",
        )

    split = workbench.split_preview
    cards = []
    for name, rows in split.partitions():
        cards.append(
            html.Div(
                [
                    html.P(f"{name.capitalize()} ({len(rows)} rows)", className="text-muted small mb-1"),
                    preview_table(split.columns, rows, page_size=workbench.SPLIT_PREVIEW_MAX_ROWS),
                ],
                className="col-md-4",
            )
        )
    return html.Div(cards, className="row g-2")


def action_log_items(entries) -> List[Any]:
    if not entries:
        return [html.Li("No actions requested yet.", className="text-muted")]
    return [
        html.Li(f"{e.received_at:%H:%M:%S} · {e.describe()}")
        for e in entries
    ]
