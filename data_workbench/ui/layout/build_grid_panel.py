from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dash_table, dcc, html

from data_workbench.ui.helpers import TABLE_FONT
from data_workbench.ui.ids import IDs


def build_grid_panel() -> dbc.Card:
    """
    Data preview grid.

    Column checkboxes drive the selection set; clicking a cell (or using the
    dropdown) sets the active column.
    """
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Data Preview"),
                        html.Div(
                            [
                                html.Span("Select column:", className="text-muted small me-2"),
                                dcc.Dropdown(
                                    id=IDs.Control.ACTIVE_COLUMN_SELECT,
                                    placeholder="(none)",
                                    style={"minWidth": "180px"},
                                ),
                            ],
                            className="ms-auto d-flex align-items-center",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    html.Div(
                        [
                            dbc.Button("Select all", id=IDs.Control.SELECT_ALL_BTN, color="light", size="sm"),
                            dbc.Button("Clear", id=IDs.Control.CLEAR_SELECTION_BTN, color="light", size="sm"),
                            html.Span(id=IDs.Control.SELECTION_TEXT, className="text-muted small ms-2"),
                        ],
                        className="d-flex align-items-center gap-2 mb-2",
                    ),
                    dash_table.DataTable(
                        id=IDs.Control.PREVIEW_GRID,
                        data=[],
                        columns=[],
                        column_selectable="multi",
                        selected_columns=[],
                        page_action="none",
                        fixed_rows={"headers": True},
                        style_table={"overflowX": "auto", "maxHeight": "60vh"},
                        style_cell={
                            "fontFamily": TABLE_FONT,
                            "fontSize": "12px",
                            "padding": "6px 8px",
                            "textAlign": "left",
                            "minWidth": "90px",
                            "whiteSpace": "nowrap",
                        },
                        style_header={"fontWeight": "600", "backgroundColor": "#f3f4f6"},
                    ),
                ],
                className="p-2",
            ),
        ],
        className="mt-3",
    )
