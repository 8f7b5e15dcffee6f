from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from data_workbench.ui.ids import IDs

COMPACT_HEIGHT = "24vh"
EXPANDED_HEIGHT = "60vh"


def split_container_style(expanded: bool) -> dict:
    return {
        "maxHeight": EXPANDED_HEIGHT if expanded else COMPACT_HEIGHT,
        "overflow": "auto",
    }


def build_split_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Split Viewer"),
                        dbc.Button(
                            "Expand",
                            id=IDs.Control.SPLIT_TOGGLE_BTN,
                            color="link",
                            size="sm",
                            className="ms-auto",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                html.Div(id=IDs.Control.SPLIT_BODY),
                id=IDs.Control.SPLIT_CONTAINER,
                style=split_container_style(False),
                className="p-2",
            ),
        ],
        className="mt-3 mb-3",
    )
