from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from data_workbench.ui.helpers import ACTION_GROUPS
from data_workbench.ui.ids import IDs, action_button_id


def build_actions_panel() -> dbc.Card:
    sections = []
    for title, action_type, options in ACTION_GROUPS:
        sections.append(
            html.Div(
                [
                    html.P(title, className="text-muted small mb-1"),
                    html.Div(
                        [
                            dbc.Button(
                                label,
                                id=action_button_id(action_type, option),
                                color="light",
                                size="sm",
                            )
                            for option, label in options
                        ],
                        className="d-flex flex-wrap gap-2",
                    ),
                ],
                className="mb-3",
            )
        )

    sections.append(
        html.Div(
            [
                html.P("Split", className="text-muted small mb-1"),
                dbc.Button(
                    "Apply Split",
                    id=action_button_id("split", "apply"),
                    color="secondary",
                    size="sm",
                ),
            ],
            className="mb-3",
        )
    )

    return dbc.Card(
        [
            dbc.CardHeader("Actions", className="fw-semibold"),
            dbc.CardBody(
                [
                    *sections,
                    html.Hr(),
                    html.P("Requested actions", className="text-muted small mb-1"),
                    html.Ul(id=IDs.Control.ACTION_LOG, className="small ps-3 mb-0"),
                ]
            ),
        ],
        className="mt-3",
    )
