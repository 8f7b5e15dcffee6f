from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from data_workbench.ui.ids import IDs


def _metric(label: str, value_id: str) -> html.Div:
    return html.Div(
        [
            html.P(label, className="text-muted small mb-0"),
            html.P("–", id=value_id, className="fs-5 fw-semibold text-center mb-0"),
        ]
    )


def build_summary_bar() -> dbc.Card:
    """Back button, dataset title and the columns / preview rows / missing % figures."""
    return dbc.Card(
        dbc.CardBody(
            html.Div(
                [
                    dbc.Button("Back", id=IDs.Control.BACK_BTN, color="link", size="sm"),
                    html.Span(id=IDs.Control.SUMMARY_TITLE, className="fw-semibold text-truncate"),
                    html.Div(
                        [
                            _metric("Columns", IDs.Control.SUMMARY_COLUMNS),
                            _metric("Rows (preview)", IDs.Control.SUMMARY_ROWS),
                            _metric("Missing (%)", IDs.Control.SUMMARY_MISSING),
                        ],
                        className="ms-auto d-flex align-items-center gap-4",
                    ),
                ],
                className="d-flex flex-wrap align-items-center gap-3",
            ),
            className="p-2",
        ),
        className="mt-3",
    )
