from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from data_workbench.core.view_registry import ViewRegistry
from data_workbench.ui.ids import IDs


def build_charts_panel(registry: ViewRegistry) -> dbc.Card:
    view_classes = registry.all_classes()
    view_options = [{"label": cls.label, "value": cls.id} for cls in view_classes]
    default_view = view_classes[0].id if view_classes else None

    return dbc.Card(
        [
            dbc.CardHeader("Charts", className="fw-semibold"),
            dbc.CardBody(
                [
                    dbc.RadioItems(
                        id=IDs.Control.CHART_VIEW_SELECT,
                        options=view_options,
                        value=default_view,
                        inline=True,
                        className="mb-2",
                    ),
                    html.Div(
                        [
                            html.Span("Scatter", className="text-muted small"),
                            dcc.Dropdown(id=IDs.Control.X_SELECT, placeholder="x", style={"minWidth": "140px"}),
                            dcc.Dropdown(id=IDs.Control.Y_SELECT, placeholder="y", style={"minWidth": "140px"}),
                        ],
                        className="d-flex align-items-center gap-2 mb-2",
                    ),
                    dcc.Loading(
                        dcc.Graph(id=IDs.Control.CHART_GRAPH, config={"responsive": True}),
                        type="default",
                    ),
                ]
            ),
        ],
        className="mt-3",
    )
