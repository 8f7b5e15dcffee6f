from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from data_workbench.ui.ids import IDs
from data_workbench.ui.layout.build_actions_panel import build_actions_panel
from data_workbench.ui.layout.build_charts_panel import build_charts_panel
from data_workbench.ui.layout.build_grid_panel import build_grid_panel
from data_workbench.ui.layout.build_navbar import build_navbar
from data_workbench.ui.layout.build_split_panel import build_split_panel
from data_workbench.ui.layout.build_summary_bar import build_summary_bar

if TYPE_CHECKING:
    from data_workbench.ui.config import AppConfig


def build_datasets_panel(ctx: AppConfig) -> dbc.Card:
    if not ctx.dataset_configs:
        body = html.P("No datasets configured. Add a dataset config under config/datasets.")
    else:
        body = html.Ul(
            [
                html.Li(
                    [
                        html.Strong(cfg.name),
                        f" · {cfg.title} · ",
                        html.Code(cfg.path.name),
                    ]
                )
                for cfg in ctx.dataset_configs.values()
            ],
            className="mb-0",
        )

    return dbc.Card(
        [
            dbc.CardHeader("Configured datasets", className="fw-semibold"),
            dbc.CardBody(body, id=IDs.Control.DATASET_LIST),
        ],
        className="mt-3",
    )


def build_layout(ctx: AppConfig):
    dataset_names = list(ctx.dataset_configs.keys())

    workbench_tab = html.Div(
        [
            build_summary_bar(),
            dbc.Row(
                [
                    dbc.Col(build_actions_panel(), md=3),
                    dbc.Col(build_grid_panel(), md=6),
                    dbc.Col(build_charts_panel(ctx.registry), md=3),
                ],
                className="gx-3",
            ),
            build_split_panel(),
        ]
    )

    return dbc.Container(
        fluid=True,
        children=[
            build_navbar(dataset_names, ctx.global_config, ctx.default_dataset),

            dcc.Store(id=IDs.Store.REVISION, data=0),

            dcc.Tabs(
                id=IDs.Control.PAGE_TABS,
                value="workbench",
                children=[
                    dcc.Tab(
                        label="Datasets",
                        value="datasets",
                        children=[build_datasets_panel(ctx)],
                    ),
                    dcc.Tab(
                        label="Workbench",
                        value="workbench",
                        children=[workbench_tab],
                    ),
                ],
                className="mt-2",
            ),
        ],
    )
