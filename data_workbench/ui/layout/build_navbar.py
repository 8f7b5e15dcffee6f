from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from data_workbench.config.model import GlobalConfig
from data_workbench.ui.ids import IDs


def build_navbar(
    dataset_names: List[str],
    global_config: GlobalConfig,
    default_name: Optional[str],
) -> dbc.Navbar:
    dataset_options = [{"label": name, "value": name} for name in dataset_names]

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Active Dataset", className="navbar-dataset-title"),
                        html.Div(
                            [
                                dcc.Dropdown(
                                    id=IDs.Control.DATASET_SELECT,
                                    options=dataset_options,
                                    value=default_name,
                                    clearable=False,
                                    placeholder="Select dataset",
                                    style={"minWidth": "240px"},
                                ),
                                dbc.Button(
                                    "Reload",
                                    id=IDs.Control.RELOAD_BTN,
                                    color="secondary",
                                    size="sm",
                                    outline=True,
                                    className="ms-2",
                                ),
                            ],
                            className="d-flex align-items-center mt-1",
                        ),
                    ],
                    className="ms-auto",
                    style={"marginRight": "24px"},
                ),
            ],
        ),
        dark=False,
        className="shadow-sm",
    )
