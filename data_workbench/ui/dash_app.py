from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from data_workbench.config.dataset_loader import load_dataset_registry
from data_workbench.core.view_registry import ViewRegistry
from data_workbench.services.action_log import ActionLog
from data_workbench.ui.callbacks.callbacks_render import register_render_callbacks
from data_workbench.ui.callbacks.callbacks_sync import register_sync_callbacks
from data_workbench.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from data_workbench.views import CorrelationView, HistogramView, ScatterView

    registry = ViewRegistry()
    registry.register(HistogramView)
    registry.register(ScatterView)
    registry.register(CorrelationView)
    return registry


def create_app_config(config_root: Path | str = Path("config")) -> AppConfig:
    config_root = Path(config_root)

    # 1) Load Config
    global_config, cfg_by_name = load_dataset_registry(config_root)

    # 2) Choose Default Dataset
    default_dataset = global_config.default_dataset
    if default_dataset not in cfg_by_name:
        if default_dataset is not None:
            logger.warning(f"Default dataset '{default_dataset}' not configured")
        default_dataset = next(iter(sorted(cfg_by_name)), None)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset_configs={name: cfg_by_name[name] for name in sorted(cfg_by_name)},
        default_dataset=default_dataset,
        registry=_build_view_registry(),
        action_log=ActionLog(),
    )
    ctx.validate()
    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = create_app_config(config_root)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = ctx.global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app
