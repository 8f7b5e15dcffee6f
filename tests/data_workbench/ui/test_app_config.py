import json
from pathlib import Path

import dash

from data_workbench.core import Action
from data_workbench.ui.dash_app import create_app_config, create_dash_app

CONFIG_ROOT = Path(__file__).resolve().parents[3] / "config"


def test_sample_config_wires_registry_and_default_dataset():
    ctx = create_app_config(CONFIG_ROOT)

    assert ctx.default_dataset == "households"
    assert [cls.id for cls in ctx.registry.all_classes()] == ["histogram", "scatter", "correlation"]
    assert not ctx.provider.is_mounted


def test_sample_dataset_opens():
    ctx = create_app_config(CONFIG_ROOT)
    wb = ctx.open_dataset("households")

    assert wb.columns == ("age", "income", "score", "city", "owns_home")
    assert wb.numeric_columns == ("age", "income", "score")
    assert (wb.x_col, wb.y_col) == ("age", "income")
    assert wb.preview.n_rows == 12
    assert wb.has_split_preview
    assert wb.split_preview.sizes() == {"training": 8, "validation": 2, "testing": 2}

    wb.on_action(Action("split"))
    assert ctx.action_log.entries()[0].action.type == "split"


def test_unknown_default_dataset_falls_back_to_first_name(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({"default_dataset": "missing"}))
    (tmp_path / "datasets").mkdir()
    for name in ["zeta", "alpha"]:
        (tmp_path / "datasets" / f"{name}.json").write_text(
            json.dumps({"name": name, "file": f"{name}.csv", "stats_file": f"{name}_s.csv"})
        )

    ctx = create_app_config(tmp_path)

    assert ctx.default_dataset == "alpha"
    assert list(ctx.dataset_configs) == ["alpha", "zeta"]


def test_create_dash_app():
    app = create_dash_app(CONFIG_ROOT)

    assert isinstance(app, dash.Dash)
    assert app.title == "Data Workbench"
