from pathlib import Path

import pytest
from dash import html

from data_workbench.config.model import DatasetConfig, GlobalConfig
from data_workbench.core import DatasetSource, MissingContextError
from data_workbench.core.view_registry import ViewRegistry
from data_workbench.services.action_log import ActionLog
from data_workbench.ui.callbacks.callbacks_sync import apply_ui_event
from data_workbench.ui.config import AppConfig
from data_workbench.ui.helpers import build_action, split_preview_body, table_records
from data_workbench.ui.ids import IDs


def _fake_loader(loads):
    def load(cfg: DatasetConfig) -> DatasetSource:
        loads.append(cfg.name)
        return DatasetSource.create(
            columns=["a", "b", "c"],
            get_preview=lambda n: {"columns": ["a", "b", "c"], "rows": [[1, 2, "x"], [3, 4, "y"]]},
            stats=[
                {"column": "a", "type": "numeric", "count": 2, "missing": 0, "unique": 2},
                {"column": "b", "type": "numeric", "count": 2, "missing": 0, "unique": 2},
                {"column": "c", "type": "categorical", "count": 2, "missing": 0, "unique": 2},
            ],
            title=cfg.title,
        )
    return load


def _make_app_config(loads=None) -> AppConfig:
    """
    AppConfig with two in-memory datasets ("one", "two") and a loader that
    records which dataset it was asked for.
    """
    loads = [] if loads is None else loads
    configs = {
        name: DatasetConfig(raw={"name": name, "file": f"{name}.csv", "stats_file": f"{name}_s.csv"},
                            source_path=Path(f"{name}.json"), index=i)
        for i, name in enumerate(["one", "two"])
    }
    cfg = AppConfig(
        config_root=Path("."),
        global_config=GlobalConfig("T", "S", "one", list(configs.values())),
        dataset_configs=configs,
        default_dataset="one",
        registry=ViewRegistry(),
        action_log=ActionLog(),
        source_loader=_fake_loader(loads),
    )
    cfg.validate()
    return cfg


def _event(triggered_id, **kwargs):
    inputs = {"triggered_id": triggered_id, "dataset": "one"}
    inputs.update(kwargs)
    return inputs


def test_initial_call_opens_dataset():
    loads = []
    ctx = _make_app_config(loads)

    assert apply_ui_event(ctx, _event(None)) is None
    assert ctx.active_dataset == "one"
    assert ctx.workbench.title == "one"

    # A repeated initial call does not remount
    apply_ui_event(ctx, _event(None))
    assert loads == ["one"]


def test_dataset_switch_mounts_fresh_context():
    ctx = _make_app_config()
    apply_ui_event(ctx, _event(None))
    ctx.workbench.toggle("a")

    apply_ui_event(ctx, _event(IDs.Control.DATASET_SELECT, dataset="two"))

    assert ctx.active_dataset == "two"
    assert ctx.workbench.selected_columns == ()


def test_events_ignored_without_dataset():
    ctx = _make_app_config()

    assert apply_ui_event(ctx, _event(IDs.Control.SELECT_ALL_BTN)) is None
    with pytest.raises(MissingContextError):
        ctx.workbench


def test_reload_keeps_selection():
    loads = []
    ctx = _make_app_config(loads)
    apply_ui_event(ctx, _event(None))
    apply_ui_event(ctx, _event(IDs.Control.PREVIEW_GRID, trigger_prop="selected_columns", selected_columns=["b"]))
    version = ctx.workbench.dataset_version

    apply_ui_event(ctx, _event(IDs.Control.RELOAD_BTN))

    assert loads == ["one", "one"]
    assert ctx.workbench.dataset_version != version
    assert ctx.workbench.selected_columns == ("b",)


def test_grid_active_cell_sets_active_column():
    ctx = _make_app_config()
    apply_ui_event(ctx, _event(None))

    apply_ui_event(
        ctx,
        _event(IDs.Control.PREVIEW_GRID, trigger_prop="active_cell", active_cell={"row": 0, "column_id": "b"}),
    )

    assert ctx.workbench.active_column == "b"
    assert ctx.workbench.selected_columns == ()


def test_selection_and_axis_controls():
    ctx = _make_app_config()
    apply_ui_event(ctx, _event(None))
    wb = ctx.workbench

    apply_ui_event(ctx, _event(IDs.Control.SELECT_ALL_BTN))
    assert wb.selected_columns == ("a", "b", "c")

    apply_ui_event(ctx, _event(IDs.Control.CLEAR_SELECTION_BTN))
    assert wb.selected_columns == ()

    apply_ui_event(ctx, _event(IDs.Control.X_SELECT, x_col="b"))
    apply_ui_event(ctx, _event(IDs.Control.Y_SELECT, y_col=None))
    assert (wb.x_col, wb.y_col) == ("b", None)

    apply_ui_event(ctx, _event(IDs.Control.ACTIVE_COLUMN_SELECT, active_column="c"))
    assert wb.active_column == "c"

    apply_ui_event(ctx, _event(IDs.Control.SPLIT_TOGGLE_BTN))
    assert wb.expand_split is True


def test_action_button_forwards_action_to_log():
    ctx = _make_app_config()
    apply_ui_event(ctx, _event(None))
    ctx.workbench.replace_selection(["a"])

    button = {"type": IDs.Pattern.ACTION, "action": "normalize", "option": "zscore"}
    apply_ui_event(ctx, _event(button, trigger_value=None))
    assert ctx.action_log.entries() == []

    apply_ui_event(ctx, _event(button, trigger_value=1))
    (entry,) = ctx.action_log.entries()
    assert entry.action.type == "normalize"
    assert entry.action.payload == {"method": "zscore", "targetColumns": ["a"]}


def test_split_action_expands_split_viewer():
    ctx = _make_app_config()
    apply_ui_event(ctx, _event(None))

    button = {"type": IDs.Pattern.ACTION, "action": "split", "option": "default"}
    apply_ui_event(ctx, _event(button, trigger_value=1))

    assert ctx.workbench.expand_split is True
    assert ctx.action_log.entries()[0].action.type == "split"


def test_back_returns_datasets_tab():
    ctx = _make_app_config()
    apply_ui_event(ctx, _event(None))

    assert apply_ui_event(ctx, _event(IDs.Control.BACK_BTN)) == "datasets"


@pytest.mark.parametrize(
    "action_type, option, expected",
    [
        ("missing", "median", {"strategy": "median", "targetColumns": ["x"]}),
        ("encode", "onehot", {"method": "onehot", "targetColumns": ["x"]}),
        ("clip", "iqr", {"method": "iqr", "targetColumns": ["x"]}),
        (
            "clip",
            "percentile",
            {"method": "percentile", "lowerPercentile": 1, "upperPercentile": 99, "targetColumns": ["x"]},
        ),
    ],
)
def test_build_action_payloads(action_type, option, expected):
    action = build_action(action_type, option, ["x"])
    assert action.type == action_type
    assert action.payload == expected


def test_build_split_action_has_no_payload():
    assert build_action("split", "default", ["x"]).payload is None


def test_table_records_render_missing_as_null():
    records = table_records(["a", "b"], [(None, True), (1.5, "x")])
    assert records == [{"a": "null", "b": "true"}, {"a": 1.5, "b": "x"}]


def test_split_body_shows_hint_without_split_preview():
    ctx = _make_app_config()
    apply_ui_event(ctx, _event(None))

    body = split_preview_body(ctx.workbench)

    assert isinstance(body, html.P)
    assert "After splitting" in body.children
