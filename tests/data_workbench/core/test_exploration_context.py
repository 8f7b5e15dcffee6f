import pytest

from data_workbench.core import (
    Action,
    DatasetSource,
    ExplorationContext,
    ExplorationProvider,
    KeyEvent,
    MissingContextError,
    WorkbenchHandlers,
)
from data_workbench.core.exceptions import WorkbenchError


class _Accessor:
    """Preview accessor that counts its calls."""

    def __init__(self, payload):
        self.payload = payload
        self.calls = 0

    def __call__(self, max_rows):
        self.calls += 1
        return {"columns": self.payload["columns"], "rows": self.payload["rows"][:max_rows]}


def _make_source(title="Tiny", split=None):
    """
    Three columns, stats list income before age so the default axes follow
    stats order rather than column order.
    """
    accessor = _Accessor(
        {
            "columns": ["age", "income", "city"],
            "rows": [
                [30, 1000.0, "A"],
                [40, None, "B"],
                [50, 3000.0, "A"],
            ],
        }
    )
    stats = [
        {"column": "income", "type": "numeric", "count": 2, "missing": 1, "unique": 2},
        {"column": "age", "type": "numeric", "count": 3, "missing": 0, "unique": 3},
        {"column": "city", "type": "categorical", "count": 3, "missing": 0, "unique": 2},
    ]
    source = DatasetSource.create(
        columns=["age", "income", "city"],
        get_preview=accessor,
        stats=stats,
        get_split_preview=split,
        title=title,
    )
    return source, accessor


def test_defaults():
    source, _ = _make_source()
    ctx = ExplorationContext(source)

    assert ctx.numeric_columns == ("income", "age")
    assert ctx.x_col == "income"
    assert ctx.y_col == "age"
    assert ctx.active_column == "age"
    assert ctx.selected_columns == ()
    assert ctx.expand_split is False
    assert not ctx.has_split_preview
    assert ctx.split_preview is None


def test_preview_stable_across_unrelated_changes():
    source, accessor = _make_source()
    ctx = ExplorationContext(source)

    preview = ctx.preview
    ctx.toggle("age")
    ctx.set_active_column("income")
    ctx.set_x_col("age")
    ctx.set_expand_split(True)
    ctx.select_all()
    ctx.clear_selection()

    assert ctx.preview is preview
    assert accessor.calls == 1


def test_swap_source_reloads_preview_and_keeps_selection():
    source, accessor = _make_source()
    ctx = ExplorationContext(source)
    ctx.replace_selection(["city"])
    first = ctx.preview
    old_version = ctx.dataset_version

    new_source, new_accessor = _make_source(title="Reloaded")
    ctx.swap_source(new_source)

    assert ctx.dataset_version != old_version
    assert ctx.preview is not first
    assert new_accessor.calls == 1
    assert accessor.calls == 1
    assert ctx.selected_columns == ("city",)
    assert ctx.title == "Reloaded"


def test_histogram_and_scatter_follow_state():
    source, _ = _make_source()
    ctx = ExplorationContext(source)

    assert ctx.histogram == (30, 40, 50)
    ctx.set_active_column("income")
    assert ctx.histogram == (1000.0, 3000.0)
    ctx.set_active_column("city")
    assert ctx.histogram == ()
    assert ctx.histogram_bins.empty

    assert [tuple(p) for p in ctx.scatter] == [(1000.0, 30), (3000.0, 50)]


def test_histogram_memo_survives_selection_changes():
    source, _ = _make_source()
    ctx = ExplorationContext(source)

    hist = ctx.histogram
    ctx.toggle("city")
    assert ctx.histogram is hist


def test_selection_commands():
    source, _ = _make_source()
    ctx = ExplorationContext(source)

    ctx.select_all()
    assert ctx.selected_columns == ("age", "income", "city")

    ctx.toggle("income")
    assert not ctx.is_selected("income")

    event = KeyEvent("Enter")
    assert ctx.on_header_key_down(event, "city")
    assert ctx.selected_columns == ("city",)
    assert event.default_prevented

    ctx.clear_selection()
    assert ctx.selected_columns == ()


def test_summary_bar_fields():
    source, _ = _make_source()
    summary = ExplorationContext(source).summary()

    assert summary.title == "Tiny"
    assert summary.n_columns == 3
    assert summary.n_preview_rows == 3
    assert summary.missing_pct == pytest.approx(100.0 / 9)
    assert summary.missing_pct_text == "11.1"


def test_split_preview_is_cached():
    calls = []

    def split(max_rows):
        calls.append(max_rows)
        return {"columns": ["age"], "training": [[30]], "validation": [[40]], "testing": [[50]]}

    source, _ = _make_source(split=split)
    ctx = ExplorationContext(source)

    assert ctx.has_split_preview
    first = ctx.split_preview
    assert ctx.split_preview is first
    assert calls == [ExplorationContext.SPLIT_PREVIEW_MAX_ROWS]
    assert first.sizes() == {"training": 1, "validation": 1, "testing": 1}


def test_on_action_forwards_to_handler():
    received = []
    source, _ = _make_source()
    ctx = ExplorationContext(source, handlers=WorkbenchHandlers(on_action=received.append))

    action = Action("normalize", {"method": "zscore", "targetColumns": ["age"]})
    ctx.on_action(action)

    assert received == [action]


def test_on_action_without_handler_is_dropped():
    source, _ = _make_source()
    ctx = ExplorationContext(source)

    ctx.on_action(Action("split"))
    ctx.go_back()
    assert not ctx.can_go_back


def test_go_back_calls_handler():
    calls = []
    source, _ = _make_source()
    ctx = ExplorationContext(source, handlers=WorkbenchHandlers(on_back=lambda: calls.append("back")))

    assert ctx.can_go_back
    ctx.go_back()
    assert calls == ["back"]


def test_provider_use_without_mount_raises_every_time():
    provider = ExplorationProvider()

    for _ in range(3):
        with pytest.raises(MissingContextError):
            provider.use()

    assert issubclass(MissingContextError, WorkbenchError)
    assert issubclass(MissingContextError, RuntimeError)


def test_provider_mount_and_unmount():
    provider = ExplorationProvider()
    source, _ = _make_source()

    ctx = provider.mount(source)
    assert provider.is_mounted
    assert provider.use() is ctx

    provider.unmount()
    assert not provider.is_mounted
    with pytest.raises(MissingContextError):
        provider.use()


def test_histogram_bins_with_infinite_cell():
    source = DatasetSource.create(
        columns=["v"],
        get_preview=lambda n: {"columns": ["v"], "rows": [[1.0], [float("inf")], [2.0]]},
        stats=[{"column": "v", "type": "numeric", "count": 3, "missing": 0, "unique": 3}],
    )
    ctx = ExplorationContext(source)

    assert ctx.histogram == (1.0, float("inf"), 2.0)
    assert int(ctx.histogram_bins["count"].sum()) == 2
