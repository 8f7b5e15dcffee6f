import pytest

from data_workbench.core import DatasetSource, ExplorationContext
from data_workbench.core.base_view import BaseView
from data_workbench.core.view_registry import ViewRegistry
from data_workbench.views import HistogramView, ScatterView


def _make_context():
    source = DatasetSource.create(
        columns=["a"],
        get_preview=lambda n: {"columns": ["a"], "rows": [[1]]},
        stats=[{"column": "a", "type": "numeric", "count": 1, "missing": 0, "unique": 1}],
    )
    return ExplorationContext(source)


def test_register_and_create():
    registry = ViewRegistry()
    registry.register(HistogramView)
    registry.register(ScatterView)

    assert registry.all_classes() == [HistogramView, ScatterView]

    ctx = _make_context()
    view = registry.create("scatter", ctx)
    assert isinstance(view, ScatterView)
    assert view.context is ctx


def test_register_rejects_duplicates_and_non_views():
    registry = ViewRegistry()
    registry.register(HistogramView)

    with pytest.raises(ValueError):
        registry.register(HistogramView)
    with pytest.raises(TypeError):
        registry.register(object)


def test_create_unknown_view_raises():
    with pytest.raises(KeyError):
        ViewRegistry().create("nope", _make_context())


def test_empty_figure_carries_message():
    fig = BaseView.empty_figure("Nothing here")
    assert fig.layout.title.text == "Nothing here"
    assert len(fig.data) == 0
