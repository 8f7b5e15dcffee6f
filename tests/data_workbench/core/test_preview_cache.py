import pytest

from data_workbench.core.preview import Preview, PreviewCache, SplitPreview


class _CountingAccessor:
    def __init__(self):
        self.calls = []

    def __call__(self, max_rows):
        self.calls.append(max_rows)
        return {"columns": ["a", "b"], "rows": [[1, "x"], [2, "y"]]}


def test_accessor_called_once_per_version():
    accessor = _CountingAccessor()
    cache = PreviewCache(max_rows=50, convert=Preview.from_raw)

    first = cache.get(1, accessor)
    for _ in range(3):
        assert cache.get(1, accessor) is first

    assert accessor.calls == [50]
    assert cache.version == 1


def test_new_version_reinvokes_accessor():
    accessor = _CountingAccessor()
    cache = PreviewCache(max_rows=10, convert=Preview.from_raw)

    first = cache.get(1, accessor)
    second = cache.get(2, accessor)

    assert accessor.calls == [10, 10]
    assert second is not first
    assert second == first


def test_invalidate_forces_reload():
    accessor = _CountingAccessor()
    cache = PreviewCache(max_rows=5, convert=Preview.from_raw)

    cache.get(1, accessor)
    cache.invalidate()
    assert cache.version is None

    cache.get(1, accessor)
    assert len(accessor.calls) == 2


def test_preview_from_raw():
    preview = Preview.from_raw({"columns": ["a", "b"], "rows": [[1, None]]})

    assert preview.columns == ("a", "b")
    assert preview.rows == ((1, None),)
    assert preview.n_rows == 1
    assert preview.column_index("b") == 1
    assert preview.column_index("c") is None
    assert Preview.from_raw(preview) is preview


def test_split_preview_partitions():
    split = SplitPreview.from_raw(
        {
            "columns": ["a"],
            "training": [[1], [2]],
            "validation": [[3]],
            "testing": [],
        }
    )

    assert split.sizes() == {"training": 2, "validation": 1, "testing": 0}
    assert [name for name, _ in split.partitions()] == ["training", "validation", "testing"]
    assert split.partition("validation") == ((3,),)

    with pytest.raises(KeyError):
        split.partition("holdout")
