from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

Row = Tuple[Any, ...]

SPLIT_PARTITIONS: Tuple[str, ...] = ("training", "validation", "testing")


@dataclass(frozen=True)
class Preview:
    """
    Bounded row sample of a dataset.

    Rows are positionally aligned to ``columns``; every row has
    ``len(columns)`` cells.
    """
    columns: Tuple[str, ...] = ()
    rows: Tuple[Row, ...] = ()

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    def column_index(self, column: Optional[str]) -> Optional[int]:
        """Position of ``column``, or None when it is unset or absent."""
        if column is None:
            return None
        try:
            return self.columns.index(column)
        except ValueError:
            return None

    def column_values(self, index: int) -> List[Any]:
        return [row[index] for row in self.rows]

    @classmethod
    def from_raw(cls, raw: Any) -> Preview:
        """
        Accept either a Preview or a ``{"columns": [...], "rows": [[...], ...]}``
        mapping as returned by a dataset provider.
        """
        if isinstance(raw, Preview):
            return raw
        return cls(
            columns=tuple(str(c) for c in raw.get("columns", ())),
            rows=tuple(tuple(r) for r in raw.get("rows", ())),
        )


@dataclass(frozen=True)
class SplitPreview:
    """
    Externally precomputed training/validation/testing samples.

    All three partitions share ``columns``. Disjointness or completeness of
    the partitions is not checked here.
    """
    columns: Tuple[str, ...] = ()
    training: Tuple[Row, ...] = ()
    validation: Tuple[Row, ...] = ()
    testing: Tuple[Row, ...] = ()

    def partition(self, name: str) -> Tuple[Row, ...]:
        if name not in SPLIT_PARTITIONS:
            raise KeyError(f"Unknown split partition '{name}'")
        return getattr(self, name)

    def partitions(self) -> Iterator[Tuple[str, Tuple[Row, ...]]]:
        for name in SPLIT_PARTITIONS:
            yield name, self.partition(name)

    def sizes(self) -> Dict[str, int]:
        return {name: len(rows) for name, rows in self.partitions()}

    @classmethod
    def from_raw(cls, raw: Any) -> SplitPreview:
        if isinstance(raw, SplitPreview):
            return raw
        return cls(
            columns=tuple(str(c) for c in raw.get("columns", ())),
            **{
                name: tuple(tuple(r) for r in raw.get(name, ()))
                for name in SPLIT_PARTITIONS
            },
        )


T = TypeVar("T")

_UNSET = object()


@dataclass
class PreviewCache(Generic[T]):
    """
    Materialised preview keyed on a dataset-version token.

    The accessor is only invoked when the requested version differs from
    the cached one (or after ``invalidate()``); any other read returns the
    same object. ``max_rows`` is fixed for the lifetime of the cache.
    """
    max_rows: int
    convert: Callable[[Any], T]
    label: str = "preview"

    _version: Any = field(default=_UNSET, init=False, repr=False)
    _value: Optional[T] = field(default=None, init=False, repr=False)

    @property
    def version(self) -> Any:
        return None if self._version is _UNSET else self._version

    def get(self, version: Any, accessor: Callable[[int], Any]) -> T:
        if self._version is _UNSET or version != self._version:
            raw = accessor(self.max_rows)
            self._value = self.convert(raw)
            self._version = version
            logger.info(
                "Materialised %s",
                self.label,
                extra={"dataset_version": version, "max_rows": self.max_rows},
            )
        return self._value

    def invalidate(self) -> None:
        self._version = _UNSET
        self._value = None
