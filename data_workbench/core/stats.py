from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

NUMERIC_TYPE = "numeric"


@dataclass(frozen=True)
class ColumnStats:
    """
    Precomputed profile of a single column, as supplied by the dataset provider.

    Fields:

    - column: column name, expected to be one of the dataset's columns
    - type: type tag ("numeric", "categorical", ...)
    - count: number of non-missing values
    - missing: number of missing values
    - unique: number of distinct values

    - min/max/mean/std: only populated for numeric columns
    """
    column: str
    type: str
    count: int
    missing: int
    unique: int

    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    std: Optional[float] = None

    @property
    def is_numeric(self) -> bool:
        return self.type == NUMERIC_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ColumnStats:
        def opt_float(key: str) -> Optional[float]:
            value = data.get(key)
            return None if value is None else float(value)

        return cls(
            column=str(data["column"]),
            type=str(data.get("type", "")),
            count=int(data.get("count") or 0),
            missing=int(data.get("missing") or 0),
            unique=int(data.get("unique") or 0),
            min=opt_float("min"),
            max=opt_float("max"),
            mean=opt_float("mean"),
            std=opt_float("std"),
        )


def coerce_stats(stats: Iterable[Any]) -> List[ColumnStats]:
    """Accept ColumnStats or plain mappings, preserving table order."""
    return [s if isinstance(s, ColumnStats) else ColumnStats.from_dict(s) for s in stats]


def numeric_columns(stats: Sequence[ColumnStats]) -> List[str]:
    """
    Names of the numeric columns, in statistics-table order.

    This order drives the default chart axes, so it must not be sorted.
    """
    return [s.column for s in stats if s.is_numeric]


def missing_percentage(stats: Sequence[ColumnStats]) -> float:
    """
    Aggregate missing rate over all profiled cells, as a percentage.

    missing / (count + missing), summed over every column. An empty table
    (or one with no cells) reads 0.0.
    """
    missing = sum(s.missing for s in stats)
    total = sum(s.count + s.missing for s in stats)
    return 100.0 * missing / (total or 1)


def format_missing_percentage(stats: Sequence[ColumnStats]) -> str:
    return f"{missing_percentage(stats):.1f}"
