from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .stats import ColumnStats, coerce_stats

PreviewAccessor = Callable[[int], Any]


@dataclass(frozen=True)
class DatasetSource:
    """
    Everything the workbench consumes from a dataset provider.

    - columns: ordered, unique column names
    - get_preview: ``max_rows -> {columns, rows}`` (or a Preview)
    - stats: one profile per column, in table order
    - get_split_preview: optional ``max_rows -> {columns, training, validation, testing}``
    - title: optional display title

    The accessors are held by reference only. They are expected to be pure
    for a given dataset, the workbench decides when to call them.
    """
    columns: Tuple[str, ...]
    get_preview: PreviewAccessor
    stats: Tuple[ColumnStats, ...] = field(default_factory=tuple)
    get_split_preview: Optional[PreviewAccessor] = None
    title: Optional[str] = None

    @classmethod
    def create(
        cls,
        columns: Sequence[str],
        get_preview: PreviewAccessor,
        stats: Sequence[Any] = (),
        get_split_preview: Optional[PreviewAccessor] = None,
        title: Optional[str] = None,
    ) -> DatasetSource:
        """Build a source from loosely typed provider values (lists, stat dicts)."""
        return cls(
            columns=tuple(columns),
            get_preview=get_preview,
            stats=tuple(coerce_stats(stats)),
            get_split_preview=get_split_preview,
            title=title,
        )

    def unknown_stat_columns(self) -> List[str]:
        """Profiled columns that are not in ``columns``."""
        known = set(self.columns)
        return [s.column for s in self.stats if s.column not in known]
