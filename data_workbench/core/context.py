from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import pandas as pd

from .actions import Action, WorkbenchHandlers
from .charts import ChartProjector, ScatterPoint
from .exceptions import MissingContextError
from .preview import Preview, PreviewCache, SplitPreview
from .selection import ColumnSelection, KeyEvent
from .source import DatasetSource
from .stats import ColumnStats, format_missing_percentage, missing_percentage, numeric_columns

logger = logging.getLogger(__name__)

# Dataset-version tokens, one per source handed to a context
_dataset_versions = itertools.count(1)


@dataclass(frozen=True)
class WorkbenchSummary:
    """Fields shown in the summary bar."""
    title: Optional[str]
    n_columns: int
    n_preview_rows: int
    missing_pct: float
    missing_pct_text: str


class ExplorationContext:
    """
    Shared exploration state for one dataset.

    Owns the column selection, the active column, the memoized previews and
    the chart projector. Holds the dataset accessors by reference. Consumers
    read through the properties below and mutate only through the command
    methods, nothing else touches the state.

    Design Notes:
    - The previews are cached on a dataset-version token that changes only in
      ``swap_source``, so selection or chart changes never re-run the
      accessors.
    - "Selected columns" and "active column" are independent: the selection
      is for bulk actions, the active column drives the histogram.
    """

    PREVIEW_MAX_ROWS = 50
    SPLIT_PREVIEW_MAX_ROWS = 10

    def __init__(
        self,
        source: DatasetSource,
        handlers: Optional[WorkbenchHandlers] = None,
    ) -> None:
        self._handlers = handlers or WorkbenchHandlers()

        self._preview_cache: PreviewCache[Preview] = PreviewCache(
            max_rows=self.PREVIEW_MAX_ROWS, convert=Preview.from_raw, label="preview",
        )
        self._split_cache: PreviewCache[SplitPreview] = PreviewCache(
            max_rows=self.SPLIT_PREVIEW_MAX_ROWS, convert=SplitPreview.from_raw, label="split preview",
        )

        self._set_source(source)

        self._selection = ColumnSelection()
        self._active_column: Optional[str] = source.columns[0] if source.columns else None
        self._charts = ChartProjector(self._numeric_columns)
        self._expand_split = False

        logger.info(
            "Exploration context created",
            extra={
                "title": source.title,
                "n_columns": len(source.columns),
                "dataset_version": self._version,
            },
        )

    # -------------------------------------------------------------------------
    # Source
    # -------------------------------------------------------------------------
    def _set_source(self, source: DatasetSource) -> None:
        self._source = source
        self._version = next(_dataset_versions)
        self._numeric_columns: Tuple[str, ...] = tuple(numeric_columns(source.stats))

        unknown = source.unknown_stat_columns()
        if unknown:
            logger.warning(
                "Statistics reference columns not in the dataset: %s",
                ", ".join(unknown),
            )

    def swap_source(self, source: DatasetSource) -> None:
        """
        Replace the dataset accessors (a new or reloaded dataset).

        Assigns a new dataset-version token so the previews are rebuilt on the
        next read. Selection, active column and chart axes are kept; names
        that no longer exist simply derive empty series.
        """
        self._set_source(source)
        self._preview_cache.invalidate()
        self._split_cache.invalidate()
        logger.info(
            "Dataset source swapped",
            extra={"title": source.title, "dataset_version": self._version},
        )

    @property
    def dataset_version(self) -> int:
        return self._version

    # -------------------------------------------------------------------------
    # Read state
    # -------------------------------------------------------------------------
    @property
    def columns(self) -> Tuple[str, ...]:
        return self._source.columns

    @property
    def stats(self) -> Tuple[ColumnStats, ...]:
        return self._source.stats

    @property
    def title(self) -> Optional[str]:
        return self._source.title

    @property
    def preview(self) -> Preview:
        return self._preview_cache.get(self._version, self._source.get_preview)

    @property
    def has_split_preview(self) -> bool:
        return self._source.get_split_preview is not None

    @property
    def split_preview(self) -> Optional[SplitPreview]:
        if self._source.get_split_preview is None:
            return None
        return self._split_cache.get(self._version, self._source.get_split_preview)

    @property
    def numeric_columns(self) -> Tuple[str, ...]:
        return self._numeric_columns

    @property
    def selected_columns(self) -> Tuple[str, ...]:
        return self._selection.selected

    @property
    def active_column(self) -> Optional[str]:
        return self._active_column

    @property
    def x_col(self) -> Optional[str]:
        return self._charts.x_col

    @property
    def y_col(self) -> Optional[str]:
        return self._charts.y_col

    @property
    def expand_split(self) -> bool:
        return self._expand_split

    @property
    def histogram(self) -> Tuple[float, ...]:
        return self._charts.histogram(self._version, self.preview, self._active_column)

    @property
    def histogram_bins(self) -> pd.DataFrame:
        return self._charts.histogram_bins(self._version, self.preview, self._active_column)

    @property
    def scatter(self) -> Tuple[ScatterPoint, ...]:
        return self._charts.scatter(self._version, self.preview)

    @property
    def correlation(self) -> pd.DataFrame:
        return self._charts.correlation(self._version, self.preview, self._numeric_columns)

    def summary(self) -> WorkbenchSummary:
        return WorkbenchSummary(
            title=self.title,
            n_columns=len(self.columns),
            n_preview_rows=self.preview.n_rows,
            missing_pct=missing_percentage(self.stats),
            missing_pct_text=format_missing_percentage(self.stats),
        )

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------
    def set_active_column(self, col: Optional[str]) -> None:
        self._active_column = col or None

    def is_selected(self, col: str) -> bool:
        return self._selection.is_selected(col)

    def toggle(self, col: str) -> None:
        self._selection.toggle(col)

    def replace_selection(self, cols: Iterable[str]) -> None:
        self._selection.replace(cols)

    def select_all(self) -> None:
        self._selection.replace(self.columns)

    def clear_selection(self) -> None:
        self._selection.clear()

    def on_header_key_down(self, event: KeyEvent, col: str) -> bool:
        return self._selection.on_header_key_down(event, col)

    def set_x_col(self, col: Optional[str]) -> None:
        self._charts.set_x_col(col)

    def set_y_col(self, col: Optional[str]) -> None:
        self._charts.set_y_col(col)

    def set_expand_split(self, expand: bool) -> None:
        self._expand_split = bool(expand)

    def on_action(self, action: Action) -> None:
        """Forward ``action`` to the external handler, if one is configured."""
        handler = self._handlers.on_action
        if handler is None:
            logger.debug("No action handler configured, dropping %r", action.type)
            return
        logger.info("Forwarding action", extra={"action_type": action.type})
        handler(action)

    def go_back(self) -> None:
        handler = self._handlers.on_back
        if handler is None:
            logger.debug("No back handler configured")
            return
        handler()

    @property
    def can_go_back(self) -> bool:
        return self._handlers.on_back is not None


class ExplorationProvider:
    """
    Establishes the active ExplorationContext.

    ``use()`` is the only way consumers reach the context; with nothing
    mounted it raises MissingContextError every time instead of returning a
    default.
    """

    def __init__(self) -> None:
        self._context: Optional[ExplorationContext] = None

    @property
    def is_mounted(self) -> bool:
        return self._context is not None

    def mount(
        self,
        source: DatasetSource,
        handlers: Optional[WorkbenchHandlers] = None,
    ) -> ExplorationContext:
        self._context = ExplorationContext(source, handlers=handlers)
        return self._context

    def unmount(self) -> None:
        self._context = None

    def use(self) -> ExplorationContext:
        if self._context is None:
            raise MissingContextError(
                "ExplorationProvider.use() called with no mounted ExplorationContext"
            )
        return self._context
