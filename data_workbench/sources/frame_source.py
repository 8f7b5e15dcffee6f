from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import pandas as pd

from data_workbench.config.model import DatasetConfig
from data_workbench.core.exceptions import ConfigError
from data_workbench.core.preview import SPLIT_PARTITIONS, Preview, SplitPreview
from data_workbench.core.source import DatasetSource
from data_workbench.core.stats import ColumnStats

logger = logging.getLogger(__name__)


def _rows(frame: pd.DataFrame) -> tuple:
    """Plain Python cells, with every missing marker as None."""
    cells = frame.astype(object).where(frame.notna(), None)
    return tuple(cells.itertuples(index=False, name=None))


class FrameDatasetSource:
    """
    Dataset provider backed by a pandas DataFrame.

    The column profile and the split assignment are precomputed upstream:
    ``stats`` is a table with one row per column, and ``split_column`` (if
    any) names a column whose values are "training", "validation" or
    "testing". That column is hidden from the exposed columns.
    """

    def __init__(
        self,
        data: pd.DataFrame,
        stats: pd.DataFrame,
        split_column: Optional[str] = None,
        title: Optional[str] = None,
    ) -> None:
        if split_column is not None and split_column not in data.columns:
            raise ConfigError(f"Split column '{split_column}' not found in data")

        self.data = data
        self.split_column = split_column
        self.title = title
        self.stats: List[ColumnStats] = self._parse_stats(stats)

        self._columns: List[str] = [str(c) for c in data.columns if c != split_column]

    @staticmethod
    def _parse_stats(stats: pd.DataFrame) -> List[ColumnStats]:
        records: List[Dict[str, Any]] = (
            stats.astype(object).where(stats.notna(), None).to_dict("records")
        )
        return [ColumnStats.from_dict(r) for r in records]

    @property
    def columns(self) -> List[str]:
        return list(self._columns)

    def get_preview(self, max_rows: int = 50) -> Preview:
        frame = self.data[self._columns].head(max_rows)
        return Preview(columns=tuple(self._columns), rows=_rows(frame))

    def get_split_preview(self, max_rows: int = 10) -> SplitPreview:
        parts = {}
        for name in SPLIT_PARTITIONS:
            subset = self.data.loc[self.data[self.split_column] == name, self._columns]
            parts[name] = _rows(subset.head(max_rows))
        return SplitPreview(columns=tuple(self._columns), **parts)

    def to_source(self) -> DatasetSource:
        return DatasetSource.create(
            columns=self._columns,
            get_preview=self.get_preview,
            stats=self.stats,
            get_split_preview=self.get_split_preview if self.split_column else None,
            title=self.title,
        )


def load_frame_source(cfg: DatasetConfig) -> DatasetSource:
    """Read the data and stats files named by ``cfg`` and wrap them as a DatasetSource."""
    logger.info(
        "Loading dataset",
        extra={"dataset": cfg.name, "file": str(cfg.path), "stats_file": str(cfg.stats_path)},
    )
    data = pd.read_csv(cfg.path)
    stats = pd.read_csv(cfg.stats_path)
    return FrameDatasetSource(
        data,
        stats,
        split_column=cfg.split_column,
        title=cfg.title,
    ).to_source()
