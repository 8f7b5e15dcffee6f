from __future__ import annotations

from typing import Any, Callable, Hashable, NamedTuple, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .cells import is_number
from .preview import Preview

HISTOGRAM_BINS = 20
CORRELATION_LIMIT = 8


class ScatterPoint(NamedTuple):
    x: float
    y: float


# -----------------------------------------------------------------------------
# Pure projections
# -----------------------------------------------------------------------------
def project_histogram(preview: Preview, column: Optional[str]) -> Tuple[float, ...]:
    """
    Numeric values of ``column`` across the preview rows.

    Non-numeric and missing cells are dropped. An unset or absent column
    yields an empty tuple.
    """
    idx = preview.column_index(column)
    if idx is None:
        return ()
    return tuple(
        row[idx] for row in preview.rows
        if is_number(row[idx])
    )


def project_scatter(
    preview: Preview,
    x_column: Optional[str],
    y_column: Optional[str],
) -> Tuple[ScatterPoint, ...]:
    """
    Same-row (x, y) pairs where both cells are numeric.

    A pair with only one numeric coordinate is dropped whole.
    """
    xi = preview.column_index(x_column)
    yi = preview.column_index(y_column)
    if xi is None or yi is None:
        return ()

    points = []
    for row in preview.rows:
        x, y = row[xi], row[yi]
        if is_number(x) and is_number(y):
            points.append(ScatterPoint(x, y))
    return tuple(points)


def bin_histogram(values: Sequence[float], bins: int = HISTOGRAM_BINS) -> pd.DataFrame:
    """
    Equal-width bins over ``values``.

    Returns a frame with one row per bin: "bin" (bin centre) and "count".
    Infinite values are left out, the bin range only spans finite ones.
    """
    arr = np.asarray(values, dtype=float)
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        return pd.DataFrame({"bin": pd.Series(dtype=float), "count": pd.Series(dtype=int)})

    counts, edges = np.histogram(arr, bins=bins)
    centres = (edges[:-1] + edges[1:]) / 2.0
    return pd.DataFrame({"bin": centres, "count": counts})


def correlation_matrix(
    preview: Preview,
    numeric_columns: Sequence[str],
    limit: int = CORRELATION_LIMIT,
) -> pd.DataFrame:
    """
    Pearson correlation of the first ``limit`` numeric columns.

    Only rows where every one of those columns holds a number take part.
    Empty if any column is missing from the preview or no complete row
    exists. Zero-variance pairs read 0, the diagonal reads 1.
    """
    cols = list(numeric_columns[:limit])
    idxs = [preview.column_index(c) for c in cols]
    if not cols or any(i is None for i in idxs):
        return pd.DataFrame()

    complete = [
        [float(row[i]) for i in idxs]
        for row in preview.rows
        if all(is_number(row[i]) for i in idxs)
    ]
    if not complete:
        return pd.DataFrame()

    frame = pd.DataFrame(complete, columns=cols)
    with np.errstate(divide="ignore", invalid="ignore"):
        mat = frame.corr(method="pearson").fillna(0.0).to_numpy(copy=True)
    np.fill_diagonal(mat, 1.0)
    return pd.DataFrame(mat, index=cols, columns=cols)


# -----------------------------------------------------------------------------
# Memoized projector
# -----------------------------------------------------------------------------
class _LastValue:
    """Keep the last computed value and the key it was computed for."""

    def __init__(self) -> None:
        self._key: Any = None
        self._has_value = False
        self._value: Any = None

    def get(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        if not self._has_value or key != self._key:
            self._value = compute()
            self._key = key
            self._has_value = True
        return self._value


class ChartProjector:
    """
    Derives plottable series from a preview.

    Holds the scatter axes (x defaults to the first numeric column, y to the
    second) and memoizes each derivation on its exact inputs: the preview's
    dataset-version token plus the column(s) involved. Unrelated state
    changes return the same objects, changed inputs always recompute.
    """

    def __init__(self, numeric_columns: Sequence[str]):
        self.x_col: Optional[str] = numeric_columns[0] if len(numeric_columns) > 0 else None
        self.y_col: Optional[str] = numeric_columns[1] if len(numeric_columns) > 1 else None

        self._histogram = _LastValue()
        self._bins = _LastValue()
        self._scatter = _LastValue()
        self._correlation = _LastValue()

    def set_x_col(self, col: Optional[str]) -> None:
        self.x_col = col or None

    def set_y_col(self, col: Optional[str]) -> None:
        self.y_col = col or None

    def histogram(self, version: Hashable, preview: Preview, column: Optional[str]) -> Tuple[float, ...]:
        return self._histogram.get(
            (version, column),
            lambda: project_histogram(preview, column),
        )

    def histogram_bins(self, version: Hashable, preview: Preview, column: Optional[str]) -> pd.DataFrame:
        values = self.histogram(version, preview, column)
        return self._bins.get((version, column), lambda: bin_histogram(values))

    def scatter(self, version: Hashable, preview: Preview) -> Tuple[ScatterPoint, ...]:
        x_col, y_col = self.x_col, self.y_col
        return self._scatter.get(
            (version, x_col, y_col),
            lambda: project_scatter(preview, x_col, y_col),
        )

    def correlation(
        self,
        version: Hashable,
        preview: Preview,
        numeric_columns: Sequence[str],
    ) -> pd.DataFrame:
        key = (version, tuple(numeric_columns[:CORRELATION_LIMIT]))
        return self._correlation.get(
            key,
            lambda: correlation_matrix(preview, numeric_columns),
        )


def scatter_frame(points: Sequence[ScatterPoint]) -> pd.DataFrame:
    return pd.DataFrame(list(points), columns=["x", "y"])
