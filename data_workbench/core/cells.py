from __future__ import annotations

import math
import numbers
from enum import Enum
from typing import Any

import pandas as pd


class CellKind(Enum):
    """
    Tag for a single preview cell.

    Preview rows mix numbers, strings and missing markers, so derivations
    switch on the tag rather than on raw Python types.
    """
    NUMBER = "number"
    TEXT = "text"
    MISSING = "missing"


def classify_cell(value: Any) -> CellKind:
    """
    Classify a raw cell value.

    - None, NaN, pd.NA and NaT are MISSING
    - real numbers (ints, floats, numpy scalars) are NUMBER, bools are not
    - anything else is TEXT
    """
    if value is None:
        return CellKind.MISSING

    # bool subclasses int
    if isinstance(value, bool):
        return CellKind.TEXT

    if isinstance(value, numbers.Real):
        return CellKind.MISSING if math.isnan(value) else CellKind.NUMBER

    if pd.api.types.is_scalar(value) and pd.isna(value):
        return CellKind.MISSING

    return CellKind.TEXT


def is_number(value: Any) -> bool:
    return classify_cell(value) is CellKind.NUMBER
