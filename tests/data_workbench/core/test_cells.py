import math

import numpy as np
import pandas as pd
import pytest

from data_workbench.core.cells import CellKind, classify_cell, is_number


@pytest.mark.parametrize("value", [0, 1, -2.5, np.int64(3), np.float32(1.5), math.inf])
def test_numbers(value):
    assert classify_cell(value) is CellKind.NUMBER
    assert is_number(value)


@pytest.mark.parametrize("value", [None, float("nan"), np.nan, pd.NA, pd.NaT])
def test_missing(value):
    assert classify_cell(value) is CellKind.MISSING


@pytest.mark.parametrize("value", ["a", "", "3", True, False, np.bool_(True), [1, 2]])
def test_text(value):
    assert classify_cell(value) is CellKind.TEXT
    assert not is_number(value)
