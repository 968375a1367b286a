from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np
import torch

from pipeplot import PlotDataError
from pipeplot.adapters.normalize import coerce_column, coerce_columns

try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None


class CoerceColumnTests(unittest.TestCase):
    def test_integer_lists_keep_integer_dtype(self) -> None:
        arr = coerce_column([1, 2, 3])
        self.assertEqual(arr.dtype, np.int64)

    def test_mixed_values_become_float(self) -> None:
        arr = coerce_column([1, 2.5, None, Decimal("0.25")])
        self.assertEqual(arr.dtype, np.float64)
        self.assertTrue(np.isnan(arr[2]))
        self.assertEqual(arr[3], 0.25)

    def test_torch_tensors(self) -> None:
        floats = coerce_column(torch.tensor([0.5, 1.5], dtype=torch.float32))
        ints = coerce_column(torch.arange(3))
        self.assertEqual(floats.dtype, np.float64)
        self.assertEqual(ints.tolist(), [0, 1, 2])
        with self.assertRaises(PlotDataError):
            coerce_column(torch.zeros((2, 2)))

    @unittest.skipIf(pd is None, "pandas not installed")
    def test_pandas_series(self) -> None:
        arr = coerce_column(pd.Series([1.0, 2.0]))
        self.assertEqual(arr.tolist(), [1.0, 2.0])

    def test_rejects_bad_inputs(self) -> None:
        with self.assertRaises(PlotDataError):
            coerce_column(np.zeros((2, 2)))
        with self.assertRaises(PlotDataError):
            coerce_column("123")
        with self.assertRaises(PlotDataError):
            coerce_column([1, "two"])
        with self.assertRaises(PlotDataError):
            coerce_column(42)

    def test_coerce_columns_names_columns_in_errors(self) -> None:
        with self.assertRaisesRegex(PlotDataError, "column 2"):
            coerce_columns([[1, 2], ["x", "y"]])


if __name__ == "__main__":
    unittest.main()
