from __future__ import annotations

import math
import unittest

import numpy as np

from pipeplot.serialize import (
    column_selector,
    escape_quotes,
    format_number,
    format_range,
    quote,
    serialize_columns,
)


class SerializeTests(unittest.TestCase):
    def test_format_range_renders_auto_bounds(self) -> None:
        self.assertEqual(format_range(math.nan, math.nan), "[]")
        self.assertEqual(format_range(), "[]")
        self.assertEqual(format_range(0, 6), "[0:6]")
        self.assertEqual(format_range(math.nan, 6), "[*:6]")
        self.assertEqual(format_range(-1.5, None), "[-1.5:*]")

    def test_format_range_treats_non_finite_bounds_as_auto(self) -> None:
        self.assertEqual(format_range(np.float32("nan"), 6), "[*:6]")
        self.assertEqual(format_range(np.float64("nan"), 6), "[*:6]")
        self.assertEqual(format_range(math.inf, 6), "[*:6]")
        self.assertEqual(format_range(0, -math.inf), "[0:*]")
        self.assertEqual(format_range(np.inf, np.nan), "[]")
        self.assertEqual(format_range(np.float32(1.5), np.int64(6)), "[1.5:6]")

    def test_escape_quotes_doubles_single_quotes(self) -> None:
        self.assertEqual(escape_quotes("O'Brien"), "O''Brien")
        self.assertEqual(quote("O'Brien"), "'O''Brien'")
        self.assertEqual(escape_quotes('say "hi"'), 'say "hi"')

    def test_line_breaks_in_quoted_text_become_spaces(self) -> None:
        self.assertEqual(escape_quotes("a\nb\r\nc\rd"), "a b c d")
        self.assertEqual(quote("it's\nset output 'x'"), "'it''s set output ''x'''")
        self.assertNotIn("\n", quote("line1\nline2"))

    def test_format_number_drops_integral_fraction(self) -> None:
        self.assertEqual(format_number(3), "3")
        self.assertEqual(format_number(2.0), "2")
        self.assertEqual(format_number(-2.5), "-2.5")
        self.assertEqual(format_number(0.1), "0.1")
        self.assertEqual(format_number(np.int64(7)), "7")
        self.assertEqual(format_number(0.0), "0")

    def test_format_number_uses_scientific_for_extremes(self) -> None:
        self.assertEqual(format_number(1e20), "1e+20")
        self.assertEqual(float(format_number(1.25e-7)), 1.25e-7)

    def test_format_number_non_finite(self) -> None:
        self.assertEqual(format_number(math.nan), "NaN")
        self.assertEqual(format_number(math.inf), "Inf")
        self.assertEqual(format_number(-math.inf), "-Inf")

    def test_serialize_columns_builds_rows_and_selector(self) -> None:
        rows, selector = serialize_columns([np.asarray([1, 2, 3]), np.asarray([5, 2, 4])])
        self.assertEqual(rows, ("1 5", "2 2", "3 4"))
        self.assertEqual(selector, "1:2")

    def test_selector_tracks_column_count(self) -> None:
        self.assertEqual(column_selector(1), "1")
        self.assertEqual(column_selector(6), "1:2:3:4:5:6")
        with self.assertRaises(ValueError):
            column_selector(0)


if __name__ == "__main__":
    unittest.main()
