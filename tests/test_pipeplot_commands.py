from __future__ import annotations

import unittest

from pipeplot import AxisRanges, LineStyle, SeriesBuffer, compose
from pipeplot.commands import DataBlock, SeriesClause
from pipeplot.series import AxisRange


class CommandComposerTests(unittest.TestCase):
    def test_empty_buffer_composes_nothing(self) -> None:
        buf = SeriesBuffer()
        self.assertIsNone(compose(buf.series, buf.dimensionality, AxisRanges()))

    def test_single_series_command_text(self) -> None:
        buf = SeriesBuffer()
        buf.add_series("run1", LineStyle.LINES, False, [[1, 2, 3], [5, 2, 4]])
        command = compose(buf.series, buf.dimensionality, AxisRanges())
        assert command is not None
        self.assertEqual(
            command.render(),
            "set style fill solid 0.5\n"
            "$Datablock0 << EOD\n"
            "1 5\n"
            "2 2\n"
            "3 4\n"
            "EOD\n"
            "plot [] [] $Datablock0 using 1:2 with lines title 'run1'",
        )

    def test_multiple_series_are_indexed_and_delimited(self) -> None:
        buf = SeriesBuffer()
        buf.add_series("a", LineStyle.POINTS, False, [[1], [2]])
        buf.add_series("b's", LineStyle.Y_ERROR_BARS, False, [[1], [2], [0.5]])
        ranges = AxisRanges().with_axis("x", 0, 6).with_axis("y", None, 10)
        command = compose(buf.series, buf.dimensionality, ranges, fill_style="transparent solid 0.3")
        assert command is not None
        text = command.render()
        self.assertTrue(text.startswith("set style fill transparent solid 0.3\n"))
        self.assertIn("$Datablock0 << EOD\n1 2\nEOD\n", text)
        self.assertIn("$Datablock1 << EOD\n1 2 0.5\nEOD\n", text)
        draw = text.splitlines()[-1]
        self.assertEqual(
            draw,
            "plot [0:6] [*:10] $Datablock0 using 1:2 with points title 'a', "
            "$Datablock1 using 1:2:3 with yerrorbars title 'b''s'",
        )
        self.assertFalse(draw.endswith(", "))

    def test_labels_with_line_breaks_stay_on_the_draw_line(self) -> None:
        buf = SeriesBuffer()
        buf.add_series("a\nset output '/tmp/x'", LineStyle.LINES, False, [[1, 2], [3, 4]])
        buf.add_series("b", LineStyle.LINES, False, [[1, 2], [5, 6]])
        command = compose(buf.series, buf.dimensionality, AxisRanges())
        assert command is not None
        lines = command.render().splitlines()
        draws = [line for line in lines if line.startswith("plot ")]
        self.assertEqual(len(draws), 1)
        self.assertIn("title 'a set output ''/tmp/x'''", draws[0])
        self.assertTrue(draws[0].endswith("title 'b'"))
        self.assertFalse(any(line.startswith("set output") for line in lines))

    def test_3d_command_uses_splot_with_z_range(self) -> None:
        buf = SeriesBuffer()
        buf.add_series("helix", LineStyle.LINES, True, [[0, 1], [0, 1], [0, 1]])
        ranges = AxisRanges().with_axis("z", 0, 1)
        command = compose(buf.series, buf.dimensionality, ranges)
        assert command is not None
        self.assertEqual(command.verb, "splot")
        self.assertEqual(len(command.ranges), 3)
        self.assertTrue(command.render().endswith("splot [] [] [0:1] $Datablock0 using 1:2:3 with lines title 'helix'"))

    def test_clauses_render_independently(self) -> None:
        block = DataBlock(index=3, rows=("1 2",))
        clause = SeriesClause(block=block, column_selector="1:2", style=LineStyle.STEPS, label="O'Brien")
        self.assertEqual(block.render(), "$Datablock3 << EOD\n1 2\nEOD")
        self.assertEqual(clause.render(), "$Datablock3 using 1:2 with steps title 'O''Brien'")
        self.assertEqual(AxisRange(None, 2).render(), "[*:2]")


if __name__ == "__main__":
    unittest.main()
