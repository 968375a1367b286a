from __future__ import annotations

import importlib.util
import io
from pathlib import Path
import unittest

from pipeplot import PlotSession
from pipeplot_core.transport import StreamTransport


def _load_example(name: str):
    path = Path(__file__).resolve().parents[1] / "examples" / "plots" / f"{name}.py"
    spec = importlib.util.spec_from_file_location(f"pipeplot_example_{name}", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _session() -> tuple[PlotSession, io.StringIO]:
    out = io.StringIO()
    session = PlotSession(StreamTransport(out))
    session.start()
    return session, out


class PlotExampleTests(unittest.TestCase):
    def test_animated_gif_example_draws_one_frame_per_point(self) -> None:
        session, out = _session()
        self.assertTrue(_load_example("animated_gif").run(session, "frames.gif"))
        text = out.getvalue()
        self.assertIn("set terminal gif animate delay 100 loop 0 size 800,600", text)
        self.assertEqual(text.count("$Datablock0 << EOD"), 5)
        self.assertIn("plot [0:6] [0:6] $Datablock0", text)
        self.assertIn("1 5\n2 2\n3 4\n4 1\n5 3\nEOD", text)

    def test_error_bars_example(self) -> None:
        session, out = _session()
        self.assertTrue(_load_example("error_bars").run(session))
        text = out.getvalue()
        self.assertIn("using 1:2:3:4 with xyerrorbars title 'Measurements'", text)
        self.assertIn("$Datablock1 using 1:2 with lines title 'Model y = 2x'", text)

    def test_histogram_example_counts_every_sample(self) -> None:
        session, out = _session()
        self.assertTrue(_load_example("histogram").run(session, bins=10))
        text = out.getvalue()
        block = text.split("$Datablock0 << EOD\n", 1)[1].split("\nEOD", 1)[0]
        counts = [int(row.split()[1]) for row in block.splitlines()]
        self.assertEqual(len(counts), 10)
        self.assertEqual(sum(counts), 2000)

    def test_vector_field_example_uses_splot(self) -> None:
        session, out = _session()
        self.assertTrue(_load_example("vector_field_3d").run(session))
        draw = out.getvalue().rstrip("\n").splitlines()[-1]
        self.assertTrue(draw.startswith("splot [] [] [0:1] "))
        self.assertIn("with vectors title 'Tangent'", draw)


if __name__ == "__main__":
    unittest.main()
