from __future__ import annotations

import argparse
import io
import logging
from pathlib import Path
import sys
from typing import Sequence

import numpy as np

from pipeplot import PlotSession
from pipeplot.api import connect
from pipeplot.errors import PlotDataError
from pipeplot.styles import TerminalMode, coerce_style
from pipeplot_core.config import SessionConfig, config_from_env, load_config
from pipeplot_core.transport import StreamTransport, Transport

LOGGER = logging.getLogger("pipeplot")
OUTPUTS = ("window", "png", "pdf", "svg", "dumb")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pipeplot")
    parser.add_argument("--config", type=Path, default=None, help="TOML session config file.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    plot = sub.add_parser("plot", help="Plot numeric columns of a data file.")
    plot.add_argument("data", type=Path)
    plot.add_argument(
        "--columns",
        default="1,2",
        help="Comma separated 1-based data file columns, in the order the style expects (default: 1,2).",
    )
    plot.add_argument("--style", default="lines", help="Render style, e.g. lines, points, xyerrorbars.")
    plot.add_argument("--3d", dest="three_d", action="store_true", help="Draw with splot (x, y, z columns).")
    plot.add_argument("--title", default="")
    _add_common(plot)

    hist = sub.add_parser("histogram", help="Plot a histogram of one data file column.")
    hist.add_argument("data", type=Path)
    hist.add_argument("--bins", type=int, required=True)
    hist.add_argument("--column", type=int, default=1)
    hist.add_argument("--style", default="boxes")
    hist.add_argument("--title", default="")
    _add_common(hist)

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    config = load_config(args.config) if args.config is not None else SessionConfig()
    config = config_from_env(config)

    data = read_columns(args.data)
    if data.shape[0] == 0:
        LOGGER.info("nothing to plot: %s has no data rows", args.data)
        return 0
    transport = _build_transport(args, config)
    with PlotSession(transport, config=config) as session:
        if not _apply_output(session, args):
            LOGGER.error("failed to configure output %s", args.output)
            return 1
        _apply_ranges(session, args)
        try:
            _add_plot(session, args, data)
        except PlotDataError as exc:
            LOGGER.error("%s", exc)
            return 1
        if not session.show():
            LOGGER.error("engine rejected the plot command")
            return 1
    return 0


def _add_plot(session: PlotSession, args: argparse.Namespace, data: np.ndarray) -> None:
    if args.command == "plot":
        columns = [_column(data, i) for i in _parse_columns(args.columns)]
        session.add_series(args.title, coerce_style(args.style), args.three_d, columns)
    elif args.command == "histogram":
        session.histogram(_column(data, args.column), args.bins, args.title, coerce_style(args.style))
    else:
        raise RuntimeError(f"unsupported command: {args.command}")


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output", choices=OUTPUTS, default="window")
    parser.add_argument("--out-file", default="", help="Output file for png/pdf/svg/dumb outputs.")
    parser.add_argument("--size", default=None, help="Terminal size, e.g. 800,600.")
    parser.add_argument("--xrange", default=None, metavar="MIN:MAX")
    parser.add_argument("--yrange", default=None, metavar="MIN:MAX")
    parser.add_argument("--zrange", default=None, metavar="MIN:MAX")
    parser.add_argument("--dry-run", action="store_true", help="Print engine commands instead of running it.")


def _build_transport(args: argparse.Namespace, config: SessionConfig) -> Transport:
    if args.dry_run:
        return StreamTransport(sys.stdout)
    return connect(config)


def _apply_output(session: PlotSession, args: argparse.Namespace) -> bool:
    output = args.output
    if output == "window":
        return True
    if output == "dumb":
        if args.size:
            width, height = (int(v) for v in args.size.split(","))
            return session.redirect_to_dumb(args.out_file, width, height, TerminalMode.MONO)
        return session.redirect_to_dumb(args.out_file)
    if not args.out_file:
        raise SystemExit(f"--out-file is required for --output {output}")
    redirect = {
        "png": session.redirect_to_png,
        "pdf": session.redirect_to_pdf,
        "svg": session.redirect_to_svg,
    }[output]
    if args.size:
        return redirect(args.out_file, args.size)
    return redirect(args.out_file)


def _apply_ranges(session: PlotSession, args: argparse.Namespace) -> None:
    for axis, setter in (("xrange", session.set_xrange), ("yrange", session.set_yrange), ("zrange", session.set_zrange)):
        raw = getattr(args, axis)
        if raw is not None:
            setter(*parse_range(raw))


def parse_range(text: str) -> tuple[float | None, float | None]:
    text = text.strip().strip("[]")
    if ":" not in text:
        raise ValueError(f"range must use MIN:MAX format: {text!r}")
    lo_text, hi_text = text.split(":", 1)
    return _parse_bound(lo_text), _parse_bound(hi_text)


def _parse_bound(text: str) -> float | None:
    text = text.strip()
    if text in ("", "*"):
        return None
    return float(text)


def _parse_columns(text: str) -> list[int]:
    out = [int(part) for part in text.split(",") if part.strip()]
    if not out or any(i <= 0 for i in out):
        raise ValueError("--columns must list 1-based column numbers")
    return out


def _column(data: np.ndarray, index: int) -> np.ndarray:
    if index <= 0 or index > data.shape[1]:
        raise PlotDataError(f"column {index} out of range (file has {data.shape[1]} columns)")
    return data[:, index - 1]


def read_columns(path: str | Path) -> np.ndarray:
    """Read whitespace or comma separated numeric columns; `#` starts a comment."""
    lines = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            lines.append(line.replace(",", " "))
    if not lines:
        return np.empty((0, 1), dtype=np.float64)
    return np.loadtxt(io.StringIO("\n".join(lines)), dtype=np.float64, ndmin=2)


if __name__ == "__main__":
    raise SystemExit(main())
