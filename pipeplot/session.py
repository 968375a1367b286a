from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from pipeplot_core.config import SessionConfig
from pipeplot_core.transport import Transport

from pipeplot.buffer import SeriesBuffer
from pipeplot.commands import PlotCommand, compose
from pipeplot.serialize import quote
from pipeplot.series import AxisRanges, Series
from pipeplot.styles import AxisScale, LineStyle, TerminalMode
from pipeplot.terminals import (
    animated_gif_terminal,
    dumb_terminal,
    logscale_command,
    multiplot_command,
    pdf_terminal,
    png_terminal,
    svg_terminal,
)

LOGGER = logging.getLogger(__name__)


class PlotSession:
    """Accumulates series and sends them to the engine as one draw command per `show`.

    Use it as a context manager so the transport is torn down on every exit path::

        with PlotSession(transport) as gp:
            gp.plot([1, 2, 3], [5, 2, 4], label="run1")
            gp.show()
    """

    def __init__(self, transport: Transport, *, config: SessionConfig | None = None) -> None:
        self._transport = transport
        self._config = config or SessionConfig()
        self._buffer = SeriesBuffer()
        self._ranges = AxisRanges()
        self._points_x: list[float] = []
        self._points_y: list[float] = []
        self._started = False

    def __enter__(self) -> "PlotSession":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def buffer(self) -> SeriesBuffer:
        return self._buffer

    @property
    def ranges(self) -> AxisRanges:
        return self._ranges

    @property
    def pending(self) -> tuple[Series, ...]:
        return self._buffer.series

    def start(self) -> bool:
        if self._started:
            return self.ok()
        self._started = True
        self.reset()
        ok = self.send_command(f"set encoding {self._config.encoding}")
        return self.send_command("set minussign") and ok

    def close(self) -> None:
        self._transport.close()

    def ok(self) -> bool:
        return self._transport.is_alive()

    def send_command(self, text: str) -> bool:
        sent = self._transport.send_line(text)
        if not sent:
            LOGGER.debug("command not sent: %.60r", text)
        return sent

    # configuration

    def set_xrange(self, lo: float | None = None, hi: float | None = None) -> None:
        self._ranges = self._ranges.with_axis("x", lo, hi)

    def set_yrange(self, lo: float | None = None, hi: float | None = None) -> None:
        self._ranges = self._ranges.with_axis("y", lo, hi)

    def set_zrange(self, lo: float | None = None, hi: float | None = None) -> None:
        self._ranges = self._ranges.with_axis("z", lo, hi)

    def set_xlabel(self, label: str) -> bool:
        return self.send_command(f"set xlabel {quote(label)}")

    def set_ylabel(self, label: str) -> bool:
        return self.send_command(f"set ylabel {quote(label)}")

    def set_logscale(self, scale: AxisScale | str) -> bool:
        return self.send_command(logscale_command(scale))

    def multiplot(self, rows: int, cols: int, title: str = "") -> bool:
        return self.send_command(multiplot_command(rows, cols, title))

    def redirect_to_png(self, filename: str, size: str = "800,600") -> bool:
        return self.send_command(png_terminal(filename, size))

    def redirect_to_pdf(self, filename: str, size: str = "16cm,12cm") -> bool:
        return self.send_command(pdf_terminal(filename, size))

    def redirect_to_svg(self, filename: str, size: str = "800,600") -> bool:
        return self.send_command(svg_terminal(filename, size))

    def redirect_to_dumb(
        self,
        filename: str = "",
        width: int = 80,
        height: int = 50,
        mode: TerminalMode | str = TerminalMode.MONO,
    ) -> bool:
        return self.send_command(dumb_terminal(filename, width, height, mode))

    def redirect_to_animated_gif(
        self,
        filename: str,
        size: str = "800,600",
        delay_ms: int = 50,
        loop: bool = True,
    ) -> bool:
        return self.send_command(animated_gif_terminal(filename, size, delay_ms, loop))

    # series

    def add_series(
        self,
        label: str,
        style: LineStyle | str,
        is_3d: bool,
        sequences: Sequence[Any],
    ) -> Series | None:
        return self._buffer.add_series(label, style, is_3d, sequences)

    def plot(self, *columns: Any, label: str = "", style: LineStyle | str = LineStyle.LINES) -> Series | None:
        """Plot ``y`` or ``x, y``; with no columns, plot the points gathered by `add_point`."""
        if not columns:
            return self.plot_points(label=label, style=style)
        if len(columns) > 2:
            raise TypeError("plot() takes y or x, y; use plot3d() or the error-bar helpers for more columns")
        return self._buffer.add_series(label, style, False, columns)

    def plot_xerr(self, x: Any, y: Any, err: Any, label: str = "") -> Series | None:
        return self._buffer.add_series(label, LineStyle.X_ERROR_BARS, False, [x, y, err])

    def plot_yerr(self, x: Any, y: Any, err: Any, label: str = "") -> Series | None:
        return self._buffer.add_series(label, LineStyle.Y_ERROR_BARS, False, [x, y, err])

    def plot_xyerr(self, x: Any, y: Any, xerr: Any, yerr: Any, label: str = "") -> Series | None:
        return self._buffer.add_series(label, LineStyle.XY_ERROR_BARS, False, [x, y, xerr, yerr])

    def plot_vectors(self, x: Any, y: Any, vx: Any, vy: Any, label: str = "") -> Series | None:
        return self._buffer.add_series(label, LineStyle.VECTORS, False, [x, y, vx, vy])

    def plot3d(
        self,
        x: Any,
        y: Any,
        z: Any,
        label: str = "",
        style: LineStyle | str = LineStyle.LINES,
    ) -> Series | None:
        return self._buffer.add_series(label, style, True, [x, y, z])

    def plot_vectors3d(
        self,
        x: Any,
        y: Any,
        z: Any,
        vx: Any,
        vy: Any,
        vz: Any,
        label: str = "",
    ) -> Series | None:
        return self._buffer.add_series(label, LineStyle.VECTORS, True, [x, y, z, vx, vy, vz])

    def histogram(
        self,
        values: Any,
        bin_count: int,
        label: str = "",
        style: LineStyle | str = LineStyle.BOXES,
    ) -> Series | None:
        return self._buffer.add_histogram(values, bin_count, label, style)

    def add_point(self, x: float, y: float) -> None:
        self._points_x.append(float(x))
        self._points_y.append(float(y))

    def plot_points(self, label: str = "", style: LineStyle | str = LineStyle.LINES) -> Series | None:
        return self._buffer.add_series(label, style, False, [self._points_x, self._points_y])

    def clear_points(self) -> None:
        self._points_x.clear()
        self._points_y.clear()

    # drawing

    def build_command(self) -> PlotCommand | None:
        return compose(
            self._buffer.series,
            self._buffer.dimensionality,
            self._ranges,
            fill_style=self._config.fill_style,
        )

    def show(self, auto_clear: bool = True) -> bool:
        command = self.build_command()
        if command is None:
            return True
        sent = self.send_command(command.render())
        if sent and auto_clear:
            self._buffer.clear()
        return sent

    flush = show

    def clear(self) -> None:
        self._buffer.clear()

    def reset(self) -> None:
        self._buffer.clear()
        self._ranges = AxisRanges()
        self.clear_points()
