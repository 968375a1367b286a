from pipeplot.api import connect, open_session
from pipeplot.buffer import SeriesBuffer
from pipeplot.commands import PlotCommand, compose
from pipeplot.errors import DimensionalityMismatch, PlotDataError
from pipeplot.serialize import escape_quotes, format_range
from pipeplot.series import AxisRange, AxisRanges, Series
from pipeplot.session import PlotSession
from pipeplot.styles import AxisScale, Dimensionality, LineStyle, TerminalMode

__all__ = [
    "AxisRange",
    "AxisRanges",
    "AxisScale",
    "Dimensionality",
    "DimensionalityMismatch",
    "LineStyle",
    "PlotCommand",
    "PlotDataError",
    "PlotSession",
    "Series",
    "SeriesBuffer",
    "TerminalMode",
    "compose",
    "connect",
    "escape_quotes",
    "format_range",
    "open_session",
]
