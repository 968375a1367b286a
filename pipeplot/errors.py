from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when plot input cannot be turned into a series."""


class DimensionalityMismatch(PlotDataError):
    """Raised when a 2-D series is mixed with 3-D series in one plot, or vice versa."""
