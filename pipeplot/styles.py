from __future__ import annotations

from enum import Enum


class LineStyle(str, Enum):
    """Render styles; the value is the keyword used in the `with` clause."""

    DOTS = "dots"
    LINES = "lines"
    POINTS = "points"
    LINESPOINTS = "linespoints"
    STEPS = "steps"
    BOXES = "boxes"
    X_ERROR_BARS = "xerrorbars"
    Y_ERROR_BARS = "yerrorbars"
    XY_ERROR_BARS = "xyerrorbars"
    VECTORS = "vectors"

    @property
    def keyword(self) -> str:
        return self.value


class Dimensionality(str, Enum):
    TWO_D = "2d"
    THREE_D = "3d"

    @classmethod
    def of(cls, is_3d: bool) -> "Dimensionality":
        return cls.THREE_D if is_3d else cls.TWO_D


class AxisScale(str, Enum):
    LINEAR = "linear"
    LOGX = "logx"
    LOGY = "logy"
    LOGXY = "logxy"


class TerminalMode(str, Enum):
    MONO = "mono"
    ANSI = "ansi"
    ANSI256 = "ansi256"
    ANSIRGB = "ansirgb"


_BASIC_STYLES = (
    LineStyle.DOTS,
    LineStyle.LINES,
    LineStyle.POINTS,
    LineStyle.LINESPOINTS,
    LineStyle.STEPS,
    LineStyle.BOXES,
)

# Number of aligned columns each style accepts, per dimensionality.
STYLE_ARITY: dict[tuple[LineStyle, Dimensionality], frozenset[int]] = {
    **{(style, Dimensionality.TWO_D): frozenset({1, 2}) for style in _BASIC_STYLES},
    (LineStyle.BOXES, Dimensionality.TWO_D): frozenset({1, 2, 3}),
    **{(style, Dimensionality.THREE_D): frozenset({3}) for style in _BASIC_STYLES},
    (LineStyle.X_ERROR_BARS, Dimensionality.TWO_D): frozenset({3, 4}),
    (LineStyle.Y_ERROR_BARS, Dimensionality.TWO_D): frozenset({3, 4}),
    (LineStyle.XY_ERROR_BARS, Dimensionality.TWO_D): frozenset({4, 6}),
    (LineStyle.VECTORS, Dimensionality.TWO_D): frozenset({4}),
    (LineStyle.VECTORS, Dimensionality.THREE_D): frozenset({6}),
}


def accepted_arities(style: LineStyle, dimensionality: Dimensionality) -> frozenset[int]:
    return STYLE_ARITY.get((style, dimensionality), frozenset())


def coerce_style(style: LineStyle | str) -> LineStyle:
    if isinstance(style, LineStyle):
        return style
    key = str(style).strip().lower()
    for member in LineStyle:
        if key in (member.value, member.name.lower(), member.name.lower().replace("_", "-")):
            return member
    raise ValueError(f"unknown line style: {style!r}")
