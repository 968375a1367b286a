from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pipeplot.serialize import quote
from pipeplot.series import AxisRange, AxisRanges, Series
from pipeplot.styles import Dimensionality, LineStyle

SERIES_DELIMITER = ", "
DEFAULT_FILL_STYLE = "solid 0.5"


@dataclass(frozen=True)
class RangeClause:
    axis_range: AxisRange

    def render(self) -> str:
        return self.axis_range.render()


@dataclass(frozen=True)
class DataBlock:
    index: int
    rows: tuple[str, ...]

    @property
    def name(self) -> str:
        return f"$Datablock{self.index}"

    def render(self) -> str:
        lines = [f"{self.name} << EOD", *self.rows, "EOD"]
        return "\n".join(lines)


@dataclass(frozen=True)
class SeriesClause:
    block: DataBlock
    column_selector: str
    style: LineStyle
    label: str

    def render(self) -> str:
        return f"{self.block.name} using {self.column_selector} with {self.style.keyword} title {quote(self.label)}"


@dataclass(frozen=True)
class PlotCommand:
    """One complete draw request: fill preamble, inline data, then the draw verb."""

    fill_style: str
    blocks: tuple[DataBlock, ...]
    verb: str
    ranges: tuple[RangeClause, ...]
    clauses: tuple[SeriesClause, ...]

    def render(self) -> str:
        parts = [f"set style fill {self.fill_style}"]
        parts.extend(block.render() for block in self.blocks)
        draw = " ".join([self.verb, *(r.render() for r in self.ranges)])
        draw += " " + SERIES_DELIMITER.join(clause.render() for clause in self.clauses)
        parts.append(draw)
        return "\n".join(parts)


def compose(
    series: Sequence[Series],
    dimensionality: Dimensionality | None,
    ranges: AxisRanges,
    *,
    fill_style: str = DEFAULT_FILL_STYLE,
) -> PlotCommand | None:
    if not series:
        return None
    blocks = tuple(DataBlock(index=i, rows=s.rows) for i, s in enumerate(series))
    clauses = tuple(
        SeriesClause(block=block, column_selector=s.column_selector, style=s.style, label=s.label)
        for block, s in zip(blocks, series)
    )
    if dimensionality is Dimensionality.THREE_D:
        verb = "splot"
        range_clauses = (RangeClause(ranges.x), RangeClause(ranges.y), RangeClause(ranges.z))
    else:
        verb = "plot"
        range_clauses = (RangeClause(ranges.x), RangeClause(ranges.y))
    return PlotCommand(
        fill_style=fill_style,
        blocks=blocks,
        verb=verb,
        ranges=range_clauses,
        clauses=clauses,
    )
