from __future__ import annotations

from dataclasses import dataclass, replace

from pipeplot.serialize import format_range
from pipeplot.styles import LineStyle


@dataclass(frozen=True)
class Series:
    rows: tuple[str, ...]
    style: LineStyle
    label: str
    column_selector: str
    is_3d: bool = False

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class AxisRange:
    lo: float | None = None
    hi: float | None = None

    def render(self) -> str:
        return format_range(self.lo, self.hi)


AUTO = AxisRange()


@dataclass(frozen=True)
class AxisRanges:
    x: AxisRange = AUTO
    y: AxisRange = AUTO
    z: AxisRange = AUTO

    def with_axis(self, axis: str, lo: float | None = None, hi: float | None = None) -> "AxisRanges":
        if axis not in ("x", "y", "z"):
            raise ValueError(f"unknown axis: {axis!r}")
        return replace(self, **{axis: AxisRange(lo=lo, hi=hi)})
