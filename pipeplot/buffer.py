from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any, Iterator

from pipeplot.adapters.normalize import coerce_column, coerce_columns
from pipeplot.errors import DimensionalityMismatch, PlotDataError
from pipeplot.histogram import bin_values
from pipeplot.serialize import serialize_columns
from pipeplot.series import Series
from pipeplot.styles import Dimensionality, LineStyle, accepted_arities, coerce_style

LOGGER = logging.getLogger(__name__)


class SeriesBuffer:
    """Ordered pending series sharing one dimensionality until the next clear."""

    def __init__(self) -> None:
        self._series: list[Series] = []
        self._dimensionality: Dimensionality | None = None

    @property
    def dimensionality(self) -> Dimensionality | None:
        return self._dimensionality

    @property
    def is_3d(self) -> bool:
        return self._dimensionality is Dimensionality.THREE_D

    @property
    def series(self) -> tuple[Series, ...]:
        return tuple(self._series)

    def __len__(self) -> int:
        return len(self._series)

    def __iter__(self) -> Iterator[Series]:
        return iter(self._series)

    def clear(self) -> None:
        self._series.clear()
        self._dimensionality = None

    def add_series(
        self,
        label: str,
        style: LineStyle | str,
        is_3d: bool,
        sequences: Sequence[Any],
    ) -> Series | None:
        style = coerce_style(style)
        if len(sequences) == 0:
            raise PlotDataError("at least one sequence is required")
        columns = coerce_columns(sequences)
        if columns[0].size == 0:
            LOGGER.debug("skipping series %r: primary sequence is empty", label)
            return None
        lengths = {col.size for col in columns}
        if len(lengths) != 1:
            LOGGER.debug("skipping series %r: sequence lengths differ %s", label, sorted(lengths))
            return None

        dimensionality = Dimensionality.of(is_3d)
        self._check_dimensionality(dimensionality)
        arities = accepted_arities(style, dimensionality)
        if len(columns) not in arities:
            raise PlotDataError(
                f"style {style.keyword!r} ({dimensionality.value}) takes "
                f"{' or '.join(str(n) for n in sorted(arities)) or 'no'} columns, got {len(columns)}"
            )

        rows, selector = serialize_columns(columns)
        series = Series(rows=rows, style=style, label=label, column_selector=selector, is_3d=is_3d)
        self._append(series, dimensionality)
        return series

    def add_histogram(
        self,
        values: Any,
        bin_count: int,
        label: str = "",
        style: LineStyle | str = LineStyle.BOXES,
    ) -> Series | None:
        style = coerce_style(style)
        if 2 not in accepted_arities(style, Dimensionality.TWO_D):
            raise PlotDataError(f"style {style.keyword!r} cannot draw a histogram (needs 2 columns)")
        bins = bin_values(coerce_column(values, label="values"), bin_count)
        if bins is None:
            LOGGER.debug("skipping histogram %r: nothing to bin", label)
            return None
        self._check_dimensionality(Dimensionality.TWO_D)
        rows, selector = serialize_columns([bins.centers, bins.counts])
        series = Series(rows=rows, style=style, label=label, column_selector=selector, is_3d=False)
        self._append(series, Dimensionality.TWO_D)
        return series

    def _check_dimensionality(self, dimensionality: Dimensionality) -> None:
        if self._series and self._dimensionality is not dimensionality:
            current = self._dimensionality.value if self._dimensionality else "unset"
            raise DimensionalityMismatch(
                f"cannot add a {dimensionality.value} series to a {current} plot"
            )

    def _append(self, series: Series, dimensionality: Dimensionality) -> None:
        self._series.append(series)
        self._dimensionality = dimensionality
