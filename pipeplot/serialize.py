from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


_SCIENTIFIC_ABOVE = 1e16
_SCIENTIFIC_BELOW = 1e-4


def format_number(value: float | int) -> str:
    """Shortest text that reads back to the same number; integral values carry no `.0`."""
    if isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_)):
        return str(int(value))
    v = float(value)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Inf" if v > 0 else "-Inf"
    if v == 0.0:
        return "0"
    mag = abs(v)
    if mag >= _SCIENTIFIC_ABOVE or mag < _SCIENTIFIC_BELOW:
        return np.format_float_scientific(v, trim="-")
    return np.format_float_positional(v, trim="-")


def column_selector(count: int) -> str:
    if count <= 0:
        raise ValueError("column count must be > 0")
    return ":".join(str(i) for i in range(1, count + 1))


def serialize_columns(columns: Sequence[np.ndarray]) -> tuple[tuple[str, ...], str]:
    """Render aligned columns as space-joined rows plus the selector naming them.

    Callers guarantee that every column has the length of the first one.
    """
    if not columns:
        raise ValueError("at least one column is required")
    length = len(columns[0])
    rows = tuple(" ".join(format_number(col[i]) for col in columns) for i in range(length))
    return rows, column_selector(len(columns))


def escape_quotes(text: str) -> str:
    # A line break would end the command early; the engine reads one command per line.
    text = text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
    return text.replace("'", "''")


def quote(text: str) -> str:
    return f"'{escape_quotes(text)}'"


def format_range(lo: float | None = None, hi: float | None = None) -> str:
    lo_unset = _is_unset(lo)
    hi_unset = _is_unset(hi)
    if lo_unset and hi_unset:
        return "[]"
    lo_text = "*" if lo_unset else format_number(lo)  # type: ignore[arg-type]
    hi_text = "*" if hi_unset else format_number(hi)  # type: ignore[arg-type]
    return f"[{lo_text}:{hi_text}]"


def _is_unset(value: float | None) -> bool:
    # NaN and infinite bounds have no range syntax; they mean "auto".
    return value is None or not math.isfinite(float(value))
