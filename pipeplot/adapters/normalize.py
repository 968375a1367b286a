from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from pipeplot.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_column(value: Any, *, label: str = "values") -> np.ndarray:
    """Turn one caller-supplied sequence into a 1-D numeric array.

    Integer and boolean inputs keep an integer dtype so they serialize without a
    fractional part; everything else becomes float64, with ``None`` mapped to NaN.
    """
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        if tensor.is_floating_point():
            return tensor.to(torch.float64).numpy()
        return tensor.to(torch.int64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(list(value), dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def coerce_columns(values: Sequence[Any], *, labels: Sequence[str] | None = None) -> list[np.ndarray]:
    out: list[np.ndarray] = []
    for i, value in enumerate(values):
        label = labels[i] if labels is not None and i < len(labels) else f"column {i + 1}"
        out.append(coerce_column(value, label=label))
    return out


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "b"}:
        return arr.astype(np.int64, copy=False)
    if arr.dtype.kind == "f":
        return arr.astype(np.float64, copy=False)

    items = arr.tolist()
    if items and all(isinstance(raw, (int, np.integer)) and not isinstance(raw, bool) for raw in items):
        return np.asarray(items, dtype=np.int64)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(items):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes)):
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
