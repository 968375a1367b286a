from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class HistogramBins:
    centers: np.ndarray
    counts: np.ndarray
    bin_width: float


def bin_values(values: np.ndarray, bin_count: int) -> HistogramBins | None:
    """Uniform-width binning over ``[min, max]`` of the finite values.

    Returns None when there is nothing to bin. A value equal to the maximum goes
    into the last bin; when every value is equal they all land in bin 0.
    """
    if bin_count < 0:
        raise ValueError("bin_count must be >= 0")
    if bin_count == 0:
        return None
    arr = np.asarray(values, dtype=np.float64)
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        return None

    vmin = float(np.min(arr))
    vmax = float(np.max(arr))
    bin_width = (vmax - vmin) / bin_count

    if bin_width > 0.0:
        index = np.floor((arr - vmin) / bin_width).astype(np.int64)
        index = np.clip(index, 0, bin_count - 1)
    else:
        index = np.zeros(arr.size, dtype=np.int64)

    counts = np.bincount(index, minlength=bin_count).astype(np.int64)
    centers = vmin + bin_width * (np.arange(bin_count, dtype=np.float64) + 0.5)
    return HistogramBins(centers=centers, counts=counts, bin_width=bin_width)
