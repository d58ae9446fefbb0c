"""Math helpers: rounding and ratio helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray


def round_half_away(values: ArrayLike) -> NDArray[np.float64]:
    """Round to the nearest whole unit, ties away from zero (2.5 to 3, -2.5 to -3).

    ``round()`` and ``np.round`` round ties to even, which would shift
    pixel edges on exact halves.
    """
    arr = np.asarray(values, dtype=np.float64)
    return np.sign(arr) * np.floor(np.abs(arr) + 0.5)


def round_px(value: float) -> int:
    """Scalar ``round_half_away`` returning an int pixel count."""
    return int(round_half_away(value))


def cumulative_rounded_errors(error_per_item: float, count: int) -> NDArray[np.float64]:
    """Rounded running error totals: ``round(error_per_item * i)`` for i = 1..count."""
    return round_half_away(error_per_item * np.arange(1, count + 1, dtype=np.float64))


def aspect_ratio(width: float, height: float) -> float:
    """width / height; NaN for a zero height so callers can reject it."""
    if height == 0:
        return math.nan
    return width / height
