"""
R type 7 quantiles.

Type 7 is the Hyndman & Fan (1996) definition used by default in R, NumPy
and spreadsheets: sort ascending, take the fractional index
h = p * (n - 1), and interpolate linearly between the neighbouring order
statistics.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray


def r7_quantile(x_sorted: NDArray, prob: float) -> float | None:
    """
    Type 7 quantile of an ascending 1D array.

    Parameters
    ----------
    x_sorted : NDArray
        1D sorted array with no NaN values.
    prob : float
        Probability in [0, 1].

    Returns
    -------
    float or None
        The quantile, or None for an empty array.
    """
    n = len(x_sorted)
    if n == 0:
        return None

    index = prob * (n - 1)
    lower = int(math.floor(index))
    upper = lower + 1
    weight = index - lower

    if upper >= n:
        return float(x_sorted[min(lower, n - 1)])
    if lower < 0:
        return float(x_sorted[0])

    return float(x_sorted[lower] * (1.0 - weight) + x_sorted[upper] * weight)


def r7_quantiles(x: NDArray, probs: NDArray) -> list[float | None]:
    """Type 7 quantiles of an unsorted array, one per probability."""
    x_sorted = np.sort(np.asarray(x, dtype=np.float64))
    return [r7_quantile(x_sorted, float(p)) for p in probs]
