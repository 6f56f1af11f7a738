"""
Holm-Bonferroni step-down adjustment for multiple comparisons.

Standalone utility; the ANOVA post-hoc runs its pairwise p-values through it.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from whoqolstats.core.exceptions import ValidationError


def holm_adjust(p_values: ArrayLike) -> NDArray[np.floating]:
    """
    Adjust p-values with Holm's step-down method.

    Parameters
    ----------
    p_values : array-like
        Raw p-values, each in [0, 1].

    Returns
    -------
    ndarray
        Adjusted p-values in input order. The k-th smallest raw value
        (1-based) is multiplied by (m - k + 1), a running maximum keeps the
        sorted sequence non-decreasing, and values are clamped to 1.
    """
    p = np.asarray(p_values, dtype=np.float64).ravel()
    if p.size == 0:
        return np.array([], dtype=np.float64)
    if np.any(np.isnan(p)) or np.any(p < 0.0) or np.any(p > 1.0):
        raise ValidationError(
            f"p_values must lie in [0, 1], got {p.tolist()}"
        )

    m = len(p)
    # Stable so equal raw p-values keep their input order
    order = np.argsort(p, kind='stable')
    adjusted_sorted = p[order] * np.arange(m, 0, -1, dtype=np.float64)
    adjusted_sorted = np.minimum(np.maximum.accumulate(adjusted_sorted), 1.0)

    result = np.empty(m, dtype=np.float64)
    result[order] = adjusted_sorted
    return result
