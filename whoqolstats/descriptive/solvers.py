"""
Descriptive statistics.

Provides describe() as the comprehensive entry point, plus individual
functions: mean(), var(), sd(), minimum(), maximum(), percentile(),
quartiles() and frequency_table().

Conventions kept from the survey application this engine serves:
    - mean() of an empty sample is 0.0
    - var() and sd() are 0.0 when n < 2 (callers check n separately)
    - order statistics of an empty sample are None, never 0
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from whoqolstats.core.exceptions import ValidationError
from whoqolstats.core.validation import as_sample, is_missing
from whoqolstats.descriptive._quantile import r7_quantile, r7_quantiles
from whoqolstats.descriptive.solution import DescriptiveSummary, FrequencyRow


def mean(x: ArrayLike) -> float:
    """Arithmetic mean; 0.0 for an empty sample."""
    arr = as_sample(x, 'x')
    if len(arr) == 0:
        return 0.0
    return float(np.mean(arr))


def var(x: ArrayLike) -> float:
    """Sample variance with the n - 1 divisor; 0.0 when n < 2."""
    arr = as_sample(x, 'x')
    if len(arr) < 2:
        return 0.0
    return float(np.var(arr, ddof=1))


def sd(x: ArrayLike) -> float:
    """Sample standard deviation; 0.0 when n < 2."""
    return math.sqrt(var(x))


def minimum(x: ArrayLike) -> float | None:
    """Smallest value, or None for an empty sample."""
    arr = as_sample(x, 'x')
    return float(np.min(arr)) if len(arr) else None


def maximum(x: ArrayLike) -> float | None:
    """Largest value, or None for an empty sample."""
    arr = as_sample(x, 'x')
    return float(np.max(arr)) if len(arr) else None


def percentile(x: ArrayLike, p: float) -> float | None:
    """
    Percentile by linear interpolation (R type 7).

    Parameters
    ----------
    x : array-like
        1D numeric sample.
    p : float
        Percentile in [0, 100].

    Returns
    -------
    float or None
        None for an empty sample.
    """
    if not (0.0 <= p <= 100.0):
        raise ValidationError(f"p must be in [0, 100], got {p}")
    arr = np.sort(as_sample(x, 'x'))
    return r7_quantile(arr, p / 100.0)


def quartiles(x: ArrayLike) -> tuple[float | None, float | None, float | None]:
    """(Q1, median, Q3) by R type 7; all None for an empty sample."""
    arr = as_sample(x, 'x')
    q1, median, q3 = r7_quantiles(arr, np.array([0.25, 0.5, 0.75]))
    return q1, median, q3


def describe(x: ArrayLike) -> DescriptiveSummary:
    """
    Compute the full summary of one numeric sample.

    Returns
    -------
    DescriptiveSummary with n, mean, sd, min, max, median, q1, q3.
    """
    arr = as_sample(x, 'x')
    q1, median, q3 = quartiles(arr)
    return DescriptiveSummary(
        n=len(arr),
        mean=mean(arr),
        sd=sd(arr),
        min=minimum(arr),
        max=maximum(arr),
        median=median,
        q1=q1,
        q3=q3,
    )


def frequency_table(values: Iterable[Any]) -> tuple[FrequencyRow, ...]:
    """
    Count and percentage per distinct category.

    None, empty strings and NaN are treated as "no answer" and excluded from
    both the counts and the percentage denominator. Rows are sorted by
    descending frequency; ties keep first-seen order.

    Returns
    -------
    tuple of FrequencyRow, empty when no value is present.
    """
    present = [str(v) for v in values if not is_missing(v)]
    total = len(present)
    if total == 0:
        return ()

    counts = Counter(present)
    rows = [
        FrequencyRow(
            category=category,
            frequency=count,
            percentage=count / total * 100.0,
        )
        for category, count in counts.items()
    ]
    rows.sort(key=lambda r: r.frequency, reverse=True)
    return tuple(rows)

