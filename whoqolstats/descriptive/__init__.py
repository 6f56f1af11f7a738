"""
Descriptive statistics module.

Public API:
    describe(x)         - n, mean, sd, min, max, quartiles at once
    mean(x)             - Arithmetic mean (0.0 when empty)
    var(x)              - Sample variance (n - 1 divisor, 0.0 when n < 2)
    sd(x)               - Sample standard deviation
    minimum(x)          - Minimum (None when empty)
    maximum(x)          - Maximum (None when empty)
    percentile(x, p)    - R type 7 percentile (None when empty)
    quartiles(x)        - (Q1, median, Q3)
    frequency_table(v)  - Category counts and percentages
"""

from whoqolstats.descriptive.solution import DescriptiveSummary, FrequencyRow
from whoqolstats.descriptive.solvers import (
    describe,
    mean,
    var,
    sd,
    minimum,
    maximum,
    percentile,
    quartiles,
    frequency_table,
)

__all__ = [
    "describe",
    "mean",
    "var",
    "sd",
    "minimum",
    "maximum",
    "percentile",
    "quartiles",
    "frequency_table",
    "DescriptiveSummary",
    "FrequencyRow",
]
