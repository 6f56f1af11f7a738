"""
Descriptive statistics result types.

Pure data containers; the values are computed in solvers.py.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DescriptiveSummary:
    """
    Summary of one numeric sample.

    ``mean`` and ``sd`` are 0.0 for an empty sample (callers check ``n``);
    the order statistics are None because no value exists.
    """
    n: int
    mean: float
    sd: float
    min: float | None
    max: float | None
    median: float | None
    q1: float | None
    q3: float | None


@dataclass(frozen=True)
class FrequencyRow:
    """One category of a frequency table. ``percentage`` is on a 0-100 scale."""
    category: str
    frequency: int
    percentage: float
