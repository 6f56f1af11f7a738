"""
Common data types for reliability analysis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from whoqolstats.core.result import TestType


@dataclass(frozen=True)
class CronbachParams:
    """
    Cronbach's alpha for one scale.

    Attributes
    ----------
    alpha : float
        k / (k - 1) * (1 - sum(item variances) / total variance). Not clamped:
        a negative value flags a scale whose items work against each other.
    item_ids : tuple of str
        The items, in column order.
    item_variances : tuple of float
        Sample variance (n - 1) of each item after reversal.
    total_variance : float
        Sample variance of the per-participant item sums.
    interpretation : str
        Conventional band from interpret_alpha().
    """
    alpha: float
    n_items: int
    n_participants: int
    item_ids: tuple[str, ...]
    item_variances: tuple[float, ...]
    total_variance: float
    interpretation: str
    test_type: ClassVar[TestType] = TestType.CRONBACH_ALPHA
