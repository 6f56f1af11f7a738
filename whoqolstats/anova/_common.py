"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container; no computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from whoqolstats.core.result import TestType


@dataclass(frozen=True)
class PostHocComparison:
    """One pairwise comparison; ``mean_diff`` is mean(group1) - mean(group2)."""
    group1: str
    group2: str
    mean_diff: float
    t_statistic: float
    raw_p_value: float
    p_value: float          # Holm-adjusted
    is_significant: bool


@dataclass(frozen=True)
class PostHocParams:
    """
    Holm-Bonferroni pairwise comparisons after a significant ANOVA.

    ``comparisons`` are ordered by ascending raw p-value, so their adjusted
    p-values are non-decreasing.
    """
    method: str
    comparisons: tuple[PostHocComparison, ...]
    mse: float
    df_error: int


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way between-subjects ANOVA.

    ``post_hoc`` is None unless the F test is significant and the
    post-hoc analysis was requested.
    """
    method: str
    f_statistic: float
    p_value: float
    df_between: int
    df_within: int
    is_significant: bool
    ss_between: float
    ss_within: float
    ss_total: float
    ms_between: float
    ms_within: float
    eta_squared: float
    omega_squared: float
    n_obs: int
    grand_mean: float
    group_means: dict[str, float]
    group_sizes: dict[str, int]
    post_hoc: PostHocParams | None
    test_type: ClassVar[TestType] = TestType.ANOVA
