"""
Analysis of Variance (ANOVA).

Public API:
    anova_oneway(groups, ...) -> TestSolution    # with Holm-Bonferroni post-hoc
"""

from whoqolstats.anova.solvers import anova_oneway
from whoqolstats.anova._common import (
    AnovaParams,
    PostHocComparison,
    PostHocParams,
)

__all__ = [
    "anova_oneway",
    "AnovaParams",
    "PostHocComparison",
    "PostHocParams",
]
