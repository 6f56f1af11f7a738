"""
ANOVA solver dispatch.

Public API:
    anova_oneway(groups, ...) -> TestSolution
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from numpy.typing import ArrayLike

from whoqolstats.anova._oneway import oneway
from whoqolstats.core.backend import solve
from whoqolstats.core.constants import DEFAULT_DISTRIBUTION, SIGNIFICANCE_LEVEL
from whoqolstats.core.solution import TestSolution
from whoqolstats.core.validation import (
    as_grouped_sample,
    check_distribution,
    check_probability,
)


def anova_oneway(
    groups: Mapping[Any, ArrayLike],
    *,
    post_hoc: bool = True,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """
    One-way Analysis of Variance.

    Tests whether the means of two or more groups are equal.

    Args:
        groups: Mapping of group label to sample (1D numeric array-like).
            Group order is kept for the group_means / group_sizes fields.
        post_hoc: Run Holm-Bonferroni pairwise comparisons when the F test
            is significant. Default True.
        alpha: Significance threshold for the F test and the adjusted
            pairwise p-values.
        distribution: 'approx' (default) or 'exact' p-values.

    Returns:
        TestSolution with AnovaParams, or InsufficientData for fewer than
        two groups, an empty group, or no more observations than groups

    Examples:
        >>> result = anova_oneway({'a': [1, 2, 3], 'b': [4, 5, 6]})
        >>> print(result.summary())
        >>> result.f_statistic, result.eta_squared
    """
    alpha = check_probability(alpha, 'alpha')
    check_distribution(distribution)
    return solve(
        'anova_oneway', oneway,
        as_grouped_sample(groups),
        post_hoc=bool(post_hoc),
        alpha=alpha,
        distribution=distribution,
        info={'distribution': distribution},
    )
