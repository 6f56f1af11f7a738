"""
Solver dispatch for hypothesis tests.

Provides t_test(), correlation(), linear_regression(), chisq_test(),
chisq_test_table(), mann_whitney_u() and kruskal_wallis().

Also re-exports holm_adjust() for convenience.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from whoqolstats.core.backend import solve
from whoqolstats.core.constants import DEFAULT_DISTRIBUTION, SIGNIFICANCE_LEVEL
from whoqolstats.core.exceptions import ValidationError
from whoqolstats.core.result import InsufficientData, InvalidInput
from whoqolstats.core.solution import TestSolution
from whoqolstats.core.validation import (
    as_grouped_sample,
    as_sample,
    check_2d,
    check_array,
    check_distribution,
    check_probability,
)
from whoqolstats.hypothesis._association import pearson, simple_regression
from whoqolstats.hypothesis._chisq_test import (
    build_table,
    chisq_independence,
    cross_tabulate,
)
from whoqolstats.hypothesis._p_adjust import holm_adjust  # re-export
from whoqolstats.hypothesis._rank_tests import kruskal, mann_whitney
from whoqolstats.hypothesis._t_test import t_two_sample


def _options(alpha: float, distribution: str) -> dict[str, Any]:
    return {
        'alpha': check_probability(alpha, 'alpha'),
        'distribution': check_distribution(distribution),
    }


def _group_names(group_names: Sequence[str]) -> tuple[str, str]:
    names = tuple(str(g) for g in group_names)
    if len(names) != 2:
        raise ValidationError(
            f"group_names must hold exactly 2 labels, got {len(names)}"
        )
    return names  # type: ignore[return-value]


def t_test(
    x: ArrayLike,
    y: ArrayLike,
    *,
    group_names: Sequence[str] = ("x", "y"),
    var_equal: bool = False,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """
    Two independent samples t-test.

    Parameters
    ----------
    x, y : array-like
        The two samples. 1D numeric vectors.
    group_names : pair of str
        Labels reported with the result.
    var_equal : bool
        If True, use the pooled variance (Student's t, df = n1 + n2 - 2).
        If False (default), use Welch's test with floored
        Welch-Satterthwaite degrees of freedom.
    alpha : float
        Significance threshold; ``is_significant`` is ``p_value < alpha``.
    distribution : str
        'approx' (closed-form approximations) or 'exact' (scipy.stats).

    Returns
    -------
    TestSolution
        TTestParams, or InsufficientData when a group has fewer than two
        observations, or InvalidInput when both variances are zero.
    """
    opts = _options(alpha, distribution)
    return solve(
        'ttest', t_two_sample,
        as_sample(x, 'x'), as_sample(y, 'y'),
        group_names=_group_names(group_names),
        var_equal=bool(var_equal),
        info={'distribution': distribution},
        **opts,
    )


def correlation(
    x: ArrayLike,
    y: ArrayLike,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """
    Pearson correlation with a t test of r = 0 on n - 2 df.

    A constant variable gives ``r = None`` and a warning instead of an error.
    """
    opts = _options(alpha, distribution)
    return solve(
        'correlation', pearson,
        as_sample(x, 'x'), as_sample(y, 'y'),
        info={'distribution': distribution},
        **opts,
    )


def linear_regression(
    x: ArrayLike,
    y: ArrayLike,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """Simple linear regression of y on x."""
    opts = _options(alpha, distribution)
    return solve(
        'regression', simple_regression,
        as_sample(x, 'x'), as_sample(y, 'y'),
        info={'distribution': distribution},
        **opts,
    )


def _chisq_from_labels(x, y, *, alpha, distribution):
    table = cross_tabulate(x, y)
    if isinstance(table, (InsufficientData, InvalidInput)):
        return table, []
    return chisq_independence(table, alpha=alpha, distribution=distribution)


def chisq_test(
    x: Sequence[Any],
    y: Sequence[Any],
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """
    Pearson's chi-squared test of independence of two categorical variables.

    Parameters
    ----------
    x, y : sequence
        One label per participant for each variable. Positions where either
        label is None, empty or NaN are left out. Labels are compared as
        strings and sorted to order the table.

    Returns
    -------
    TestSolution
        ChiSquaredParams (with the ContingencyTable as ``table``). A warning
        is attached when more than 20% of the expected counts are below 5.
    """
    opts = _options(alpha, distribution)
    return solve(
        'chisq', _chisq_from_labels,
        list(x), list(y),
        info={'distribution': distribution},
        **opts,
    )


def chisq_test_table(
    observed: ArrayLike,
    row_labels: Sequence[Any] | None = None,
    col_labels: Sequence[Any] | None = None,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """
    Chi-squared test of independence on a ready contingency table.

    ``observed`` is a 2D matrix of non-negative integer counts. Labels
    default to "1", "2", ... when not given.
    """
    opts = _options(alpha, distribution)
    counts = check_array(observed, 'observed')
    check_2d(counts, 'observed')
    if not np.all(np.isfinite(counts)) or np.any(counts < 0) \
            or np.any(counts != np.round(counts)):
        raise ValidationError(
            "observed: counts must be finite non-negative integers"
        )
    n_rows, n_cols = counts.shape
    rows = _labels(row_labels, n_rows, 'row_labels')
    cols = _labels(col_labels, n_cols, 'col_labels')
    table = build_table(counts.astype(np.int64), rows, cols)
    return solve(
        'chisq', chisq_independence, table,
        info={'distribution': distribution},
        **opts,
    )


def _labels(labels: Sequence[Any] | None, size: int, name: str) -> tuple[str, ...]:
    if labels is None:
        return tuple(str(i + 1) for i in range(size))
    out = tuple(str(v) for v in labels)
    if len(out) != size:
        raise ValidationError(
            f"{name}: expected {size} labels, got {len(out)}"
        )
    return out


def mann_whitney_u(
    x: ArrayLike,
    y: ArrayLike,
    *,
    group_names: Sequence[str] = ("x", "y"),
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """
    Mann-Whitney U test with a continuity-corrected normal approximation.

    Each sample needs at least 3 observations.
    """
    opts = _options(alpha, distribution)
    return solve(
        'mann_whitney', mann_whitney,
        as_sample(x, 'x'), as_sample(y, 'y'),
        group_names=_group_names(group_names),
        info={'distribution': distribution},
        **opts,
    )


def kruskal_wallis(
    groups: Mapping[Any, ArrayLike],
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """
    Kruskal-Wallis H test across two or more groups.

    Parameters
    ----------
    groups : mapping
        Group label to sample. Labels are reported as strings in
        ``mean_ranks``.
    """
    opts = _options(alpha, distribution)
    return solve(
        'kruskal_wallis', kruskal,
        as_grouped_sample(groups),
        info={'distribution': distribution},
        **opts,
    )
