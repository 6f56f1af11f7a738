"""
Hypothesis testing module.

Every test returns a TestSolution whose ``p_value`` comes from the
approximate distributions by default, or from scipy.stats with
``distribution='exact'``.

Public API:
    t_test(x, y)              - Welch's (or pooled) two-sample t-test
    correlation(x, y)         - Pearson correlation
    linear_regression(x, y)   - Simple linear regression
    chisq_test(x, y)          - Chi-squared test of independence from labels
    chisq_test_table(counts)  - Chi-squared test on a contingency table
    mann_whitney_u(x, y)      - Mann-Whitney U test
    kruskal_wallis(groups)    - Kruskal-Wallis H test
    holm_adjust(p)            - Holm-Bonferroni correction
"""

from whoqolstats.hypothesis.solvers import (
    t_test, correlation, linear_regression, chisq_test, chisq_test_table,
    mann_whitney_u, kruskal_wallis,
)
from whoqolstats.hypothesis._p_adjust import holm_adjust
from whoqolstats.hypothesis._common import (
    TTestParams,
    CorrelationParams,
    RegressionParams,
    ContingencyTable,
    ChiSquaredParams,
    MannWhitneyParams,
    KruskalWallisParams,
)

__all__ = [
    "t_test",
    "correlation",
    "linear_regression",
    "chisq_test",
    "chisq_test_table",
    "mann_whitney_u",
    "kruskal_wallis",
    "holm_adjust",
    "TTestParams",
    "CorrelationParams",
    "RegressionParams",
    "ContingencyTable",
    "ChiSquaredParams",
    "MannWhitneyParams",
    "KruskalWallisParams",
]
