"""
p-value dispatch between the approximate and exact back ends.

Every inferential test calls these functions with its ``distribution``
argument, so switching a whole analysis to scipy's exact distributions is a
single keyword.
"""

from __future__ import annotations

from whoqolstats.core.constants import DEFAULT_DISTRIBUTION, DISTRIBUTION_EXACT
from whoqolstats.core.validation import check_distribution
from whoqolstats.distributions import _approx


def _backend(method: str):
    check_distribution(method)
    if method == DISTRIBUTION_EXACT:
        from whoqolstats.distributions import _exact
        return _exact
    return _approx


def t_pvalue(t: float, df: float, method: str = DEFAULT_DISTRIBUTION) -> float:
    """Two-tailed p-value of a t statistic on df degrees of freedom."""
    return _backend(method).t_pvalue(float(t), float(df))


def f_pvalue(
    f: float,
    df1: float,
    df2: float,
    method: str = DEFAULT_DISTRIBUTION,
) -> float:
    """Upper-tail p-value of an F statistic."""
    return _backend(method).f_pvalue(float(f), float(df1), float(df2))


def chi2_pvalue(x: float, df: float, method: str = DEFAULT_DISTRIBUTION) -> float:
    """Upper-tail p-value of a chi-squared statistic."""
    return _backend(method).chi2_pvalue(float(x), float(df))


def normal_pvalue(z: float, method: str = DEFAULT_DISTRIBUTION) -> float:
    """Two-tailed p-value of a z-score."""
    return _backend(method).normal_pvalue(float(z))
