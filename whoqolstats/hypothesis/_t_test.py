"""
Two independent samples t-test.

Welch's test (default) does not assume equal variances; its degrees of
freedom come from the Welch-Satterthwaite equation and are floored to an
integer before the p-value lookup. The pooled (Student) variant is kept for
comparisons against one-way ANOVA, where F == t**2 for two groups.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from whoqolstats.core.result import InsufficientData, InvalidInput
from whoqolstats.core.validation import is_constant
from whoqolstats.distributions.pvalues import t_pvalue
from whoqolstats.hypothesis._common import TTestParams


def _variance(values: NDArray) -> float:
    return 0.0 if is_constant(values) else float(np.var(values, ddof=1))


def pooled_sd(n1: int, n2: int, var1: float, var2: float) -> float:
    """Pooled standard deviation sqrt(((n1-1)v1 + (n2-1)v2) / (n1+n2-2))."""
    return math.sqrt(((n1 - 1) * var1 + (n2 - 1) * var2) / (n1 + n2 - 2))


def welch_df(n1: int, n2: int, var1: float, var2: float) -> int:
    """
    Welch-Satterthwaite degrees of freedom, floored.

    The ratio gets 1e-9 added before flooring; an integral df such as
    2n - 2 (equal sizes and variances) must not round down to 2n - 3.
    """
    v1 = var1 / n1
    v2 = var2 / n2
    num = (v1 + v2) ** 2
    den = v1 ** 2 / (n1 - 1) + v2 ** 2 / (n2 - 1)
    return int(math.floor(num / den + 1e-9))


def t_two_sample(
    x: NDArray,
    y: NDArray,
    *,
    group_names: tuple[str, str],
    var_equal: bool,
    alpha: float,
    distribution: str,
) -> tuple[TTestParams | InsufficientData | InvalidInput, list[str]]:
    """Welch (default) or pooled two-sample t-test."""
    warnings_list: list[str] = []
    n1, n2 = len(x), len(y)
    if n1 < 2 or n2 < 2:
        return InsufficientData(
            f"each group needs at least 2 observations for the t-test "
            f"(got {n1} and {n2})"
        ), warnings_list

    mean1, mean2 = float(np.mean(x)), float(np.mean(y))
    var1, var2 = _variance(x), _variance(y)

    if var1 == 0.0 and var2 == 0.0:
        return InvalidInput(
            "the variance of both groups is zero; the t statistic is undefined"
        ), warnings_list

    sp = pooled_sd(n1, n2, var1, var2)
    diff = mean1 - mean2

    if var_equal:
        se = sp * math.sqrt(1.0 / n1 + 1.0 / n2)
        df = n1 + n2 - 2
        method = "Student's t-test (pooled variance)"
    else:
        se = math.sqrt(var1 / n1 + var2 / n2)
        df = welch_df(n1, n2, var1, var2)
        method = "Welch's t-test"

    t_stat = diff / se
    p_value = t_pvalue(t_stat, df, distribution)
    cohens_d = diff / sp if sp > 0 else 0.0

    return TTestParams(
        method=method,
        group_names=group_names,
        n1=n1,
        n2=n2,
        mean1=mean1,
        mean2=mean2,
        t_statistic=t_stat,
        df=df,
        p_value=p_value,
        is_significant=p_value < alpha,
        cohens_d=cohens_d,
    ), warnings_list
