"""
Pearson correlation and simple linear regression.

Both test a linear association between two paired numeric variables with
a Student-t statistic on n - 2 degrees of freedom.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from whoqolstats.core.result import InsufficientData, InvalidInput
from whoqolstats.core.validation import is_constant
from whoqolstats.distributions.pvalues import t_pvalue
from whoqolstats.hypothesis._common import CorrelationParams, RegressionParams


def _check_pairs(
    x: NDArray, y: NDArray, what: str,
) -> InsufficientData | InvalidInput | None:
    if len(x) != len(y):
        return InvalidInput(
            f"{what} needs paired observations; x has {len(x)} values "
            f"and y has {len(y)}"
        )
    if len(x) < 3:
        return InsufficientData(
            f"{what} needs at least 3 pairs of observations (got {len(x)})"
        )
    return None


def correlation_strength(r: float) -> str:
    """Conventional label for |r|: weak (< 0.3), moderate (< 0.7), strong."""
    a = abs(r)
    if a < 0.3:
        return 'weak'
    if a < 0.7:
        return 'moderate'
    return 'strong'


def pearson(
    x: NDArray,
    y: NDArray,
    *,
    alpha: float,
    distribution: str,
) -> tuple[CorrelationParams | InsufficientData | InvalidInput, list[str]]:
    """Pearson product-moment correlation with a t test of r = 0."""
    warnings_list: list[str] = []
    bad = _check_pairs(x, y, "correlation")
    if bad is not None:
        return bad, warnings_list

    n = len(x)
    df = n - 2
    if is_constant(x) or is_constant(y):
        warnings_list.append(
            "one variable is constant; the correlation is undefined"
        )
        return CorrelationParams(
            method="Pearson correlation",
            n=n,
            df=df,
            r=None,
            r_squared=None,
            t_statistic=None,
            p_value=None,
            is_significant=False,
            strength=None,
            direction=None,
        ), warnings_list

    sd_x = float(np.std(x, ddof=1))
    sd_y = float(np.std(y, ddof=1))
    cov = float(np.sum((x - np.mean(x)) * (y - np.mean(y)))) / (n - 1)
    r = cov / (sd_x * sd_y)
    # Rounding can push |r| a hair past 1 for perfectly collinear data
    r = min(1.0, max(-1.0, r))
    r_squared = r * r

    if r_squared >= 1.0:
        t_stat = math.copysign(math.inf, r)
        p_value = 0.0
    else:
        t_stat = r * math.sqrt(df / (1.0 - r_squared))
        p_value = t_pvalue(t_stat, df, distribution)

    return CorrelationParams(
        method="Pearson correlation",
        n=n,
        df=df,
        r=r,
        r_squared=r_squared,
        t_statistic=t_stat,
        p_value=p_value,
        is_significant=p_value < alpha,
        strength=correlation_strength(r),
        direction='positive' if r > 0 else 'negative',
    ), warnings_list


def simple_regression(
    x: NDArray,
    y: NDArray,
    *,
    alpha: float,
    distribution: str,
) -> tuple[RegressionParams | InsufficientData | InvalidInput, list[str]]:
    """Ordinary least squares fit of y on x with a t test of the slope."""
    warnings_list: list[str] = []
    bad = _check_pairs(x, y, "linear regression")
    if bad is not None:
        return bad, warnings_list

    n = len(x)
    df = n - 2
    if is_constant(x):
        return InvalidInput(
            "the independent variable has zero variance; the slope is undefined"
        ), warnings_list

    mean_x = float(np.mean(x))
    dx = x - mean_x
    sxx = float(np.sum(dx ** 2))
    # A constant y is fitted exactly by a flat line
    if is_constant(y):
        mean_y = float(y[0])
        dy = np.zeros_like(y)
    else:
        mean_y = float(np.mean(y))
        dy = y - mean_y
    slope = float(np.sum(dx * dy)) / sxx
    intercept = mean_y - slope * mean_x

    fitted = intercept + slope * x
    ss_res = float(np.sum((y - fitted) ** 2))
    ss_total = float(np.sum(dy ** 2))
    r_squared = 0.0 if ss_total == 0.0 else 1.0 - ss_res / ss_total

    s_yx = math.sqrt(ss_res / df)
    slope_se = s_yx / math.sqrt(sxx)

    if slope_se == 0.0:
        warnings_list.append(
            "residuals are all zero; the slope standard error is zero and "
            "no t statistic is reported"
        )
        t_stat = 0.0
    else:
        t_stat = slope / slope_se
    p_value = t_pvalue(t_stat, df, distribution)

    return RegressionParams(
        method="Simple linear regression",
        n=n,
        df=df,
        slope=slope,
        intercept=intercept,
        r_squared=r_squared,
        slope_se=slope_se,
        t_statistic=t_stat,
        p_value=p_value,
        is_significant=p_value < alpha,
    ), warnings_list
