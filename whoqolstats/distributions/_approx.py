"""
Closed-form approximations of the normal, Student-t, chi-squared and F
distributions.

These are intentionally approximate. The precision contract (see
core.compute.tolerances) is:

    erf            Abramowitz & Stegun 7.1.26, |error| <= 1.5e-7
    t CDF          exact for df = 1 and df = 2; Hill's normal approximation
                   for df > 2 (absolute error well below 1e-3)
    chi-squared    Wilson-Hilferty cube-root normal approximation
    F              chi-squared transform F * df1 with df1 degrees of
                   freedom, then Wilson-Hilferty; df2 is ignored, so the
                   tail matches the F distribution only as df2 grows

References:
    Abramowitz, M. and Stegun, I.A. (1964) Handbook of Mathematical
    Functions, formula 7.1.26.
    Hill, G.W. (1970) "Algorithm 395: Student's t-distribution",
    Communications of the ACM, 13(10), 617-619.
    Wilson, E.B. and Hilferty, M.M. (1931) "The distribution of chi-square",
    PNAS, 17(12), 684-688.
"""

from __future__ import annotations

import math

# Abramowitz & Stegun 7.1.26 coefficients
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

_SQRT2 = math.sqrt(2.0)


def erf(x: float) -> float:
    """Error function, Abramowitz & Stegun 7.1.26."""
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)
    t = 1.0 / (1.0 + _P * x)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    return sign * (1.0 - poly * math.exp(-x * x))


def normal_cdf(z: float) -> float:
    """Standard normal CDF via erf."""
    return 0.5 * (1.0 + erf(z / _SQRT2))


def _hill_z(t: float, df: float) -> float:
    """
    Hill's normalizing transform: a z with Phi(z) ~= F_t(|t|; df).

    z**2 starts from (df - 1/2) * log(1 + t**2/df) and is refined by the
    asymptotic series of Algorithm 395.
    """
    a = df - 0.5
    b = 48.0 * a * a
    y = a * math.log1p(t * t / df)
    series = (
        ((((-0.4 * y - 3.3) * y - 24.0) * y - 85.5) / (0.8 * y * y + 100.0 + b)
         + y + 3.0) / b
        + 1.0
    )
    return series * math.sqrt(y)


def t_cdf(t: float, df: float) -> float:
    """
    Student-t CDF P(T <= t).

    Closed forms for df = 1 (Cauchy) and df = 2; Hill's approximation
    otherwise. The result is clamped to [0, 1] and NaN maps to 0.
    """
    if df == 1:
        cdf = 0.5 + math.atan(t) / math.pi
    elif df == 2:
        cdf = 0.5 + t / (2.0 * math.sqrt(2.0 + t * t))
    elif df > 2:
        z = _hill_z(t, df)
        upper = 1.0 - normal_cdf(z)
        cdf = 1.0 - upper if t >= 0 else upper
    else:
        cdf = math.nan

    if math.isnan(cdf) or cdf < 0.0:
        return 0.0
    return 1.0 if cdf > 1.0 else cdf


def t_pvalue(t: float, df: float) -> float:
    """Two-tailed p-value 2 * (1 - CDF(|t|, df)); 1.0 when undefined."""
    if math.isnan(t) or math.isnan(df) or df <= 0:
        return 1.0
    return 2.0 * (1.0 - t_cdf(abs(t), df))


def chi2_cdf(x: float, df: float) -> float:
    """Chi-squared CDF by the Wilson-Hilferty approximation."""
    if x <= 0 or df <= 0:
        return 0.0
    h = 2.0 / (9.0 * df)
    z = ((x / df) ** (1.0 / 3.0) - (1.0 - h)) / math.sqrt(h)
    return normal_cdf(z)


def chi2_pvalue(x: float, df: float) -> float:
    """Upper-tail chi-squared p-value; 1.0 when x <= 0 or df <= 0."""
    if math.isnan(x) or x <= 0 or df <= 0:
        return 1.0
    return 1.0 - chi2_cdf(x, df)


def f_pvalue(f: float, df1: float, df2: float) -> float:
    """
    Upper-tail F p-value via chi2 = F * df1 on df1 degrees of freedom.

    Returns 1.0 when F <= 0 or either df is non-positive.
    """
    if math.isnan(f) or f < 0 or df1 <= 0 or df2 <= 0:
        return 1.0
    return chi2_pvalue(f * df1, df1)


def normal_pvalue(z: float) -> float:
    """Two-tailed normal p-value 2 * (1 - Phi(|z|))."""
    if math.isnan(z):
        return 1.0
    return 2.0 * (1.0 - normal_cdf(abs(z)))
