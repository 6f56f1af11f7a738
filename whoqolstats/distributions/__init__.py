"""
Distribution approximations.

Public API:
    erf(x)                 - Abramowitz-Stegun error function
    normal_cdf(z)          - Standard normal CDF
    t_cdf(t, df)           - Student-t CDF (closed forms, Hill)
    chi2_cdf(x, df)        - Chi-squared CDF (Wilson-Hilferty)
    t_pvalue(t, df)        - Two-tailed t p-value
    f_pvalue(f, df1, df2)  - Upper-tail F p-value
    chi2_pvalue(x, df)     - Upper-tail chi-squared p-value
    normal_pvalue(z)       - Two-tailed normal p-value

The p-value functions take ``method='approx'`` (default) or ``'exact'``.
"""

from whoqolstats.distributions._approx import erf, normal_cdf, t_cdf, chi2_cdf
from whoqolstats.distributions.pvalues import (
    t_pvalue,
    f_pvalue,
    chi2_pvalue,
    normal_pvalue,
)

__all__ = [
    "erf",
    "normal_cdf",
    "t_cdf",
    "chi2_cdf",
    "t_pvalue",
    "f_pvalue",
    "chi2_pvalue",
    "normal_pvalue",
]
