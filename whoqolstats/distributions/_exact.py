"""
Exact p-values from scipy.stats.

Opt-in alternative to the approximations in _approx. Results differ from
the default path in the later decimals; see core.compute.tolerances.
"""

from __future__ import annotations

import math

from scipy import stats as sp_stats


def t_pvalue(t: float, df: float) -> float:
    if math.isnan(t) or math.isnan(df) or df <= 0:
        return 1.0
    return float(min(1.0, 2.0 * sp_stats.t.sf(abs(t), df)))


def chi2_pvalue(x: float, df: float) -> float:
    if math.isnan(x) or x <= 0 or df <= 0:
        return 1.0
    return float(sp_stats.chi2.sf(x, df))


def f_pvalue(f: float, df1: float, df2: float) -> float:
    if math.isnan(f) or f < 0 or df1 <= 0 or df2 <= 0:
        return 1.0
    if f == 0:
        return 1.0
    return float(sp_stats.f.sf(f, df1, df2))


def normal_pvalue(z: float) -> float:
    if math.isnan(z):
        return 1.0
    return float(min(1.0, 2.0 * sp_stats.norm.sf(abs(z))))
