"""
One-way between-subjects ANOVA from group sums of squares.

SSB = sum n_i (m_i - grand_mean)^2
SSW = sum over groups of sum (x - m_i)^2
F   = (SSB / (k - 1)) / (SSW / (N - k)), 0 when MSW is 0

Effect sizes:
    eta^2   = SSB / SST (0 when SST is 0)
    omega^2 = (SSB - df_between * MSW) / (SST + MSW) (0 when the
              denominator is 0); can be negative for tiny effects
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from whoqolstats.anova._common import AnovaParams
from whoqolstats.anova._posthoc import holm_pairwise
from whoqolstats.core.result import InsufficientData
from whoqolstats.core.validation import is_constant
from whoqolstats.distributions.pvalues import f_pvalue


def _center(values: NDArray) -> float:
    return float(values[0]) if is_constant(values) else float(np.mean(values))


def _ss(values: NDArray, center: float) -> float:
    if is_constant(values):
        return 0.0
    return float(np.sum((values - center) ** 2))


def oneway(
    groups: dict[str, NDArray],
    *,
    post_hoc: bool,
    alpha: float,
    distribution: str,
) -> tuple[AnovaParams | InsufficientData, list[str]]:
    """One-way ANOVA with an optional Holm-Bonferroni post-hoc."""
    warnings_list: list[str] = []
    names = list(groups)
    k = len(names)
    if k < 2:
        return InsufficientData(
            f"ANOVA needs at least 2 groups (got {k})"
        ), warnings_list

    empty = [name for name in names if len(groups[name]) == 0]
    if empty:
        return InsufficientData(
            f"ANOVA groups must not be empty: {', '.join(empty)}"
        ), warnings_list

    sizes = {name: len(groups[name]) for name in names}
    n_obs = sum(sizes.values())
    if n_obs <= k:
        return InsufficientData(
            f"ANOVA needs more observations than groups "
            f"(got {n_obs} observations in {k} groups)"
        ), warnings_list

    pooled = np.concatenate([groups[name] for name in names])
    grand_mean = _center(pooled)
    means = {name: _center(groups[name]) for name in names}

    # Constant samples contribute exactly zero, not rounding residue
    ss_between = 0.0 if is_constant(pooled) else float(sum(
        sizes[name] * (means[name] - grand_mean) ** 2 for name in names
    ))
    ss_within = float(sum(
        _ss(groups[name], means[name]) for name in names
    ))
    ss_total = ss_between + ss_within

    df_between = k - 1
    df_within = n_obs - k
    ms_between = ss_between / df_between
    ms_within = ss_within / df_within

    f_stat = ms_between / ms_within if ms_within > 0 else 0.0
    p_value = f_pvalue(f_stat, df_between, df_within, distribution)
    is_significant = p_value < alpha

    eta_squared = ss_between / ss_total if ss_total > 0 else 0.0
    omega_denominator = ss_total + ms_within
    omega_squared = (
        (ss_between - df_between * ms_within) / omega_denominator
        if omega_denominator > 0 else 0.0
    )

    post_hoc_params = None
    if post_hoc and is_significant:
        post_hoc_params = holm_pairwise(
            groups, ms_within, df_within,
            alpha=alpha, distribution=distribution,
        )

    return AnovaParams(
        method='One-way ANOVA',
        f_statistic=f_stat,
        p_value=p_value,
        df_between=df_between,
        df_within=df_within,
        is_significant=is_significant,
        ss_between=ss_between,
        ss_within=ss_within,
        ss_total=ss_total,
        ms_between=ms_between,
        ms_within=ms_within,
        eta_squared=eta_squared,
        omega_squared=omega_squared,
        n_obs=n_obs,
        grand_mean=grand_mean,
        group_means=means,
        group_sizes=sizes,
        post_hoc=post_hoc_params,
    ), warnings_list
