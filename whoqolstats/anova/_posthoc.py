"""
Post-hoc pairwise comparisons for one-way ANOVA.

Holm-Bonferroni:
    For every pair of groups, t = (m_i - m_j) / sqrt(MSW * (1/n_i + 1/n_j))
    on the ANOVA's within-groups degrees of freedom. The raw two-sided
    p-values go through holm_adjust().
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from whoqolstats.anova._common import PostHocComparison, PostHocParams
from whoqolstats.distributions.pvalues import t_pvalue
from whoqolstats.hypothesis._p_adjust import holm_adjust


def holm_pairwise(
    groups: dict[str, NDArray],
    mse: float,
    df_error: int,
    *,
    alpha: float,
    distribution: str,
) -> PostHocParams:
    """
    Holm-Bonferroni comparisons of all group pairs.

    Args:
        groups: Ordered mapping of group label to sample
        mse: Mean square within groups from the ANOVA
        df_error: Within-groups degrees of freedom
        alpha: Threshold applied to the adjusted p-values
        distribution: p-value back end

    Returns:
        PostHocParams with comparisons sorted by ascending raw p-value
    """
    names = list(groups)
    means = {name: float(np.mean(groups[name])) for name in names}
    sizes = {name: len(groups[name]) for name in names}

    pairs: list[tuple[str, str, float, float, float]] = []
    for i in range(len(names)):
        for j in range(i + 1, len(names)):
            g1, g2 = names[i], names[j]
            diff = means[g1] - means[g2]
            se = math.sqrt(mse * (1.0 / sizes[g1] + 1.0 / sizes[g2]))
            if se > 0:
                t_stat = diff / se
                raw_p = t_pvalue(t_stat, df_error, distribution)
            else:
                t_stat = 0.0 if diff == 0 else math.copysign(math.inf, diff)
                raw_p = 1.0 if diff == 0 else 0.0
            pairs.append((g1, g2, diff, t_stat, raw_p))

    pairs.sort(key=lambda pair: pair[4])
    adjusted = holm_adjust([pair[4] for pair in pairs])

    comparisons = tuple(
        PostHocComparison(
            group1=g1,
            group2=g2,
            mean_diff=diff,
            t_statistic=t_stat,
            raw_p_value=raw_p,
            p_value=float(p_adj),
            is_significant=bool(p_adj < alpha),
        )
        for (g1, g2, diff, t_stat, raw_p), p_adj in zip(pairs, adjusted)
    )

    return PostHocParams(
        method='Holm-Bonferroni',
        comparisons=comparisons,
        mse=mse,
        df_error=df_error,
    )
