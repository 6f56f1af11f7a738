"""
Rank-based tests: Mann-Whitney U and Kruskal-Wallis H.

Observations are ranked jointly with midranks for ties
(scipy.stats.rankdata, method='average').
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from scipy.stats import rankdata

from whoqolstats.core.result import InsufficientData
from whoqolstats.distributions.pvalues import chi2_pvalue, normal_pvalue
from whoqolstats.hypothesis._common import KruskalWallisParams, MannWhitneyParams


def tie_correction(ranks: NDArray) -> float:
    """1 - sum(T^3 - T) / (N^3 - N) over groups of tied ranks."""
    n = len(ranks)
    if n < 2:
        return 1.0
    _, counts = np.unique(ranks, return_counts=True)
    counts = counts.astype(np.float64)
    return 1.0 - float(np.sum(counts ** 3 - counts)) / (n ** 3 - n)


def mann_whitney(
    x: NDArray,
    y: NDArray,
    *,
    group_names: tuple[str, str],
    alpha: float,
    distribution: str,
) -> tuple[MannWhitneyParams | InsufficientData, list[str]]:
    """
    Two-sided Mann-Whitney U test.

    z = (U - n1*n2/2 + 0.5) / sqrt(n1*n2*(n1+n2+1)/12), U = min(U1, U2).
    The continuity correction moves U towards its mean; no tie adjustment
    is applied to the variance.
    """
    warnings_list: list[str] = []
    n1, n2 = len(x), len(y)
    if n1 < 3 or n2 < 3:
        return InsufficientData(
            f"each group needs at least 3 observations for the Mann-Whitney U "
            f"test (got {n1} and {n2})"
        ), warnings_list

    ranks = rankdata(np.concatenate([x, y]), method='average')
    r1 = float(np.sum(ranks[:n1]))
    u1 = r1 - n1 * (n1 + 1) / 2.0
    u2 = n1 * n2 - u1
    u = min(u1, u2)

    mean_u = n1 * n2 / 2.0
    sd_u = math.sqrt(n1 * n2 * (n1 + n2 + 1) / 12.0)
    z = (u - mean_u + 0.5) / sd_u
    p_value = normal_pvalue(z, distribution)

    if tie_correction(ranks) < 1.0:
        warnings_list.append(
            "tied observations present; the normal approximation does not "
            "adjust its variance for ties"
        )

    return MannWhitneyParams(
        method="Mann-Whitney U test",
        group_names=group_names,
        n1=n1,
        n2=n2,
        u=u,
        u1=u1,
        u2=u2,
        z=z,
        p_value=p_value,
        is_significant=p_value < alpha,
    ), warnings_list


def kruskal(
    groups: dict[str, NDArray],
    *,
    alpha: float,
    distribution: str,
) -> tuple[KruskalWallisParams | InsufficientData, list[str]]:
    """
    Kruskal-Wallis H test, df = k - 1.

    H = 12 / (N(N+1)) * sum(R_i^2 / n_i) - 3(N+1), divided by the tie
    correction when it is positive.
    """
    warnings_list: list[str] = []
    names = list(groups)
    samples = [groups[name] for name in names]
    k = len(samples)
    n_total = sum(len(s) for s in samples)

    if k < 2:
        return InsufficientData(
            f"the Kruskal-Wallis test needs at least 2 groups (got {k})"
        ), warnings_list
    if n_total < 3:
        return InsufficientData(
            f"the Kruskal-Wallis test needs at least 3 observations in total "
            f"(got {n_total})"
        ), warnings_list

    empty = [name for name, s in zip(names, samples) if len(s) == 0]
    if empty:
        warnings_list.append(
            f"empty group(s) ignored: {', '.join(empty)}"
        )

    ranks = rankdata(np.concatenate(samples), method='average')
    rank_sums: dict[str, float] = {}
    mean_ranks: dict[str, float] = {}
    start = 0
    for name, sample in zip(names, samples):
        stop = start + len(sample)
        if len(sample) > 0:
            rank_sums[name] = float(np.sum(ranks[start:stop]))
            mean_ranks[name] = rank_sums[name] / len(sample)
        start = stop

    n = float(n_total)
    h = 12.0 / (n * (n + 1.0)) * sum(
        rank_sums[name] ** 2 / len(groups[name]) for name in rank_sums
    ) - 3.0 * (n + 1.0)

    c = tie_correction(ranks)
    if c > 0:
        h = h / c

    df = k - 1
    p_value = chi2_pvalue(h, df, distribution)

    return KruskalWallisParams(
        method="Kruskal-Wallis H test",
        h=h,
        df=df,
        p_value=p_value,
        is_significant=p_value < alpha,
        n=n_total,
        tie_correction=c,
        mean_ranks=mean_ranks,
    ), warnings_list
