"""
Common types for hypothesis testing.

Frozen parameter payloads that go inside Result[P] envelopes. Each payload
is a pure data container tagged with its TestType.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np
from numpy.typing import NDArray

from whoqolstats.core.result import TestType


@dataclass(frozen=True)
class TTestParams:
    """
    Two independent samples t-test.

    Attributes
    ----------
    method : str
        "Welch's t-test" or "Student's t-test (pooled variance)".
    group_names : tuple of str
        Labels of the two samples, in argument order.
    t_statistic : float
        (mean1 - mean2) / standard error.
    df : int
        Welch-Satterthwaite degrees of freedom floored to an integer
        (n1 + n2 - 2 for the pooled test).
    cohens_d : float
        Mean difference over the pooled standard deviation, whichever
        variant of the test ran.
    """
    method: str
    group_names: tuple[str, str]
    n1: int
    n2: int
    mean1: float
    mean2: float
    t_statistic: float
    df: int
    p_value: float
    is_significant: bool
    cohens_d: float
    test_type: ClassVar[TestType] = TestType.T_TEST


@dataclass(frozen=True)
class CorrelationParams:
    """
    Pearson correlation.

    ``r``, ``r_squared``, ``t_statistic`` and ``p_value`` are None when
    either variable is constant; the correlation is then undefined and
    reported as not significant.
    """
    method: str
    n: int
    df: int
    r: float | None
    r_squared: float | None
    t_statistic: float | None
    p_value: float | None
    is_significant: bool
    strength: str | None      # 'weak', 'moderate', 'strong'
    direction: str | None     # 'positive', 'negative'
    test_type: ClassVar[TestType] = TestType.CORRELATION


@dataclass(frozen=True)
class RegressionParams:
    """Simple linear regression y = intercept + slope * x."""
    method: str
    n: int
    df: int
    slope: float
    intercept: float
    r_squared: float
    slope_se: float
    t_statistic: float
    p_value: float
    is_significant: bool
    test_type: ClassVar[TestType] = TestType.REGRESSION


@dataclass(frozen=True, eq=False)
class ContingencyTable:
    """
    Cross-tabulation of two categorical variables.

    Invariants: ``observed`` and ``expected`` have shape
    (len(row_labels), len(col_labels)); row and column totals both sum to
    ``grand_total``.
    """
    row_labels: tuple[str, ...]
    col_labels: tuple[str, ...]
    observed: NDArray[np.integer[Any]]
    expected: NDArray[np.floating[Any]]
    row_totals: NDArray[np.integer[Any]]
    col_totals: NDArray[np.integer[Any]]
    grand_total: int

    @property
    def shape(self) -> tuple[int, int]:
        return self.observed.shape


@dataclass(frozen=True)
class ChiSquaredParams:
    """
    Pearson's chi-squared test of independence.

    ``n_low_expected`` counts cells with an expected count below 5; the
    Cochran warning is attached to the Result when their share exceeds 20%.
    """
    method: str
    chi2: float
    df: int
    p_value: float
    is_significant: bool
    n_low_expected: int
    low_expected_fraction: float
    table: ContingencyTable
    test_type: ClassVar[TestType] = TestType.CHI_SQUARED


@dataclass(frozen=True)
class MannWhitneyParams:
    """
    Mann-Whitney U test with normal approximation.

    ``u`` is min(u1, u2); u1 + u2 == n1 * n2.
    """
    method: str
    group_names: tuple[str, str]
    n1: int
    n2: int
    u: float
    u1: float
    u2: float
    z: float
    p_value: float
    is_significant: bool
    test_type: ClassVar[TestType] = TestType.MANN_WHITNEY_U


@dataclass(frozen=True)
class KruskalWallisParams:
    """Kruskal-Wallis H test with tie correction."""
    method: str
    h: float
    df: int
    p_value: float
    is_significant: bool
    n: int
    tie_correction: float
    mean_ranks: dict[str, float]
    test_type: ClassVar[TestType] = TestType.KRUSKAL_WALLIS
