"""
Pearson's chi-squared test of independence.

The table is built from two categorical variables observed on the same
participants; a participant counts only when both values are present.
No continuity correction is applied, 2x2 tables included.

Cochran's rule: the chi-squared approximation is questionable when more
than 20% of the cells have an expected count below 5. The test still
reports a result and attaches a warning.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from whoqolstats.core.constants import (
    COCHRAN_MAX_LOW_FRACTION,
    COCHRAN_MIN_EXPECTED,
)
from whoqolstats.core.result import InsufficientData, InvalidInput
from whoqolstats.core.validation import is_missing
from whoqolstats.distributions.pvalues import chi2_pvalue
from whoqolstats.hypothesis._common import ChiSquaredParams, ContingencyTable


def cross_tabulate(
    x: Sequence[Any],
    y: Sequence[Any],
) -> ContingencyTable | InsufficientData | InvalidInput:
    """
    Build the observed table of two label sequences.

    Row and column labels are the sorted distinct string values.
    """
    if len(x) != len(y):
        return InvalidInput(
            f"x has {len(x)} values and y has {len(y)}; the chi-squared test "
            f"needs one pair of labels per participant"
        )

    pairs = [
        (str(a), str(b))
        for a, b in zip(x, y)
        if not is_missing(a) and not is_missing(b)
    ]
    row_labels = tuple(sorted({a for a, _ in pairs}))
    col_labels = tuple(sorted({b for _, b in pairs}))

    if len(row_labels) < 2 or len(col_labels) < 2:
        return InsufficientData(
            "the chi-squared test needs at least two categories in each variable "
            f"(got {len(row_labels)} and {len(col_labels)})"
        )

    row_index = {label: i for i, label in enumerate(row_labels)}
    col_index = {label: j for j, label in enumerate(col_labels)}
    observed = np.zeros((len(row_labels), len(col_labels)), dtype=np.int64)
    for a, b in pairs:
        observed[row_index[a], col_index[b]] += 1

    return build_table(observed, row_labels, col_labels)


def build_table(
    observed: NDArray,
    row_labels: tuple[str, ...],
    col_labels: tuple[str, ...],
) -> ContingencyTable:
    """Totals and expected counts row_total * col_total / grand_total."""
    row_totals = observed.sum(axis=1)
    col_totals = observed.sum(axis=0)
    grand_total = int(observed.sum())
    if grand_total > 0:
        expected = np.outer(row_totals, col_totals) / grand_total
    else:
        expected = np.zeros(observed.shape, dtype=np.float64)

    return ContingencyTable(
        row_labels=row_labels,
        col_labels=col_labels,
        observed=observed,
        expected=expected,
        row_totals=row_totals,
        col_totals=col_totals,
        grand_total=grand_total,
    )


def chisq_independence(
    table: ContingencyTable,
    *,
    alpha: float,
    distribution: str,
) -> tuple[ChiSquaredParams | InsufficientData, list[str]]:
    """Chi-squared statistic, df = (R-1)(C-1), and Cochran's check."""
    warnings_list: list[str] = []
    n_rows, n_cols = table.shape

    if n_rows < 2 or n_cols < 2:
        return InsufficientData(
            "the chi-squared test needs at least two categories in each variable "
            f"(got {n_rows} and {n_cols})"
        ), warnings_list
    if table.grand_total == 0:
        return InsufficientData(
            "no participant has a value for both variables"
        ), warnings_list

    observed = table.observed.astype(np.float64)
    expected = table.expected
    positive = expected > 0
    chi2 = float(np.sum((observed[positive] - expected[positive]) ** 2 / expected[positive]))
    df = (n_rows - 1) * (n_cols - 1)
    p_value = chi2_pvalue(chi2, df, distribution)

    n_cells = n_rows * n_cols
    n_low = int(np.sum(expected < COCHRAN_MIN_EXPECTED))
    low_fraction = n_low / n_cells
    if low_fraction > COCHRAN_MAX_LOW_FRACTION:
        warnings_list.append(
            f"Cochran's rule: {n_low} cell(s) ({low_fraction * 100:.1f}% of the "
            f"table) have an expected count below {COCHRAN_MIN_EXPECTED:g}; "
            f"the chi-squared approximation may be unreliable"
        )

    return ChiSquaredParams(
        method="Pearson's chi-squared test of independence",
        chi2=chi2,
        df=df,
        p_value=p_value,
        is_significant=p_value < alpha,
        n_low_expected=n_low,
        low_expected_fraction=low_fraction,
        table=table,
    ), warnings_list
