"""
Internal consistency of a multi-item scale (Cronbach's alpha).

Procedure:
    1. Raw 1-5 answers of each item; negatively worded items reversed.
    2. Listwise deletion: only participants who answered every item.
    3. alpha = k / (k - 1) * (1 - sum(var_i) / var_total), sample variances.

A total-score variance of zero gives alpha = 1.0 when every item is
constant as well (identical answers everywhere), and 0.0 otherwise (items
that cancel each other out exactly).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from whoqolstats.core.backend import solve
from whoqolstats.core.result import InsufficientData
from whoqolstats.core.solution import TestSolution
from whoqolstats.core.validation import (
    check_2d,
    check_array,
    check_finite,
    is_constant,
)
from whoqolstats.reliability._common import CronbachParams
from whoqolstats.scoring.solvers import RawResponse, scored_item


def interpret_alpha(alpha: float) -> str:
    """
    Conventional reading of an alpha value.

    negative, poor (< 0.6), questionable (< 0.7), acceptable (< 0.8),
    good (< 0.9), excellent.
    """
    if alpha < 0:
        return 'negative'
    if alpha < 0.6:
        return 'poor'
    if alpha < 0.7:
        return 'questionable'
    if alpha < 0.8:
        return 'acceptable'
    if alpha < 0.9:
        return 'good'
    return 'excellent'


def _alpha_from_matrix(
    matrix: NDArray,
    item_ids: tuple[str, ...],
) -> tuple[CronbachParams | InsufficientData, list[str]]:
    warnings_list: list[str] = []
    n_participants, k = matrix.shape
    if k < 2:
        return InsufficientData(
            f"Cronbach's alpha needs at least 2 items (got {k})"
        ), warnings_list
    if n_participants < 2:
        return InsufficientData(
            f"Cronbach's alpha needs at least 2 participants who answered "
            f"every item (got {n_participants})"
        ), warnings_list

    constant_items = [is_constant(matrix[:, j]) for j in range(k)]
    item_variances = np.array([
        0.0 if constant else np.var(matrix[:, j], ddof=1)
        for j, constant in enumerate(constant_items)
    ])
    totals = matrix.sum(axis=1)
    total_variance = 0.0 if is_constant(totals) else float(np.var(totals, ddof=1))
    sum_item_variances = float(np.sum(item_variances))

    if total_variance == 0.0:
        alpha = 1.0 if all(constant_items) else 0.0
    else:
        alpha = (k / (k - 1)) * (1.0 - sum_item_variances / total_variance)

    if alpha < 0:
        warnings_list.append(
            "negative alpha: the items correlate negatively on average; "
            "check for unreversed items"
        )

    return CronbachParams(
        alpha=alpha,
        n_items=k,
        n_participants=n_participants,
        item_ids=item_ids,
        item_variances=tuple(float(v) for v in item_variances),
        total_variance=total_variance,
        interpretation=interpret_alpha(alpha),
    ), warnings_list


def complete_cases(
    responses: Iterable[RawResponse | None],
    item_ids: Sequence[str],
) -> NDArray:
    """
    Participants x items matrix of reversed answers, listwise.

    None entries in ``responses`` are skipped, as are participants with
    any of the items unanswered.
    """
    rows: list[list[int]] = []
    for answers in responses:
        if answers is None:
            continue
        row = [scored_item(answers, q) for q in item_ids]
        if any(v is None for v in row):
            continue
        rows.append(row)
    return np.array(rows, dtype=np.float64).reshape(len(rows), len(item_ids))


def cronbach_alpha(
    responses: Iterable[RawResponse | None],
    item_ids: Sequence[str],
) -> TestSolution:
    """
    Cronbach's alpha of the given WHOQOL-BREF items.

    Parameters
    ----------
    responses : iterable of mapping or None
        One question id -> Likert value mapping per participant.
    item_ids : sequence of str
        The scale's items, e.g. domain_items('social').

    Returns
    -------
    TestSolution
        CronbachParams, or InsufficientData for fewer than 2 items or fewer
        than 2 complete participants.

    Raises
    ------
    ResponseError
        If an answer to one of the items is not an integer in 1-5.
    """
    ids = tuple(str(q) for q in item_ids)
    matrix = complete_cases(responses, ids)
    return solve(
        'cronbach_alpha', _alpha_from_matrix, matrix, ids,
        info={'listwise': True},
    )


def cronbach_alpha_matrix(
    matrix: ArrayLike,
    item_ids: Sequence[Any] | None = None,
) -> TestSolution:
    """
    Cronbach's alpha of a ready participants x items score matrix.

    No reversal or deletion is applied; the matrix must be complete.
    """
    arr = check_array(matrix, 'matrix')
    check_2d(arr, 'matrix')
    check_finite(arr, 'matrix')
    if item_ids is None:
        ids = tuple(f"item{j + 1}" for j in range(arr.shape[1]))
    else:
        ids = tuple(str(q) for q in item_ids)
    return solve('cronbach_alpha', _alpha_from_matrix, arr, ids)
