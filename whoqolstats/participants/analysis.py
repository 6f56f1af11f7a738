"""
Analyses over a set of participants.

These functions extract the variables from participant records and hand
them to the scoring, descriptive and inferential modules. Excluded
participants and those who declined consent never count; score-based
analyses also skip participants without questionnaire responses.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Real
from typing import Any

from whoqolstats.anova.solvers import anova_oneway
from whoqolstats.core.constants import (
    DEFAULT_DISTRIBUTION,
    LIKERT_MAX,
    LIKERT_MIN,
    SIGNIFICANCE_LEVEL,
)
from whoqolstats.core.exceptions import ValidationError
from whoqolstats.core.result import InsufficientData, InvalidInput, failure
from whoqolstats.core.solution import TestSolution
from whoqolstats.core.validation import is_missing
from whoqolstats.descriptive.solution import DescriptiveSummary, FrequencyRow
from whoqolstats.descriptive.solvers import describe, frequency_table
from whoqolstats.hypothesis.solvers import (
    chisq_test,
    correlation,
    kruskal_wallis,
    linear_regression,
    mann_whitney_u,
    t_test,
)
from whoqolstats.participants._common import GroupScores, QuestionFrequency
from whoqolstats.participants.records import (
    Participant,
    active,
    domain_scores,
    included,
)
from whoqolstats.reliability.solvers import cronbach_alpha
from whoqolstats.scoring._common import SCORE_FIELDS, DomainScores
from whoqolstats.scoring.instrument import QUESTIONS
from whoqolstats.scoring.solvers import (
    classify_raw_score,
    domain_items,
    likert_value,
    mean_domain_scores,
    transformed_to_raw,
)


def _included(participants: Iterable[Participant]) -> list[Participant]:
    return [p for p in participants if included(p)]


def _scored(participants: Iterable[Participant]) -> list[tuple[Participant, DomainScores]]:
    return [(p, domain_scores(p)) for p in active(participants)]


def _check_score_name(name: str) -> str:
    if name not in SCORE_FIELDS:
        raise ValidationError(
            f"unknown outcome {name!r}; expected one of {SCORE_FIELDS}"
        )
    return name


def _numeric(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def _variable(participant: Participant, scores: DomainScores, name: str) -> float | None:
    """A domain score when ``name`` is one, else a numeric socioeconomic answer."""
    if name in SCORE_FIELDS:
        return scores.get(name)
    return _numeric(participant.field_value(name))


def group_outcomes(
    participants: Iterable[Participant],
    outcome: str,
    group_field: str,
    *,
    min_size: int = 3,
) -> dict[str, list[float]]:
    """
    Defined outcome scores per group label.

    Participants without a group label or without a defined outcome are
    skipped; groups with fewer than ``min_size`` values are dropped. Groups
    keep the order in which their labels first appear.
    """
    _check_score_name(outcome)
    groups: dict[str, list[float]] = {}
    for p, scores in _scored(participants):
        label = p.field_value(group_field)
        value = scores.get(outcome)
        if is_missing(label) or value is None:
            continue
        groups.setdefault(str(label), []).append(value)
    return {label: values for label, values in groups.items() if len(values) >= min_size}


def paired_values(
    participants: Iterable[Participant],
    x_var: str,
    y_var: str,
) -> tuple[list[float], list[float]]:
    """
    Aligned values of two numeric variables.

    Each variable is a score name ('physical', ..., 'mean_of_domains') or a
    numeric socioeconomic field such as 'age'. Participants missing either
    value are dropped.
    """
    xs: list[float] = []
    ys: list[float] = []
    for p, scores in _scored(participants):
        x = _variable(p, scores, x_var)
        y = _variable(p, scores, y_var)
        if x is None or y is None:
            continue
        xs.append(x)
        ys.append(y)
    return xs, ys


def compare_groups(
    participants: Iterable[Participant],
    outcome: str,
    group_field: str,
    *,
    nonparametric: bool = False,
    post_hoc: bool = True,
    min_size: int = 3,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """
    Compare an outcome score across the groups of a categorical field.

    Two qualifying groups run Welch's t-test (Mann-Whitney U when
    ``nonparametric``); more run one-way ANOVA (Kruskal-Wallis).

    Returns:
        TestSolution of the chosen test, or InsufficientData when fewer than
        two groups have ``min_size`` participants
    """
    groups = group_outcomes(participants, outcome, group_field, min_size=min_size)
    if len(groups) < 2:
        return TestSolution(_result=failure(InsufficientData(
            f"at least two groups with {min_size} or more participants each "
            f"are needed (got {len(groups)})"
        ), 'compare_groups'))

    opts = {'alpha': alpha, 'distribution': distribution}
    names = list(groups)
    if len(groups) == 2:
        x, y = groups[names[0]], groups[names[1]]
        if nonparametric:
            return mann_whitney_u(x, y, group_names=names, **opts)
        return t_test(x, y, group_names=names, **opts)

    if nonparametric:
        return kruskal_wallis(groups, **opts)
    return anova_oneway(groups, post_hoc=post_hoc, **opts)


def correlate(
    participants: Iterable[Participant],
    x_var: str,
    y_var: str,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """Pearson correlation of two numeric variables (see paired_values)."""
    x, y = paired_values(participants, x_var, y_var)
    return correlation(x, y, alpha=alpha, distribution=distribution)


def regress(
    participants: Iterable[Participant],
    predictor: str,
    outcome: str,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """Simple linear regression of ``outcome`` on ``predictor``."""
    x, y = paired_values(participants, predictor, outcome)
    return linear_regression(x, y, alpha=alpha, distribution=distribution)


def crosstab(
    participants: Iterable[Participant],
    field1: str,
    field2: str,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> TestSolution:
    """Chi-squared test of independence between two categorical fields."""
    if field1 == field2:
        return TestSolution(_result=failure(InvalidInput(
            f"cannot test {field1!r} against itself; choose two different fields"
        ), 'crosstab'))
    pool = _included(participants)
    x = [p.field_value(field1) for p in pool]
    y = [p.field_value(field2) for p in pool]
    return chisq_test(x, y, alpha=alpha, distribution=distribution)


def domain_reliability(
    participants: Iterable[Participant],
    domain: str,
) -> TestSolution:
    """Cronbach's alpha of a domain's items over the active participants."""
    items = domain_items(domain)
    return cronbach_alpha((p.responses for p in active(participants)), items)


def domain_summaries(
    participants: Iterable[Participant],
) -> dict[str, DescriptiveSummary]:
    """Descriptive statistics of each score over its defined values."""
    all_scores = [scores for _, scores in _scored(participants)]
    return {
        name: describe([s.get(name) for s in all_scores if s.get(name) is not None])
        for name in SCORE_FIELDS
    }


def categorical_frequency(
    participants: Iterable[Participant],
    field: str,
) -> tuple[FrequencyRow, ...]:
    """Frequency table of a socioeconomic field; unanswered values ignored."""
    return frequency_table(p.field_value(field) for p in _included(participants))


def question_frequencies(
    participants: Iterable[Participant],
) -> tuple[QuestionFrequency, ...]:
    """
    Answer counts, percentages and mean of every question.

    Returns () when no active participant has responses.

    Raises:
        ResponseError: If an answer is not an integer in 1-5
    """
    pool = active(participants)
    if not pool:
        return ()

    likert = range(LIKERT_MIN, LIKERT_MAX + 1)
    rows = []
    for question in QUESTIONS:
        answers = [likert_value(question.id, p.responses.get(question.id)) for p in pool]
        answers = [v for v in answers if v is not None]
        n = len(answers)
        counts = {v: 0 for v in likert}
        for v in answers:
            counts[v] += 1
        rows.append(QuestionFrequency(
            question_id=question.id,
            text=question.text,
            n=n,
            counts=counts,
            percentages={v: (counts[v] / n * 100.0 if n else 0.0) for v in likert},
            mean=(sum(answers) / n if n else None),
        ))
    return tuple(rows)


def scores_by_group(
    participants: Iterable[Participant],
    group_field: str,
) -> tuple[GroupScores, ...]:
    """
    Mean domain scores per group label, sorted by label.

    ``classifications`` maps each score to its 1-5 band (poor, fair, good,
    very good), None where the mean is undefined.
    """
    grouped: dict[str, list[DomainScores]] = {}
    for p, scores in _scored(participants):
        label = p.field_value(group_field)
        if is_missing(label):
            continue
        grouped.setdefault(str(label), []).append(scores)

    rows = []
    for label in sorted(grouped):
        means = mean_domain_scores(grouped[label])
        rows.append(GroupScores(
            group=label,
            n=len(grouped[label]),
            scores=means,
            classifications={
                name: classify_raw_score(transformed_to_raw(means.get(name)))
                for name in SCORE_FIELDS
            },
        ))
    return tuple(rows)

