"""
WHOQOL-BREF domain scoring.

Scoring rules:
    1. Negatively worded items (Q3, Q4, Q26) are reversed as 6 - value.
    2. Missing data: a domain with more than four items needs at least 80%
       of them answered; a domain with four items or fewer tolerates at most
       one missing item. The thresholds differ at the boundary (a four-item
       domain accepts 75%); this follows the instrument's scoring manual.
    3. The mean of the answered items (1-5) is transformed to 0-100 as
       (mean - 1) * 25.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from numbers import Integral, Real

from whoqolstats.core.constants import LIKERT_MAX, LIKERT_MIN
from whoqolstats.core.exceptions import ResponseError
from whoqolstats.scoring._common import SCORE_FIELDS, DomainScores
from whoqolstats.scoring.instrument import (
    DOMAIN_ITEMS,
    NEGATIVE_ITEMS,
    PRIMARY_DOMAINS,
)

RawResponse = Mapping[str, int]


def invert_score(value: int) -> int:
    """Reverse a 1-5 Likert value (1 <-> 5, 2 <-> 4)."""
    return (LIKERT_MAX + LIKERT_MIN) - value


def likert_value(question_id: str, value: object) -> int | None:
    """
    Validate one answer.

    Returns:
        The integer value, or None if the item was not answered

    Raises:
        ResponseError: If the value is not an integer in 1-5
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ResponseError(
            f"{question_id}: expected an integer {LIKERT_MIN}-{LIKERT_MAX}, "
            f"got {value!r}",
            question_id=question_id,
            value=value,
        )
    if not isinstance(value, Integral):
        if value != value:  # NaN marks an unanswered item in imported data
            return None
        if not float(value).is_integer():
            raise ResponseError(
                f"{question_id}: Likert values are whole numbers, got {value!r}",
                question_id=question_id,
                value=value,
            )
    result = int(value)
    if not (LIKERT_MIN <= result <= LIKERT_MAX):
        raise ResponseError(
            f"{question_id}: value {result} outside {LIKERT_MIN}-{LIKERT_MAX}",
            question_id=question_id,
            value=value,
        )
    return result


def scored_item(responses: RawResponse, question_id: str) -> int | None:
    """Answer to one item after reversing negatively worded items."""
    value = likert_value(question_id, responses.get(question_id))
    if value is None:
        return None
    return invert_score(value) if question_id in NEGATIVE_ITEMS else value


def domain_items(domain: str) -> tuple[str, ...]:
    """
    Item ids of a domain ('physical', ..., 'overall').

    Raises:
        KeyError: If domain is unknown
    """
    try:
        return DOMAIN_ITEMS[domain]
    except KeyError:
        raise KeyError(
            f"unknown domain {domain!r}; expected one of {tuple(DOMAIN_ITEMS)}"
        ) from None


def is_scorable(n_items: int, n_answered: int) -> bool:
    """Missing-data rule for a domain of n_items with n_answered answers."""
    if n_answered == 0:
        return False
    if n_items > 4:
        return n_answered >= n_items * 0.8
    return n_answered >= n_items - 1


def domain_raw_mean(responses: RawResponse, domain: str) -> float | None:
    """Mean (1-5) of the answered, reversed items of a domain, or None."""
    items = domain_items(domain)
    answered = [v for v in (scored_item(responses, q) for q in items) if v is not None]
    if not is_scorable(len(items), len(answered)):
        return None
    return sum(answered) / len(answered)


def to_transformed(raw_mean: float | None) -> float | None:
    """1-5 mean to the 0-100 scale."""
    if raw_mean is None:
        return None
    return (raw_mean - 1.0) * 25.0


def transformed_to_raw(score: float | None) -> float | None:
    """0-100 score back to the 1-5 scale."""
    if score is None:
        return None
    return score / 100.0 * 4.0 + 1.0


def classify_raw_score(raw: float | None) -> str | None:
    """Qualitative band of a 1-5 score: poor, fair, good or very good."""
    if raw is None:
        return None
    if raw < 3:
        return 'poor'
    if raw < 4:
        return 'fair'
    if raw < 5:
        return 'good'
    return 'very good'


def score_domains(responses: RawResponse) -> DomainScores:
    """
    Score one participant.

    Parameters
    ----------
    responses : mapping
        Question id -> Likert value 1-5. Missing keys and None values are
        unanswered items; ids outside the instrument are ignored. The
        mapping is not modified.

    Returns
    -------
    DomainScores
        Each field in [0, 100] or None.

    Raises
    ------
    ResponseError
        If an answered item is not an integer in 1-5.
    """
    scores = {
        domain: to_transformed(domain_raw_mean(responses, domain))
        for domain in DOMAIN_ITEMS
    }
    defined = [scores[d] for d in PRIMARY_DOMAINS if scores[d] is not None]
    mean_of_domains = sum(defined) / len(defined) if defined else None

    return DomainScores(
        physical=scores['physical'],
        psychological=scores['psychological'],
        social=scores['social'],
        environment=scores['environment'],
        overall=scores['overall'],
        mean_of_domains=mean_of_domains,
    )


def mean_domain_scores(all_scores: Iterable[DomainScores]) -> DomainScores:
    """
    Per-field mean over many participants.

    Undefined scores are skipped field by field; a field with no defined
    value stays None.
    """
    totals = {name: 0.0 for name in SCORE_FIELDS}
    counts = {name: 0 for name in SCORE_FIELDS}
    for scores in all_scores:
        for name in SCORE_FIELDS:
            value = getattr(scores, name)
            if value is not None:
                totals[name] += value
                counts[name] += 1

    return DomainScores(**{
        name: (totals[name] / counts[name] if counts[name] else None)
        for name in SCORE_FIELDS
    })
