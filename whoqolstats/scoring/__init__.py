"""
WHOQOL-BREF scoring.

Public API:
    score_domains(responses)     - Six 0-100 scores for one participant
    mean_domain_scores(scores)   - Field-wise mean over participants
    invert_score(value)          - Reverse a negatively worded answer
    domain_items(domain)         - Item ids of a domain
    transformed_to_raw(score)    - 0-100 back to 1-5
    classify_raw_score(raw)      - poor / fair / good / very good
    likert_scale(question_id)    - Answer labels of a question
"""

from whoqolstats.scoring._common import SCORE_FIELDS, DomainScores
from whoqolstats.scoring.instrument import (
    DOMAIN_ITEMS,
    NEGATIVE_ITEMS,
    PRIMARY_DOMAINS,
    QUESTION_IDS,
    QUESTIONS,
    Question,
    get_question,
    likert_scale,
)
from whoqolstats.scoring.solvers import (
    classify_raw_score,
    domain_items,
    invert_score,
    likert_value,
    mean_domain_scores,
    score_domains,
    scored_item,
    transformed_to_raw,
)

__all__ = [
    "score_domains",
    "mean_domain_scores",
    "invert_score",
    "likert_value",
    "scored_item",
    "domain_items",
    "transformed_to_raw",
    "classify_raw_score",
    "likert_scale",
    "get_question",
    "DomainScores",
    "Question",
    "QUESTIONS",
    "QUESTION_IDS",
    "DOMAIN_ITEMS",
    "NEGATIVE_ITEMS",
    "PRIMARY_DOMAINS",
    "SCORE_FIELDS",
]
