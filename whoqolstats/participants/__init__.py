"""
Participant records and the analyses run over them.

Public API:
    Participant                                 - One study participant
    included(participant)                       - Not excluded, consent given
    active(participants)                        - Drop excluded / unanswered
    domain_scores(participant)                  - DomainScores or None
    group_outcomes(ps, outcome, group_field)    - Scores per group label
    paired_values(ps, x_var, y_var)             - Aligned numeric pairs
    compare_groups(ps, outcome, group_field)    - t / Mann-Whitney / ANOVA / Kruskal-Wallis
    correlate(ps, x_var, y_var)                 - Pearson correlation
    regress(ps, predictor, outcome)             - Simple linear regression
    crosstab(ps, field1, field2)                - Chi-squared independence test
    domain_reliability(ps, domain)              - Cronbach's alpha of a domain
    domain_summaries(ps)                        - Descriptive stats per score
    categorical_frequency(ps, field)            - Frequency table of a field
    question_frequencies(ps)                    - Answer distribution per question
    scores_by_group(ps, group_field)            - Mean scores per group
"""

from whoqolstats.participants._common import GroupScores, QuestionFrequency
from whoqolstats.participants.records import (
    Participant,
    active,
    domain_scores,
    included,
)
from whoqolstats.participants.analysis import (
    categorical_frequency,
    compare_groups,
    correlate,
    crosstab,
    domain_reliability,
    domain_summaries,
    group_outcomes,
    paired_values,
    question_frequencies,
    regress,
    scores_by_group,
)

__all__ = [
    "Participant",
    "included",
    "active",
    "domain_scores",
    "group_outcomes",
    "paired_values",
    "compare_groups",
    "correlate",
    "regress",
    "crosstab",
    "domain_reliability",
    "domain_summaries",
    "categorical_frequency",
    "question_frequencies",
    "scores_by_group",
    "GroupScores",
    "QuestionFrequency",
]
