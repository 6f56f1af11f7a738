"""
Common data types for participant-level summaries.
"""

from __future__ import annotations

from dataclasses import dataclass

from whoqolstats.scoring._common import DomainScores


@dataclass(frozen=True)
class QuestionFrequency:
    """
    Answer distribution of one WHOQOL-BREF question.

    ``counts`` and ``percentages`` are keyed by the Likert value 1-5;
    percentages (0-100) are relative to ``n``. ``mean`` is None when nobody
    answered.
    """
    question_id: str
    text: str
    n: int
    counts: dict[int, int]
    percentages: dict[int, float]
    mean: float | None


@dataclass(frozen=True)
class GroupScores:
    """Mean domain scores of the participants sharing one group label."""
    group: str
    n: int
    scores: DomainScores
    classifications: dict[str, str | None]
