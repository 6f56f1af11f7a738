"""
Participant records.

A participant carries optional socioeconomic answers (free-form keys) and
optional WHOQOL-BREF responses. Excluded participants, and participants
who declined consent, stay in the data set but are left out of every
analysis.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from whoqolstats.scoring._common import DomainScores
from whoqolstats.scoring.solvers import score_domains


@dataclass(frozen=True)
class Participant:
    """
    One study participant.

    Attributes:
        id: Unique identifier
        socioeconomic: Field name -> answer (str for categorical fields,
            number for numeric ones). Empty strings mean 'not answered'.
        responses: Question id -> Likert value 1-5, or None when the
            questionnaire was not filled in
        is_excluded: Left out of analyses when True
        exclusion_reason: Why the participant was excluded
        consent_given: Participants who declined consent never count
    """
    id: str
    socioeconomic: Mapping[str, Any] = field(default_factory=dict)
    responses: Mapping[str, int] | None = None
    is_excluded: bool = False
    exclusion_reason: str | None = None
    consent_given: bool = True

    def field_value(self, name: str) -> Any:
        """Socioeconomic answer, or None when absent."""
        return self.socioeconomic.get(name)


def included(participant: Participant) -> bool:
    """Not excluded and consent given."""
    return participant.consent_given and not participant.is_excluded


def active(participants: Iterable[Participant]) -> list[Participant]:
    """Participants that count for analysis: included and questionnaire present."""
    return [p for p in participants if included(p) and p.responses is not None]


def domain_scores(participant: Participant) -> DomainScores | None:
    """Domain scores of a participant, None without responses."""
    if participant.responses is None:
        return None
    return score_domains(participant.responses)
