"""
Common data types for domain scoring.
"""

from __future__ import annotations

from dataclasses import dataclass

SCORE_FIELDS: tuple[str, ...] = (
    'physical', 'psychological', 'social', 'environment', 'overall', 'mean_of_domains',
)


@dataclass(frozen=True)
class DomainScores:
    """
    Transformed (0-100) scores of one participant.

    A field is None when the domain could not be scored under the
    missing-data rule. ``mean_of_domains`` averages whichever of the four
    primary domains are defined; it never includes ``overall``.
    """
    physical: float | None
    psychological: float | None
    social: float | None
    environment: float | None
    overall: float | None
    mean_of_domains: float | None

    def get(self, name: str) -> float | None:
        """Score by field name (e.g. 'physical')."""
        if name not in SCORE_FIELDS:
            raise KeyError(f"unknown score {name!r}; expected one of {SCORE_FIELDS}")
        return getattr(self, name)

    def as_dict(self) -> dict[str, float | None]:
        return {name: getattr(self, name) for name in SCORE_FIELDS}
