"""
Reliability analysis.

Public API:
    cronbach_alpha(responses, item_ids)   - Alpha from raw WHOQOL answers
    cronbach_alpha_matrix(matrix)         - Alpha from a complete score matrix
    interpret_alpha(alpha)                - Conventional quality band
"""

from whoqolstats.reliability._common import CronbachParams
from whoqolstats.reliability.solvers import (
    complete_cases,
    cronbach_alpha,
    cronbach_alpha_matrix,
    interpret_alpha,
)

__all__ = [
    "cronbach_alpha",
    "cronbach_alpha_matrix",
    "interpret_alpha",
    "complete_cases",
    "CronbachParams",
]
