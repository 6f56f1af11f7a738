"""
Shared compute infrastructure for whoqolstats.

Submodules:
    timing: Execution timing utilities
    tolerances: Precision contract of the distribution approximations
"""

from whoqolstats.core.compute.timing import Timer

__all__ = [
    "Timer",
]
