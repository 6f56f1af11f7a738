"""
Core infrastructure for whoqolstats.

This module provides shared abstractions used by every subpackage.

Key components:
    result: Result[P] envelope and the failure payloads
    solution: TestSolution user-facing wrapper
    exceptions: Exception hierarchy
    validation: Input validators
    constants: Shared thresholds
    compute: Timing and tolerance tiers
"""

from whoqolstats.core.result import (
    Result,
    TestType,
    InsufficientData,
    InvalidInput,
)
from whoqolstats.core.solution import TestSolution
from whoqolstats.core.exceptions import (
    WhoqolStatsError,
    ValidationError,
    DimensionError,
    ResponseError,
)

__all__ = [
    # Result
    "Result",
    "TestType",
    "InsufficientData",
    "InvalidInput",
    "TestSolution",
    # Exceptions
    "WhoqolStatsError",
    "ValidationError",
    "DimensionError",
    "ResponseError",
]
