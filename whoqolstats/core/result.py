"""
Generic result container for all whoqolstats computations.

The Result class provides a standardized envelope that every test uses.
This enables shared tooling for timing, diagnostics and formatting while
allowing each test to define its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - Exactly one payload per call: a test-specific params dataclass, or
      one of the two failure payloads (InsufficientData, InvalidInput)
    - Every payload carries a TestType tag, so callers can dispatch on
      ``result.params.test_type`` without isinstance chains
    - info dict for flexible metadata (method, distribution method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

P = TypeVar('P')  # Parameter payload type


class TestType(str, Enum):
    """Tag identifying which payload a Result carries."""
    __test__ = False  # not a pytest test class

    T_TEST = 'TTest'
    ANOVA = 'Anova'
    CORRELATION = 'Correlation'
    REGRESSION = 'Regression'
    CHI_SQUARED = 'ChiSquared'
    MANN_WHITNEY_U = 'MannWhitneyU'
    KRUSKAL_WALLIS = 'KruskalWallis'
    CRONBACH_ALPHA = 'CronbachAlpha'
    INSUFFICIENT_DATA = 'InsufficientData'
    INVALID_INPUT = 'InvalidInput'


@dataclass(frozen=True)
class InsufficientData:
    """
    Failure payload: sample or group sizes below the test's minimum.

    Attributes:
        message: Human-readable explanation, naming the minimum required
    """
    message: str
    test_type: ClassVar[TestType] = TestType.INSUFFICIENT_DATA


@dataclass(frozen=True)
class InvalidInput:
    """
    Failure payload: structurally inconsistent input.

    Mismatched lengths, comparing a variable against itself, or zero
    variance preventing a ratio.

    Attributes:
        message: Human-readable explanation
    """
    message: str
    test_type: ClassVar[TestType] = TestType.INVALID_INPUT


FAILURE_TYPES = (InsufficientData, InvalidInput)


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The test-specific parameter payload type

    Attributes:
        params: Test-specific payload, or a failure payload
        info: Structured metadata (method, distribution, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=TTestParams(...),
        ...     info={'method': "Welch's t-test", 'distribution': 'approx'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_t_test'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """True unless the payload is a failure variant."""
        return not isinstance(self.params, FAILURE_TYPES)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)


def failure(
    params: InsufficientData | InvalidInput,
    backend_name: str,
) -> Result[InsufficientData | InvalidInput]:
    """Wrap a failure payload in an untimed Result."""
    return Result(
        params=params,
        info={'test_type': params.test_type.value},
        timing=None,
        backend_name=backend_name,
    )
