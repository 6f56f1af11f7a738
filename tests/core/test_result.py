"""
Tests for the Result[P] envelope and the TestSolution wrapper.

Validates:
    - Frozen immutability
    - Failure payloads and the ok flag
    - has_warning() method
    - Attribute forwarding and summary() formatting of TestSolution
    - core.backend.solve() metadata
"""

from dataclasses import FrozenInstanceError, dataclass
from typing import ClassVar

import pytest

from whoqolstats.core.backend import solve
from whoqolstats.core.result import (
    InsufficientData,
    InvalidInput,
    Result,
    TestType,
    failure,
)
from whoqolstats.core.solution import TestSolution


# ═══════════════════════════════════════════════════════════════════════
# Test payload types
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    method: str
    statistic: float
    p_value: float
    is_significant: bool
    test_type: ClassVar[TestType] = TestType.T_TEST


def _fake(p=0.01):
    return FakeParams(method="Fake test", statistic=2.5, p_value=p, is_significant=p < 0.05)


# ═══════════════════════════════════════════════════════════════════════
# Result envelope
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=_fake(),
            info={"method": "Fake test"},
            timing={"total_seconds": 0.01},
            backend_name="fake",
        )
        assert result.params.statistic == 2.5
        assert result.info["method"] == "Fake test"
        assert result.backend_name == "fake"
        assert result.ok

    def test_warnings_default_empty(self):
        result = Result(params=_fake(), info={}, timing=None, backend_name="fake")
        assert result.warnings == ()
        assert not result.has_warning("anything")

    def test_has_warning_substring(self):
        result = Result(
            params=_fake(),
            info={},
            timing=None,
            backend_name="fake",
            warnings=("Cochran's rule: 2 cell(s) ...",),
        )
        assert result.has_warning("Cochran")
        assert not result.has_warning("variance")

    def test_frozen(self):
        result = Result(params=_fake(), info={}, timing=None, backend_name="fake")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"

    def test_failure_payloads_not_ok(self):
        for payload in (InsufficientData("too few"), InvalidInput("mismatch")):
            result = failure(payload, "fake")
            assert not result.ok
            assert result.timing is None
            assert result.info["test_type"] == payload.test_type.value


# ═══════════════════════════════════════════════════════════════════════
# TestSolution
# ═══════════════════════════════════════════════════════════════════════


class TestSolutionWrapper:

    def test_forwards_payload_fields(self):
        sol = solve("fake", lambda: (_fake(), []))
        assert sol.statistic == 2.5
        assert sol.p_value == 0.01
        assert sol.is_significant is True
        assert sol.test_type is TestType.T_TEST

    def test_unknown_field_raises(self):
        sol = solve("fake", lambda: (_fake(), []))
        with pytest.raises(AttributeError):
            sol.no_such_field

    def test_failure_has_no_p_value(self):
        sol = TestSolution(_result=failure(InsufficientData("too few"), "fake"))
        assert not sol.ok
        assert sol.p_value is None
        assert sol.is_significant is False
        assert sol.message == "too few"
        assert "too few" in sol.summary()

    def test_solve_records_metadata(self):
        sol = solve(
            "fake", lambda: (_fake(), ["careful"]),
            info={"distribution": "approx"},
        )
        assert sol.info["method"] == "Fake test"
        assert sol.info["test_type"] == "TTest"
        assert sol.info["distribution"] == "approx"
        assert "total_seconds" in sol.timing
        assert "fake" in sol.timing
        assert sol.backend_name == "fake"
        assert sol.has_warning("careful")

    def test_solve_forwards_arguments(self):
        def compute(a, *, b):
            return FakeParams(method="m", statistic=a + b, p_value=0.5, is_significant=False), []
        sol = solve("fake", compute, 1.0, b=2.0)
        assert sol.statistic == 3.0

    def test_summary_lists_fields_and_warnings(self):
        sol = solve("fake", lambda: (_fake(0.0001), ["careful"]))
        s = sol.summary()
        assert s.startswith("Fake test")
        assert "statistic" in s
        assert "Warning: careful" in s

    def test_repr(self):
        sol = solve("fake", lambda: (_fake(), []))
        assert "TTest" in repr(sol)
        assert "p_value" in repr(sol)
