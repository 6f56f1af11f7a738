"""
User-facing test solution.

TestSolution wraps Result[P] for every inferential test and the
reliability analysis, and provides a plain-text summary. Payload fields are
reachable as attributes, so ``sol.t_statistic`` reads
``sol.params.t_statistic``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import Any

import numpy as np

from whoqolstats.core.result import Result, TestType


@dataclass
class TestSolution:
    """
    User-facing result of a statistical test.

    Exactly one payload is populated. Check ``ok`` (or ``test_type``)
    before reading test-specific fields; failure payloads only carry a
    ``message``.
    """
    __test__ = False  # not a pytest test class

    _result: Result[Any]

    # --- Variant ---

    @property
    def params(self) -> Any:
        """The test-specific (or failure) payload."""
        return self._result.params

    @property
    def test_type(self) -> TestType:
        return self._result.params.test_type

    @property
    def ok(self) -> bool:
        """False for InsufficientData / InvalidInput."""
        return self._result.ok

    @property
    def message(self) -> str | None:
        """Failure message, or None for a successful test."""
        return None if self.ok else self._result.params.message

    # --- Common statistics ---

    @property
    def p_value(self) -> float | None:
        """p-value, or None when the test produced none."""
        return getattr(self._result.params, 'p_value', None)

    @property
    def is_significant(self) -> bool:
        return bool(getattr(self._result.params, 'is_significant', False))

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; guard against recursion
        # while the dataclass is being constructed or unpickled.
        if name.startswith('_'):
            raise AttributeError(name)
        params = self._result.params
        try:
            return getattr(params, name)
        except AttributeError:
            raise AttributeError(
                f"{type(params).__name__} result has no field {name!r}"
            ) from None

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format the result as an aligned plain-text block.

        Produces output like:
            Welch's t-test
            ------------------------------
            t_statistic           -9
            df                    8
            p_value               1.805e-05
            ...
        """
        p = self._result.params
        if not self.ok:
            return f"{p.test_type.value}: {p.message}\n"

        title = self._result.info.get('method', p.test_type.value)
        lines = [title, "-" * max(30, len(title))]
        for f in fields(p):
            value = getattr(p, f.name)
            if is_dataclass(value) or isinstance(value, (tuple, list, dict)):
                continue
            lines.append(f"{f.name:<22}{_format_value(value)}")

        post_hoc = getattr(p, 'post_hoc', None)
        if post_hoc is not None:
            lines.append("")
            lines.append(f"Post-hoc ({post_hoc.method})")
            for c in post_hoc.comparisons:
                mark = " *" if c.is_significant else ""
                lines.append(
                    f"  {c.group1} - {c.group2}: diff = {c.mean_diff:.4g}, "
                    f"p adj = {_format_pvalue(c.p_value)}{mark}"
                )

        for w in self._result.warnings:
            lines.append(f"Warning: {w}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        if not self.ok:
            return f"TestSolution({p.test_type.value}, message={p.message!r})"
        pv = self.p_value
        pv_str = "None" if pv is None else f"{pv:.4g}"
        return f"TestSolution({p.test_type.value}, p_value={pv_str})"


def _format_pvalue(p: float | None) -> str:
    if p is None:
        return "NA"
    if p < 0.001:
        return "< 0.001"
    return f"{p:.4f}"


def _format_value(x: Any) -> str:
    if x is None:
        return "NA"
    if isinstance(x, bool):
        return str(x)
    if isinstance(x, (float, np.floating)):
        if np.isinf(x):
            return "-Inf" if x < 0 else "Inf"
        return f"{x:.6g}"
    if isinstance(x, np.ndarray):
        return np.array2string(x, precision=4)
    return str(x)
