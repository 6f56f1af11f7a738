"""
Shared execution path for every test.

Each test implementation is a plain function returning
``(payload, warnings)``. solve() times it, wraps the payload in a Result
envelope and returns the user-facing TestSolution, so all tests report
timing, method and warnings the same way.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from whoqolstats.core.compute.timing import Timer
from whoqolstats.core.result import Result
from whoqolstats.core.solution import TestSolution

Compute = Callable[..., tuple[Any, list[str]]]


def solve(
    name: str,
    compute: Compute,
    *args: Any,
    info: dict[str, Any] | None = None,
    **kwargs: Any,
) -> TestSolution:
    """
    Run one test implementation.

    Args:
        name: Backend identifier, recorded as Result.backend_name
            and as the timing section
        compute: Implementation returning (payload, warnings)
        *args, **kwargs: Forwarded to compute
        info: Extra metadata merged into Result.info

    Returns:
        TestSolution wrapping the payload (possibly a failure payload)
    """
    timer = Timer()
    timer.start()
    with timer.section(name):
        params, warnings_list = compute(*args, **kwargs)
    timer.stop()

    meta: dict[str, Any] = {'test_type': params.test_type.value}
    method = getattr(params, 'method', None)
    if method is not None:
        meta['method'] = method
    if info:
        meta.update(info)

    return TestSolution(_result=Result(
        params=params,
        info=meta,
        timing=timer.result(),
        backend_name=name,
        warnings=tuple(warnings_list),
    ))
