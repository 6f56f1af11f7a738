"""
Input validation utilities for whoqolstats.

These validators follow the "fail fast, fail loud" principle for input that
is corrupt (non-numeric, non-finite, wrong dimensionality). They do NOT
police sample sizes: too-small samples are an expected condition and are
reported by the tests themselves as InsufficientData.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Mapping
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from whoqolstats.core.constants import DISTRIBUTION_METHODS
from whoqolstats.core.exceptions import DimensionError, ValidationError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.size == 0 and not np.issubdtype(result.dtype, np.number):
        # np.asarray([]) is float64 already; an empty list of strings is not
        return np.empty(result.shape, dtype=np.float64)

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def as_sample(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert a Sample to a validated 1D float64 array.

    Combines check_array, check_1d and check_finite. A scalar is rejected
    rather than wrapped.
    """
    arr = check_array(x, name)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr


def as_grouped_sample(
    groups: Mapping[Any, ArrayLike],
    name: str = 'groups',
) -> dict[str, NDArray[np.floating[Any]]]:
    """
    Convert a GroupedSample mapping to {label: 1D float64 array}.

    Labels are stringified; insertion order is preserved.

    Raises:
        ValidationError: If groups is not a mapping, or two labels collide
            after conversion to str
    """
    if not isinstance(groups, Mapping):
        raise ValidationError(
            f"{name}: expected a mapping of group label to sample, "
            f"got {type(groups).__name__}"
        )
    out: dict[str, NDArray[np.floating[Any]]] = {}
    for label, sample in groups.items():
        key = str(label)
        if key in out:
            raise ValidationError(f"{name}: duplicate group label {key!r}")
        out[key] = as_sample(sample, f"{name}[{key!r}]")
    return out


def check_distribution(method: str) -> str:
    """
    Validate a p-value back-end name.

    Raises:
        ValidationError: If method is not one of DISTRIBUTION_METHODS
    """
    if method not in DISTRIBUTION_METHODS:
        raise ValidationError(
            f"distribution must be one of {DISTRIBUTION_METHODS}, got {method!r}"
        )
    return method


def check_probability(value: float, name: str) -> float:
    """
    Verify a significance level lies in (0, 1).

    Raises:
        ValidationError: If value is outside the open interval
    """
    if not (0.0 < value < 1.0):
        raise ValidationError(f"{name} must be in (0, 1), got {value}")
    return float(value)


def is_constant(array: NDArray[np.floating[Any]]) -> bool:
    """
    True when every value equals the first.

    Variances of constant samples such as [0.1, 0.1, 0.1] come out as tiny
    non-zero numbers because the mean is not exactly 0.1; compare values
    instead of testing the variance against zero.
    """
    return array.size == 0 or bool(np.all(array == array.flat[0]))


def is_missing(value: Any) -> bool:
    """None, empty strings and NaN all mean 'no answer' in survey data."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ''
    return isinstance(value, float) and value != value
