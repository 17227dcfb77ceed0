"""
Argument validation utilities for the computation entry points.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent. Content (CSV) validation lives
in susstatistics.ingest; these guard the numeric API.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from susstatistics.core.exceptions import InvalidArgumentError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a 1D float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        1D numpy.ndarray of float64

    Raises:
        InvalidArgumentError: If input is None, empty, non-numeric,
            not one-dimensional or contains non-finite values
    """
    if array is None:
        raise InvalidArgumentError(f"{name}: data cannot be None")

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object or not np.issubdtype(result.dtype, np.number):
        raise InvalidArgumentError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.ndim != 1:
        raise InvalidArgumentError(
            f"{name}: expected 1D array, got {result.ndim}D with shape {result.shape}"
        )

    if result.size == 0:
        raise InvalidArgumentError(f"{name}: data cannot be empty")

    result = result.astype(np.float64)

    if not np.all(np.isfinite(result)):
        n_nan = int(np.sum(np.isnan(result)))
        n_inf = int(np.sum(np.isinf(result)))
        raise InvalidArgumentError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )

    return result


def check_samples(
    samples: Sequence[ArrayLike] | None,
    name: str = "samples",
) -> tuple[NDArray[np.floating[Any]], ...]:
    """
    Validate a jagged collection of samples (one per group).

    Args:
        samples: Sequence of 1D array-likes
        name: Parameter name for error messages

    Returns:
        Tuple of validated 1D float64 arrays

    Raises:
        InvalidArgumentError: If the collection or any sample is empty
    """
    if samples is None or len(samples) == 0:
        raise InvalidArgumentError(f"{name}: data cannot be None or empty")
    return tuple(
        check_array(s, f"{name}[{i}]") for i, s in enumerate(samples)
    )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of observations.

    Raises:
        InvalidArgumentError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InvalidArgumentError(
            f"{name}: requires at least {min_samples} observations, got {n}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length.

    Raises:
        ValueError: If number of names doesn't match number of arrays
        InvalidArgumentError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise InvalidArgumentError(f"Inconsistent lengths: {details}")
