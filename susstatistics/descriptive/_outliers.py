"""
Tukey fence outlier detection.

Fences are Q1 - k*IQR and Q3 + k*IQR with quartiles from the (n+1)p
method in _quantile. k = 1.5 flags "outside" values, k = 3 "far out".
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from susstatistics.core.constants import TUKEY_K
from susstatistics.core.exceptions import InvalidArgumentError
from susstatistics.core.validation import check_array
from susstatistics.descriptive._quantile import quantile


def tukey_fences(data: ArrayLike, k: float = TUKEY_K) -> tuple[float, float]:
    """
    Compute the lower and upper Tukey fences.

    Args:
        data: 1D numeric data (any order)
        k: IQR multiplier for the fence distance

    Returns:
        (lower_fence, upper_fence)
    """
    if k < 0:
        raise InvalidArgumentError(f"k must be non-negative, got {k}")

    x = check_array(data, "data")
    q1 = quantile(x, 0.25)
    q3 = quantile(x, 0.75)
    iqr = q3 - q1
    return q1 - k * iqr, q3 + k * iqr


def identify_outliers(data: ArrayLike, k: float = TUKEY_K) -> list[float]:
    """
    Values strictly outside the Tukey fences, in input order.

    The length of the returned list is the outlier count.
    """
    x = check_array(data, "data")
    lower, upper = tukey_fences(x, k)
    return [float(v) for v in x if v < lower or v > upper]
