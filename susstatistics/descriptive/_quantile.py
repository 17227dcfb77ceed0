"""
Order-statistic quantiles with (n+1)p plotting positions.

This is the "exclusive median" method (Hyndman & Fan type 6, Minitab and
SPSS default): the quantile at fraction p sits at 1-based position
(n + 1) * p in the sorted data, interpolating linearly between the two
neighbouring order statistics.

Positions before the first or after the last order statistic (only
reachable for very small n or p near 0 or 1) use the end value, the same
padding R applies in quantile(): xs = c(x[1], x, x[n]).

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from susstatistics.core.exceptions import InvalidArgumentError
from susstatistics.core.validation import check_array


def quantile(values: ArrayLike, p: float) -> float:
    """
    Compute the quantile at fraction p.

    Parameters
    ----------
    values : array-like
        1D numeric data. Sorted into a copy; the input is never mutated.
    p : float
        Fraction in [0, 1] (0.25 first quartile, 0.5 median, ...).

    Returns
    -------
    float
        The interpolated quantile.

    Examples
    --------
    >>> quantile([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 0.5)
    5.5
    >>> quantile([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 0.25)
    2.75
    """
    if not (0.0 <= p <= 1.0):
        raise InvalidArgumentError(f"p must be in [0, 1], got {p}")

    x = np.sort(check_array(values, "values"))
    n = len(x)

    position = (n + 1) * p
    lower = math.floor(position) - 1
    upper = math.ceil(position) - 1
    fraction = position - math.floor(position)

    # Pad beyond the ends; never let a negative index wrap around
    lower = min(max(lower, 0), n - 1)
    upper = min(max(upper, 0), n - 1)

    if lower == upper:
        return float(x[lower])

    return float(x[lower] * (1.0 - fraction) + x[upper] * fraction)


def quartiles(values: ArrayLike) -> tuple[float, float, float]:
    """Return (Q1, median, Q3)."""
    return (
        quantile(values, 0.25),
        quantile(values, 0.5),
        quantile(values, 0.75),
    )
