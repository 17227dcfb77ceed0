"""
Effect sizes.

Cohen's d for the t-tests and eta squared for one-way ANOVA. Statistical
significance never depends on these; they describe magnitude only.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


def pooled_sd(x: NDArray, y: NDArray) -> float:
    """
    sqrt(((n1-1)var1 + (n2-1)var2) / (n1+n2-2)), sample variances.

    Computed from sums of squared deviations so a single-observation group
    contributes zero; nan when n1 + n2 < 3.
    """
    df = len(x) + len(y) - 2
    if df <= 0:
        return math.nan
    ss = np.sum((x - np.mean(x)) ** 2) + np.sum((y - np.mean(y)) ** 2)
    return float(np.sqrt(ss / df))


def cohens_d_independent(mean_difference: float, sd_pooled: float) -> float:
    """|mean difference| / pooled SD; nan when the pooled SD is zero."""
    if sd_pooled == 0.0 or math.isnan(sd_pooled):
        return math.nan
    return abs(mean_difference) / sd_pooled


def cohens_d_paired(mean_difference: float, standard_error: float, n: int) -> float:
    """
    |mean difference| / SD of the differences.

    The SD of the differences is recovered as standard_error * sqrt(n),
    which holds because the paired test's standard error is SD(d) / sqrt(n).
    """
    sd_diff = standard_error * math.sqrt(n)
    if sd_diff == 0.0 or math.isnan(sd_diff):
        return math.nan
    return abs(mean_difference) / sd_diff


def sums_of_squares(samples: Sequence[NDArray]) -> tuple[float, float, float]:
    """
    Between-group, within-group and total sums of squares.

    total = sum((x - grand_mean)^2) over all pooled values
    between = sum(n_j * (mean_j - grand_mean)^2) over groups
    """
    pooled = np.concatenate(samples)
    grand_mean = np.mean(pooled)

    ss_total = float(np.sum((pooled - grand_mean) ** 2))
    ss_between = 0.0
    ss_within = 0.0
    for s in samples:
        mean_j = np.mean(s)
        ss_between += len(s) * (mean_j - grand_mean) ** 2
        ss_within += np.sum((s - mean_j) ** 2)

    return float(ss_between), float(ss_within), ss_total


def eta_squared(ss_between: float, ss_total: float) -> float:
    """SS_between / SS_total; 0 when there is no variation at all."""
    return ss_between / ss_total if ss_total > 0 else 0.0
