"""
Assumption checks for the parametric tests.

Levene's test for homogeneity of variances:
    Transform each value to |x_i - center(group_j)|, then run a one-way
    ANOVA on the transformed values. center='median' gives the
    Brown-Forsythe variant (robust to skewness, the default);
    center='mean' gives the original Levene test.

Shapiro-Wilk test for normality:
    scipy.stats.shapiro; the sample counts as normal when p > alpha.

Neither check gates test selection; they are run on demand.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from susstatistics.core.constants import ALPHA
from susstatistics.core.exceptions import InvalidArgumentError
from susstatistics.core.validation import check_array, check_min_samples
from susstatistics.hypothesis._common import LeveneParams, ShapiroParams


def levene_test_impl(
    samples: tuple[NDArray[np.floating[Any]], ...],
    *,
    center: str = 'median',
    alpha: float = ALPHA,
) -> LeveneParams:
    """
    Compute Levene's test (or the Brown-Forsythe variant).

    Args:
        samples: One validated 1D array per group
        center: 'median' (Brown-Forsythe, default) or 'mean' (original Levene)
        alpha: Significance level

    Returns:
        LeveneParams with F statistic, p-value and degrees of freedom
    """
    if center not in ('mean', 'median'):
        raise InvalidArgumentError(
            f"center must be 'mean' or 'median', got {center!r}"
        )

    center_fn = np.mean if center == 'mean' else np.median
    k = len(samples)
    n = sum(len(s) for s in samples)

    z = [np.abs(s - center_fn(s)) for s in samples]
    group_vars = tuple(
        float(np.var(s, ddof=1)) if len(s) > 1 else float('nan') for s in samples
    )

    # One-way ANOVA on the transformed values
    z_grand_mean = np.mean(np.concatenate(z))
    ss_between = 0.0
    ss_within = 0.0
    for z_group in z:
        z_mean_j = np.mean(z_group)
        ss_between += len(z_group) * (z_mean_j - z_grand_mean) ** 2
        ss_within += np.sum((z_group - z_mean_j) ** 2)

    df_between = k - 1
    df_within = n - k

    if df_between <= 0 or df_within <= 0:
        f_val = 0.0
        p_val = 1.0
    elif ss_within == 0:
        # Constant deviations within every group
        if ss_between > 0:
            f_val = np.inf
            p_val = 0.0
        else:
            f_val = 0.0
            p_val = 1.0
    else:
        ms_between = ss_between / df_between
        ms_within = ss_within / df_within
        f_val = float(ms_between / ms_within)
        p_val = float(sp_stats.f.sf(f_val, df_between, df_within))

    return LeveneParams(
        f_value=f_val,
        p_value=p_val,
        df_between=df_between,
        df_within=df_within,
        significant=bool(p_val < alpha),
        center=center,
        group_vars=group_vars,
    )


def shapiro_impl(x: ArrayLike, *, alpha: float = ALPHA) -> ShapiroParams:
    """
    Shapiro-Wilk normality test.

    Args:
        x: 1D sample (the SUS scores of one study), at least 3 values
        alpha: Threshold; the sample is considered normal when p > alpha
    """
    arr = check_array(x, "x")
    check_min_samples(arr, 3, "x")

    res = sp_stats.shapiro(arr)
    p_value = float(res.pvalue)
    return ShapiroParams(
        w=float(res.statistic),
        p_value=p_value,
        n=len(arr),
        is_normal=bool(p_value > alpha),
        alpha=alpha,
    )
