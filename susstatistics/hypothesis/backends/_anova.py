"""
One-way ANOVA with Bonferroni-corrected post-hoc t-tests.

Omnibus F from the between/within sums of squares, p-value from the F
distribution (scipy.stats). Effect size is eta squared.

Post-hoc: an independent pooled t-test for every unordered pair of groups.
A pair is significant iff its raw p-value is below alpha / C(k, 2); the
p-values themselves are reported unadjusted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from scipy import stats as sp_stats

from susstatistics.hypothesis._common import HTestKind, HTestParams, PostHocComparison
from susstatistics.hypothesis._effect_size import eta_squared, sums_of_squares
from susstatistics.hypothesis.backends._groups import summarize_groups
from susstatistics.hypothesis.backends._t_test import pooled_t

if TYPE_CHECKING:
    from numpy.typing import NDArray
    from susstatistics.hypothesis.design import HTestDesign


def bonferroni_alpha(alpha: float, n_groups: int) -> float:
    """alpha divided by the number of unordered pairs k * (k - 1) / 2."""
    n_comparisons = n_groups * (n_groups - 1) // 2
    return alpha / n_comparisons


def bonferroni_pairwise(
    samples: tuple[NDArray, ...],
    *,
    alpha: float,
    conf_level: float,
) -> tuple[PostHocComparison, ...]:
    """Pairwise pooled t-tests, flagged against the Bonferroni alpha."""
    k = len(samples)
    alpha_adj = bonferroni_alpha(alpha, k)

    comparisons: list[PostHocComparison] = []
    for i in range(k):
        for j in range(i + 1, k):
            res = pooled_t(samples[i], samples[j], conf_level)
            comparisons.append(PostHocComparison(
                group1=i,
                group2=j,
                p_value=res.p_value,
                significant=bool(res.p_value < alpha_adj),
                mean_difference=res.mean_difference,
                statistic=res.statistic,
                df=res.df,
                ci_lower=res.ci_lower,
                ci_upper=res.ci_upper,
            ))
    return tuple(comparisons)


def oneway_anova(design: HTestDesign) -> tuple[HTestParams, list[str]]:
    """One-way between-subjects ANOVA over design.samples."""
    samples = design.samples
    warnings_list: list[str] = []

    k = len(samples)
    n = sum(len(s) for s in samples)
    df_between = k - 1
    df_within = n - k

    ss_between, ss_within, ss_total = sums_of_squares(samples)

    ms_between = ss_between / df_between
    ms_within = ss_within / df_within

    if ms_within == 0.0:
        warnings_list.append("within-group variance is zero")
        f_val = np.inf if ms_between > 0 else np.nan
    else:
        f_val = ms_between / ms_within

    if np.isnan(f_val):
        p_val = np.nan
    else:
        p_val = float(sp_stats.f.sf(f_val, df_between, df_within))

    post_hoc = bonferroni_pairwise(
        samples, alpha=design.alpha, conf_level=design.conf_level,
    )
    if any(np.isnan(c.p_value) for c in post_hoc):
        warnings_list.append("post-hoc comparison on essentially constant data")

    return HTestParams(
        kind=HTestKind.ONEWAY_ANOVA,
        method="One-way ANOVA",
        statistic=float(f_val),
        statistic_name="F",
        df=(float(df_between), float(df_within)),
        p_value=float(p_val),
        significant=bool(p_val < design.alpha),
        alpha=design.alpha,
        conf_int=None,
        conf_level=design.conf_level,
        mean_difference=None,
        standard_error=None,
        effect_size=eta_squared(ss_between, ss_total),
        effect_size_name="eta squared",
        groups=summarize_groups(design.names, samples),
        post_hoc=post_hoc,
        bonferroni_alpha=bonferroni_alpha(design.alpha, k),
    ), warnings_list
