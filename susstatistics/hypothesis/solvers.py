"""
Solver dispatch for hypothesis tests.

Provides run_test() for a routed HTestKind, one named function per test
family, and the assumption checks levene_test() and shapiro_test().
"""

from __future__ import annotations

from typing import Sequence

from numpy.typing import ArrayLike

from susstatistics.core.compute import timed
from susstatistics.core.constants import ALPHA, CONF_LEVEL
from susstatistics.core.result import Result
from susstatistics.core.validation import check_samples
from susstatistics.hypothesis._assumptions import levene_test_impl, shapiro_impl
from susstatistics.hypothesis._common import HTestKind
from susstatistics.hypothesis.backends.cpu import CPUHypothesisBackend
from susstatistics.hypothesis.design import HTestDesign
from susstatistics.hypothesis.solution import (
    HTestSolution,
    LeveneSolution,
    ShapiroSolution,
)


def run_test(
    kind: HTestKind | HTestDesign,
    samples: Sequence[ArrayLike] | None = None,
    names: Sequence[str] | None = None,
    *,
    alpha: float = ALPHA,
    conf_level: float = CONF_LEVEL,
) -> HTestSolution:
    """
    Run one of the supported tests.

    Parameters
    ----------
    kind : HTestKind or HTestDesign
        Test family (usually from select_test()), or a pre-built design.
    samples : sequence of array-like
        SUS scores, one 1D sample per group, in active-study order.
    names : sequence of str or None
        Group names used in narratives.
    alpha : float
        Significance level. Default 0.05.
    conf_level : float
        Confidence level for intervals. Default 0.95.

    Returns
    -------
    HTestSolution
        Statistic, degrees of freedom, p-value, significance, confidence
        interval, effect size and (ANOVA) post-hoc comparisons.

    Raises
    ------
    InvalidArgumentError
        On None/empty data or data the test cannot accept.
    """
    if isinstance(kind, HTestDesign):
        design = kind
    else:
        design = HTestDesign.for_test(
            kind, samples, names, alpha=alpha, conf_level=conf_level,
        )

    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


def independent_t_test(
    x: ArrayLike, y: ArrayLike, names: Sequence[str] | None = None, **kwargs,
) -> HTestSolution:
    """Student's independent-samples t-test with Cohen's d."""
    return run_test(HTestKind.INDEPENDENT_T, [x, y], names, **kwargs)


def paired_t_test(
    x: ArrayLike, y: ArrayLike, names: Sequence[str] | None = None, **kwargs,
) -> HTestSolution:
    """Paired-samples t-test on x - y with Cohen's d."""
    return run_test(HTestKind.PAIRED_T, [x, y], names, **kwargs)


def oneway_anova(
    samples: Sequence[ArrayLike], names: Sequence[str] | None = None, **kwargs,
) -> HTestSolution:
    """One-way ANOVA with eta squared and Bonferroni post-hoc t-tests."""
    return run_test(HTestKind.ONEWAY_ANOVA, samples, names, **kwargs)


def mann_whitney_u_test(
    x: ArrayLike, y: ArrayLike, names: Sequence[str] | None = None, **kwargs,
) -> HTestSolution:
    """Mann-Whitney U test for two independent samples."""
    return run_test(HTestKind.MANN_WHITNEY_U, [x, y], names, **kwargs)


def wilcoxon_signed_rank_test(
    x: ArrayLike, y: ArrayLike, names: Sequence[str] | None = None, **kwargs,
) -> HTestSolution:
    """Wilcoxon signed-rank test for two paired samples."""
    return run_test(HTestKind.WILCOXON_SIGNED_RANK, [x, y], names, **kwargs)


def levene_test(
    samples: Sequence[ArrayLike],
    *,
    center: str = 'median',
    alpha: float = ALPHA,
) -> LeveneSolution:
    """
    Levene's test for homogeneity of variances.

    Args:
        samples: One 1D sample per group
        center: 'median' (Brown-Forsythe, default) or 'mean'
        alpha: Significance level

    Returns:
        LeveneSolution with F, degrees of freedom, p-value and significance

    Raises:
        InvalidArgumentError: If samples is None/empty or any sample is empty
    """
    with timed() as timer:
        arrays = check_samples(samples, "samples")
        params = levene_test_impl(arrays, center=center, alpha=alpha)

    result = Result(
        params=params,
        info={'center': center, 'n_groups': len(arrays)},
        timing=timer.result(),
        backend_name='cpu',
    )
    return LeveneSolution(_result=result)


def shapiro_test(x: ArrayLike, *, alpha: float = ALPHA) -> ShapiroSolution:
    """
    Shapiro-Wilk test for normality of one sample.

    Raises:
        InvalidArgumentError: If x is None/empty or has fewer than 3 values
    """
    with timed() as timer:
        params = shapiro_impl(x, alpha=alpha)

    result = Result(
        params=params,
        info={'n': params.n},
        timing=timer.result(),
        backend_name='cpu',
    )
    return ShapiroSolution(_result=result)
