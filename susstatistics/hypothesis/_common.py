"""
Common types for hypothesis testing.

Defines the design decisions (sample dependence, parametric choice), the
closed set of supported and unsupported tests, and the frozen parameter
payloads that go inside Result[P] envelopes. Payloads are pure data
containers: no methods, no computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# =====================================================================
# Design decisions
# =====================================================================


class SampleDependence(Enum):
    """Whether the compared groups are different or the same respondents."""
    INDEPENDENT = "independent"
    DEPENDENT = "dependent"


class Parametric(Enum):
    """Whether the analyst wants a parametric or non-parametric test."""
    PARAMETRIC = "parametric"
    NON_PARAMETRIC = "non_parametric"


@dataclass(frozen=True)
class DesignChoice:
    """
    A fully resolved study design.

    Both decisions are required; an incomplete design is represented by the
    absence of a DesignChoice, never by a partially filled one.
    """
    dependence: SampleDependence
    parametric: Parametric


# =====================================================================
# Tests
# =====================================================================


class HTestKind(Enum):
    """The supported test families."""
    INDEPENDENT_T = "independent_t"
    PAIRED_T = "paired_t"
    ONEWAY_ANOVA = "oneway_anova"
    MANN_WHITNEY_U = "mann_whitney_u"
    WILCOXON_SIGNED_RANK = "wilcoxon_signed_rank"


TWO_SAMPLE_KINDS = (
    HTestKind.INDEPENDENT_T,
    HTestKind.PAIRED_T,
    HTestKind.MANN_WHITNEY_U,
    HTestKind.WILCOXON_SIGNED_RANK,
)

PAIRED_KINDS = (HTestKind.PAIRED_T, HTestKind.WILCOXON_SIGNED_RANK)


class UnsupportedTest(Enum):
    """Designs that are recognised but deliberately not computed."""
    REPEATED_MEASURES_ANOVA = "repeated_measures_anova"
    KRUSKAL_WALLIS = "kruskal_wallis"
    FRIEDMAN = "friedman"


UNSUPPORTED_NOTICES = {
    UnsupportedTest.REPEATED_MEASURES_ANOVA: (
        "Parametric tests for more than two dependent samples require a "
        "repeated measures ANOVA, which is currently not supported."
    ),
    UnsupportedTest.KRUSKAL_WALLIS: (
        "Non-parametric tests for more than two independent samples require "
        "a Kruskal-Wallis test, which is currently not supported."
    ),
    UnsupportedTest.FRIEDMAN: (
        "Non-parametric tests for more than two dependent samples require a "
        "Friedman test, which is currently not supported."
    ),
}


# =====================================================================
# Payloads
# =====================================================================


@dataclass(frozen=True)
class GroupSummary:
    """Descriptives of one compared group, as reported in narratives."""
    name: str
    n: int
    mean: float
    sd: float
    median: float
    q1: float
    q3: float
    iqr: float


@dataclass(frozen=True)
class PostHocComparison:
    """
    One pairwise comparison after a one-way ANOVA.

    group1 and group2 index into HTestParams.groups (group1 < group2).
    significant uses the Bonferroni-adjusted alpha, not the raw one.
    """
    group1: int
    group2: int
    p_value: float
    significant: bool
    mean_difference: float     # mean(group1) - mean(group2)
    statistic: float
    df: float
    ci_lower: float
    ci_upper: float


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for the supported tests.

    Every test returns this same structure; fields that a family does not
    define are None.

    Attributes
    ----------
    kind : HTestKind
        Test family.
    method : str
        Human-readable method name, e.g. "Two Sample t-test".
    statistic : float
        Test statistic (t, F, U or W).
    statistic_name : str
        "t", "F", "U" or "W".
    df : tuple of float or None
        (df,) for t-tests, (df_between, df_within) for ANOVA,
        None for rank tests.
    p_value : float
        Two-sided p-value.
    significant : bool
        p_value < alpha.
    alpha : float
        Significance level.
    conf_int : tuple or None
        (lower, upper) confidence interval of the mean difference (t-tests).
    conf_level : float
        Confidence level of conf_int.
    mean_difference : float or None
        mean(x) - mean(y) for the independent test, mean(x - y) for paired.
    standard_error : float or None
        Standard error of mean_difference.
    effect_size : float or None
        Cohen's d (t-tests) or eta squared (ANOVA).
    effect_size_name : str or None
        "Cohen's d" or "eta squared".
    groups : tuple of GroupSummary
        Descriptives of the compared groups, in input order.
    post_hoc : tuple of PostHocComparison or None
        ANOVA only: every unordered pair of groups.
    bonferroni_alpha : float or None
        ANOVA only: alpha / number of pairs.
    has_ties : bool or None
        Wilcoxon only: tied non-zero absolute differences.
    has_zeros : bool or None
        Wilcoxon only: pairs with zero difference.
    """
    kind: HTestKind
    method: str
    statistic: float
    statistic_name: str
    df: tuple[float, ...] | None
    p_value: float
    significant: bool
    alpha: float
    conf_int: tuple[float, float] | None
    conf_level: float
    mean_difference: float | None
    standard_error: float | None
    effect_size: float | None
    effect_size_name: str | None
    groups: tuple[GroupSummary, ...]
    post_hoc: tuple[PostHocComparison, ...] | None = None
    bonferroni_alpha: float | None = None
    has_ties: bool | None = None
    has_zeros: bool | None = None


@dataclass(frozen=True)
class LeveneParams:
    """Parameter payload for the median-centered Levene test."""
    f_value: float
    p_value: float
    df_between: int
    df_within: int
    significant: bool
    center: str                       # 'median' or 'mean'
    group_vars: tuple[float, ...]     # per group, input order


@dataclass(frozen=True)
class ShapiroParams:
    """Parameter payload for the Shapiro-Wilk normality test."""
    w: float
    p_value: float
    n: int
    is_normal: bool                   # p_value > alpha
    alpha: float
