"""
Test selection.

Maps (number of active groups, sample dependence, parametric choice) to
exactly one supported test or one named unsupported test. Pure lookup; no
numeric work happens here.

    groups  dependence   parametric      outcome
    2       independent  parametric      independent t-test
    2       dependent    parametric      paired t-test
    2       independent  non-parametric  Mann-Whitney U
    2       dependent    non-parametric  Wilcoxon signed-rank
    >=3     independent  parametric      one-way ANOVA + Bonferroni post-hoc
    >=3     dependent    parametric      unsupported: repeated measures ANOVA
    >=3     independent  non-parametric  unsupported: Kruskal-Wallis
    >=3     dependent    non-parametric  unsupported: Friedman
"""

from __future__ import annotations

from susstatistics.core.exceptions import InsufficientGroupsError, UnsupportedDesignError
from susstatistics.hypothesis._common import (
    UNSUPPORTED_NOTICES,
    DesignChoice,
    HTestKind,
    Parametric,
    SampleDependence,
    UnsupportedTest,
)


_TWO_GROUP_TESTS = {
    (SampleDependence.INDEPENDENT, Parametric.PARAMETRIC): HTestKind.INDEPENDENT_T,
    (SampleDependence.DEPENDENT, Parametric.PARAMETRIC): HTestKind.PAIRED_T,
    (SampleDependence.INDEPENDENT, Parametric.NON_PARAMETRIC): HTestKind.MANN_WHITNEY_U,
    (SampleDependence.DEPENDENT, Parametric.NON_PARAMETRIC): HTestKind.WILCOXON_SIGNED_RANK,
}

_MULTI_GROUP_TESTS: dict[tuple[SampleDependence, Parametric], HTestKind | UnsupportedTest] = {
    (SampleDependence.INDEPENDENT, Parametric.PARAMETRIC): HTestKind.ONEWAY_ANOVA,
    (SampleDependence.DEPENDENT, Parametric.PARAMETRIC): UnsupportedTest.REPEATED_MEASURES_ANOVA,
    (SampleDependence.INDEPENDENT, Parametric.NON_PARAMETRIC): UnsupportedTest.KRUSKAL_WALLIS,
    (SampleDependence.DEPENDENT, Parametric.NON_PARAMETRIC): UnsupportedTest.FRIEDMAN,
}


def _lookup(n_groups: int, design: DesignChoice) -> HTestKind | UnsupportedTest:
    if n_groups < 2:
        raise InsufficientGroupsError(
            n_groups,
            f"At least two systems/variables must be selected to perform "
            f"inferential statistics, got {n_groups}.",
        )
    key = (design.dependence, design.parametric)
    if n_groups == 2:
        return _TWO_GROUP_TESTS[key]
    return _MULTI_GROUP_TESTS[key]


def unsupported_test(n_groups: int, design: DesignChoice) -> UnsupportedTest | None:
    """
    The unsupported test the design would require, or None if supported.

    Raises:
        InsufficientGroupsError: If n_groups < 2
    """
    outcome = _lookup(n_groups, design)
    return outcome if isinstance(outcome, UnsupportedTest) else None


def select_test(n_groups: int, design: DesignChoice) -> HTestKind:
    """
    Select the test for a design.

    Args:
        n_groups: Number of active groups
        design: The resolved design decisions

    Returns:
        HTestKind of the test to run

    Raises:
        InsufficientGroupsError: If n_groups < 2
        UnsupportedDesignError: If the design needs a test that is not
            implemented (repeated measures ANOVA, Kruskal-Wallis, Friedman)

    Examples:
        >>> select_test(2, DesignChoice(SampleDependence.DEPENDENT,
        ...                             Parametric.PARAMETRIC))
        <HTestKind.PAIRED_T: 'paired_t'>
    """
    outcome = _lookup(n_groups, design)
    if isinstance(outcome, UnsupportedTest):
        raise UnsupportedDesignError(
            UNSUPPORTED_NOTICES[outcome], test=outcome, n_groups=n_groups,
        )
    return outcome
