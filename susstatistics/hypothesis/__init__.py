"""
Hypothesis testing for SUS study comparisons.

Public API:
    select_test(n_groups, design)    - route a design to an HTestKind
    run_test(kind, samples, names)   - execute a routed test
    independent_t_test(x, y)         - Student's t-test, Cohen's d
    paired_t_test(x, y)              - paired t-test, Cohen's d
    oneway_anova(samples)            - one-way ANOVA, eta squared, post-hoc
    mann_whitney_u_test(x, y)        - Mann-Whitney U
    wilcoxon_signed_rank_test(x, y)  - Wilcoxon signed-rank
    levene_test(samples)             - homogeneity of variances
    shapiro_test(x)                  - normality
"""

from susstatistics.hypothesis._common import (
    DesignChoice,
    GroupSummary,
    HTestKind,
    HTestParams,
    LeveneParams,
    Parametric,
    PostHocComparison,
    SampleDependence,
    ShapiroParams,
    UnsupportedTest,
)
from susstatistics.hypothesis.router import select_test, unsupported_test
from susstatistics.hypothesis.design import HTestDesign
from susstatistics.hypothesis.solvers import (
    run_test,
    independent_t_test,
    paired_t_test,
    oneway_anova,
    mann_whitney_u_test,
    wilcoxon_signed_rank_test,
    levene_test,
    shapiro_test,
)
from susstatistics.hypothesis.solution import (
    HTestSolution,
    LeveneSolution,
    ShapiroSolution,
)

__all__ = [
    "DesignChoice",
    "GroupSummary",
    "HTestKind",
    "HTestParams",
    "LeveneParams",
    "Parametric",
    "PostHocComparison",
    "SampleDependence",
    "ShapiroParams",
    "UnsupportedTest",
    "select_test",
    "unsupported_test",
    "HTestDesign",
    "run_test",
    "independent_t_test",
    "paired_t_test",
    "oneway_anova",
    "mann_whitney_u_test",
    "wilcoxon_signed_rank_test",
    "levene_test",
    "shapiro_test",
    "HTestSolution",
    "LeveneSolution",
    "ShapiroSolution",
]
