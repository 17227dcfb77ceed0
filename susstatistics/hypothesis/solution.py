"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams]; LeveneSolution and ShapiroSolution
wrap the assumption-check payloads. All three render APA-style text via
susstatistics.reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from susstatistics.core.result import Result
from susstatistics.hypothesis._common import (
    GroupSummary,
    HTestKind,
    HTestParams,
    LeveneParams,
    PostHocComparison,
    ShapiroParams,
)

if TYPE_CHECKING:
    from susstatistics.hypothesis.design import HTestDesign


@dataclass
class HTestSolution:
    """
    User-facing test results.

    All payload fields are available as properties; apa() renders the
    narrative paragraphs.
    """
    _result: Result[HTestParams]
    _design: 'HTestDesign | None'

    # --- Test fields ---

    @property
    def params(self) -> HTestParams:
        """The frozen payload (what narratives are rendered from)."""
        return self._result.params

    @property
    def kind(self) -> HTestKind:
        return self._result.params.kind

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def df(self) -> tuple[float, ...] | None:
        """Degrees of freedom: (df,), (df_between, df_within) or None."""
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def conf_int(self) -> tuple[float, float] | None:
        return self._result.params.conf_int

    @property
    def mean_difference(self) -> float | None:
        return self._result.params.mean_difference

    @property
    def standard_error(self) -> float | None:
        return self._result.params.standard_error

    @property
    def effect_size(self) -> float | None:
        """Cohen's d (t-tests) or eta squared (ANOVA)."""
        return self._result.params.effect_size

    @property
    def groups(self) -> tuple[GroupSummary, ...]:
        return self._result.params.groups

    @property
    def post_hoc(self) -> tuple[PostHocComparison, ...] | None:
        return self._result.params.post_hoc

    @property
    def has_ties(self) -> bool | None:
        return self._result.params.has_ties

    @property
    def has_zeros(self) -> bool | None:
        return self._result.params.has_zeros

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def apa(self) -> tuple[str, ...]:
        """APA-style paragraphs (three for ANOVA, one otherwise)."""
        from susstatistics.reporting.apa import render
        return render(self._result.params)

    def summary(self) -> str:
        return "\n\n".join(self.apa())

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )


@dataclass
class LeveneSolution:
    """
    User-facing result for Levene's test.

    Produced by levene_test().
    """
    _result: Result[LeveneParams]

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def significant(self) -> bool:
        """True when the variances differ significantly."""
        return self._result.params.significant

    @property
    def center(self) -> str:
        return self._result.params.center

    @property
    def group_vars(self) -> tuple[float, ...]:
        return self._result.params.group_vars

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    def apa(self) -> str:
        from susstatistics.reporting.apa import describe_levene
        return describe_levene(self._result.params)

    def summary(self) -> str:
        variant = "Brown-Forsythe" if self.center == 'median' else "Levene"
        lines = [
            f"{variant} Test for Homogeneity of Variances",
            "=" * 50,
            f"F({self.df_between}, {self.df_within}) = {self.f_value:.4f}, "
            f"p = {self.p_value:.4f}",
            "",
            f"Center: {self.center}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LeveneSolution(F={self.f_value:.4f}, "
            f"p={self.p_value:.4f}, center={self.center!r})"
        )


@dataclass
class ShapiroSolution:
    """
    User-facing result for the Shapiro-Wilk test.

    Produced by shapiro_test().
    """
    _result: Result[ShapiroParams]

    @property
    def w(self) -> float:
        return self._result.params.w

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def is_normal(self) -> bool:
        return self._result.params.is_normal

    def apa(self) -> str:
        from susstatistics.reporting.apa import describe_shapiro
        return describe_shapiro(self._result.params)

    def __repr__(self) -> str:
        return (
            f"ShapiroSolution(W={self.w:.4f}, p={self.p_value:.4f}, "
            f"is_normal={self.is_normal})"
        )
