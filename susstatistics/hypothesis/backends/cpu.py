"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.kind.
"""

from __future__ import annotations

from susstatistics.core.compute.timing import Timer
from susstatistics.core.result import Result
from susstatistics.hypothesis._common import HTestKind, HTestParams
from susstatistics.hypothesis.design import HTestDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HTestDesign) -> Result[HTestParams]:
        """Dispatch to the test-specific implementation based on design.kind."""
        timer = Timer()
        timer.start()

        kind = design.kind

        with timer.section(kind.value):
            if kind is HTestKind.INDEPENDENT_T:
                from susstatistics.hypothesis.backends._t_test import independent_t
                params, warnings_list = independent_t(design)
            elif kind is HTestKind.PAIRED_T:
                from susstatistics.hypothesis.backends._t_test import paired_t
                params, warnings_list = paired_t(design)
            elif kind is HTestKind.ONEWAY_ANOVA:
                from susstatistics.hypothesis.backends._anova import oneway_anova
                params, warnings_list = oneway_anova(design)
            elif kind is HTestKind.MANN_WHITNEY_U:
                from susstatistics.hypothesis.backends._rank_tests import mann_whitney_u
                params, warnings_list = mann_whitney_u(design)
            elif kind is HTestKind.WILCOXON_SIGNED_RANK:
                from susstatistics.hypothesis.backends._rank_tests import wilcoxon_signed_rank
                params, warnings_list = wilcoxon_signed_rank(design)
            else:
                raise ValueError(f"Unknown test kind: {kind!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_kind': kind.value, 'n_groups': design.n_groups},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
