"""
HTestDesign: tagged union for test inputs.

The `kind` field identifies the test family; `samples` holds one validated
1D array per group. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from susstatistics.core.constants import ALPHA, CONF_LEVEL
from susstatistics.core.exceptions import (
    InsufficientObservationsError,
    InvalidArgumentError,
)
from susstatistics.core.validation import check_consistent_length, check_samples
from susstatistics.hypothesis._common import PAIRED_KINDS, TWO_SAMPLE_KINDS, HTestKind


def _validate_alpha(alpha: float) -> float:
    if not (0.0 < alpha < 1.0):
        raise InvalidArgumentError(f"alpha must be in (0, 1), got {alpha}")
    return alpha


def _validate_conf_level(conf_level: float) -> float:
    if not (0.0 < conf_level < 1.0):
        raise InvalidArgumentError(
            f"conf_level must be in (0, 1), got {conf_level}"
        )
    return conf_level


@dataclass(frozen=True)
class HTestDesign:
    """
    Validated input for one test.

    Do not construct directly; use HTestDesign.for_test().
    """
    kind: HTestKind
    samples: tuple[NDArray[np.floating[Any]], ...]
    names: tuple[str, ...]
    alpha: float = ALPHA
    conf_level: float = CONF_LEVEL

    @property
    def n_groups(self) -> int:
        return len(self.samples)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self.samples[0]

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self.samples[1]

    @classmethod
    def for_test(
        cls,
        kind: HTestKind,
        samples: Sequence[ArrayLike],
        names: Sequence[str] | None = None,
        *,
        alpha: float = ALPHA,
        conf_level: float = CONF_LEVEL,
    ) -> HTestDesign:
        """
        Build and validate the design for a test.

        Args:
            kind: Test family
            samples: One 1D numeric sample per group (SUS scores)
            names: Group names, defaults to "Group 1", "Group 2", ...
            alpha: Significance level
            conf_level: Confidence level for intervals

        Raises:
            InvalidArgumentError: On None/empty data, a wrong number of groups
                for the test, or unequal lengths in a paired test
            InsufficientObservationsError: If a parametric test cannot
                estimate a variance from the data
        """
        if not isinstance(kind, HTestKind):
            raise InvalidArgumentError(f"Unknown test kind: {kind!r}")

        arrays = check_samples(samples, "samples")
        k = len(arrays)

        if names is None:
            names = tuple(f"Group {i + 1}" for i in range(k))
        else:
            names = tuple(str(nm) for nm in names)
            if len(names) != k:
                raise InvalidArgumentError(
                    f"names: expected {k} names, got {len(names)}"
                )

        if kind in TWO_SAMPLE_KINDS and k != 2:
            raise InvalidArgumentError(
                f"{kind.value} compares exactly 2 groups, got {k}"
            )
        if kind is HTestKind.ONEWAY_ANOVA and k < 2:
            raise InvalidArgumentError(
                f"one-way ANOVA needs at least 2 groups, got {k}"
            )

        if kind in PAIRED_KINDS:
            check_consistent_length(*arrays, names=names)

        _check_variance_estimable(kind, arrays, names)

        return cls(
            kind=kind,
            samples=arrays,
            names=names,
            alpha=_validate_alpha(alpha),
            conf_level=_validate_conf_level(conf_level),
        )


def _check_variance_estimable(
    kind: HTestKind,
    arrays: tuple[NDArray[np.floating[Any]], ...],
    names: tuple[str, ...],
) -> None:
    """
    Parametric tests need at least one degree of freedom for the error term.

    Paired t: n - 1 >= 1. Independent t and one-way ANOVA pool the
    within-group variation, so single-respondent groups are fine as long as
    N - k >= 1.
    """
    sizes = {nm: len(arr) for nm, arr in zip(names, arrays)}
    if kind is HTestKind.PAIRED_T:
        if len(arrays[0]) < 2:
            raise InsufficientObservationsError(
                "paired-samples t-test", sizes, "at least 2 pairs are required",
            )
    elif kind in (HTestKind.INDEPENDENT_T, HTestKind.ONEWAY_ANOVA):
        if sum(sizes.values()) - len(arrays) < 1:
            test = (
                "independent-samples t-test" if kind is HTestKind.INDEPENDENT_T
                else "one-way ANOVA"
            )
            raise InsufficientObservationsError(
                test, sizes,
                "the total sample size must exceed the number of groups",
            )
