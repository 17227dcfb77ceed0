"""
Per-group descriptives carried on every test result.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from susstatistics.descriptive._quantile import quartiles
from susstatistics.hypothesis._common import GroupSummary


def summarize_group(name: str, x: NDArray) -> GroupSummary:
    """Unrounded mean, sample SD and (n+1)p quartiles of one group."""
    n = len(x)
    sd = float(np.std(x, ddof=1)) if n > 1 else math.nan
    q1, median, q3 = quartiles(x)
    return GroupSummary(
        name=name,
        n=n,
        mean=float(np.mean(x)),
        sd=sd,
        median=median,
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
    )


def summarize_groups(
    names: Sequence[str], samples: Sequence[NDArray],
) -> tuple[GroupSummary, ...]:
    return tuple(summarize_group(nm, s) for nm, s in zip(names, samples))
