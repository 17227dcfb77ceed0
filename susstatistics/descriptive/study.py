"""
Study: the respondents and descriptive statistics of one system/variable.

A Study is built once from the grouped rating rows of one system label
and is immutable afterwards. Respondent order is preserved in both
raw_item_scores and sus_scores; quartiles come from a sorted copy.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from susstatistics.core.constants import DECIMALS, TUKEY_K
from susstatistics.core.exceptions import InvalidArgumentError
from susstatistics.descriptive._outliers import identify_outliers
from susstatistics.descriptive._quantile import quartiles
from susstatistics.descriptive._sus import sus_scores


@dataclass(frozen=True)
class Study:
    """
    Aggregated SUS data for one system/variable.

    Attributes:
        name: System/variable label
        raw_item_scores: Ten ratings per respondent, in respondent order
        sus_scores: SUS score per respondent, same order as raw_item_scores
        mean: Study score (mean SUS score), rounded to 2 decimals
        sd: Sample standard deviation (n - 1), rounded to 2 decimals;
            nan for a single respondent
        min: Lowest SUS score
        max: Highest SUS score
        q1: First quartile
        median: Median
        q3: Third quartile

    Do not construct directly; use Study.from_rows().
    """
    name: str
    raw_item_scores: tuple[tuple[float, ...], ...]
    sus_scores: tuple[float, ...]
    mean: float
    sd: float
    min: float
    max: float
    q1: float
    median: float
    q3: float

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[Sequence[float]]) -> Study:
        """
        Score every respondent and compute the descriptive statistics.

        Args:
            name: System/variable label
            rows: Ten ratings per respondent

        Returns:
            Study

        Raises:
            InvalidArgumentError: If rows is empty or a row is not ten ratings
        """
        if not rows:
            raise InvalidArgumentError(f"Study {name!r}: no respondents")

        raw = tuple(tuple(float(v) for v in row) for row in rows)
        scores = np.asarray(sus_scores(raw), dtype=np.float64)
        n = len(scores)

        if n < 2:
            warnings.warn(
                f"Study {name!r} has a single respondent; its standard "
                f"deviation is undefined (nan)",
                UserWarning,
                stacklevel=2,
            )
            sd = math.nan
        else:
            sd = round(float(np.std(scores, ddof=1)), DECIMALS)

        q1, median, q3 = quartiles(scores)

        return cls(
            name=name,
            raw_item_scores=raw,
            sus_scores=tuple(float(s) for s in scores),
            mean=round(float(np.mean(scores)), DECIMALS),
            sd=sd,
            min=float(np.min(scores)),
            max=float(np.max(scores)),
            q1=q1,
            median=median,
            q3=q3,
        )

    @property
    def n(self) -> int:
        """Number of respondents."""
        return len(self.sus_scores)

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    @property
    def outliers(self) -> tuple[float, ...]:
        """SUS scores outside the Tukey fences (k = 1.5), in respondent order."""
        return tuple(identify_outliers(self.sus_scores, TUKEY_K))

    @property
    def n_outliers(self) -> int:
        return len(self.outliers)

    def summary(self) -> str:
        lines = [
            f"Study: {self.name}",
            "=" * 40,
            f"Respondents: {self.n}",
            f"SUS score:   M = {self.mean:.2f}, SD = {self.sd:.2f}",
            f"Range:       {self.min:.2f} to {self.max:.2f}",
            f"Quartiles:   Q1 = {self.q1:.2f}, Mdn = {self.median:.2f}, "
            f"Q3 = {self.q3:.2f}",
            f"Outliers:    {self.n_outliers}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Study(name={self.name!r}, n={self.n}, mean={self.mean:.2f})"
