"""
Descriptive statistics for SUS data.

Public API:
    sus_score(items)               - SUS score (0-100) of one respondent
    sus_scores(rows)               - SUS score per respondent
    quantile(values, p)            - (n+1)p order-statistic quantile
    quartiles(values)              - (Q1, median, Q3)
    tukey_fences(data, k=1.5)      - (lower, upper) outlier fences
    identify_outliers(data, k=1.5) - values outside the fences
    Study                          - per-system scores and descriptives
"""

from susstatistics.descriptive._sus import sus_score, sus_scores
from susstatistics.descriptive._quantile import quantile, quartiles
from susstatistics.descriptive._outliers import tukey_fences, identify_outliers
from susstatistics.descriptive.study import Study

__all__ = [
    "sus_score",
    "sus_scores",
    "quantile",
    "quartiles",
    "tukey_fences",
    "identify_outliers",
    "Study",
]
