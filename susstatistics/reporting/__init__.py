"""
Narrative reporting of test results.

Public API:
    render(params)           - APA-style paragraphs for an HTestParams
    describe_levene(params)  - one-sentence Levene's test report
    describe_shapiro(params) - one-sentence Shapiro-Wilk report
    describe_cohens_d(d)     - effect-size band for Cohen's d
    describe_eta_squared(e)  - effect-size band for eta squared
"""

from susstatistics.reporting.apa import (
    render,
    describe_levene,
    describe_shapiro,
    describe_cohens_d,
    describe_eta_squared,
    fmt,
    fmt_p,
)

__all__ = [
    "render",
    "describe_levene",
    "describe_shapiro",
    "describe_cohens_d",
    "describe_eta_squared",
    "fmt",
    "fmt_p",
]
