"""
APA-style narrative reporting.

Pure rendering over finalized result payloads: nothing here reads session
state or computes statistics. Numbers are formatted with '.' as decimal
separator regardless of locale: means, SDs, statistics and effect sizes
with 2 decimals, p-values with 4.
"""

from __future__ import annotations

import math

from susstatistics.hypothesis._common import (
    GroupSummary,
    HTestKind,
    HTestParams,
    LeveneParams,
    ShapiroParams,
)


# =====================================================================
# Formatting
# =====================================================================


def fmt(value: float, decimals: int = 2) -> str:
    """Fixed-point, locale-invariant; never renders a negative zero."""
    text = f"{value:.{decimals}f}"
    if text.startswith('-') and float(text) == 0.0:
        text = text[1:]
    return text


def fmt_p(p: float) -> str:
    return fmt(p, 4)


def _fmt_level(alpha: float) -> str:
    """0.05 -> '.05' (APA drops the leading zero for bounded values)."""
    return fmt(alpha, 2).lstrip('0')


def _fmt_pct(conf_level: float) -> str:
    return f"{conf_level * 100:g}%"


def _significance(significant: bool) -> str:
    return "a significant" if significant else "no significant"


def _m_sd(g: GroupSummary) -> str:
    return f"M = {fmt(g.mean)}, SD = {fmt(g.sd)}"


# =====================================================================
# Effect-size bands
# =====================================================================


def describe_cohens_d(d: float) -> str:
    """Cohen's d: <0.2 very small, <0.5 small, <0.8 medium, else large."""
    if d is None or math.isnan(d):
        return "undefined"
    if d < 0.2:
        return "very small"
    if d < 0.5:
        return "small"
    if d < 0.8:
        return "medium"
    return "large"


def describe_eta_squared(eta_sq: float) -> str:
    """Eta squared: <0.06 small, <0.14 medium, else large."""
    if eta_sq is None or math.isnan(eta_sq):
        return "undefined"
    if eta_sq < 0.06:
        return "small"
    if eta_sq < 0.14:
        return "medium"
    return "large"


# =====================================================================
# Test narratives
# =====================================================================


def _independent_t(p: HTestParams) -> tuple[str, ...]:
    a, b = p.groups
    lo, hi = p.conf_int
    text = (
        f"An independent-samples t-test was conducted to compare the means "
        f"between the two SUS study scores. "
        f"There was {_significance(p.significant)} difference in scores for "
        f"{a.name} ({_m_sd(a)}) and {b.name} ({_m_sd(b)}); "
        f"t({fmt(p.df[0])}) = {fmt(p.statistic)}, p = {fmt_p(p.p_value)}. "
        f"The magnitude of the differences in the means "
        f"(mean difference = {fmt(p.mean_difference)}, "
        f"{_fmt_pct(p.conf_level)} CI: {fmt(lo)} to {fmt(hi)}) "
        f"is considered {describe_cohens_d(p.effect_size)} "
        f"(Cohen's d = {fmt(p.effect_size)})."
    )
    return (text,)


def _paired_t(p: HTestParams) -> tuple[str, ...]:
    a, b = p.groups
    lo, hi = p.conf_int
    text = (
        f"A paired-samples t-test was conducted to compare {a.name} and "
        f"{b.name} SUS scores. "
        f"There was {_significance(p.significant)} difference in SUS scores "
        f"for {a.name} ({_m_sd(a)}) and {b.name} ({_m_sd(b)}), "
        f"t({p.df[0]:.0f}) = {fmt(p.statistic)}, p = {fmt_p(p.p_value)}. "
        f"The mean difference was {fmt(p.mean_difference)} "
        f"({_fmt_pct(p.conf_level)} CI: {fmt(lo)} to {fmt(hi)}). "
        f"This would be considered a {describe_cohens_d(p.effect_size)} "
        f"effect size (Cohen's d = {fmt(p.effect_size)})."
    )
    return (text,)


def _mann_whitney_u(p: HTestParams) -> tuple[str, ...]:
    a, b = p.groups
    text = (
        f"A Mann-Whitney U test was conducted to determine whether there "
        f"were significant differences between SUS scores of the two systems. "
        f"There was {_significance(p.significant)} difference in scores for "
        f"{a.name} (Mdn = {fmt(a.median)}) and {b.name} "
        f"(Mdn = {fmt(b.median)}); U = {fmt(p.statistic)}, "
        f"p = {fmt_p(p.p_value)}."
    )
    return (text,)


def _wilcoxon_signed_rank(p: HTestParams) -> tuple[str, ...]:
    a, b = p.groups
    sentences = [
        "A Wilcoxon signed-rank test was conducted to determine whether "
        "there was a significant difference in SUS scores.",
        f"There was {_significance(p.significant)} difference in scores for "
        f"{a.name} (Mdn = {fmt(a.median)}, IQR = {fmt(a.iqr)}) and {b.name} "
        f"(Mdn = {fmt(b.median)}, IQR = {fmt(b.iqr)}); "
        f"W = {fmt(p.statistic)}, p = {fmt_p(p.p_value)}.",
        f"The test {'rejected' if p.significant else 'failed to reject'} "
        f"the null hypothesis.",
    ]
    if p.has_ties:
        sentences.append("The test detected ties in the data.")
    if p.has_zeros:
        sentences.append("The test detected pairs with zero difference in the data.")
    return (" ".join(sentences),)


def _oneway_anova(p: HTestParams) -> tuple[str, str, str]:
    k = len(p.groups)
    df_between, df_within = p.df

    descriptive = "\n".join(
        f"The SUS study score (mean) of {g.name} is {fmt(g.mean)} "
        f"(SD = {fmt(g.sd)})."
        for g in p.groups
    )

    omnibus = (
        f"A one-way ANOVA was conducted to compare the effect of the "
        f"system/variable on SUS scores for the {k} conditions. "
        f"There is {_significance(p.significant)} effect of the "
        f"system/variable on SUS scores at the p < {_fmt_level(p.alpha)} level "
        f"for the {k} conditions "
        f"[F({df_between:.0f}, {df_within:.0f}) = {fmt(p.statistic)}, "
        f"p = {fmt_p(p.p_value)}]. "
        f"The effect size (η²) is {fmt(p.effect_size)}, which is "
        f"generally considered a {describe_eta_squared(p.effect_size)} effect."
    )

    lines = [
        "Post-hoc pairwise comparisons using Bonferroni-corrected t-tests "
        "indicated that:"
    ]
    for c in p.post_hoc:
        g1, g2 = p.groups[c.group1], p.groups[c.group2]
        verdict = "significantly" if c.significant else "not significantly"
        lines.append(
            f"The mean SUS score of {g1.name} ({_m_sd(g1)}) is {verdict} "
            f"different from the mean SUS score of {g2.name} ({_m_sd(g2)}), "
            f"t({fmt(c.df)}) = {fmt(c.statistic)}, p = {fmt_p(c.p_value)}, "
            f"{_fmt_pct(p.conf_level)} CI [{fmt(c.ci_lower)}, {fmt(c.ci_upper)}]. "
            f"The mean difference in SUS scores between these two groups is "
            f"{fmt(abs(c.mean_difference))}."
        )
    post_hoc = "\n".join(lines)

    return descriptive, omnibus, post_hoc


_RENDERERS = {
    HTestKind.INDEPENDENT_T: _independent_t,
    HTestKind.PAIRED_T: _paired_t,
    HTestKind.ONEWAY_ANOVA: _oneway_anova,
    HTestKind.MANN_WHITNEY_U: _mann_whitney_u,
    HTestKind.WILCOXON_SIGNED_RANK: _wilcoxon_signed_rank,
}


def render(params: HTestParams) -> tuple[str, ...]:
    """
    APA-style paragraphs for a test result.

    Returns one paragraph for the two-group tests and three for one-way
    ANOVA (descriptives, omnibus test, post-hoc comparisons).
    """
    try:
        renderer = _RENDERERS[params.kind]
    except KeyError:
        raise ValueError(f"No narrative for test kind {params.kind!r}") from None
    return renderer(params)


# =====================================================================
# Assumption checks
# =====================================================================


def describe_levene(params: LeveneParams) -> str:
    conclusion = "did" if params.significant else "did not"
    return (
        f"Levene's test {conclusion} indicate a significant difference in "
        f"variances between the provided groups, "
        f"(F({params.df_between}, {params.df_within}) = {fmt(params.f_value)}, "
        f"p = {fmt_p(params.p_value)})"
    )


def describe_shapiro(params: ShapiroParams) -> str:
    conclusion = "did not" if params.is_normal else "did"
    return (
        f"A Shapiro-Wilk test {conclusion} indicate a significant deviation "
        f"from normality, (W({params.n}) = {fmt(params.w)}, "
        f"p = {fmt_p(params.p_value)})"
    )
