"""
Tests for the Mann-Whitney U and Wilcoxon signed-rank tests.
"""

import pytest
from scipy import stats as sp_stats

from susstatistics.core.exceptions import InvalidArgumentError
from susstatistics.hypothesis import (
    HTestKind,
    mann_whitney_u_test,
    wilcoxon_signed_rank_test,
)


class TestMannWhitneyU:

    X = [75.0, 87.5, 62.5, 77.5, 90.0, 70.0]
    Y = [50.0, 37.5, 65.0, 52.5, 55.0]

    def test_matches_scipy(self):
        res = sp_stats.mannwhitneyu(self.X, self.Y, alternative="two-sided")
        u_min = min(res.statistic, len(self.X) * len(self.Y) - res.statistic)
        result = mann_whitney_u_test(self.X, self.Y)
        assert result.statistic == pytest.approx(u_min)
        assert result.p_value == pytest.approx(res.pvalue, rel=1e-10)

    def test_reports_smaller_u(self):
        # Complete separation except one overlap
        result = mann_whitney_u_test(self.X, self.Y)
        assert result.statistic == 1.0

    def test_symmetric_in_argument_order(self):
        a = mann_whitney_u_test(self.X, self.Y)
        b = mann_whitney_u_test(self.Y, self.X)
        assert a.statistic == b.statistic
        assert a.p_value == pytest.approx(b.p_value)

    def test_fields(self):
        result = mann_whitney_u_test(self.X, self.Y, names=["New", "Old"])
        assert result.kind is HTestKind.MANN_WHITNEY_U
        assert result.statistic_name == "U"
        assert result.df is None
        assert result.effect_size is None
        assert result.significant is True
        assert result.groups[0].median == pytest.approx(76.25)

    def test_not_significant(self):
        result = mann_whitney_u_test([60, 70, 80, 65], [62.5, 72.5, 77.5, 67.5])
        assert result.significant is False

    def test_empty(self):
        with pytest.raises(InvalidArgumentError):
            mann_whitney_u_test([1.0, 2.0], [])


class TestWilcoxonSignedRank:

    PRE = [62.5, 70.0, 55.0, 80.0, 67.5, 72.5, 60.0, 57.5]
    POST = [70.0, 72.5, 65.0, 85.0, 66.0, 80.5, 71.0, 69.0]

    def test_matches_scipy(self):
        res = sp_stats.wilcoxon(self.PRE, self.POST, alternative="two-sided")
        result = wilcoxon_signed_rank_test(self.PRE, self.POST)
        assert result.statistic == pytest.approx(res.statistic)
        assert result.p_value == pytest.approx(res.pvalue, rel=1e-10)

    def test_fields(self):
        result = wilcoxon_signed_rank_test(self.PRE, self.POST)
        assert result.kind is HTestKind.WILCOXON_SIGNED_RANK
        assert result.statistic_name == "W"
        assert result.has_ties is False
        assert result.has_zeros is False
        assert result.warnings == ()

    def test_zero_differences_flagged(self):
        pre = [60.0, 70.0, 55.0, 80.0, 67.5, 72.5, 60.0]
        post = [60.0, 75.0, 62.5, 90.0, 80.0, 87.5, 77.5]
        result = wilcoxon_signed_rank_test(pre, post)
        assert result.has_zeros is True
        assert "zero differences were dropped before ranking" in result.warnings
        expected = sp_stats.wilcoxon(pre, post, zero_method="wilcox")
        assert result.statistic == pytest.approx(expected.statistic)
        assert result.p_value == pytest.approx(expected.pvalue, rel=1e-10)

    def test_ties_flagged(self):
        pre = [60.0, 70.0, 55.0, 80.0, 67.5]
        post = [65.0, 75.0, 62.5, 90.0, 80.0]
        result = wilcoxon_signed_rank_test(pre, post)
        assert result.has_ties is True
        assert result.has_zeros is False

    def test_tie_of_opposite_signs(self):
        result = wilcoxon_signed_rank_test([60.0, 70.0, 50.0], [65.0, 65.0, 40.0])
        assert result.has_ties is True

    def test_all_zero_differences(self):
        x = [50.0, 60.0, 70.0]
        result = wilcoxon_signed_rank_test(x, x)
        assert result.statistic == 0.0
        assert result.p_value == 1.0
        assert result.significant is False
        assert result.has_zeros is True
        assert "all paired differences are zero" in result.warnings

    def test_unequal_lengths(self):
        with pytest.raises(InvalidArgumentError):
            wilcoxon_signed_rank_test([1.0, 2.0, 3.0], [1.0, 2.0])
