"""
Tests for the assumption checks: Levene (Brown-Forsythe) and Shapiro-Wilk.

Reference values come from scipy.stats.levene and scipy.stats.shapiro.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from susstatistics.core.exceptions import InvalidArgumentError
from susstatistics.hypothesis import levene_test, shapiro_test


class TestLevene:

    def test_median_matches_scipy(self, sus_samples):
        result = levene_test(sus_samples)
        expected = sp_stats.levene(*sus_samples, center="median")
        assert result.f_value == pytest.approx(expected.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(expected.pvalue, rel=1e-8)
        assert result.center == "median"

    def test_mean_matches_scipy(self, sus_samples):
        result = levene_test(sus_samples, center="mean")
        expected = sp_stats.levene(*sus_samples, center="mean")
        assert result.f_value == pytest.approx(expected.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(expected.pvalue, rel=1e-8)

    def test_df(self, sus_samples):
        result = levene_test(sus_samples)
        n = sum(len(s) for s in sus_samples)
        assert result.df_between == 2
        assert result.df_within == n - 3

    def test_group_vars(self, sus_samples):
        result = levene_test(sus_samples)
        assert_allclose(
            result.group_vars, [np.var(s, ddof=1) for s in sus_samples],
        )

    def test_unequal_variances_detected(self, rng):
        narrow = rng.normal(70, 1, size=40)
        wide = rng.normal(70, 20, size=40)
        assert levene_test([narrow, wide]).significant is True

    def test_no_spread(self):
        result = levene_test([[50, 50, 50], [60, 60, 60]])
        assert result.f_value == 0.0
        assert result.p_value == 1.0
        assert result.significant is False

    def test_constant_deviations_that_differ(self):
        # |x - median| is 2.5 in every cell of the first group, 15 in the second
        result = levene_test([[50, 55], [40, 70]])
        assert result.f_value == math.inf
        assert result.p_value == 0.0
        assert result.significant is True

    def test_timing_recorded(self, sus_samples):
        timing = levene_test(sus_samples).timing
        assert set(timing) == {"total_seconds"}
        assert timing["total_seconds"] >= 0.0

    def test_invalid_center(self):
        with pytest.raises(InvalidArgumentError, match="center"):
            levene_test([[1, 2, 3], [4, 5, 6]], center="trimmed")

    @pytest.mark.parametrize("samples", [None, [], [[1.0, 2.0], []]])
    def test_empty(self, samples):
        with pytest.raises(InvalidArgumentError):
            levene_test(samples)

    def test_apa(self):
        result = levene_test([[50, 55, 60, 65], [40, 55, 60, 80]])
        text = result.apa()
        assert text.startswith("Levene's test")
        assert f"F(1, 6) = {result.f_value:.2f}" in text

    def test_summary(self, sus_samples):
        result = levene_test(sus_samples)
        text = result.summary()
        assert "Brown-Forsythe" in text
        assert f"p = {result.p_value:.4f}" in text
        assert f"p={result.p_value:.4f}" in repr(result)


class TestShapiro:

    def test_matches_scipy(self, rng):
        x = rng.normal(68, 12, size=30)
        expected = sp_stats.shapiro(x)
        result = shapiro_test(x)
        assert result.w == pytest.approx(expected.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(expected.pvalue, rel=1e-10)
        assert result.n == 30

    def test_normal_sample(self):
        # Normal quantiles: as close to normal as 50 values get
        x = 68 + 12 * sp_stats.norm.ppf((np.arange(1, 51) - 0.5) / 50)
        assert shapiro_test(x).is_normal is True

    def test_skewed_sample(self, rng):
        assert shapiro_test(rng.exponential(10.0, size=100)).is_normal is False

    def test_too_few(self):
        with pytest.raises(InvalidArgumentError, match="at least 3"):
            shapiro_test([50.0, 60.0])

    def test_empty(self):
        with pytest.raises(InvalidArgumentError):
            shapiro_test([])

    def test_apa(self, rng):
        result = shapiro_test(rng.normal(68, 12, size=25))
        text = result.apa()
        assert text.startswith("A Shapiro-Wilk test")
        assert "W(25) = " in text
