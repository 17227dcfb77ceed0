"""
Tests for the (n+1)p quantile method.

Reference values for interior positions are cross-checked against
numpy's 'weibull' method (Hyndman & Fan type 6).
"""

import numpy as np
import pytest

from susstatistics.core.exceptions import InvalidArgumentError
from susstatistics.descriptive import quantile, quartiles


ONE_TO_TEN = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


class TestQuantile:

    def test_median_even(self):
        assert quantile(ONE_TO_TEN, 0.5) == pytest.approx(5.5)

    def test_quartiles_one_to_ten(self):
        assert quantile(ONE_TO_TEN, 0.25) == pytest.approx(2.75)
        assert quantile(ONE_TO_TEN, 0.75) == pytest.approx(8.25)

    def test_median_odd(self):
        assert quantile([9, 1, 5], 0.5) == 5.0

    def test_exact_position(self):
        # n = 3, p = 0.25 -> position 1 -> smallest value
        assert quantile([10, 20, 30], 0.25) == 10.0

    def test_unsorted_input_not_mutated(self):
        values = [10, 3, 7, 1, 8]
        before = list(values)
        assert quantile(values, 0.5) == 7.0
        assert values == before

    def test_numpy_input_not_mutated(self):
        values = np.array([4.0, 1.0, 3.0, 2.0])
        quantile(values, 0.5)
        np.testing.assert_array_equal(values, [4.0, 1.0, 3.0, 2.0])

    def test_returns_python_float(self):
        assert isinstance(quantile(ONE_TO_TEN, 0.5), float)

    @pytest.mark.parametrize("p", [0.25, 0.5, 0.75])
    def test_matches_weibull(self, rng, p):
        x = rng.normal(70, 10, size=23)
        expected = np.quantile(x, p, method="weibull")
        assert quantile(x, p) == pytest.approx(expected, rel=1e-12)


class TestClamping:
    """Positions outside [1, n] use the end values."""

    def test_single_value(self):
        for p in (0.0, 0.25, 0.5, 0.75, 1.0):
            assert quantile([42.5], p) == 42.5

    def test_two_values_lower(self):
        # position 0.75 lies before the first order statistic
        assert quantile([3, 1], 0.25) == 1.0

    def test_two_values_upper(self):
        # position 2.25 lies after the last order statistic
        assert quantile([3, 1], 0.75) == 3.0

    def test_p_zero_and_one(self):
        assert quantile(ONE_TO_TEN, 0.0) == 1.0
        assert quantile(ONE_TO_TEN, 1.0) == 10.0


class TestInvalid:

    def test_empty(self):
        with pytest.raises(InvalidArgumentError):
            quantile([], 0.5)

    def test_none(self):
        with pytest.raises(InvalidArgumentError):
            quantile(None, 0.5)

    @pytest.mark.parametrize("p", [-0.1, 1.5])
    def test_p_out_of_range(self, p):
        with pytest.raises(InvalidArgumentError, match="p must be in"):
            quantile(ONE_TO_TEN, p)


class TestQuartiles:

    def test_tuple(self):
        q1, median, q3 = quartiles(ONE_TO_TEN)
        assert (q1, median, q3) == pytest.approx((2.75, 5.5, 8.25))

    def test_ordered(self, rng):
        q1, median, q3 = quartiles(rng.uniform(0, 100, size=15))
        assert q1 <= median <= q3
