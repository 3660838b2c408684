"""
Unit tests for the math module.
"""

import pytest

from primlib.runtime.stdlib.math import (
    INT_MAX,
    INT_MIN,
    absolute_value,
    integer_pow,
    integer_sqrt,
    maximum,
    minimum,
)
from primlib.utils.errors import DomainError, IntegerOverflowError, InvalidArgumentError


class TestBounds:
    """Tests for the integer range constants."""

    def test_int32_range(self):
        """Test the range is the 32-bit signed range."""
        assert INT_MIN == -(2**31)
        assert INT_MAX == 2**31 - 1


class TestIntegerSqrt:
    """Tests for integer_sqrt."""

    @pytest.mark.parametrize(
        "x, expected",
        [(0, 0), (1, 1), (15, 3), (16, 4), (17, 4), (INT_MAX, 46340)],
    )
    def test_truncates(self, x, expected):
        """Test the result is the integer part of the root."""
        assert integer_sqrt(x) == expected

    def test_negative_is_domain_error(self):
        """Test a negative argument raises DomainError."""
        with pytest.raises(DomainError, match="negative"):
            integer_sqrt(-1)

    def test_domain_error_is_value_error(self):
        """Test DomainError can be caught as ValueError."""
        with pytest.raises(ValueError):
            integer_sqrt(-4)


class TestIntegerPow:
    """Tests for integer_pow."""

    @pytest.mark.parametrize(
        "base, exponent, expected",
        [
            (2, 3, 8),
            (2, 0, 1),
            (0, 0, 1),
            (0, 5, 0),
            (-3, 3, -27),
            (-2, 4, 16),
            (2, 30, 2**30),
            (-2, 31, INT_MIN),
            (46340, 2, 46340**2),
        ],
    )
    def test_exact(self, base, exponent, expected):
        """Test exact results inside the range."""
        assert integer_pow(base, exponent) == expected

    @pytest.mark.parametrize("base, exponent", [(2, 31), (46341, 2), (10, 10), (3, 10**9)])
    def test_overflow(self, base, exponent):
        """Test results outside the range raise IntegerOverflowError."""
        with pytest.raises(IntegerOverflowError):
            integer_pow(base, exponent)

    def test_negative_exponent_truncates(self):
        """Test negative exponents truncate toward zero."""
        assert integer_pow(2, -1) == 0
        assert integer_pow(-5, -2) == 0
        assert integer_pow(1, -7) == 1
        assert integer_pow(-1, -3) == -1
        assert integer_pow(-1, -4) == 1

    def test_zero_negative_exponent(self):
        """Test zero to a negative power is a domain error."""
        with pytest.raises(DomainError):
            integer_pow(0, -1)


class TestAbsoluteValue:
    """Tests for absolute_value."""

    @pytest.mark.parametrize("x", [0, 1, -1, 42, -42, INT_MAX, INT_MIN + 1])
    def test_non_negative(self, x):
        """Test the result is never negative."""
        result = absolute_value(x)
        assert result >= 0
        assert result in (x, -x)

    def test_int_min_overflows(self):
        """Test INT_MIN cannot be negated."""
        with pytest.raises(IntegerOverflowError):
            absolute_value(INT_MIN)

    def test_overflow_is_overflow_error(self):
        """Test IntegerOverflowError can be caught as OverflowError."""
        with pytest.raises(OverflowError):
            absolute_value(INT_MIN)


class TestMinMax:
    """Tests for maximum and minimum."""

    @pytest.mark.parametrize("values", [(1,), (3, 1, 2), (-5, -1, -9), (7, 7, 7)])
    def test_maximum_bounds(self, values):
        """Test the maximum is an argument and no argument exceeds it."""
        result = maximum(*values)
        assert result in values
        assert all(v <= result for v in values)

    @pytest.mark.parametrize("values", [(1,), (3, 1, 2), (-5, -1, -9), (7, 7, 7)])
    def test_minimum_bounds(self, values):
        """Test the minimum is an argument and no argument is below it."""
        result = minimum(*values)
        assert result in values
        assert all(v >= result for v in values)

    def test_no_arguments(self):
        """Test empty calls raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="max"):
            maximum()
        with pytest.raises(InvalidArgumentError, match="min"):
            minimum()


class TestArgumentRange:
    """Tests for arguments outside the 32-bit range."""

    def test_abs_below_range(self):
        """Test abs rejects a value below INT_MIN instead of returning it."""
        with pytest.raises(IntegerOverflowError, match="outside the integer range"):
            absolute_value(INT_MIN - 1)

    def test_abs_above_range(self):
        """Test abs rejects a value above INT_MAX."""
        with pytest.raises(IntegerOverflowError):
            absolute_value(INT_MAX + 1)

    def test_sqrt_above_range(self):
        """Test sqrt rejects a value above INT_MAX."""
        with pytest.raises(IntegerOverflowError):
            integer_sqrt(INT_MAX + 1)

    def test_sqrt_far_below_range(self):
        """Test a huge negative value overflows before the domain check."""
        with pytest.raises(IntegerOverflowError):
            integer_sqrt(-(2**40))

    @pytest.mark.parametrize("base, exponent", [(INT_MAX + 1, 1), (1, INT_MAX + 1), (2, -(2**40))])
    def test_pow_arguments(self, base, exponent):
        """Test pow checks both arguments."""
        with pytest.raises(IntegerOverflowError):
            integer_pow(base, exponent)

    def test_min_max_any_argument(self):
        """Test every variadic argument is checked."""
        with pytest.raises(IntegerOverflowError, match=r"\[max\]"):
            maximum(1, INT_MAX + 1, 2)
        with pytest.raises(IntegerOverflowError, match=r"\[min\]"):
            minimum(1, 2, INT_MIN - 1)

    def test_bounds_accepted(self):
        """Test the range endpoints themselves are valid arguments."""
        assert maximum(INT_MIN, INT_MAX) == INT_MAX
        assert minimum(INT_MIN, INT_MAX) == INT_MIN
        assert absolute_value(INT_MAX) == INT_MAX
        assert integer_sqrt(INT_MAX) == 46340
