"""
primlib Standard Library - Math Module.

Provides integer math functions over the 32-bit signed range:
- Square root and power
- Absolute value
- Variadic minimum and maximum

Results are exact. Arguments outside the 32-bit range, and results that would
leave it, raise IntegerOverflowError instead of wrapping.
"""

from __future__ import annotations

import math as _math

import numpy as np

from primlib.utils.errors import DomainError, IntegerOverflowError, InvalidArgumentError

# =============================================================================
# Constants
# =============================================================================

_INT32 = np.iinfo(np.int32)
INT_MIN = int(_INT32.min)
INT_MAX = int(_INT32.max)


def _check_range(value: int, function: str) -> int:
    if value < INT_MIN or value > INT_MAX:
        raise IntegerOverflowError(
            f"value {value} is outside the integer range [{INT_MIN}, {INT_MAX}]",
            function=function,
        )
    return value


# =============================================================================
# Powers and Roots
# =============================================================================

def integer_sqrt(x: int) -> int:
    """
    Return the integer part of the square root of x.

    Raises:
        DomainError: If x is negative
        IntegerOverflowError: If x is outside the integer range
    """
    _check_range(x, "sqrt")
    if x < 0:
        raise DomainError(f"square root of negative number {x}", function="sqrt")
    return _math.isqrt(x)


def integer_pow(base: int, exponent: int) -> int:
    """
    Return base raised to exponent, by repeated squaring.

    A negative exponent yields the true result truncated toward zero, so only
    bases 1 and -1 give a non-zero answer.

    Raises:
        DomainError: If base is 0 and exponent is negative
        IntegerOverflowError: If the result leaves the integer range
    """
    _check_range(base, "pow")
    _check_range(exponent, "pow")
    if exponent < 0:
        if base == 0:
            raise DomainError("zero cannot be raised to a negative power", function="pow")
        if base == 1:
            return 1
        if base == -1:
            return -1 if exponent % 2 else 1
        return 0

    result = 1
    factor = base
    remaining = exponent
    while remaining:
        if remaining & 1:
            result = _check_range(result * factor, "pow")
        remaining >>= 1
        if remaining:
            factor *= factor
            # every remaining bit multiplies result by at least this factor
            if factor > INT_MAX + 1:
                raise IntegerOverflowError(
                    f"{base} ** {exponent} is outside the integer range", function="pow"
                )
    return result


# =============================================================================
# Basic Math Functions
# =============================================================================

def absolute_value(x: int) -> int:
    """
    Return absolute value.

    Raises:
        IntegerOverflowError: If x is INT_MIN, whose negation is not representable
            or x is outside the integer range
    """
    _check_range(x, "abs")
    if x == INT_MIN:
        raise IntegerOverflowError(f"absolute value of {x} is not representable", function="abs")
    return -x if x < 0 else x


def maximum(*args: int) -> int:
    """Return maximum value."""
    if not args:
        raise InvalidArgumentError("expects at least 1 argument(s), got 0", function="max")
    for value in args:
        _check_range(value, "max")
    return max(args)


def minimum(*args: int) -> int:
    """Return minimum value."""
    if not args:
        raise InvalidArgumentError("expects at least 1 argument(s), got 0", function="min")
    for value in args:
        _check_range(value, "min")
    return min(args)
