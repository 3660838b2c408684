"""
primlib Standard Library.

Provides the primitive functions for text, integer math, random values and
console I/O.
"""

from primlib.runtime.stdlib.io import print, read_line
from primlib.runtime.stdlib.math import (
    INT_MAX,
    INT_MIN,
    absolute_value,
    integer_pow,
    integer_sqrt,
    maximum,
    minimum,
)
from primlib.runtime.stdlib.random import ALPHANUMERIC, random_integer, random_text, set_seed
from primlib.runtime.stdlib.string import (
    contains,
    ends_with,
    length,
    starts_with,
    to_lower,
    to_text,
    to_upper,
)

__all__ = [
    # String
    "to_lower", "to_upper", "length", "starts_with", "ends_with", "contains", "to_text",
    # Math
    "integer_sqrt", "integer_pow", "absolute_value", "maximum", "minimum",
    "INT_MIN", "INT_MAX",
    # Random
    "random_integer", "random_text", "set_seed", "ALPHANUMERIC",
    # IO
    "print", "read_line",
]
