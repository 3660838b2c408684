"""
primlib Standard Library - String Module.

Provides text functions. Case conversion only touches ASCII letters and
lengths are measured in UTF-8 bytes.
"""

from __future__ import annotations

import string as _string
from typing import Union

from primlib.utils.errors import InvalidArgumentError

_TO_LOWER = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)
_TO_UPPER = str.maketrans(_string.ascii_lowercase, _string.ascii_uppercase)


def to_lower(s: str) -> str:
    """Convert ASCII letters to lowercase."""
    return s.translate(_TO_LOWER)


def to_upper(s: str) -> str:
    """Convert ASCII letters to uppercase."""
    return s.translate(_TO_UPPER)


def length(s: str) -> int:
    """Return length of string in bytes."""
    return len(s.encode("utf-8"))


def starts_with(s: str, prefix: str) -> bool:
    """Check if string starts with prefix."""
    return s.startswith(prefix)


def ends_with(s: str, suffix: str) -> bool:
    """Check if string ends with suffix."""
    return s.endswith(suffix)


def contains(s: str, sub: str) -> bool:
    """Check if string contains substring."""
    return sub in s


def to_text(value: Union[int, bool, str]) -> str:
    """
    Convert a value to its text form.

    Booleans become "true"/"false", integers their base-10 representation and
    text is returned unchanged.

    Raises:
        InvalidArgumentError: If the value is not an integer, boolean or text
    """
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise InvalidArgumentError(
        f"cannot convert {type(value).__name__} to text", function="to_string"
    )
