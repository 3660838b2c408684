"""
primlib Standard Library - Random Module.

Provides random number and text generation. The generator lives in the
runtime context and is seeded once when the context is created, never per
call.
"""

from __future__ import annotations

import string as _string
from typing import Optional

from primlib.runtime.context import RuntimeContext, resolve_context
from primlib.utils.errors import InvalidArgumentError

ALPHANUMERIC = _string.ascii_lowercase + _string.ascii_uppercase + _string.digits


def set_seed(seed: Optional[int], *, context: Optional[RuntimeContext] = None) -> None:
    """Set random seed for reproducibility."""
    resolve_context(context).reseed(seed)


def random_integer(low: int, high: int, *, context: Optional[RuntimeContext] = None) -> int:
    """
    Return random integer in [low, high] inclusive.

    Raises:
        InvalidArgumentError: If low > high
    """
    if low > high:
        raise InvalidArgumentError(
            f"empty range: low {low} is greater than high {high}", function="random_int"
        )
    ctx = resolve_context(context)
    with ctx.rng_lock:
        return ctx.rng.randint(low, high)


def random_text(length: int, *, context: Optional[RuntimeContext] = None) -> str:
    """Return random alphanumeric string of given length."""
    if length <= 0:
        return ""
    ctx = resolve_context(context)
    with ctx.rng_lock:
        return "".join(ctx.rng.choices(ALPHANUMERIC, k=length))
