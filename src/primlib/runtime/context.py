"""
primlib Runtime Context.

Owns the process-level state the stdlib functions share:

- The random source, seeded once when the context is created
- The console streams used by print/read_line
- One lock per shared resource, so a multi-threaded embedder can share a
  single context

Functions in the stdlib accept an optional ``context`` argument. When it is
omitted they use the default context, created lazily on first use.
"""

from __future__ import annotations

import logging
import os
import random as _random
import sys
import threading
from typing import Optional, TextIO

from primlib.utils.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "PRIMLIB_SEED"


def _seed_from_env() -> Optional[int]:
    """Read the seed from the environment, None when unset or blank."""
    raw = os.environ.get(SEED_ENV_VAR, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(
            f"{SEED_ENV_VAR} must be an integer, got {raw!r}"
        ) from None


class RuntimeContext:
    """
    Shared state for one logical run of a program.

    Attributes:
        rng: The random generator, seeded exactly once here
        rng_lock: Serializes access to ``rng``
        io_lock: Serializes access to the console streams
        seed: The explicit seed, or None when seeded from OS entropy
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        if seed is None:
            seed = _seed_from_env()
        self.seed = seed
        # Random(None) pulls from os.urandom once, at construction
        self.rng = _random.Random(seed)
        self.rng_lock = threading.Lock()
        self.io_lock = threading.Lock()
        self._stdin = stdin
        self._stdout = stdout

        if seed is None:
            logger.debug("Runtime context created, random source seeded from OS entropy")
        else:
            logger.debug(f"Runtime context created with seed {seed}")

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def reseed(self, seed: Optional[int]) -> None:
        """Reseed the random source. None draws fresh OS entropy."""
        with self.rng_lock:
            self.rng.seed(seed)
            self.seed = seed
        logger.debug(f"Random source reseeded with {seed!r}")


_default_context: Optional[RuntimeContext] = None
_default_lock = threading.Lock()


def get_default_context() -> RuntimeContext:
    """Return the process-wide context, creating it on first use."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = RuntimeContext()
        return _default_context


def set_default_context(context: Optional[RuntimeContext]) -> None:
    """Replace the process-wide context. None resets it to lazy creation."""
    global _default_context
    with _default_lock:
        _default_context = context


def resolve_context(context: Optional[RuntimeContext]) -> RuntimeContext:
    """Return ``context`` or the default context when it is None."""
    return context if context is not None else get_default_context()
