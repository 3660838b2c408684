"""
primlib - Primitive runtime library for a small compiled language.

Text, integer math, random generation and console I/O, callable directly or
by name through the function registry.
"""

from primlib.runtime import RuntimeContext, default_registry
from primlib.utils.errors import (
    DomainError,
    IntegerOverflowError,
    InvalidArgumentError,
    PrimlibError,
)

__version__ = "0.1.0"
__all__ = [
    "RuntimeContext",
    "default_registry",
    "PrimlibError",
    "DomainError",
    "InvalidArgumentError",
    "IntegerOverflowError",
]
