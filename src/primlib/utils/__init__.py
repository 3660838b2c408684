"""
primlib Utilities Package.

Error taxonomy shared by every runtime module.
"""

from primlib.utils.errors import (
    DomainError,
    IntegerOverflowError,
    InvalidArgumentError,
    PrimlibError,
)

__all__ = [
    "PrimlibError",
    "DomainError",
    "InvalidArgumentError",
    "IntegerOverflowError",
]
