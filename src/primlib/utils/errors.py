"""
Error types for the primlib runtime library.
"""

from typing import Optional


class PrimlibError(Exception):
    """Base exception for all errors raised by the runtime library."""

    def __init__(self, message: str, function: Optional[str] = None) -> None:
        self.message = message
        self.function = function
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.function:
            return f"[{self.function}] {self.message}"
        return self.message


class DomainError(PrimlibError, ValueError):
    """Raised when an argument lies outside the mathematically valid domain."""

    pass


class InvalidArgumentError(PrimlibError, ValueError):
    """
    Raised on a bad call shape.

    This error is raised when:
    - A variadic reduction receives no arguments
    - A range is empty (low > high)
    - A registered function is called with the wrong arity or value kind
    - A name is not registered
    """

    pass


class IntegerOverflowError(PrimlibError, OverflowError):
    """Raised when a result leaves the 32-bit signed integer range."""

    pass
