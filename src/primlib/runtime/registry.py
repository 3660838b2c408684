"""
primlib Function Registry.

Maps the names a program uses to the stdlib implementations, so an embedding
interpreter can call into the library by name:

    registry = default_registry()
    registry.invoke("starts_with", "hello", "he")   # True
    call_method("abc", "upper")                       # "ABC"
    get_property("abc", "len")                        # 3

Calls are checked for arity and value kind before dispatch; a bad call raises
InvalidArgumentError with a message naming the function.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from primlib.runtime.context import RuntimeContext
from primlib.runtime.stdlib import io, math, random, string
from primlib.utils.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class StdModule(Enum):
    """The stdlib group a function belongs to."""

    IO = "io"
    STRING = "string"
    MATH = "math"
    RANDOM = "random"


class ValueKind(Enum):
    """Runtime kinds of the values passed across the call surface."""

    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    TEXT = "Text"
    VOID = "Void"


def kind_of(value: Any) -> Optional[ValueKind]:
    """Return the kind of a value, None if it has no runtime kind."""
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, str):
        return ValueKind.TEXT
    return None


def _kind_name(value: Any) -> str:
    kind = kind_of(value)
    return kind.value if kind is not None else type(value).__name__


@dataclass(frozen=True, slots=True)
class Param:
    """
    One declared parameter.

    Attributes:
        kinds: Accepted value kinds
        optional: The argument may be omitted
        variadic: Absorbs every remaining argument (last parameter only)
        name: Name used in error messages; the position is used when None
    """

    kinds: tuple[ValueKind, ...]
    optional: bool = False
    variadic: bool = False
    name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FunctionDefinition:
    """A registered stdlib function."""

    name: str
    module: StdModule
    params: tuple[Param, ...]
    return_kind: ValueKind
    impl: Callable[..., Any]
    uses_context: bool = False

    def signature(self) -> str:
        parts = []
        for param in self.params:
            text = " | ".join(kind.value for kind in param.kinds)
            if param.variadic:
                text = f"...{text}"
            if param.optional:
                text = f"{text}?"
            parts.append(text)
        return f"{self.name}({', '.join(parts)}) -> {self.return_kind.value}"


@dataclass(frozen=True, slots=True)
class LiteralMethod:
    """A method callable on a literal value, e.g. ``"abc".upper()``."""

    name: str
    return_kind: ValueKind
    impl: Callable[..., Any]
    params: tuple[Param, ...] = ()


@dataclass(frozen=True, slots=True)
class LiteralProperty:
    """A read-only property of a literal value, e.g. ``"abc".len``."""

    name: str
    return_kind: ValueKind
    impl: Callable[[Any], Any]


def validate_arguments(name: str, args: Sequence[Any], expected: Sequence[Param]) -> None:
    """
    Check a call's arity and argument kinds against its parameters.

    Integer arguments must also fit the 32-bit range.

    Raises:
        InvalidArgumentError: On too few or too many arguments, a kind mismatch,
            or an out-of-range Integer
    """
    is_variadic = bool(expected) and expected[-1].variadic
    required = sum(1 for param in expected if not param.optional)

    if len(args) < required:
        raise InvalidArgumentError(
            f"{name} expects at least {required} argument(s), got {len(args)}"
        )

    if not is_variadic and len(args) > len(expected):
        raise InvalidArgumentError(
            f"{name} expects at most {len(expected)} argument(s), got {len(args)}"
        )

    for index, arg in enumerate(args):
        param = expected[index] if index < len(expected) else expected[-1]
        if kind_of(arg) not in param.kinds:
            arg_name = param.name or index + 1
            allowed = " or ".join(kind.value for kind in param.kinds)
            raise InvalidArgumentError(
                f"Argument {arg_name} of {name} must be {allowed}, got {_kind_name(arg)}"
            )
        if kind_of(arg) is ValueKind.INTEGER and not math.INT_MIN <= arg <= math.INT_MAX:
            arg_name = param.name or index + 1
            raise InvalidArgumentError(
                f"Argument {arg_name} of {name} must be Integer in range "
                f"[{math.INT_MIN}, {math.INT_MAX}], got {arg}"
            )


class FunctionRegistry:
    """Name-to-function table for the stdlib."""

    def __init__(self) -> None:
        self._functions: dict[str, FunctionDefinition] = {}

    def register(self, definition: FunctionDefinition) -> None:
        self._functions[definition.name] = definition

    def get(self, name: str) -> Optional[FunctionDefinition]:
        return self._functions.get(name)

    def has(self, name: str) -> bool:
        return name in self._functions

    def names(self, module: Optional[StdModule] = None) -> list[str]:
        """Return registered names, optionally limited to one module."""
        return [
            name
            for name, definition in self._functions.items()
            if module is None or definition.module is module
        ]

    def validate_call(self, name: str, args: Sequence[Any]) -> FunctionDefinition:
        """Look up ``name`` and check ``args`` against it."""
        definition = self._functions.get(name)
        if definition is None:
            raise InvalidArgumentError(f"{name} is not a function")
        validate_arguments(name, args, definition.params)
        return definition

    def invoke(self, name: str, *args: Any, context: Optional[RuntimeContext] = None) -> Any:
        """Validate and call a registered function."""
        definition = self.validate_call(name, args)
        logger.debug(f"Invoking {name} with {len(args)} argument(s)")
        if definition.uses_context:
            return definition.impl(*args, context=context)
        return definition.impl(*args)


# =============================================================================
# Literal methods and properties
# =============================================================================

_LITERAL_METHODS: dict[ValueKind, dict[str, LiteralMethod]] = {
    ValueKind.TEXT: {
        "upper": LiteralMethod("upper", ValueKind.TEXT, string.to_upper),
        "lower": LiteralMethod("lower", ValueKind.TEXT, string.to_lower),
    },
}

_LITERAL_PROPERTIES: dict[ValueKind, dict[str, LiteralProperty]] = {
    ValueKind.TEXT: {
        "len": LiteralProperty("len", ValueKind.INTEGER, string.length),
    },
}


def call_method(value: Any, name: str, *args: Any) -> Any:
    """Call a literal method on ``value``."""
    kind = kind_of(value)
    method = _LITERAL_METHODS.get(kind, {}).get(name) if kind is not None else None
    if method is None:
        raise InvalidArgumentError(f"{name} is not a method of {_kind_name(value)}")
    validate_arguments(name, args, method.params)
    return method.impl(value, *args)


def get_property(value: Any, name: str) -> Any:
    """Read a literal property of ``value``."""
    kind = kind_of(value)
    prop = _LITERAL_PROPERTIES.get(kind, {}).get(name) if kind is not None else None
    if prop is None:
        raise InvalidArgumentError(f"{name} is not a property of {_kind_name(value)}")
    return prop.impl(value)


# =============================================================================
# Default registry
# =============================================================================

_INT = (ValueKind.INTEGER,)
_TEXT = (ValueKind.TEXT,)
_PRINTABLE = (ValueKind.TEXT, ValueKind.BOOLEAN, ValueKind.INTEGER)


def _std_definitions() -> list[FunctionDefinition]:
    return [
        # === IO ===
        FunctionDefinition(
            "print", StdModule.IO, (Param(_PRINTABLE, optional=True, variadic=True),),
            ValueKind.VOID, io.print, uses_context=True,
        ),
        FunctionDefinition(
            "input", StdModule.IO, (Param(_TEXT, optional=True),),
            ValueKind.TEXT, io.read_line, uses_context=True,
        ),
        # === STRING ===
        FunctionDefinition(
            "to_string", StdModule.STRING, (Param((ValueKind.INTEGER, ValueKind.BOOLEAN)),),
            ValueKind.TEXT, string.to_text,
        ),
        FunctionDefinition(
            "strlen", StdModule.STRING, (Param(_TEXT),), ValueKind.INTEGER, string.length,
        ),
        FunctionDefinition(
            "lower", StdModule.STRING, (Param(_TEXT),), ValueKind.TEXT, string.to_lower,
        ),
        FunctionDefinition(
            "upper", StdModule.STRING, (Param(_TEXT),), ValueKind.TEXT, string.to_upper,
        ),
        FunctionDefinition(
            "starts_with", StdModule.STRING, (Param(_TEXT), Param(_TEXT)),
            ValueKind.BOOLEAN, string.starts_with,
        ),
        FunctionDefinition(
            "ends_with", StdModule.STRING, (Param(_TEXT), Param(_TEXT)),
            ValueKind.BOOLEAN, string.ends_with,
        ),
        FunctionDefinition(
            "contains", StdModule.STRING, (Param(_TEXT), Param(_TEXT)),
            ValueKind.BOOLEAN, string.contains,
        ),
        # === MATH ===
        FunctionDefinition(
            "sqrt", StdModule.MATH, (Param(_INT),), ValueKind.INTEGER, math.integer_sqrt,
        ),
        FunctionDefinition(
            "pow", StdModule.MATH, (Param(_INT), Param(_INT)),
            ValueKind.INTEGER, math.integer_pow,
        ),
        FunctionDefinition(
            "abs", StdModule.MATH, (Param(_INT),), ValueKind.INTEGER, math.absolute_value,
        ),
        FunctionDefinition(
            "max", StdModule.MATH, (Param(_INT, variadic=True),), ValueKind.INTEGER, math.maximum,
        ),
        FunctionDefinition(
            "min", StdModule.MATH, (Param(_INT, variadic=True),), ValueKind.INTEGER, math.minimum,
        ),
        # === RANDOM ===
        FunctionDefinition(
            "random_int", StdModule.RANDOM, (Param(_INT), Param(_INT)),
            ValueKind.INTEGER, random.random_integer, uses_context=True,
        ),
        FunctionDefinition(
            "random_string", StdModule.RANDOM, (Param(_INT),),
            ValueKind.TEXT, random.random_text, uses_context=True,
        ),
    ]


_default_registry: Optional[FunctionRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> FunctionRegistry:
    """Return the registry populated with every stdlib function."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            registry = FunctionRegistry()
            for definition in _std_definitions():
                registry.register(definition)
            _default_registry = registry
        return _default_registry
