"""
primlib Runtime.

The stdlib functions, the context that owns their shared state, and the
name-based registry an interpreter dispatches through.
"""

from primlib.runtime.context import (
    RuntimeContext,
    get_default_context,
    resolve_context,
    set_default_context,
)
from primlib.runtime.registry import (
    FunctionDefinition,
    FunctionRegistry,
    Param,
    StdModule,
    ValueKind,
    call_method,
    default_registry,
    get_property,
    kind_of,
)

__all__ = [
    "RuntimeContext",
    "get_default_context",
    "set_default_context",
    "resolve_context",
    "FunctionDefinition",
    "FunctionRegistry",
    "Param",
    "StdModule",
    "ValueKind",
    "call_method",
    "default_registry",
    "get_property",
    "kind_of",
]
