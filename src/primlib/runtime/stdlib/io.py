"""
primlib Standard Library - IO Module.

Console output and line input over the runtime context's streams.
"""

from __future__ import annotations

from typing import Optional, Union

from primlib.runtime.context import RuntimeContext, resolve_context
from primlib.runtime.stdlib.string import to_text


def print(*values: Union[int, bool, str], context: Optional[RuntimeContext] = None) -> None:
    """Write values space-separated, followed by a newline."""
    line = " ".join(to_text(value) for value in values) + "\n"
    ctx = resolve_context(context)
    with ctx.io_lock:
        out = ctx.stdout
        out.write(line)
        out.flush()


def read_line(prompt: str = "", *, context: Optional[RuntimeContext] = None) -> str:
    """
    Read one line from standard input.

    A non-empty prompt is written first, without a newline. The line is
    returned without its line terminator; end of input yields "".
    """
    ctx = resolve_context(context)
    with ctx.io_lock:
        if prompt:
            out = ctx.stdout
            out.write(prompt)
            out.flush()
        line = ctx.stdin.readline()

    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
