"""
primlib Command-Line Interface.

Lists and calls the registered stdlib functions.

Usage:
    primlib info                     # List every function
    primlib info --module math       # List one module
    primlib call pow 2 10            # Call a function by name
    primlib --seed 7 call random_string 8
    primlib call random_string 8 --seed 7
    primlib call strlen '"123"'       # Quoted words are always text
"""

import argparse
import logging
import os
import sys
from typing import Any, Optional

from primlib import __version__
from primlib.runtime.context import RuntimeContext
from primlib.runtime.registry import StdModule, default_registry
from primlib.runtime.stdlib.io import print as print_values
from primlib.utils.errors import PrimlibError

logger = logging.getLogger(__name__)


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors."""
        cls.RED = ""
        cls.CYAN = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


def parse_literal(text: str) -> Any:
    """
    Turn a command-line word into a runtime value.

    A word wrapped in double quotes is text with the quotes removed, so
    numeric-looking text and the words true/false can still be passed.
    """
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    if text == "true":
        return True
    if text == "false":
        return False
    try:
        return int(text)
    except ValueError:
        return text


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="primlib",
        description="primlib - primitive runtime library",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source (default: $PRIMLIB_SEED or OS entropy)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    info_parser = subparsers.add_parser(
        "info",
        help="List registered functions",
    )
    info_parser.add_argument(
        "--module",
        choices=[module.value for module in StdModule],
        default=None,
        help="Only list functions of this module",
    )

    call_parser = subparsers.add_parser(
        "call",
        help="Call a registered function",
    )
    call_parser.add_argument(
        "name",
        help="Function name, e.g. starts_with",
    )
    call_parser.add_argument(
        "args",
        nargs="*",
        help='Arguments: true/false, integers, "quoted" words and anything else are text',
    )
    # absent means the top-level --seed value stands
    call_parser.add_argument(
        "--seed",
        type=int,
        default=argparse.SUPPRESS,
        help="Seed for the random source",
    )

    return parser


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command - list functions grouped by module."""
    registry = default_registry()
    modules = [StdModule(args.module)] if args.module else list(StdModule)

    print(f"{Colors.BOLD}primlib {__version__}{Colors.RESET}")
    for module in modules:
        print(f"\n{Colors.CYAN}{module.value}:{Colors.RESET}")
        for name in registry.names(module):
            print(f"  {registry.get(name).signature()}")
    return 0


def cmd_call(args: argparse.Namespace) -> int:
    """Handle the call command - invoke one function and print its result."""
    values = [parse_literal(word) for word in args.args]

    try:
        context = RuntimeContext(seed=args.seed)
        result = default_registry().invoke(args.name, *values, context=context)
    except PrimlibError as e:
        print(f"{Colors.RED}error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    if result is not None:
        print_values(result, context=context)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    _init_colors()
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "info": cmd_info,
        "call": cmd_call,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1
