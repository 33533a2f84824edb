"""CLI application entry point for cliparser.

This module is the **sole error boundary** for the command.  It catches
:class:`~cliparser.exceptions.CliParserError`, ``KeyboardInterrupt``, and
any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Usage::

    cliparser [--strict] [--format FORMAT] [-v] -- ./prog --level=2 -verb file

Tokens after ``--`` are classified verbatim, the first one standing in
for the program path.  Without ``--`` the command classifies its own
process argument vector.
"""

from __future__ import annotations

import argparse
import sys

from cliparser.cli import exit_codes
from cliparser.cli.console import configure_logging, console
from cliparser.cli.report import FORMATS, print_result
from cliparser.core.models import DashPolicy
from cliparser.exceptions import CliParserError
from cliparser.infra.environment import parse_process_args
from cliparser.version import __version__

TOKEN_MARKER = "--"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cliparser",
        description=(
            "Classify command-line tokens into positionals, flags and "
            "key=value pairs."
        ),
        epilog="Pass the tokens to classify after a literal '--'.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject malformed tokens instead of demoting them.",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="table",
        help="Output format (default: %(default)s).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every routed token.",
    )
    return parser


def _split_tokens(argv: list[str]) -> tuple[list[str], list[str] | None]:
    """Separate the command's own options from the tokens to classify.

    Returns ``(options, tokens)``; *tokens* is ``None`` when no ``--``
    marker is present.
    """
    if TOKEN_MARKER not in argv:
        return argv, None
    index = argv.index(TOKEN_MARKER)
    return argv[:index], argv[index + 1:]


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cliparser CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    raw = list(sys.argv[1:] if argv is None else argv)
    options, tokens = _split_tokens(raw)

    args = _build_parser().parse_args(options)
    configure_logging(args.verbose)

    policy = DashPolicy.STRICT if args.strict else DashPolicy.LENIENT
    result = parse_process_args(tokens, policy=policy)
    print_result(result, args.format)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CliParserError as exc:
        console.print(f"Error: {exc}", markup=False)
        if exc.hint:
            console.print(f"Hint: {exc.hint}", markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            markup=False,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
