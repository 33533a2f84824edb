"""Infrastructure: reading the process argument vector.

This module is the only place that touches :data:`sys.argv`.  It takes
a snapshot of the vector, validates that one was supplied at all, and
hands the tokens to the pure classifier.

Rules
-----
* Read once, never mutate :data:`sys.argv`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from cliparser.core.classifier import classify
from cliparser.core.models import DashPolicy, ParseResult
from cliparser.exceptions import EnvironmentReadError

logger = logging.getLogger(__name__)


def read_process_args(argv: Sequence[str] | None = None) -> tuple[str, ...]:
    """Return an immutable snapshot of the argument vector.

    Parameters
    ----------
    argv:
        Explicit vector.  When ``None`` (default), :data:`sys.argv` is
        read.  Element 0 is expected to be the invocation path.

    Raises
    ------
    EnvironmentReadError
        If the vector is missing, is not a sequence of strings, or is
        empty (not even a program path).
    """
    source = sys.argv if argv is None else argv
    if source is None or isinstance(source, (str, bytes)):
        raise EnvironmentReadError("Process arguments are unavailable.")

    try:
        tokens = tuple(source)
    except TypeError as exc:
        raise EnvironmentReadError(
            f"Process arguments could not be read: {exc}",
        ) from exc

    if not tokens:
        raise EnvironmentReadError(
            "Process arguments are empty.",
            hint="Expected at least the program path as the first argument.",
        )
    if not all(isinstance(token, str) for token in tokens):
        raise EnvironmentReadError("Process arguments must all be text.")

    logger.debug("read %d process argument(s)", len(tokens))
    return tokens


def parse_process_args(
    argv: Sequence[str] | None = None,
    *,
    policy: DashPolicy = DashPolicy.LENIENT,
) -> ParseResult:
    """Read the argument vector and classify it in a single call.

    A read failure aborts before any token is classified.
    """
    return classify(read_process_args(argv), policy=policy)
