"""CLI console helpers with optional Rich support.

Rich is never imported at module level so that ``--help`` and
``--version`` keep working when it is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
    """Return ``rich.console.Console`` or ``None`` when Rich is missing."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console


def get_rich_console() -> Any | None:
    """Create a Rich console targeting stderr, if Rich is available."""
    console_class = _load_rich_console_class()
    if console_class is None:
        return None
    return console_class(stderr=True)


def rich_available() -> bool:
    return _load_rich_console_class() is not None


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-stderr fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print."""
        rich_console = get_rich_console()
        if rich_console is None:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()


def configure_logging(verbose: bool) -> None:
    """Route library log records to stderr, through Rich when present.

    Without *verbose* only warnings are shown.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
    else:
        handler = RichHandler(console=get_rich_console(), show_path=False)

    root = logging.getLogger("cliparser")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
