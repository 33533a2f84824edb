"""Allow ``python -m cliparser`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cliparser`` behaves identically to the ``cliparser``
console script.
"""

from __future__ import annotations

from cliparser.cli.app import cli

if __name__ == "__main__":
    cli()
