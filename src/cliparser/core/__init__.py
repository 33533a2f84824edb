"""Core layer — pure classification logic and value types.

Rules
-----
* No ``print()`` calls.
* No filesystem, process or environment access.
* No imports from ``cli`` or ``infra``.
"""

from cliparser.core.classifier import classify, classify_token, count_leading_dashes
from cliparser.core.models import DashPolicy, ParseResult, TokenKind

__all__: list[str] = [
    "DashPolicy",
    "ParseResult",
    "TokenKind",
    "classify",
    "classify_token",
    "count_leading_dashes",
]
