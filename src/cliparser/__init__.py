"""cliparser — classify command-line tokens by their leading dashes.

Zero dashes make a positional value, one dash a flag, two dashes a
``key=value`` pair.
"""

from cliparser.core.classifier import classify, classify_token
from cliparser.core.models import DashPolicy, ParseResult, TokenKind
from cliparser.exceptions import CliParserError, EnvironmentReadError, MalformedArgumentError
from cliparser.infra.environment import parse_process_args, read_process_args
from cliparser.version import __version__

__all__: list[str] = [
    "CliParserError",
    "DashPolicy",
    "EnvironmentReadError",
    "MalformedArgumentError",
    "ParseResult",
    "TokenKind",
    "__version__",
    "classify",
    "classify_token",
    "parse_process_args",
    "read_process_args",
]
