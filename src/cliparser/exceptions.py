"""Custom exception hierarchy for cliparser.

Every error raised by the library derives from :class:`CliParserError`
so that callers (and the CLI error boundary) can catch a single type
and render a clean message with an optional hint.

Hierarchy
---------
CliParserError
├── EnvironmentReadError
└── MalformedArgumentError
    ├── FlagWithSignError
    ├── MalformedFlagError
    ├── PairMissingSignError
    ├── PairMalformedError
    ├── PairBadSignError
    └── DashesMalformedError

The :class:`MalformedArgumentError` branch is only raised under the
strict dash policy.  The lenient default never rejects a token.
"""

from __future__ import annotations


FLAG_SYNTAX = "Proper syntax: `./my_program -flag`"
PAIR_SYNTAX = "Proper syntax: `./my_program --key=value`"


class CliParserError(Exception):
    """Base exception for all cliparser errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Environment -----------------------------------------------------------

class EnvironmentReadError(CliParserError):
    """Raised when the process argument vector is empty or unavailable."""


# --- Strict-mode token validation -------------------------------------------

class MalformedArgumentError(CliParserError):
    """Raised when a single token violates the strict argument syntax.

    The offending token is kept on :attr:`argument` verbatim.
    """

    def __init__(
        self,
        argument: str,
        message: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.argument: str = argument


class FlagWithSignError(MalformedArgumentError):
    """A one-dash flag contains an equal sign (``-name=value``)."""

    def __init__(self, argument: str) -> None:
        super().__init__(
            argument,
            f"Equal signs not allowed in flags: `{argument}`",
            hint=FLAG_SYNTAX,
        )


class MalformedFlagError(MalformedArgumentError):
    """A one-dash flag has no name (a lone ``-``)."""

    def __init__(self, argument: str) -> None:
        super().__init__(
            argument,
            f"Malformed flag: `{argument}`",
            hint=FLAG_SYNTAX,
        )


class PairMissingSignError(MalformedArgumentError):
    """A two-dash pair has no equal sign (``--name``)."""

    def __init__(self, argument: str) -> None:
        super().__init__(
            argument,
            f"Key-value pair arguments need an equal sign: `{argument}`",
            hint=PAIR_SYNTAX,
        )


class PairMalformedError(MalformedArgumentError):
    """A two-dash pair is too short to hold both a key and a value."""

    def __init__(self, argument: str) -> None:
        super().__init__(
            argument,
            f"Malformed key-value pair: `{argument}`",
            hint=PAIR_SYNTAX,
        )


class PairBadSignError(MalformedArgumentError):
    """The equal sign of a pair leaves the key or the value empty."""

    def __init__(self, argument: str) -> None:
        super().__init__(
            argument,
            f"Improper use of equal sign in key-value pair: `{argument}`",
            hint=PAIR_SYNTAX,
        )


class DashesMalformedError(MalformedArgumentError):
    """A token starts with three or more dashes."""

    def __init__(self, argument: str) -> None:
        super().__init__(
            argument,
            f"Arguments cannot start with 3 or more dash lines: `{argument}`",
        )
