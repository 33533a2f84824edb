"""Pure token classification by leading-dash count.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Grammar
-------
* ``value``        — zero dashes → positional, kept verbatim.
* ``-name``        — one dash    → flag ``name``.
* ``--key=value``  — two dashes  → pair ``key → value`` split on the
  first ``=``.

Anything else is resolved by the :class:`~cliparser.core.models.DashPolicy`
passed to :func:`classify`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cliparser.core.models import DASH, SEPARATOR, DashPolicy, ParseResult, TokenKind
from cliparser.exceptions import (
    DashesMalformedError,
    FlagWithSignError,
    MalformedFlagError,
    PairBadSignError,
    PairMalformedError,
    PairMissingSignError,
)

logger = logging.getLogger(__name__)

Classification = tuple[TokenKind, str, str | None]
"""``(kind, name, value)`` — *value* is only set for pairs."""

_MIN_PAIR_LENGTH = 5


def count_leading_dashes(token: str) -> int:
    """Return the number of ``-`` characters at the start of *token*."""
    return len(token) - len(token.lstrip(DASH))


# ---------------------------------------------------------------------------
# Per-class rules
# ---------------------------------------------------------------------------

def _flag(token: str, policy: DashPolicy) -> Classification:
    name = token[1:]
    if policy is DashPolicy.STRICT:
        if SEPARATOR in name:
            raise FlagWithSignError(token)
        if not name:
            raise MalformedFlagError(token)
    return TokenKind.FLAG, name, None


def _pair(token: str, policy: DashPolicy) -> Classification:
    body = token[2:]
    if SEPARATOR not in body:
        if policy is DashPolicy.STRICT:
            raise PairMissingSignError(token)
        # Demote to a flag named by the dash-stripped text.
        return TokenKind.FLAG, body, None

    key, value = body.split(SEPARATOR, 1)
    if policy is DashPolicy.STRICT:
        if len(token) < _MIN_PAIR_LENGTH:
            raise PairMalformedError(token)
        if not key or not value:
            raise PairBadSignError(token)
    return TokenKind.PAIR, key, value


def classify_token(
    token: str,
    *,
    policy: DashPolicy = DashPolicy.LENIENT,
) -> Classification:
    """Classify a single raw token.

    Raises
    ------
    MalformedArgumentError
        Only under :attr:`DashPolicy.STRICT`, for the first rule the
        token violates.
    """
    dashes = count_leading_dashes(token)
    if dashes == 0:
        return TokenKind.POSITIONAL, token, None
    if dashes == 1:
        return _flag(token, policy)
    if dashes >= 3 and policy is DashPolicy.STRICT:
        raise DashesMalformedError(token)
    # Three or more dashes: only the first two are significant.
    return _pair(token, policy)


# ---------------------------------------------------------------------------
# Full pass
# ---------------------------------------------------------------------------

def classify(
    tokens: Sequence[str],
    *,
    policy: DashPolicy = DashPolicy.LENIENT,
) -> ParseResult:
    """Route every token in *tokens* to exactly one container.

    Positionals keep their input order (the program path at index 0 is
    included).  Flags collapse duplicates; pairs keep the last value
    seen for a key.  Under the strict policy the first malformed token
    aborts the whole pass and no result is returned.
    """
    positionals: list[str] = []
    flags: set[str] = set()
    pairs: dict[str, str] = {}

    for token in tokens:
        kind, name, value = classify_token(token, policy=policy)
        logger.debug("routed %r as %s", token, kind.value)
        if kind is TokenKind.POSITIONAL:
            positionals.append(name)
        elif kind is TokenKind.FLAG:
            flags.add(name)
        else:
            if name in pairs:
                logger.debug("pair %r overwritten by %r", name, token)
            pairs[name] = value if value is not None else ""

    return ParseResult(
        positionals=tuple(positionals),
        flags=frozenset(flags),
        pairs=pairs,
    )
