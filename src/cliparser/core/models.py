"""Domain models for cliparser.

All models are **frozen** dataclasses or enums — immutable values with
no I/O and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


SEPARATOR: str = "="
"""Character splitting a two-dash token into key and value."""

DASH: str = "-"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TokenKind(enum.Enum):
    """Container a single raw token is routed to."""

    POSITIONAL = "positional"
    FLAG = "flag"
    PAIR = "pair"


class DashPolicy(enum.Enum):
    """How tokens outside the well-formed 0/1/2 dash grammar are handled.

    ``LENIENT`` never rejects a token: a two-dash token without a
    separator becomes a flag, and three or more dashes are read as two
    significant dashes followed by the remainder.  ``STRICT`` raises a
    :class:`~cliparser.exceptions.MalformedArgumentError` instead.
    """

    LENIENT = "lenient"
    STRICT = "strict"


# ---------------------------------------------------------------------------
# Parse result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseResult:
    """The three classified containers for one argument vector.

    Inputs are copied on construction, so a result never aliases a
    caller-held list, set or dict.
    """

    positionals: tuple[str, ...] = ()
    """Zero-dash tokens in input order, program path included."""

    flags: frozenset[str] = frozenset()
    """One-dash tokens with the dash stripped."""

    pairs: Mapping[str, str] = field(default_factory=dict)
    """Two-dash ``key=value`` tokens; read-only view."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "positionals", tuple(self.positionals))
        object.__setattr__(self, "flags", frozenset(self.flags))
        object.__setattr__(self, "pairs", MappingProxyType(dict(self.pairs)))

    def __len__(self) -> int:
        return len(self.positionals) + len(self.flags) + len(self.pairs)

    @property
    def program(self) -> str | None:
        """The invocation path (first positional), if any."""
        return self.positionals[0] if self.positionals else None

    @property
    def is_empty(self) -> bool:
        """``True`` when nothing beyond the program path was supplied."""
        return not self.flags and not self.pairs and len(self.positionals) <= 1

    def has_flag(self, name: str) -> bool:
        return name in self.flags

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.pairs.get(key, default)

    def to_tokens(self) -> list[str]:
        """Rebuild a token list that classifies back to this result.

        Positionals come first in input order, then flags and
        pairs sorted by name.  A flag whose name itself starts with a
        dash is emitted with two dashes so the lenient demotion rule
        restores it unchanged.
        """
        tokens: list[str] = list(self.positionals)
        for name in sorted(self.flags):
            prefix = DASH * 2 if name.startswith(DASH) else DASH
            tokens.append(prefix + name)
        tokens.extend(
            f"{DASH * 2}{key}{SEPARATOR}{value}"
            for key, value in sorted(self.pairs.items())
        )
        return tokens

    @classmethod
    def from_parts(
        cls,
        positionals: Iterable[str] = (),
        flags: Iterable[str] = (),
        pairs: Mapping[str, str] | None = None,
    ) -> ParseResult:
        return cls(
            positionals=tuple(positionals),
            flags=frozenset(flags),
            pairs=dict(pairs or {}),
        )
