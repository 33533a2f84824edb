"""Rendering of a :class:`~cliparser.core.models.ParseResult`.

Three output formats are supported:

* ``table`` — Rich table on stderr, falling back to ``plain`` when
  Rich is not installed.
* ``plain`` — fixed-width text on stderr.
* ``json``  — machine-readable document on stdout.
"""

from __future__ import annotations

import json
import sys

from cliparser.cli.console import console, rich_available
from cliparser.core.models import ParseResult, TokenKind

FORMATS: tuple[str, ...] = ("table", "plain", "json")

Row = tuple[str, str, str]


def result_rows(result: ParseResult) -> list[Row]:
    """Flatten *result* into ``(kind, name, value)`` rows.

    Positionals are named by their index; flags carry no value.  Flags
    and pairs are sorted by name so output is stable.
    """
    rows: list[Row] = [
        (TokenKind.POSITIONAL.value, f"[{index}]", value)
        for index, value in enumerate(result.positionals)
    ]
    rows.extend((TokenKind.FLAG.value, name, "") for name in sorted(result.flags))
    rows.extend(
        (TokenKind.PAIR.value, key, value)
        for key, value in sorted(result.pairs.items())
    )
    return rows


def result_to_dict(result: ParseResult) -> dict[str, object]:
    return {
        "positionals": list(result.positionals),
        "flags": sorted(result.flags),
        "pairs": dict(sorted(result.pairs.items())),
    }


def render_json(result: ParseResult) -> str:
    return json.dumps(result_to_dict(result), indent=2, ensure_ascii=False)


def render_plain(result: ParseResult) -> str:
    lines = [f"{'Kind':<12} {'Name':<24} {'Value'}", "-" * 56]
    lines.extend(
        f"{kind:<12} {name:<24} {value}" for kind, name, value in result_rows(result)
    )
    return "\n".join(lines)


def _print_rich_table(result: ParseResult) -> None:
    from rich.markup import escape
    from rich.table import Table

    table = Table(
        title="cliparser",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Kind", style="bold", min_width=10)
    table.add_column("Name", min_width=12)
    table.add_column("Value")

    for kind, name, value in result_rows(result):
        table.add_row(kind, escape(name), escape(value))

    console.print(table)


def print_result(result: ParseResult, output_format: str = "table") -> None:
    """Write *result* in *output_format* to the appropriate stream."""
    if output_format not in FORMATS:
        raise ValueError(f"Unknown output format: {output_format}")

    if output_format == "json":
        print(render_json(result))
        return

    if output_format == "table" and rich_available():
        _print_rich_table(result)
        return

    print(render_plain(result), file=sys.stderr)
