"""Regression tests for the optional Rich dependency.

Bootstrap commands and every output format must keep working when Rich
cannot be imported.
"""

from __future__ import annotations

import logging
import sys

import pytest

from cliparser.cli import exit_codes
from cliparser.cli.app import main
from cliparser.cli.console import configure_logging, console, get_rich_console


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_table_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["--", "./prog", "-v", "--k=1"])
    assert code == exit_codes.SUCCESS
    assert "./prog" in capsys.readouterr().err


def test_console_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert get_rich_console() is None
    console.print("hello", markup=False)
    assert capsys.readouterr().err == "hello\n"


def test_logging_without_rich_uses_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    configure_logging(verbose=False)
    logger = logging.getLogger("cliparser")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]) is logging.StreamHandler
