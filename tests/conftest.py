"""Shared pytest fixtures and configuration for the cliparser test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* ``sys.argv`` is only ever replaced through ``monkeypatch``.
"""

from __future__ import annotations

import logging

import pytest


@pytest.fixture
def fake_argv(monkeypatch: pytest.MonkeyPatch):
    """Replace ``sys.argv`` with the given tokens for one test."""

    def _set(*tokens: str) -> list[str]:
        argv = list(tokens)
        monkeypatch.setattr("sys.argv", argv)
        return argv

    return _set


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo handlers installed by ``configure_logging`` between tests."""
    yield
    logger = logging.getLogger("cliparser")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
