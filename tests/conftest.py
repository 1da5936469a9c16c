"""Shared pytest fixtures and test helpers for formfield tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects after each test.

    CLI invocations bind a handler to CliRunner's temporary stderr, which
    is closed once the invocation returns.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ff = logging.getLogger("formfield")
    ff_level = ff.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ff.setLevel(ff_level)
    structlog.reset_defaults()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config overrides in the env.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("FORMFIELD_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class RecordingLogger:
    """Stand-in for an injected structlog logger; records debug events."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def debug(self, event: str, **kw: Any) -> None:
        self.events.append((event, kw))


def row_for(rows: list[dict[str, Any]], name: str) -> dict[str, Any]:
    """Find the rendered row for field *name*, asserting it exists."""
    for row in rows:
        if row["name"] == name:
            return row
    raise AssertionError(f"no row for {name!r}")
