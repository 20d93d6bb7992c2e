"""Shared pytest fixtures for snippetkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog
from click.testing import CliRunner

from snippetkit.diagnostics import CollectingSink, use_sink


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sink() -> Generator[CollectingSink]:
    """Collecting diagnostic sink, active for the whole test."""
    collector = CollectingSink()
    with use_sink(collector):
        yield collector


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo logging configuration done by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    kit = logging.getLogger("snippetkit")
    kit_level = kit.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    kit.setLevel(kit_level)
    structlog.reset_defaults()


@pytest.fixture
def _isolated_cwd(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config discovery overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SNIPPETKIT_CONFIG", raising=False)
