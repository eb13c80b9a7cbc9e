"""Shared pytest fixtures for albumctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from albumctl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory so no albumctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ALBUMCTL_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("ALBUMCTL_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by the CLI root group."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    album_logger = logging.getLogger("albumctl")
    album_level = album_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    album_logger.setLevel(album_level)
    disable_telemetry()
    _current_span.set(None)
