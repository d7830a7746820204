"""Shared pytest fixtures for needful tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from needful.config.settings import NeedfulSettings


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    needful_logger = logging.getLogger("needful")
    needful_level = needful_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    needful_logger.setLevel(needful_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no needful.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.delenv("NEEDFUL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> NeedfulSettings:
    """Settings resolved from an empty directory (code defaults only)."""
    monkeypatch.delenv("NEEDFUL_CONFIG", raising=False)
    return NeedfulSettings.from_cli(start=tmp_path)
