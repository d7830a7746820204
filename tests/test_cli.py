"""Tests for the root CLI group."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from needful import __version__
from needful.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestRootGroup:
    def test_no_command_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "describe" in result.output
        assert "check" in result.output
        assert "lint" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_explicit_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[output]\nformat = "json"\n')
        result = cli_runner.invoke(cli, ["-c", str(config), "describe", "tests.widgets:Base"])
        assert result.exit_code == 0
        assert result.stdout.lstrip().startswith("{")
