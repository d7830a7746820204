"""Tests for the lint command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from needful.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestLintCommand:
    def test_clean(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["lint", "tests.widgets:Derived"])
        assert result.exit_code == 0
        assert "No issues found" in result.stdout

    def test_warning_passes_by_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "lint", "tests.widgets:RequiresInherited"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["warning_count"] == 1
        assert data["data"]["healthy"] is False

    def test_error_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "lint", "tests.widgets:ReopenedClosed"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "LINT_FAILED"

    def test_fail_on_warning_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "needful.toml").write_text("[lint]\nfail_on_warning = true\n")
        result = cli_runner.invoke(cli, ["lint", "tests.widgets:OverridesDefault"])
        assert result.exit_code == 1
        assert "default_overridden" in result.stderr
