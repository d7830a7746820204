"""Tests for the format_result dispatcher and OutputSettings."""

import json

from needful.output.formatters import OutputSettings, format_result
from needful.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("construct", type="Form"), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "construct"
        assert data["data"]["type"] == "Form"

    def test_json_mode_error(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_err("construct", "Bad"), settings=settings)
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["ok"] is True

    def test_quiet(self) -> None:
        output = format_result(_ok("construct"), settings=OutputSettings(quiet=True))
        assert output == "OK: construct"

    def test_quiet_error(self) -> None:
        output = format_result(_err("construct", "Bad"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: construct — Bad"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok("other", key="val"))
        assert "OK" in output
        assert "key: val" in output
