"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from needful.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="construct", data={"type": "Form"})
        assert result.ok is True
        assert result.op == "construct"
        assert result.data == {"type": "Form"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None
        assert result.value is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="MISSING_PARAMETERS", message="Missing parameter: a")
        result = ServiceResult(ok=False, op="construct", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "MISSING_PARAMETERS"

    def test_value_not_serialized(self) -> None:
        result = ServiceResult(ok=True, op="construct", value=object())
        parsed = json.loads(result.model_dump_json())
        assert "value" not in parsed
        assert parsed["ok"] is True

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="UNKNOWN_PARAMETER",
            message="Unknown parameter 'b'",
            detail={"parameter": "b", "accepted": ["a"]},
        )
        assert error.detail["accepted"] == ["a"]

    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}
