"""Tests for service payload contracts."""

import pytest
from pydantic import ValidationError

from needful.services.contracts import (
    ConstructResultData,
    LintResultData,
    dump_validated,
)


class TestDumpValidated:
    def test_normalizes_payload(self) -> None:
        data = dump_validated(ConstructResultData, {"type": "Form", "parameters": {"a": 1}})
        assert data == {"type": "Form", "parameters": {"a": 1}, "defaulted": []}

    def test_rejects_missing_keys(self) -> None:
        with pytest.raises(ValidationError):
            dump_validated(ConstructResultData, {"type": "Form"})

    def test_rejects_bad_severity(self) -> None:
        payload = {
            "type": "Form",
            "issues": [{"category": "x", "severity": "fatal", "type": "Form", "message": "m"}],
            "count": 1,
            "error_count": 1,
            "warning_count": 0,
            "healthy": False,
        }
        with pytest.raises(ValidationError):
            dump_validated(LintResultData, payload)
