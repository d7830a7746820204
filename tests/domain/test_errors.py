"""Tests for contract error messages and structured detail."""

from needful.domain.errors import (
    ContractError,
    MissingParametersError,
    UnknownParameterError,
)


class TestMissingParametersError:
    def test_singular(self) -> None:
        err = MissingParametersError(["a"], type_name="Form")
        assert str(err) == "Missing parameter: a"

    def test_plural_joined_in_order(self) -> None:
        err = MissingParametersError(["b", "a"])
        assert str(err) == "Missing parameters: b, a"

    def test_detail(self) -> None:
        err = MissingParametersError(["a"], type_name="Form")
        assert err.code == "MISSING_PARAMETERS"
        assert err.detail == {"type": "Form", "missing": ["a"]}


class TestUnknownParameterError:
    def test_message_lists_accepted(self) -> None:
        err = UnknownParameterError("b", ["a"], type_name="OnlyA")
        assert str(err) == "Unknown parameter 'b'. OnlyA accepts only a"

    def test_no_parameters_message(self) -> None:
        err = UnknownParameterError("x", [], type_name="Closed")
        assert str(err) == "Unknown parameter 'x'. Closed accepts no parameters"

    def test_detail(self) -> None:
        err = UnknownParameterError("b", ["a", "c"], type_name="Form")
        assert err.code == "UNKNOWN_PARAMETER"
        assert err.detail == {"type": "Form", "parameter": "b", "accepted": ["a", "c"]}


class TestHierarchy:
    def test_all_are_runtime_errors(self) -> None:
        assert issubclass(MissingParametersError, ContractError)
        assert issubclass(UnknownParameterError, ContractError)
        assert issubclass(ContractError, RuntimeError)
