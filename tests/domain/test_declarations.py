"""Tests for declaration models and argument normalization."""

import pytest

from needful.domain.declarations import (
    NO_PARAMETERS,
    NoParameters,
    ParameterDefaults,
    RequiredParameter,
    to_declaration,
)


class TestToDeclaration:
    def test_none_is_no_parameters(self) -> None:
        assert to_declaration(None) is NO_PARAMETERS

    def test_string_is_required(self) -> None:
        decl = to_declaration("title")
        assert isinstance(decl, RequiredParameter)
        assert decl.name == "title"

    def test_mapping_is_defaults(self) -> None:
        decl = to_declaration({"show_okay": True})
        assert isinstance(decl, ParameterDefaults)
        assert decl.values == {"show_okay": True}

    def test_mapping_is_copied(self) -> None:
        source = {"size": 3}
        decl = to_declaration(source)
        source["size"] = 4
        assert isinstance(decl, ParameterDefaults)
        assert decl.values == {"size": 3}

    def test_declaration_passes_through(self) -> None:
        decl = RequiredParameter(name="a")
        assert to_declaration(decl) is decl

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="Cannot declare"):
            to_declaration(42)

    def test_rejects_non_string_keys(self) -> None:
        with pytest.raises(TypeError, match="must be strings"):
            to_declaration({1: "one"})


class TestDeclarationModels:
    def test_names(self) -> None:
        assert RequiredParameter(name="a").names() == ("a",)
        assert ParameterDefaults(values={"b": 1, "c": 2}).names() == ("b", "c")
        assert NoParameters().names() == ()

    def test_frozen(self) -> None:
        decl = RequiredParameter(name="a")
        with pytest.raises(Exception):
            decl.name = "b"  # type: ignore[misc]

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(Exception):
            RequiredParameter(name="")
