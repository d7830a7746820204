"""Tests for module:Class target loading."""

import sys
from pathlib import Path

import pytest

from needful.infrastructure.loader import TargetLoadError, load_target
from tests.widgets import FancyForm, Outer


class TestLoadTarget:
    def test_loads_class(self) -> None:
        assert load_target("tests.widgets:FancyForm") is FancyForm

    def test_nested_qualname(self) -> None:
        assert load_target("tests.widgets:Outer.Inner") is Outer.Inner

    @pytest.mark.parametrize("target", ["tests.widgets", ":FancyForm", "tests.widgets:"])
    def test_malformed(self, target: str) -> None:
        with pytest.raises(TargetLoadError, match="Expected 'module:Class'"):
            load_target(target)

    def test_missing_module(self) -> None:
        with pytest.raises(TargetLoadError, match="Cannot import module"):
            load_target("tests.no_such_module:Thing")

    def test_missing_attribute(self) -> None:
        with pytest.raises(TargetLoadError, match="has no attribute"):
            load_target("tests.widgets:Nope")

    def test_not_a_class(self) -> None:
        with pytest.raises(TargetLoadError, match="not a class"):
            load_target("tests.widgets:needs")

    def test_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            load_target("bad")

    def test_search_paths(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "path", list(sys.path))
        module = tmp_path / "needful_loader_probe.py"
        module.write_text(
            "from needful import Needful, needs\n\n"
            "@needs('label')\n"
            "class Probe(Needful):\n"
            "    pass\n"
        )
        cls = load_target("needful_loader_probe:Probe", [tmp_path])
        assert cls.__name__ == "Probe"
        assert str(tmp_path) in sys.path
        sys.modules.pop("needful_loader_probe", None)
