"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, needful.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# --- needful.toml sections ---


class LoaderConfig(BaseModel):
    """[loader] section."""

    model_config = {"frozen": True}

    search_paths: list[str] = Field(default_factory=list)


class LintConfig(BaseModel):
    """[lint] section."""

    model_config = {"frozen": True}

    fail_on_warning: bool = False


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    format: Literal["human", "json"] = "human"


class NeedfulConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
