"""Typed payload contracts for service results.

These models validate operation payload shapes before they leave the
service layer so key regressions fail fast in tests and during development.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ChainEntry(BaseModel):
    """One type in a resolved chain and the names it declares itself."""

    type: str
    declared: list[str]
    no_parameters: bool = False


class ContractDescriptionData(BaseModel):
    """Payload contract for ``ContractService.describe``."""

    type: str
    has_contract: bool
    no_parameters: bool
    accepted: list[str]
    required: list[str]
    defaults: dict[str, Any] = Field(default_factory=dict)
    chain: list[ChainEntry] = Field(default_factory=list)


class ConstructResultData(BaseModel):
    """Payload contract for ``ContractService.construct``."""

    type: str
    parameters: dict[str, Any]
    defaulted: list[str] = Field(default_factory=list)


class LintIssue(BaseModel):
    """One authoring finding returned by ``ContractService.lint``."""

    category: str
    severity: Literal["warning", "error"]
    type: str
    parameter: str | None = None
    message: str


class LintResultData(BaseModel):
    """Payload contract for ``ContractService.lint``."""

    type: str
    issues: list[LintIssue]
    count: int
    error_count: int
    warning_count: int
    healthy: bool
