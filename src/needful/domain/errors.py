"""Contract errors raised while declaring contracts or constructing instances.

Every error subclasses :class:`RuntimeError`, so code that only expects a
generic runtime error keeps working. The ``code`` and ``detail`` attributes
feed :class:`~needful.services.result.ServiceError` at the service boundary.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar


class ContractError(RuntimeError):
    """Base class for every parameter-contract failure."""

    code: ClassVar[str] = "CONTRACT_ERROR"

    def __init__(self, message: str, *, type_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.type_name = type_name

    @property
    def detail(self) -> dict[str, Any]:
        """Structured payload describing the failure."""
        return {"type": self.type_name} if self.type_name else {}


class MissingParametersError(ContractError):
    """One or more required parameters were not supplied and have no default."""

    code: ClassVar[str] = "MISSING_PARAMETERS"

    def __init__(self, missing: Sequence[str], *, type_name: str | None = None) -> None:
        self.missing = tuple(missing)
        plural = "" if len(self.missing) == 1 else "s"
        super().__init__(
            f"Missing parameter{plural}: {', '.join(self.missing)}",
            type_name=type_name,
        )

    @property
    def detail(self) -> dict[str, Any]:
        return {**super().detail, "missing": list(self.missing)}


class UnknownParameterError(ContractError):
    """A supplied parameter is outside the declared contract."""

    code: ClassVar[str] = "UNKNOWN_PARAMETER"

    def __init__(
        self,
        name: str,
        accepted: Sequence[str],
        *,
        type_name: str | None = None,
    ) -> None:
        self.name = name
        self.accepted = tuple(accepted)
        owner = type_name or "This type"
        if self.accepted:
            accepts = f"accepts only {', '.join(self.accepted)}"
        else:
            accepts = "accepts no parameters"
        super().__init__(f"Unknown parameter '{name}'. {owner} {accepts}", type_name=type_name)

    @property
    def detail(self) -> dict[str, Any]:
        return {**super().detail, "parameter": self.name, "accepted": list(self.accepted)}


class ContractAuthoringError(ContractError):
    """A type's own declarations contradict each other."""

    code: ClassVar[str] = "AUTHORING_ERROR"
