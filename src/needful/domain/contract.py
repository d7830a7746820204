"""Contract value and the builder that freezes it.

A :class:`ContractBuilder` collects declarations while a type is being
defined, checks them for authoring mistakes and freezes them into an
immutable :class:`Contract`.

INVARIANT: A built contract never changes. Adding declarations later means
building a new contract from the old one.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from needful.domain.declarations import (
    Declaration,
    NoParameters,
    ParameterDefaults,
    RequiredParameter,
    to_declaration,
)
from needful.domain.errors import ContractAuthoringError

logger = logging.getLogger(__name__)


class Contract(BaseModel):
    """The ordered declarations one type makes about its own parameters."""

    model_config = {"frozen": True}

    declarations: tuple[Declaration, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.declarations

    def names(self) -> tuple[str, ...]:
        """Names declared by this contract alone, in declaration order."""
        seen: dict[str, None] = {}
        for declaration in self.declarations:
            for name in declaration.names():
                seen.setdefault(name, None)
        return tuple(seen)


EMPTY_CONTRACT = Contract()


class ContractBuilder:
    """Collect declarations for one type, then freeze them.

    Usage::

        contract = ContractBuilder("FancyForm").need("title", show_okay=True).build()
    """

    def __init__(self, owner: str = "<anonymous>", base: Contract | None = None) -> None:
        self._owner = owner
        self._declarations: list[Declaration] = list(base.declarations) if base else []

    def need(self, *parameters: object, **defaults: Any) -> ContractBuilder:
        """Append declarations; keyword defaults form one trailing mapping."""
        for parameter in parameters:
            self._declarations.append(to_declaration(parameter))
        if defaults:
            self._declarations.append(ParameterDefaults(values=defaults))
        return self

    def build(self) -> Contract:
        """Validate the collected declarations and return a frozen contract."""
        _check_authoring(self._owner, self._declarations)
        contract = Contract(declarations=tuple(self._declarations))
        logger.debug("Built contract for %s: %s", self._owner, contract.names())
        return contract


def _check_authoring(owner: str, declarations: list[Declaration]) -> None:
    """Reject declarations of one type that contradict each other."""
    if any(isinstance(d, NoParameters) for d in declarations) and len(declarations) > 1:
        msg = f"{owner} declares no parameters together with other parameters"
        raise ContractAuthoringError(msg, type_name=owner)

    required = {d.name for d in declarations if isinstance(d, RequiredParameter)}
    defaulted = {
        name for d in declarations if isinstance(d, ParameterDefaults) for name in d.values
    }
    conflicting = sorted(required & defaulted)
    if conflicting:
        msg = (
            f"{owner} declares {', '.join(conflicting)} both as required "
            f"and with a default value"
        )
        raise ContractAuthoringError(msg, type_name=owner)
