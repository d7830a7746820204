"""Per-type contract storage.

Each class keeps its own :class:`Contract` in its ``__dict__`` under
:data:`CONTRACT_ATTR`. Reading through ``__dict__`` (never ``getattr``) keeps
a subclass from picking up its parent's declarations as its own; ancestors
are merged explicitly by :mod:`needful.domain.resolver`.
"""

from __future__ import annotations

import logging
from typing import Any

from needful.domain.contract import EMPTY_CONTRACT, Contract, ContractBuilder
from needful.domain.declarations import Declaration
from needful.domain.resolver import HasContract

logger = logging.getLogger(__name__)

CONTRACT_ATTR = "__needful_contract__"


def own_contract(cls: type) -> Contract:
    """The contract *cls* declared itself, ignoring its ancestors."""
    contract = cls.__dict__.get(CONTRACT_ATTR, EMPTY_CONTRACT)
    assert isinstance(contract, Contract)
    return contract


def declare(
    cls: type,
    *parameters: object,
    prepend: bool = False,
    **defaults: Any,
) -> Contract:
    """Add declarations to *cls*'s own contract and return the new contract.

    With *prepend* the new declarations go before the existing ones; stacked
    class decorators use it to keep their source order.
    """
    existing = own_contract(cls)
    if prepend:
        builder = ContractBuilder(cls.__qualname__).need(*parameters, **defaults)
        builder.need(*existing.declarations)
    else:
        builder = ContractBuilder(cls.__qualname__, base=existing)
        builder.need(*parameters, **defaults)
    contract = builder.build()
    setattr(cls, CONTRACT_ATTR, contract)
    logger.debug("Declared parameters for %s: %s", cls.__qualname__, contract.names())
    return contract


class TypeNode:
    """:class:`HasContract` view of a Python class, walking its MRO."""

    __slots__ = ("cls",)

    def __init__(self, cls: type) -> None:
        self.cls = cls

    @property
    def name(self) -> str:
        return self.cls.__name__

    def own_declarations(self) -> tuple[Declaration, ...]:
        return own_contract(self.cls).declarations

    def ancestors(self) -> list[TypeNode]:
        return [TypeNode(base) for base in self.cls.__mro__[1:] if base is not object]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TypeNode) and other.cls is self.cls

    def __hash__(self) -> int:
        return hash(self.cls)

    def __repr__(self) -> str:
        return f"TypeNode({self.cls.__qualname__})"


def contract_node(target: type | HasContract) -> HasContract:
    """Adapt a class to :class:`HasContract`; contract nodes pass through."""
    if isinstance(target, type):
        return TypeNode(target)
    if isinstance(target, HasContract):
        return target
    msg = f"Expected a class or contract node, got {type(target).__name__}"
    raise TypeError(msg)
