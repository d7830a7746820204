"""Resolve the effective contract of a type from its ancestor chain.

Resolution works over the :class:`HasContract` protocol rather than Python
classes directly, so the merge order is explicit: a node's own declarations
come first, followed by those of each ancestor in resolution order.

All functions here are pure. They recompute from the chain on every call and
return fresh containers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from needful.domain.contract import EMPTY_CONTRACT, Contract
from needful.domain.declarations import Declaration, NoParameters, ParameterDefaults
from needful.domain.errors import ContractAuthoringError


@runtime_checkable
class HasContract(Protocol):
    """Anything that owns declarations and has a chain of ancestors."""

    @property
    def name(self) -> str: ...

    def own_declarations(self) -> tuple[Declaration, ...]: ...

    def ancestors(self) -> Sequence[HasContract]:
        """Every ancestor in resolution order, the node itself excluded."""
        ...


@dataclass(frozen=True, eq=False)
class ContractNode:
    """Explicit contract chain that does not rely on class inheritance.

    Nodes compare and hash by identity. Ancestors are ordered by C3
    linearization, the same rule Python uses for a class MRO, so a shared
    ancestor always comes after every node that derives from it.
    """

    name: str
    contract: Contract = EMPTY_CONTRACT
    parents: tuple[ContractNode, ...] = field(default=())

    def own_declarations(self) -> tuple[Declaration, ...]:
        return self.contract.declarations

    def ancestors(self) -> list[ContractNode]:
        return _linearize(self)[1:]


def _linearize(node: ContractNode) -> list[ContractNode]:
    sequences = [_linearize(parent) for parent in node.parents]
    sequences.append(list(node.parents))
    order = [node]
    while True:
        sequences = [seq for seq in sequences if seq]
        if not sequences:
            return order
        for seq in sequences:
            head = seq[0]
            if not any(head in other[1:] for other in sequences):
                break
        else:
            msg = f"Cannot linearize the parents of {node.name}"
            raise ContractAuthoringError(msg, type_name=node.name)
        order.append(head)
        for seq in sequences:
            if seq[0] is head:
                del seq[0]


def resolved_contract(node: HasContract) -> list[Declaration]:
    """Own declarations followed by every ancestor's, most-derived first."""
    declarations = list(node.own_declarations())
    for ancestor in node.ancestors():
        declarations.extend(ancestor.own_declarations())
    return declarations


def required_names(node: HasContract) -> tuple[str, ...]:
    """Every declared name, with or without a default, in declared order."""
    seen: dict[str, None] = {}
    for declaration in resolved_contract(node):
        for name in declaration.names():
            seen.setdefault(name, None)
    return tuple(seen)


def default_values(node: HasContract) -> dict[str, Any]:
    """Fold all default mappings; the most-derived default for a name wins."""
    defaults: dict[str, Any] = {}
    for declaration in resolved_contract(node):
        if isinstance(declaration, ParameterDefaults):
            for name, value in declaration.values.items():
                defaults.setdefault(name, value)
    return defaults


def declares_no_parameters(node: HasContract) -> bool:
    """Whether any type in the chain declared that it takes no parameters."""
    return any(isinstance(d, NoParameters) for d in resolved_contract(node))
