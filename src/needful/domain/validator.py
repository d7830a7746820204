"""Instance validation against a resolved parameter contract.

An :class:`InstanceValidator` is created once per constructed instance. It
resolves the contract for the instance's type, applies defaults, and fails
fast on unknown or missing parameters.

INVARIANT: A type whose chain declares nothing accepts any parameters.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import cached_property
from typing import Any

from needful.domain.errors import MissingParametersError, UnknownParameterError
from needful.domain.registry import contract_node
from needful.domain.resolver import (
    HasContract,
    declares_no_parameters,
    default_values,
    required_names,
)

logger = logging.getLogger(__name__)


class InstanceValidator:
    """Reconcile a parameter bag with the contract of one type.

    Usage::

        validator = InstanceValidator(FancyForm)
        params = validator.reconcile({"title": "Login"})
    """

    def __init__(self, target: type | HasContract) -> None:
        self._node = contract_node(target)

    @property
    def type_name(self) -> str:
        return self._node.name

    @cached_property
    def needed(self) -> tuple[str, ...]:
        """Accepted parameter names, in declared order."""
        return required_names(self._node)

    @cached_property
    def needed_defaults(self) -> dict[str, Any]:
        return default_values(self._node)

    @cached_property
    def _no_parameters(self) -> bool:
        return declares_no_parameters(self._node)

    def has_contract(self) -> bool:
        return bool(self.needed) or self._no_parameters

    def is_unknown_parameter(self, name: str) -> bool:
        return self.has_contract() and name not in self.needed

    def check_parameter(self, name: str) -> None:
        """Raise :class:`UnknownParameterError` if *name* is not accepted."""
        if self.is_unknown_parameter(name):
            raise UnknownParameterError(name, self.needed, type_name=self.type_name)

    def reconcile(self, bag: Mapping[str, Any]) -> dict[str, Any]:
        """Return a copy of *bag* with defaults applied.

        Raises:
            MissingParametersError: required names are still unassigned after
                defaults were applied. All of them are reported at once.
        """
        reconciled = dict(bag)
        for name, value in self.needed_defaults.items():
            if name not in reconciled:
                reconciled[name] = value

        missing = [name for name in self.needed if name not in reconciled]
        if missing:
            raise MissingParametersError(missing, type_name=self.type_name)
        return reconciled

    def assign_one(self, target: object, name: str, value: Any) -> None:
        """Set one parameter on *target* after checking it is accepted."""
        self.check_parameter(name)
        setattr(target, name, value)

    def apply(self, target: object, bag: Mapping[str, Any]) -> dict[str, Any]:
        """Assign a full parameter bag to *target*, defaults included.

        Supplied parameters are assigned first, in order, and the first
        unknown one stops construction. Defaults are assigned afterwards.
        """
        for name, value in bag.items():
            self.assign_one(target, name, value)

        reconciled = self.reconcile(bag)
        for name, value in reconciled.items():
            if name not in bag:
                self.assign_one(target, name, value)

        logger.debug(
            "Reconciled %s parameters: supplied=%s defaulted=%s",
            self.type_name,
            list(bag),
            [name for name in reconciled if name not in bag],
        )
        return reconciled
