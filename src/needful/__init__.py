"""needful — declarative parameter contracts for Python classes.

Declare which keyword parameters a class accepts, which are required and
which have defaults; construction then rejects missing and unknown ones::

    from needful import Needful, needs

    @needs("title", show_okay=True)
    class FancyForm(Needful):
        pass

    FancyForm(title="Login").show_okay  # True
"""

from __future__ import annotations

from needful.domain.contract import EMPTY_CONTRACT, Contract, ContractBuilder
from needful.domain.declarations import (
    NO_PARAMETERS,
    Declaration,
    NoParameters,
    ParameterDefaults,
    RequiredParameter,
)
from needful.domain.errors import (
    ContractAuthoringError,
    ContractError,
    MissingParametersError,
    UnknownParameterError,
)
from needful.domain.needs import Needful, needs
from needful.domain.registry import contract_node, declare, own_contract
from needful.domain.resolver import (
    ContractNode,
    HasContract,
    declares_no_parameters,
    default_values,
    required_names,
    resolved_contract,
)
from needful.domain.validator import InstanceValidator
from needful.services.contract import ContractService, construct
from needful.services.result import ServiceError, ServiceResult

__version__ = "0.1.0"

__all__ = [
    "EMPTY_CONTRACT",
    "NO_PARAMETERS",
    "Contract",
    "ContractAuthoringError",
    "ContractBuilder",
    "ContractError",
    "ContractNode",
    "ContractService",
    "Declaration",
    "HasContract",
    "InstanceValidator",
    "MissingParametersError",
    "Needful",
    "NoParameters",
    "ParameterDefaults",
    "RequiredParameter",
    "ServiceError",
    "ServiceResult",
    "UnknownParameterError",
    "__version__",
    "construct",
    "contract_node",
    "declare",
    "declares_no_parameters",
    "default_values",
    "needs",
    "own_contract",
    "required_names",
    "resolved_contract",
]
