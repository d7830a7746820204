"""ContractService — describe, construct and lint parameter contracts.

``construct`` is the typed entry point: it reports contract violations as
``ok=False`` results instead of raising, so callers can branch on
``result.error.code`` rather than on exception messages.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from needful.domain.declarations import NoParameters, ParameterDefaults, RequiredParameter
from needful.domain.errors import ContractError
from needful.domain.needs import Needful
from needful.domain.registry import contract_node
from needful.domain.resolver import HasContract
from needful.domain.validator import InstanceValidator
from needful.services.base import BaseService
from needful.services.contracts import (
    ConstructResultData,
    ContractDescriptionData,
    LintResultData,
    dump_validated,
)
from needful.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool, type(None))


def _jsonable(value: Any) -> Any:
    """Keep JSON-friendly values, fall back to ``repr`` for everything else."""
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, list | tuple):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict) and all(isinstance(k, str) for k in value):
        return {k: _jsonable(v) for k, v in value.items()}
    return repr(value)


class ContractService(BaseService):
    """Operations over the contract of one class or contract node."""

    def describe(self, target: type | HasContract) -> ServiceResult:
        """Describe the resolved contract of *target*."""
        node = contract_node(target)
        validator = InstanceValidator(node)
        defaults = validator.needed_defaults

        chain = [
            {
                "type": member.name,
                "declared": list(dict.fromkeys(n for d in decls for n in d.names())),
                "no_parameters": any(isinstance(d, NoParameters) for d in decls),
            }
            for member in (node, *node.ancestors())
            if (decls := member.own_declarations())
        ]
        data = {
            "type": validator.type_name,
            "has_contract": validator.has_contract(),
            "no_parameters": validator.has_contract() and not validator.needed,
            "accepted": list(validator.needed),
            "required": [n for n in validator.needed if n not in defaults],
            "defaults": {k: _jsonable(v) for k, v in defaults.items()},
            "chain": chain,
        }
        return ServiceResult(
            ok=True,
            op="describe_contract",
            data=dump_validated(ContractDescriptionData, data),
        )

    def construct(
        self,
        target: type | HasContract,
        bag: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Validate *bag* against *target*'s contract and build an instance.

        Classes are instantiated; bare contract nodes are only reconciled.
        Errors raised by the class's own constructor propagate.
        """
        bag = dict(bag or {})
        validator = InstanceValidator(target)
        try:
            for name in bag:
                validator.check_parameter(name)
            reconciled = validator.reconcile(bag)
        except ContractError as exc:
            return self._contract_failure("construct", exc)

        instance = None
        if isinstance(target, type):
            # Needful classes reconcile in __init__; others get defaults here.
            instance = target(**bag) if issubclass(target, Needful) else target(**reconciled)

        data = {
            "type": validator.type_name,
            "parameters": {k: _jsonable(v) for k, v in reconciled.items()},
            "defaulted": [name for name in reconciled if name not in bag],
        }
        logger.debug("Constructed %s with %s", validator.type_name, list(reconciled))
        return ServiceResult(
            ok=True,
            op="construct",
            data=dump_validated(ConstructResultData, data),
            value=instance,
        )

    def lint(self, target: type | HasContract) -> ServiceResult:
        """Report authoring problems that only show up across a chain.

        Contradictions inside one type's own declarations are already
        rejected when the contract is built.
        """
        node = contract_node(target)
        members = [node, *node.ancestors()]
        issues: list[dict[str, Any]] = []

        sentinel_owners = [
            m.name
            for m in members
            if any(isinstance(d, NoParameters) for d in m.own_declarations())
        ]
        named_owners = [
            m.name
            for m in members
            if any(not isinstance(d, NoParameters) for d in m.own_declarations())
        ]
        if sentinel_owners and named_owners:
            issues.append(
                {
                    "category": "no_parameters_mixed",
                    "severity": "error",
                    "type": sentinel_owners[0],
                    "message": (
                        f"{', '.join(sentinel_owners)} declare no parameters but "
                        f"{', '.join(named_owners)} declare parameters in the same chain"
                    ),
                }
            )

        default_owner: dict[str, tuple[int, Any]] = {}
        required_owner: dict[str, int] = {}
        # Walk from the most-derived type; the first default seen is the one applied.
        for depth, member in enumerate(members):
            for declaration in member.own_declarations():
                if isinstance(declaration, ParameterDefaults):
                    for name, value in declaration.values.items():
                        if name in default_owner:
                            owner_depth, applied = default_owner[name]
                            owner = members[owner_depth].name
                            if owner_depth != depth and applied != value:
                                issues.append(
                                    {
                                        "category": "default_overridden",
                                        "severity": "warning",
                                        "type": owner,
                                        "parameter": name,
                                        "message": (
                                            f"Default for '{name}' in {member.name} "
                                            f"is overridden by {owner}"
                                        ),
                                    }
                                )
                        else:
                            default_owner[name] = (depth, value)
                elif isinstance(declaration, RequiredParameter):
                    required_owner.setdefault(declaration.name, depth)

        # A default inherited from an ancestor makes a derived requirement moot.
        for name, required_depth in required_owner.items():
            if name in default_owner and default_owner[name][0] > required_depth:
                owner = members[required_depth].name
                ancestor = members[default_owner[name][0]].name
                issues.append(
                    {
                        "category": "required_has_default",
                        "severity": "warning",
                        "type": owner,
                        "parameter": name,
                        "message": (
                            f"{owner} requires '{name}' but {ancestor} "
                            f"gives it a default, so it is never missing"
                        ),
                    }
                )

        error_count = sum(1 for i in issues if i["severity"] == "error")
        warning_count = len(issues) - error_count
        data = dump_validated(
            LintResultData,
            {
                "type": node.name,
                "issues": issues,
                "count": len(issues),
                "error_count": error_count,
                "warning_count": warning_count,
                "healthy": not issues,
            },
        )
        failed = error_count > 0 or (
            warning_count > 0 and self._settings.lint.fail_on_warning
        )
        if failed:
            return ServiceResult(
                ok=False,
                op="lint_contract",
                data=data,
                error=ServiceError(
                    code="LINT_FAILED",
                    message=f"{len(issues)} contract issue(s) in {node.name}",
                    detail={"issues": data["issues"]},
                ),
            )
        return ServiceResult(ok=True, op="lint_contract", data=data)


def construct(target: type | HasContract, bag: Mapping[str, Any] | None = None) -> ServiceResult:
    """Shortcut for :meth:`ContractService.construct` with default settings."""
    return ContractService().construct(target, bag)
