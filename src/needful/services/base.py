"""BaseService — abstract foundation for needful services.

Every service receives the resolved :class:`NeedfulSettings` at
construction time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from needful.domain.errors import ContractError
from needful.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from needful.config.settings import NeedfulSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class ContractService(BaseService):
            def describe(self, target) -> ServiceResult:
                ...
    """

    def __init__(self, settings: NeedfulSettings | None = None) -> None:
        if settings is None:
            from needful.config.settings import NeedfulSettings

            settings = NeedfulSettings()
        self._settings = settings

    @staticmethod
    def _contract_failure(op: str, exc: ContractError) -> ServiceResult:
        """Convert a contract error into a failed result."""
        logger.debug("%s failed: %s", op, exc.message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
        )
