"""ListTenants query handler.

Joins the tenants visible to the caller with the caller's memberships, so
each tenant carries the caller's role. Tenants without a matching
membership are still listed, with role None.
"""

from src.application.errors import ApplicationError, from_store_failure
from src.application.queries.tenant_queries import ListTenants
from src.core.result import Failure, Result, Success
from src.domain.entities.tenant import TenantWithRole
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.tenant_store_protocol import (
    StoreFailure,
    TenantStoreProtocol,
)


class ListTenantsHandler:
    """Handler for ListTenants query.

    Returns:
        Result[list[TenantWithRole], ApplicationError]: Ordered by tenant name.
    """

    def __init__(self, store: TenantStoreProtocol, logger: LoggerProtocol) -> None:
        self._store = store
        self._logger = logger

    async def handle(
        self, query: ListTenants
    ) -> Result[list[TenantWithRole], ApplicationError]:
        """Handle ListTenants query.

        Args:
            query: ListTenants query.

        Returns:
            Success(list[TenantWithRole]): Possibly empty list.
            Failure(ApplicationError): Store denied or failed a read.
        """
        tenants_result = await self._store.list_tenants()
        if isinstance(tenants_result, Failure):
            return self._fail(query, tenants_result.error)

        memberships_result = await self._store.list_memberships(query.user_id)
        if isinstance(memberships_result, Failure):
            return self._fail(query, memberships_result.error)

        roles = {m.tenant_id: m.role for m in memberships_result.value}
        tenants = sorted(tenants_result.value, key=lambda t: t.name)

        return Success(
            value=[
                TenantWithRole(tenant=tenant, role=roles.get(tenant.id))
                for tenant in tenants
            ]
        )

    def _fail(
        self, query: ListTenants, error: StoreFailure
    ) -> Failure[ApplicationError]:
        self._logger.warning(
            "Tenant listing failed",
            user_id=str(query.user_id),
            error_code=error.code.value,
            store_code=error.store_code,
        )
        return Failure(
            error=from_store_failure(error, fallback_message="Failed to fetch tenants")
        )
