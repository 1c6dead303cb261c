"""CreateTenant command handler.

The tenant row and the caller's write membership are created by a single
store-side function call, so either both exist afterwards or neither does.
"""

from uuid import UUID

from src.application.commands.tenant_commands import CreateTenant
from src.application.errors import ApplicationError, from_store_failure
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.tenant_store_protocol import TenantStoreProtocol


class CreateTenantHandler:
    """Handler for CreateTenant command.

    Returns:
        Result[UUID, ApplicationError]: Id of the new tenant.
    """

    def __init__(self, store: TenantStoreProtocol, logger: LoggerProtocol) -> None:
        self._store = store
        self._logger = logger

    async def handle(self, cmd: CreateTenant) -> Result[UUID, ApplicationError]:
        """Handle CreateTenant command.

        Args:
            cmd: Command with a trimmed, non-empty name.

        Returns:
            Success(UUID): Tenant and membership created.
            Failure(ApplicationError): Store rejected the call.
        """
        result = await self._store.create_tenant_and_join(cmd.name)

        match result:
            case Failure(error=error):
                self._logger.warning(
                    "Tenant creation rejected",
                    user_id=str(cmd.user_id),
                    error_code=error.code.value,
                    store_code=error.store_code,
                )
                return Failure(
                    error=from_store_failure(
                        error, fallback_message="Failed to create tenant"
                    )
                )
            case Success(value=tenant_id):
                self._logger.info(
                    "Tenant created",
                    tenant_id=str(tenant_id),
                    user_id=str(cmd.user_id),
                )
                return Success(value=tenant_id)
