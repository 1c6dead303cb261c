"""CreateTransaction command handler.

Flow:
    1. Build the insert payload with created_by = caller
    2. Single atomic insert through the caller-scoped store
    3. Map store failures (policy denial -> FORBIDDEN, other -> STORE_ERROR)

The write role is enforced by the store's row-level security.
"""

from uuid import UUID

from src.application.commands.transaction_commands import CreateTransaction
from src.application.errors import ApplicationError, from_store_failure
from src.core.result import Failure, Result, Success
from src.domain.entities.transaction import NewTransaction
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.tenant_store_protocol import TenantStoreProtocol


class CreateTransactionHandler:
    """Handler for CreateTransaction command.

    Dependencies (injected via constructor):
        - TenantStoreProtocol: Caller-scoped store
        - LoggerProtocol: Structured logging

    Returns:
        Result[UUID, ApplicationError]: Id of the new transaction.
    """

    def __init__(self, store: TenantStoreProtocol, logger: LoggerProtocol) -> None:
        self._store = store
        self._logger = logger

    async def handle(self, cmd: CreateTransaction) -> Result[UUID, ApplicationError]:
        """Handle CreateTransaction command.

        Args:
            cmd: Validated command.

        Returns:
            Success(UUID): Transaction created.
            Failure(ApplicationError): Store denied or rejected the insert.
        """
        result = await self._store.insert_transaction(
            NewTransaction(
                tenant_id=cmd.tenant_id,
                transaction_type=cmd.transaction_type,
                amount=cmd.amount,
                description=cmd.description,
                transaction_date=cmd.transaction_date,
                category=cmd.category,
                created_by=cmd.user_id,
            )
        )

        match result:
            case Failure(error=error):
                self._logger.warning(
                    "Transaction insert rejected",
                    tenant_id=str(cmd.tenant_id),
                    user_id=str(cmd.user_id),
                    error_code=error.code.value,
                    store_code=error.store_code,
                )
                return Failure(
                    error=from_store_failure(
                        error, fallback_message="Failed to create transaction"
                    )
                )
            case Success(value=transaction_id):
                self._logger.info(
                    "Transaction created",
                    transaction_id=str(transaction_id),
                    tenant_id=str(cmd.tenant_id),
                    user_id=str(cmd.user_id),
                )
                return Success(value=transaction_id)
