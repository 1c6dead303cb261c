"""ListTransactions query handler.

Returns the tenant's transactions as the store orders them (date DESC, then
created_at DESC). An empty list is a valid answer: callers without a
membership in the tenant see no rows.
"""

from src.application.errors import ApplicationError, from_store_failure
from src.application.queries.transaction_queries import ListTransactions
from src.core.result import Failure, Result, Success
from src.domain.entities.transaction import Transaction
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.tenant_store_protocol import TenantStoreProtocol


class ListTransactionsHandler:
    """Handler for ListTransactions query.

    Dependencies (injected via constructor):
        - TenantStoreProtocol: Caller-scoped store
        - LoggerProtocol: Structured logging

    Returns:
        Result[list[Transaction], ApplicationError]
    """

    def __init__(self, store: TenantStoreProtocol, logger: LoggerProtocol) -> None:
        self._store = store
        self._logger = logger

    async def handle(
        self, query: ListTransactions
    ) -> Result[list[Transaction], ApplicationError]:
        """Handle ListTransactions query.

        Args:
            query: ListTransactions query.

        Returns:
            Success(list[Transaction]): Possibly empty list.
            Failure(ApplicationError): Store denied or failed the read.
        """
        result = await self._store.list_transactions(query.tenant_id)

        match result:
            case Failure(error=error):
                self._logger.warning(
                    "Transaction listing failed",
                    tenant_id=str(query.tenant_id),
                    user_id=str(query.user_id),
                    error_code=error.code.value,
                    store_code=error.store_code,
                )
                return Failure(
                    error=from_store_failure(
                        error, fallback_message="Failed to fetch transactions"
                    )
                )
            case Success(value=transactions):
                return Success(value=transactions)
