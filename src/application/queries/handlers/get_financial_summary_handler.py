"""GetFinancialSummary query handler.

Fetches every (type, amount) pair of the tenant and reduces them with
FinancialSummary.from_amounts. A tenant without rows yields all zeros.
"""

from src.application.errors import ApplicationError, from_store_failure
from src.application.queries.transaction_queries import GetFinancialSummary
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.tenant_store_protocol import TenantStoreProtocol
from src.domain.value_objects.financial_summary import FinancialSummary


class GetFinancialSummaryHandler:
    """Handler for GetFinancialSummary query.

    Returns:
        Result[FinancialSummary, ApplicationError]
    """

    def __init__(self, store: TenantStoreProtocol, logger: LoggerProtocol) -> None:
        self._store = store
        self._logger = logger

    async def handle(
        self, query: GetFinancialSummary
    ) -> Result[FinancialSummary, ApplicationError]:
        """Handle GetFinancialSummary query.

        Args:
            query: GetFinancialSummary query.

        Returns:
            Success(FinancialSummary): Totals, zeros for an empty tenant.
            Failure(ApplicationError): Store denied or failed the read.
        """
        result = await self._store.list_transaction_amounts(query.tenant_id)

        match result:
            case Failure(error=error):
                self._logger.warning(
                    "Summary computation failed",
                    tenant_id=str(query.tenant_id),
                    user_id=str(query.user_id),
                    error_code=error.code.value,
                    store_code=error.store_code,
                )
                return Failure(
                    error=from_store_failure(
                        error, fallback_message="Failed to fetch summary"
                    )
                )
            case Success(value=rows):
                return Success(value=FinancialSummary.from_amounts(rows))
