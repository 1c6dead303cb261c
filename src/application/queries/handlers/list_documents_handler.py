"""ListDocuments query handler."""

from src.application.errors import ApplicationError, from_store_failure
from src.application.queries.document_queries import ListDocuments
from src.core.result import Failure, Result, Success
from src.domain.entities.document import Document
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.tenant_store_protocol import TenantStoreProtocol


class ListDocumentsHandler:
    """Handler for ListDocuments query.

    Documents are returned newest first. Visibility cascades from the parent
    transaction's tenant inside the store.
    """

    def __init__(self, store: TenantStoreProtocol, logger: LoggerProtocol) -> None:
        self._store = store
        self._logger = logger

    async def handle(
        self, query: ListDocuments
    ) -> Result[list[Document], ApplicationError]:
        result = await self._store.list_documents(query.transaction_id)

        match result:
            case Failure(error=error):
                self._logger.warning(
                    "Document listing failed",
                    transaction_id=str(query.transaction_id),
                    user_id=str(query.user_id),
                    error_code=error.code.value,
                    store_code=error.store_code,
                )
                return Failure(
                    error=from_store_failure(
                        error, fallback_message="Failed to fetch documents"
                    )
                )
            case Success(value=documents):
                return Success(value=documents)
