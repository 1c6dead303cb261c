"""CreateDocument command handler.

Ownership of the referenced transaction is not checked here: the store's
document policy cascades from the transaction's tenant, and a missing
transaction surfaces as a store error.
"""

from uuid import UUID

from src.application.commands.document_commands import CreateDocument
from src.application.errors import ApplicationError, from_store_failure
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.tenant_store_protocol import TenantStoreProtocol


class CreateDocumentHandler:
    """Handler for CreateDocument command."""

    def __init__(self, store: TenantStoreProtocol, logger: LoggerProtocol) -> None:
        self._store = store
        self._logger = logger

    async def handle(self, cmd: CreateDocument) -> Result[UUID, ApplicationError]:
        """Attach the document and return its id."""
        result = await self._store.insert_document(cmd.transaction_id, cmd.file_url)

        match result:
            case Failure(error=error):
                self._logger.warning(
                    "Document insert rejected",
                    transaction_id=str(cmd.transaction_id),
                    user_id=str(cmd.user_id),
                    error_code=error.code.value,
                    store_code=error.store_code,
                )
                return Failure(
                    error=from_store_failure(
                        error, fallback_message="Failed to create document"
                    )
                )
            case Success(value=document_id):
                self._logger.info(
                    "Document created",
                    document_id=str(document_id),
                    transaction_id=str(cmd.transaction_id),
                    user_id=str(cmd.user_id),
                )
                return Success(value=document_id)
