"""Documents resource handlers.

Handlers:
    create_document - POST /documents (write role, enforced by the store)
    list_documents  - GET /documents?transactionId=
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.commands.document_commands import CreateDocument
from src.application.commands.handlers.create_document_handler import (
    CreateDocumentHandler,
)
from src.application.queries.document_queries import ListDocuments
from src.application.queries.handlers.list_documents_handler import (
    ListDocumentsHandler,
)
from src.core.container import get_create_document_handler, get_list_documents_handler
from src.core.result import Failure
from src.domain.types import CanonicalUUID
from src.presentation.routers.api.middleware.auth_dependencies import CurrentCaller
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import CreatedResponse
from src.schemas.document_schemas import (
    CreateDocumentRequest,
    DocumentListResponse,
    DocumentResponse,
)


async def create_document(
    request: Request,
    caller: CurrentCaller,
    body: CreateDocumentRequest,
    handler: CreateDocumentHandler = Depends(get_create_document_handler),
) -> CreatedResponse | JSONResponse:
    """Attach a document URL to a transaction.

    POST /documents -> 201 Created

    A transaction that does not exist (or is not visible to the caller) is
    reported by the store and answered with 400 or 403.
    """
    result = await handler.handle(
        CreateDocument(
            transaction_id=body.transaction_id,
            file_url=body.file_url,
            user_id=caller.user_id,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id(),
        )

    return CreatedResponse(id=result.value)


async def list_documents(
    request: Request,
    caller: CurrentCaller,
    transaction_id: Annotated[
        CanonicalUUID, Query(alias="transactionId", description="Transaction UUID")
    ],
    handler: ListDocumentsHandler = Depends(get_list_documents_handler),
) -> DocumentListResponse | JSONResponse:
    """List documents of a transaction, newest first.

    GET /documents?transactionId= -> 200 OK
    """
    result = await handler.handle(
        ListDocuments(transaction_id=transaction_id, user_id=caller.user_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id(),
        )

    return DocumentListResponse(
        documents=[DocumentResponse.from_entity(d) for d in result.value]
    )
