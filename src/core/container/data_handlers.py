"""Data handler dependency factories.

Request-scoped handler instances, each wired to the caller-scoped store:
- Transaction commands and queries (create, list, summary)
- Document commands and queries (create, list)
- Tenant commands and queries (create, list)
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_logger, get_request_store

if TYPE_CHECKING:
    from src.application.commands.handlers.create_document_handler import (
        CreateDocumentHandler,
    )
    from src.application.commands.handlers.create_tenant_handler import (
        CreateTenantHandler,
    )
    from src.application.commands.handlers.create_transaction_handler import (
        CreateTransactionHandler,
    )
    from src.application.queries.handlers.get_financial_summary_handler import (
        GetFinancialSummaryHandler,
    )
    from src.application.queries.handlers.list_documents_handler import (
        ListDocumentsHandler,
    )
    from src.application.queries.handlers.list_tenants_handler import (
        ListTenantsHandler,
    )
    from src.application.queries.handlers.list_transactions_handler import (
        ListTransactionsHandler,
    )
    from src.domain.protocols.tenant_store_protocol import TenantStoreProtocol


# ============================================================================
# Transaction Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_transaction_handler(
    store: "TenantStoreProtocol" = Depends(get_request_store),
) -> "CreateTransactionHandler":
    """Get CreateTransaction command handler (request-scoped).

    Returns:
        CreateTransactionHandler bound to the caller's store.
    """
    from src.application.commands.handlers.create_transaction_handler import (
        CreateTransactionHandler,
    )

    return CreateTransactionHandler(store=store, logger=get_logger())


async def get_list_transactions_handler(
    store: "TenantStoreProtocol" = Depends(get_request_store),
) -> "ListTransactionsHandler":
    """Get ListTransactions query handler (request-scoped)."""
    from src.application.queries.handlers.list_transactions_handler import (
        ListTransactionsHandler,
    )

    return ListTransactionsHandler(store=store, logger=get_logger())


async def get_financial_summary_handler(
    store: "TenantStoreProtocol" = Depends(get_request_store),
) -> "GetFinancialSummaryHandler":
    """Get GetFinancialSummary query handler (request-scoped)."""
    from src.application.queries.handlers.get_financial_summary_handler import (
        GetFinancialSummaryHandler,
    )

    return GetFinancialSummaryHandler(store=store, logger=get_logger())


# ============================================================================
# Document Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_document_handler(
    store: "TenantStoreProtocol" = Depends(get_request_store),
) -> "CreateDocumentHandler":
    """Get CreateDocument command handler (request-scoped)."""
    from src.application.commands.handlers.create_document_handler import (
        CreateDocumentHandler,
    )

    return CreateDocumentHandler(store=store, logger=get_logger())


async def get_list_documents_handler(
    store: "TenantStoreProtocol" = Depends(get_request_store),
) -> "ListDocumentsHandler":
    """Get ListDocuments query handler (request-scoped)."""
    from src.application.queries.handlers.list_documents_handler import (
        ListDocumentsHandler,
    )

    return ListDocumentsHandler(store=store, logger=get_logger())


# ============================================================================
# Tenant Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_tenant_handler(
    store: "TenantStoreProtocol" = Depends(get_request_store),
) -> "CreateTenantHandler":
    """Get CreateTenant command handler (request-scoped)."""
    from src.application.commands.handlers.create_tenant_handler import (
        CreateTenantHandler,
    )

    return CreateTenantHandler(store=store, logger=get_logger())


async def get_list_tenants_handler(
    store: "TenantStoreProtocol" = Depends(get_request_store),
) -> "ListTenantsHandler":
    """Get ListTenants query handler (request-scoped)."""
    from src.application.queries.handlers.list_tenants_handler import (
        ListTenantsHandler,
    )

    return ListTenantsHandler(store=store, logger=get_logger())
