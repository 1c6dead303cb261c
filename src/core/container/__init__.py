"""Container module - Centralized dependency injection.

Re-exports all factory functions so callers import from one place:

    from src.core.container import get_logger, get_list_transactions_handler

Organization:
- infrastructure: Logger, token verifier, store factory, request store
- data_handlers: Request-scoped command and query handlers
"""

from src.core.container.data_handlers import (
    get_create_document_handler,
    get_create_tenant_handler,
    get_create_transaction_handler,
    get_financial_summary_handler,
    get_list_documents_handler,
    get_list_tenants_handler,
    get_list_transactions_handler,
)
from src.core.container.infrastructure import (
    get_logger,
    get_request_store,
    get_store_factory,
    get_token_verifier,
)

__all__ = [
    # Infrastructure
    "get_logger",
    "get_request_store",
    "get_store_factory",
    "get_token_verifier",
    # Handlers
    "get_create_document_handler",
    "get_create_tenant_handler",
    "get_create_transaction_handler",
    "get_financial_summary_handler",
    "get_list_documents_handler",
    "get_list_tenants_handler",
    "get_list_transactions_handler",
]
