"""Tenant store protocol.

Port to the row-level-security store. Every instance is scoped to exactly one
caller: the store evaluates its tenant and role policies against the caller's
own token, so this service never filters rows on its own.

Failure contract:
    - AuthorizationError: store denied the operation by policy (403)
    - StoreError: any other store failure; transport failures carry
      is_transport_failure=True (500)
"""

from typing import Protocol, TypeAlias
from uuid import UUID

from src.core.errors import AuthorizationError, StoreError
from src.core.result import Result
from src.domain.entities.document import Document
from src.domain.entities.tenant import Membership, Tenant
from src.domain.entities.transaction import (
    NewTransaction,
    Transaction,
    TransactionAmount,
)

StoreFailure: TypeAlias = AuthorizationError | StoreError


class TenantStoreProtocol(Protocol):
    """Caller-scoped access to tenants, transactions and documents.

    Implementations:
        - PostgrestTenantStore: src/infrastructure/supabase/postgrest_store.py
    """

    async def insert_transaction(
        self, transaction: NewTransaction
    ) -> Result[UUID, StoreFailure]:
        """Insert one transaction atomically and return its generated id."""
        ...

    async def list_transactions(
        self, tenant_id: UUID
    ) -> Result[list[Transaction], StoreFailure]:
        """List transactions of a tenant.

        Ordered by transaction date descending, then creation time descending.
        Tenants the caller cannot read yield an empty list or a denial.
        """
        ...

    async def list_transaction_amounts(
        self, tenant_id: UUID
    ) -> Result[list[TransactionAmount], StoreFailure]:
        """Fetch (type, amount) pairs of every transaction of a tenant."""
        ...

    async def insert_document(
        self, transaction_id: UUID, file_url: str
    ) -> Result[UUID, StoreFailure]:
        """Attach a document to an existing transaction, returning its id.

        A missing transaction is reported by the store as a StoreError.
        """
        ...

    async def list_documents(
        self, transaction_id: UUID
    ) -> Result[list[Document], StoreFailure]:
        """List documents of a transaction, newest first."""
        ...

    async def list_tenants(self) -> Result[list[Tenant], StoreFailure]:
        """List tenants visible to the caller, ordered by name."""
        ...

    async def list_memberships(
        self, user_id: UUID
    ) -> Result[list[Membership], StoreFailure]:
        """List memberships of a user."""
        ...

    async def create_tenant_and_join(self, name: str) -> Result[UUID, StoreFailure]:
        """Create a tenant and the caller's write membership in one step.

        Both rows are created in a single store-side transaction.
        """
        ...


class TenantStoreFactoryProtocol(Protocol):
    """Builds caller-scoped tenant stores.

    A new store is built per request from the caller's bearer token; stores
    are never shared between callers.
    """

    def build(self, token: str) -> TenantStoreProtocol:
        """Build a store that acts with the caller's privileges.

        Args:
            token: Caller's verified bearer token.

        Returns:
            Caller-scoped store.
        """
        ...
