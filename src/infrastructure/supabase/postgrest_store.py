"""Caller-scoped tenant store over PostgREST.

Every request carries the project anon key and the caller's own bearer
token, so the database's row-level-security policies evaluate each query as
the caller. This adapter never filters rows by membership itself.

Error classification:
    - store error bodies go through decide_access: policy denials become
      AuthorizationError, anything else StoreError
    - timeouts, connection errors and unparseable success bodies become
      StoreError(is_transport_failure=True)
"""

from collections.abc import Callable
from typing import Any, TypeVar
from uuid import UUID

import httpx

from src.core.constants import (
    CREATE_TENANT_FUNCTION,
    RESPONSE_BODY_MAX_LENGTH,
    STORE_TIMEOUT_DEFAULT,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, StoreError
from src.core.result import Failure, Result, Success
from src.domain.entities.document import Document
from src.domain.entities.tenant import Membership, Tenant
from src.domain.entities.transaction import (
    NewTransaction,
    Transaction,
    TransactionAmount,
)
from src.domain.protocols.tenant_store_protocol import StoreFailure
from src.domain.value_objects.access_decision import Deny, decide_access
from src.infrastructure.supabase.base_client import SupabaseHTTPClient
from src.infrastructure.supabase.mappers import (
    document_from_row,
    membership_from_row,
    tenant_from_row,
    transaction_amount_from_row,
    transaction_from_row,
    transaction_to_row,
)

T = TypeVar("T")

_RETURN_REPRESENTATION = {"Prefer": "return=representation"}


class PostgrestTenantStore(SupabaseHTTPClient):
    """Tenant store acting with one caller's privileges.

    Implements TenantStoreProtocol. Instances are built per request by
    SupabaseStoreFactory and must not be shared between callers.
    """

    def __init__(
        self,
        *,
        supabase_url: str,
        anon_key: str,
        access_token: str,
        timeout: float = STORE_TIMEOUT_DEFAULT,
    ) -> None:
        super().__init__(
            base_url=f"{supabase_url}/rest/v1",
            api_key=anon_key,
            service_name="postgrest",
            timeout=timeout,
        )
        self._access_token = access_token

    def _unavailable_error(self, message: str) -> DomainError:
        return StoreError(
            code=ErrorCode.STORE_UNAVAILABLE,
            message=message,
            is_transport_failure=True,
        )

    # =========================================================================
    # Transactions
    # =========================================================================

    async def insert_transaction(
        self, transaction: NewTransaction
    ) -> Result[UUID, StoreFailure]:
        result = await self._insert(
            "transactions",
            transaction_to_row(transaction),
            operation="insert_transaction",
        )
        return self._map(result, lambda row: UUID(row["id"]), "insert_transaction")

    async def list_transactions(
        self, tenant_id: UUID
    ) -> Result[list[Transaction], StoreFailure]:
        result = await self._select(
            "transactions",
            params={
                "select": "*",
                "tenant_id": f"eq.{tenant_id}",
                "order": "date.desc,created_at.desc",
            },
            operation="list_transactions",
        )
        return self._map_rows(result, transaction_from_row, "list_transactions")

    async def list_transaction_amounts(
        self, tenant_id: UUID
    ) -> Result[list[TransactionAmount], StoreFailure]:
        result = await self._select(
            "transactions",
            params={"select": "type,amount", "tenant_id": f"eq.{tenant_id}"},
            operation="list_transaction_amounts",
        )
        return self._map_rows(
            result, transaction_amount_from_row, "list_transaction_amounts"
        )

    # =========================================================================
    # Documents
    # =========================================================================

    async def insert_document(
        self, transaction_id: UUID, file_url: str
    ) -> Result[UUID, StoreFailure]:
        result = await self._insert(
            "documents",
            {"transaction_id": str(transaction_id), "file_url": file_url},
            operation="insert_document",
        )
        return self._map(result, lambda row: UUID(row["id"]), "insert_document")

    async def list_documents(
        self, transaction_id: UUID
    ) -> Result[list[Document], StoreFailure]:
        result = await self._select(
            "documents",
            params={
                "select": "*",
                "transaction_id": f"eq.{transaction_id}",
                "order": "created_at.desc",
            },
            operation="list_documents",
        )
        return self._map_rows(result, document_from_row, "list_documents")

    # =========================================================================
    # Tenants
    # =========================================================================

    async def list_tenants(self) -> Result[list[Tenant], StoreFailure]:
        result = await self._select(
            "tenants",
            params={"select": "id,name", "order": "name.asc"},
            operation="list_tenants",
        )
        return self._map_rows(result, tenant_from_row, "list_tenants")

    async def list_memberships(
        self, user_id: UUID
    ) -> Result[list[Membership], StoreFailure]:
        result = await self._select(
            "tenant_users",
            params={
                "select": "user_id,tenant_id,role",
                "user_id": f"eq.{user_id}",
            },
            operation="list_memberships",
        )
        return self._map_rows(result, membership_from_row, "list_memberships")

    async def create_tenant_and_join(self, name: str) -> Result[UUID, StoreFailure]:
        """Call the store function that inserts the tenant and membership.

        The function runs in a single database transaction and returns the new
        tenant id as a bare JSON string.
        """
        result = await self._send(
            method="POST",
            path=f"/rpc/{CREATE_TENANT_FUNCTION}",
            json_data={"tenant_name": name},
            operation="create_tenant_and_join",
        )
        return self._map(
            result, lambda value: UUID(str(value)), "create_tenant_and_join"
        )

    # =========================================================================
    # Request plumbing
    # =========================================================================

    async def _select(
        self, table: str, *, params: dict[str, str], operation: str
    ) -> Result[Any, StoreFailure]:
        return await self._send(
            method="GET", path=f"/{table}", params=params, operation=operation
        )

    async def _insert(
        self, table: str, row: dict[str, Any], *, operation: str
    ) -> Result[Any, StoreFailure]:
        result = await self._send(
            method="POST",
            path=f"/{table}",
            params={"select": "id"},
            json_data=row,
            extra_headers=_RETURN_REPRESENTATION,
            operation=operation,
        )
        if isinstance(result, Failure):
            return result
        rows = result.value
        if not isinstance(rows, list) or not rows:
            return Failure(error=self._invalid_response(operation))
        return Success(value=rows[0])

    async def _send(
        self,
        *,
        method: str,
        path: str,
        operation: str,
        params: dict[str, str] | None = None,
        json_data: Any = None,
        extra_headers: dict[str, str] | None = None,
    ) -> Result[Any, StoreFailure]:
        """Execute one store request and return its decoded JSON body."""
        result = await self._execute_request(
            method=method,
            path=path,
            headers=self._build_headers(self._access_token, extra_headers),
            params=params,
            json_data=json_data,
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        response = result.value
        if response.is_error:
            return Failure(error=self._classify_error(response, operation))

        return Success(value=self._parse_json(response))

    def _classify_error(self, response: httpx.Response, operation: str) -> StoreFailure:
        """Turn a PostgREST error response into a domain error."""
        body = self._parse_json(response)
        code: str | None = None
        message: str | None = None
        if isinstance(body, dict):
            code = body.get("code")
            message = body.get("message")
        if not message:
            message = response.text[:RESPONSE_BODY_MAX_LENGTH] or response.reason_phrase

        decision = decide_access(code=code, message=message)
        if isinstance(decision, Deny):
            self._logger.info(
                "postgrest_policy_denied",
                operation=operation,
                status_code=response.status_code,
                store_code=code,
            )
            return AuthorizationError(
                code=ErrorCode.POLICY_VIOLATION,
                message=decision.reason,
                store_code=decision.store_code,
            )

        self._logger.warning(
            "postgrest_request_failed",
            operation=operation,
            status_code=response.status_code,
            store_code=code,
        )
        return StoreError(
            code=ErrorCode.STORE_REQUEST_FAILED,
            message=message,
            store_code=code,
        )

    def _invalid_response(self, operation: str) -> StoreError:
        self._logger.error("postgrest_unexpected_format", operation=operation)
        return StoreError(
            code=ErrorCode.STORE_INVALID_RESPONSE,
            message="Unexpected response from store",
            is_transport_failure=True,
        )

    def _map(
        self,
        result: Result[Any, StoreFailure],
        mapper: Callable[[Any], T],
        operation: str,
    ) -> Result[T, StoreFailure]:
        if isinstance(result, Failure):
            return result
        try:
            return Success(value=mapper(result.value))
        except (AttributeError, ArithmeticError, KeyError, TypeError, ValueError):
            return Failure(error=self._invalid_response(operation))

    def _map_rows(
        self,
        result: Result[Any, StoreFailure],
        mapper: Callable[[dict[str, Any]], T],
        operation: str,
    ) -> Result[list[T], StoreFailure]:
        if isinstance(result, Failure):
            return result
        if not isinstance(result.value, list):
            return Failure(error=self._invalid_response(operation))
        return self._map(
            result, lambda rows: [mapper(row) for row in rows], operation
        )


class SupabaseStoreFactory:
    """Builds caller-scoped PostgREST stores.

    Implements TenantStoreFactoryProtocol.
    """

    def __init__(
        self,
        *,
        supabase_url: str | None,
        anon_key: str | None,
        timeout: float = STORE_TIMEOUT_DEFAULT,
    ) -> None:
        self._supabase_url = supabase_url or ""
        self._anon_key = anon_key or ""
        self._timeout = timeout

    def build(self, token: str) -> PostgrestTenantStore:
        """Build a store scoped to the caller's token."""
        return PostgrestTenantStore(
            supabase_url=self._supabase_url,
            anon_key=self._anon_key,
            access_token=token,
            timeout=self._timeout,
        )
