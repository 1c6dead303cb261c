"""Base HTTP client for Supabase services.

Shared plumbing for the identity (GoTrue) and data (PostgREST) adapters:
- request execution with timeout and connection error handling
- apikey + caller bearer headers on every request
- JSON parsing with error handling
- structured logging with service context

Subclasses decide which domain error a transport failure becomes: the
identity adapter reports it as a configuration problem, the store adapter as
an unreachable store.
"""

from abc import ABC, abstractmethod
from typing import Any

import httpx
import structlog

from src.core.constants import BEARER_PREFIX
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success


class SupabaseHTTPClient(ABC):
    """Base class for Supabase HTTP adapters.

    Attributes:
        _base_url: Service base URL (without trailing slash).
        _api_key: Project anon key, sent as the `apikey` header.
        _service_name: Service identifier for logging.
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger with service context.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        service_name: str,
        timeout: float,
    ) -> None:
        """Initialize base client.

        Args:
            base_url: Service base URL (e.g. "https://xyz.supabase.co/rest/v1").
            api_key: Project anon key.
            service_name: Service identifier (e.g. "supabase_auth").
            timeout: HTTP request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._service_name = service_name
        self._timeout = timeout
        self._logger = structlog.get_logger(service_name)

    def _build_headers(
        self, access_token: str, extra: dict[str, str] | None = None
    ) -> dict[str, str]:
        """Build request headers acting as the caller.

        Args:
            access_token: Caller's bearer token.
            extra: Additional headers (e.g. Prefer).

        Returns:
            Header mapping.
        """
        headers = {
            "apikey": self._api_key,
            "Authorization": f"{BEARER_PREFIX}{access_token}",
            "Accept": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    @abstractmethod
    def _unavailable_error(self, message: str) -> DomainError:
        """Build the domain error for a request that never got a response."""

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        json_data: Any = None,
        operation: str,
    ) -> Result[httpx.Response, DomainError]:
        """Execute HTTP request with transport error handling.

        Args:
            method: HTTP method (GET, POST).
            path: URL path relative to base_url.
            headers: HTTP headers including authentication.
            params: Optional query parameters.
            json_data: Optional JSON body.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Any HTTP response, including 4xx/5xx.
            Failure(DomainError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    params=params,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._service_name}_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=self._unavailable_error(
                    f"{self._service_name} request timed out"
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._service_name}_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=self._unavailable_error(
                    f"Failed to connect to {self._service_name}"
                )
            )

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        """Parse a response body as JSON, returning None when it is not JSON."""
        try:
            return response.json()
        except ValueError:
            return None
