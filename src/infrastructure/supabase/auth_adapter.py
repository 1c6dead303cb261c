"""Supabase identity adapter (GoTrue).

Resolves a bearer token to a user by calling `GET /auth/v1/user` with the
project anon key and the caller's token. No caching: every request is
verified against the provider.

Status mapping:
    - 200 with a user id -> Identity
    - any other status below 500 -> AuthenticationError with the provider's reason
    - timeout, connection error, 5xx -> ConfigurationError
    - missing URL or anon key -> ConfigurationError (no request is made)
"""

from uuid import UUID

from src.core.constants import IDENTITY_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ConfigurationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.value_objects.identity import Identity
from src.infrastructure.supabase.base_client import SupabaseHTTPClient

_REASON_KEYS = ("msg", "error_description", "message", "error")


class SupabaseAuthAdapter(SupabaseHTTPClient):
    """Token verifier backed by the Supabase auth API.

    Implements TokenVerifierProtocol.

    Example:
        >>> verifier = SupabaseAuthAdapter(
        ...     supabase_url="https://xyz.supabase.co",
        ...     anon_key="anon-key",
        ... )
        >>> result = await verifier.verify(token)
    """

    def __init__(
        self,
        *,
        supabase_url: str | None,
        anon_key: str | None,
        timeout: float = IDENTITY_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize adapter.

        Args:
            supabase_url: Project URL, or None when not configured.
            anon_key: Project anon key, or None when not configured.
            timeout: Verification request timeout in seconds.
        """
        super().__init__(
            base_url=f"{supabase_url or ''}/auth/v1",
            api_key=anon_key or "",
            service_name="supabase_auth",
            timeout=timeout,
        )
        self._configured = bool(supabase_url and anon_key)

    def _unavailable_error(self, message: str) -> DomainError:
        return ConfigurationError(
            code=ErrorCode.IDENTITY_PROVIDER_UNAVAILABLE,
            message=f"Identity provider unavailable: {message}",
        )

    async def verify(
        self, token: str
    ) -> Result[Identity, AuthenticationError | ConfigurationError]:
        """Resolve a bearer token to a user identity.

        Args:
            token: Raw bearer token.

        Returns:
            Success(Identity): Token accepted by the provider.
            Failure(AuthenticationError): Token rejected.
            Failure(ConfigurationError): Provider not configured or unreachable.
        """
        if not self._configured:
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.IDENTITY_PROVIDER_NOT_CONFIGURED,
                    message=(
                        "Server configuration error: "
                        "Missing Supabase environment variables"
                    ),
                )
            )

        result = await self._execute_request(
            method="GET",
            path="/user",
            headers=self._build_headers(token),
            operation="verify_token",
        )
        if isinstance(result, Failure):
            return result

        response = result.value
        status = response.status_code

        if status >= 500:
            self._logger.warning(
                "supabase_auth_server_error",
                operation="verify_token",
                status_code=status,
            )
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.IDENTITY_PROVIDER_UNAVAILABLE,
                    message=f"Identity provider server error: {status}",
                )
            )

        body = self._parse_json(response)

        if status != 200:
            reason = _extract_reason(body) or response.text[:RESPONSE_BODY_MAX_LENGTH]
            self._logger.info(
                "supabase_auth_token_rejected",
                operation="verify_token",
                status_code=status,
                reason=reason,
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid or expired token",
                    reason=reason or None,
                )
            )

        user = body if isinstance(body, dict) else {}
        try:
            user_id = UUID(str(user.get("id")))
        except ValueError:
            self._logger.warning(
                "supabase_auth_unexpected_format",
                operation="verify_token",
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid or expired token",
                    reason="Identity provider returned no user",
                )
            )

        return Success(value=Identity(user_id=user_id, email=user.get("email")))


def _extract_reason(body: object) -> str | None:
    """Pick the provider's human-readable reason out of an error body."""
    if not isinstance(body, dict):
        return None
    for key in _REASON_KEYS:
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None
