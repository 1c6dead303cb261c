"""Token verifier protocol.

Port to the external identity provider that turns an opaque bearer token
into a user identity. This service never validates token signatures itself.
"""

from typing import Protocol

from src.core.errors import AuthenticationError, ConfigurationError
from src.core.result import Result
from src.domain.value_objects.identity import Identity


class TokenVerifierProtocol(Protocol):
    """Protocol for bearer token verification.

    Implementations:
        - SupabaseAuthAdapter: src/infrastructure/supabase/auth_adapter.py
    """

    async def verify(
        self, token: str
    ) -> Result[Identity, AuthenticationError | ConfigurationError]:
        """Resolve a bearer token to a user identity.

        Args:
            token: Raw bearer token (never logged).

        Returns:
            Success(Identity): Token is valid.
            Failure(AuthenticationError): Token invalid, expired or revoked.
            Failure(ConfigurationError): Provider credentials are missing or
                the provider cannot be reached.
        """
        ...
