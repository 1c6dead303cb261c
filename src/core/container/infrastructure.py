"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Token verifier (Supabase auth)
- Tenant store factory (PostgREST)

Request-scoped:
- Caller-scoped tenant store, built by the Auth Gate
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Request

from src.core.config import settings
from src.core.enums import Environment

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.tenant_store_protocol import (
        TenantStoreFactoryProtocol,
        TenantStoreProtocol,
    )
    from src.domain.protocols.token_verifier_protocol import TokenVerifierProtocol


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


# ============================================================================
# Identity & Store (Application-Scoped)
# ============================================================================


@lru_cache()
def get_token_verifier() -> "TokenVerifierProtocol":
    """Return the token verifier singleton.

    Built even when Supabase is not configured; verification then fails
    with ConfigurationError on every request instead of at startup.

    Returns:
        TokenVerifierProtocol: Supabase auth adapter.
    """
    from src.infrastructure.supabase.auth_adapter import SupabaseAuthAdapter

    return SupabaseAuthAdapter(
        supabase_url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        timeout=settings.identity_timeout_seconds,
    )


@lru_cache()
def get_store_factory() -> "TenantStoreFactoryProtocol":
    """Return the factory that builds caller-scoped stores.

    Returns:
        TenantStoreFactoryProtocol: PostgREST store factory.
    """
    from src.infrastructure.supabase.postgrest_store import SupabaseStoreFactory

    return SupabaseStoreFactory(
        supabase_url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        timeout=settings.store_timeout_seconds,
    )


# ============================================================================
# Caller-Scoped Store (Request-Scoped)
# ============================================================================


def get_request_store(request: Request) -> "TenantStoreProtocol":
    """Return the store the Auth Gate attached to this request.

    Routers that use handler factories must declare the Auth Gate as a
    router-level dependency so it runs first.

    Raises:
        RuntimeError: If no caller has been authenticated for this request.
    """
    store = getattr(request.state, "tenant_store", None)
    if store is None:
        raise RuntimeError("Tenant store requested before authentication")
    return store
