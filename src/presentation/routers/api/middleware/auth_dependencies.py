"""Auth Gate dependencies.

Every protected route depends on get_current_caller, which runs a short
state machine, terminal on the first rejection:

    1. no or non-Bearer Authorization header  -> 401
    2. empty token                            -> 401
    3. identity provider misconfigured/down   -> 500 (operator error)
    4. token rejected by the provider         -> 401 with provider reason
    5. success -> caller identity + caller-scoped store on the request

Any unexpected exception while verifying is reported as 401. Verification
runs once per request; nothing is cached or retried.

Usage:
    @router.get("/transactions")
    async def list_transactions(
        caller: AuthenticatedCaller = Depends(get_current_caller),
    ):
        ...
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    ApplicationErrorException,
)
from src.core.container import get_logger, get_store_factory, get_token_verifier
from src.core.enums import ErrorCode
from src.core.errors import ConfigurationError
from src.core.result import Failure, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.tenant_store_protocol import (
    TenantStoreFactoryProtocol,
    TenantStoreProtocol,
)
from src.domain.protocols.token_verifier_protocol import TokenVerifierProtocol

# auto_error=False: missing and malformed headers are answered with 401 here
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticatedCaller:
    """Verified caller attached to the request by the Auth Gate.

    Attributes:
        user_id: Identity-provider user id.
        store: Store that acts with the caller's privileges.
    """

    user_id: UUID
    store: TenantStoreProtocol


def _unauthorized(
    logger: LoggerProtocol,
    code: ErrorCode,
    detail: str,
    reason: str | None = None,
) -> HTTPException:
    logger.info("Authentication rejected", error_code=code.value, reason=reason)
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_caller(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    verifier: Annotated[TokenVerifierProtocol, Depends(get_token_verifier)],
    store_factory: Annotated[TenantStoreFactoryProtocol, Depends(get_store_factory)],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
) -> AuthenticatedCaller:
    """Authenticate the caller and attach a caller-scoped store.

    Args:
        request: Incoming request; receives user_id and tenant_store state.
        credentials: Parsed Bearer credentials, or None.
        verifier: Identity provider port (injected).
        store_factory: Scoped store factory (injected).
        logger: Structured logger (injected).

    Returns:
        AuthenticatedCaller for the verified token.

    Raises:
        HTTPException 401: Missing header, empty token or rejected token.
        ApplicationErrorException: Identity provider not usable (500).
    """
    if credentials is None:
        scheme, _ = get_authorization_scheme_param(
            request.headers.get("Authorization")
        )
        if scheme.lower() == "bearer":
            raise _unauthorized(logger, ErrorCode.TOKEN_EMPTY, "Empty token")
        raise _unauthorized(
            logger,
            ErrorCode.AUTHORIZATION_HEADER_MISSING,
            "Missing or invalid authorization header",
        )

    token = credentials.credentials
    if not token.strip():
        raise _unauthorized(logger, ErrorCode.TOKEN_EMPTY, "Empty token")

    try:
        result = await verifier.verify(token)
    except Exception as e:
        logger.error("Token verification raised", error=e)
        raise _unauthorized(
            logger, ErrorCode.AUTHENTICATION_FAILED, "Authentication failed"
        ) from e

    match result:
        case Failure(error=ConfigurationError() as error):
            logger.error(
                "Identity provider unusable",
                error_code=error.code.value,
                detail=error.message,
            )
            raise ApplicationErrorException(
                ApplicationError(
                    code=ApplicationErrorCode.CONFIGURATION_ERROR,
                    message=error.message,
                    domain_error=error,
                )
            )
        case Failure(error=error):
            reason = getattr(error, "reason", None)
            detail = f"{error.message}: {reason}" if reason else error.message
            raise _unauthorized(logger, error.code, detail, reason)
        case Success(value=identity):
            user_id = identity.user_id

    try:
        store = store_factory.build(token)
    except Exception as e:
        logger.error("Scoped store construction failed", error=e)
        raise _unauthorized(
            logger, ErrorCode.AUTHENTICATION_FAILED, "Authentication failed"
        ) from e

    request.state.user_id = user_id
    request.state.tenant_store = store
    structlog.contextvars.bind_contextvars(user_id=str(user_id))

    return AuthenticatedCaller(user_id=user_id, store=store)


# Type alias for route signatures
CurrentCaller = Annotated[AuthenticatedCaller, Depends(get_current_caller)]
