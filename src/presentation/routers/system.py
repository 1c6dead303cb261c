"""System router for unauthenticated application endpoints.

Root and health endpoints are side-effect free and never touch the identity
provider or the store.
"""

from fastapi import APIRouter

from src.core.config import settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Welcome message with API status and version.
    """
    return {
        "message": f"{settings.app_name} API",
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, bool]:
    """Health check endpoint for monitoring and load balancers."""
    return {"ok": True}
