"""Main FastAPI application entry point.

Wires settings, middleware (CORS, tracing), global exception handlers and
routers into the application instance.

Run:
    uvicorn src.main:app --host 0.0.0.0 --port 4000
    python -m src.main
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup reports missing identity-provider configuration as a warning;
    the process still starts and protected requests answer 500 until the
    configuration is fixed.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    if not settings.is_supabase_configured:
        logger.warning(
            "Supabase is not configured",
            supabase_url_set=settings.supabase_url is not None,
            supabase_anon_key_set=settings.supabase_anon_key is not None,
        )
    logger.info(
        "Application started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    logger.info("Application stopped")


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant bookkeeping API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# CORS is added last so it wraps everything, including error responses
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)


if __name__ == "__main__":
    uvicorn.run("src.main:app", host=settings.host, port=settings.port)
