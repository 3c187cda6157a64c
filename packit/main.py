"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- SQL schema setup and engine disposal when the postgres backend is used

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from packit.core.config import settings
from packit.infrastructure.packing.database import create_schema
from packit.interfaces.health import router as health_router
from packit.interfaces.packing.dependencies import get_db_engine, uses_sql_storage
from packit.interfaces.packing.router import router as packing_router
from packit.shared.errors.handlers import register_error_handlers
from packit.shared.logging import configure_logging
from packit.shared.security.headers import SecurityHeadersMiddleware
from packit.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare and release the SQL engine if configured."""
    if uses_sql_storage():
        engine = get_db_engine()
        await create_schema(engine)
        try:
            yield
        finally:
            await engine.dispose()
    else:
        logger.info("Using in-memory packing list storage")
        yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(packing_router, prefix="/api/v1")

    return app


app = create_app()
