"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, greeting)
- Error handlers (centralized domain/transport-to-HTTP mapping)
- Logging configuration
- Lifespan logging

No business logic belongs here.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from greeter.core.config import settings
from greeter.interfaces.greeting.router import router as greeting_router
from greeter.interfaces.health import router as health_router
from greeter.shared.errors.handlers import register_error_handlers
from greeter.shared.logging import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: log when the application stops serving."""
    yield
    logger.info("shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers and error handlers.
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

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(greeting_router)

    return app


app = create_app()
