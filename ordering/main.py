"""
Application entry point.

Creates the FastAPI application and wires together routers,
error handlers and logging configuration.

No business logic belongs here.
"""

from fastapi import FastAPI

from ordering.core.config import settings
from ordering.interfaces.health import router as health_router
from ordering.interfaces.orders.router import router as orders_router
from ordering.shared.errors.handlers import register_error_handlers
from ordering.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    register_error_handlers(app)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(orders_router, prefix="/api/v1")

    return app


app = create_app()
