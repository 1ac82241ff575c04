"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ordering.domain.orders.errors import OrderRepositoryError, OrdersDomainError

logger = logging.getLogger(__name__)

HTTP_500 = 500
HTTP_503 = 503


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(OrderRepositoryError)
    async def handle_order_repository(
        _request: Request, exc: OrderRepositoryError
    ) -> JSONResponse:
        """Handle failures of the order store."""
        logger.error("Order repository error: %s", exc.reason)
        return _error_response(HTTP_503, "Order repository unavailable")

    @app.exception_handler(OrdersDomainError)
    async def handle_orders_domain(
        _request: Request, exc: OrdersDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled orders domain errors."""
        logger.error("Unhandled orders domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
