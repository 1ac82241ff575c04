"""
Pydantic schemas for the orders API.

These schemas define the API contract. No business logic belongs here.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class OrderItem(BaseModel):
    """A single order in an API response."""

    id: str
    price: Decimal
    tax: Decimal
    final_price: Decimal


class ListOrdersResponse(BaseModel):
    """Response schema for the list orders endpoint.

    Attributes:
        orders: Orders in the order the repository returned them.
        count: Number of orders returned.
    """

    orders: list[OrderItem]
    count: int = Field(..., ge=0)


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
