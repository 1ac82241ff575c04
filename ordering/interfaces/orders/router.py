"""
FastAPI router for the orders bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends

from ordering.application.orders.list_orders import ListOrdersUseCase
from ordering.interfaces.orders.dependencies import get_list_orders_use_case
from ordering.interfaces.orders.schemas import (
    ErrorResponse,
    ListOrdersResponse,
    OrderItem,
)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get(
    "",
    response_model=ListOrdersResponse,
    responses={503: {"model": ErrorResponse}},
    summary="List orders",
    description="Returns every order known to the order store.",
)
def list_orders(
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
) -> ListOrdersResponse:
    """Return all orders."""
    orders = use_case.execute()
    return ListOrdersResponse(
        orders=[
            OrderItem(
                id=order.id,
                price=order.price,
                tax=order.tax,
                final_price=order.final_price,
            )
            for order in orders
        ],
        count=len(orders),
    )
