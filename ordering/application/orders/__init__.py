"""Orders bounded context: application layer."""

from ordering.application.orders.list_orders import ListOrdersUseCase

__all__ = ["ListOrdersUseCase"]
