"""
Adapter: In-memory order repository.

Implements OrderRepository port on a plain Python list.
Used for local development and as the default store.
"""

from typing import Iterable, Optional

from ordering.domain.orders.entities import Order
from ordering.domain.orders.ports import OrderRepository


class InMemoryOrderRepository(OrderRepository):
    """Keeps orders in insertion order for the lifetime of the process."""

    def __init__(self, orders: Optional[Iterable[Order]] = None) -> None:
        self._orders: list[Order] = list(orders or [])

    def add(self, order: Order) -> None:
        """Append an order to the store."""
        self._orders.append(order)

    def get_orders(self) -> list[Order]:
        """Return a snapshot of all stored orders in insertion order."""
        return list(self._orders)
