"""
Port interfaces (ABCs) for the orders bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from ordering.domain.orders.entities import Order


class OrderRepository(ABC):
    """Port for retrieving orders from storage."""

    @abstractmethod
    def get_orders(self) -> list[Order]:
        """Return all orders known to the backing store at call time.

        Raises:
            OrderRepositoryError: If the store cannot be read.
        """
        raise NotImplementedError
