"""
Use case: List all orders.

Input: None
Output: list[Order]
Side effects: None (read-only query).
Failure cases: OrderRepositoryError, raised by the repository and
propagated as-is.
"""

import logging

from ordering.domain.orders.entities import Order
from ordering.domain.orders.ports import OrderRepository

logger = logging.getLogger(__name__)


class ListOrdersUseCase:
    """Orchestrates retrieval of the full order collection.

    The repository result is returned exactly as produced: no filtering,
    sorting or pagination, and no caching between calls.
    """

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def execute(self) -> list[Order]:
        """Run the list orders use case.

        Returns:
            The orders returned by the repository, unmodified.
        """
        logger.info("Listing all orders")

        orders = self._order_repo.get_orders()

        logger.debug("Repository returned %d orders", len(orders))
        return orders
