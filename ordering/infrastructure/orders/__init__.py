"""Orders bounded context: infrastructure adapters."""

from ordering.infrastructure.orders.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from ordering.infrastructure.orders.sql_order_repository import (
    SqlOrderRepositoryAdapter,
)

__all__ = ["InMemoryOrderRepository", "SqlOrderRepositoryAdapter"]
