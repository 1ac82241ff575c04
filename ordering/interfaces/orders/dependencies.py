"""
Dependency injection for the orders bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the orders context.
"""

import logging
from functools import lru_cache

from sqlalchemy import create_engine

from ordering.application.orders.list_orders import ListOrdersUseCase
from ordering.core.config import ORDER_STORE_MEMORY, ORDER_STORE_SQL, settings
from ordering.domain.orders.ports import OrderRepository
from ordering.infrastructure.orders.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from ordering.infrastructure.orders.sql_order_repository import (
    SqlOrderRepositoryAdapter,
)

logger = logging.getLogger(__name__)


def _get_db_engine():
    """Build a SQLAlchemy engine from application settings."""
    return create_engine(settings.get_database_url(), pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_order_repository() -> OrderRepository:
    """Build the configured order repository once per process."""
    store = settings.order_store.lower()
    logger.info("Wiring order repository: store=%s", store)

    if store == ORDER_STORE_MEMORY:
        return InMemoryOrderRepository()
    if store == ORDER_STORE_SQL:
        repo = SqlOrderRepositoryAdapter(engine=_get_db_engine())
        repo.create_schema()
        return repo
    raise ValueError(f"Unsupported ORDER_STORE: {settings.order_store}")


def get_list_orders_use_case() -> ListOrdersUseCase:
    """Build ListOrdersUseCase with its infrastructure dependencies."""
    return ListOrdersUseCase(order_repo=get_order_repository())
