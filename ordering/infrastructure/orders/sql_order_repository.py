"""
Adapter: SQL order repository.

Implements OrderRepository port.
Reads/writes the orders table through a SQLAlchemy engine.
"""

import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy import text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from ordering.domain.orders.entities import Order
from ordering.domain.orders.errors import OrderRepositoryError
from ordering.domain.orders.ports import OrderRepository

logger = logging.getLogger(__name__)


def _row_to_order(row: RowMapping) -> Order:
    """Map an orders row to an Order entity."""
    return Order(
        id=str(row["id"]),
        price=Decimal(str(row["price"])),
        tax=Decimal(str(row["tax"])),
        final_price=Decimal(str(row["final_price"])),
    )


class SqlOrderRepositoryAdapter(OrderRepository):
    """SQL adapter for the orders table (PostgreSQL or SQLite)."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_schema(self) -> None:
        """Create the orders table if it does not exist yet."""
        query = text(
            """
            CREATE TABLE IF NOT EXISTS orders (
                id VARCHAR(255) NOT NULL PRIMARY KEY,
                price NUMERIC NOT NULL,
                tax NUMERIC NOT NULL,
                final_price NUMERIC NOT NULL
            )
            """
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(query)
        except SQLAlchemyError as exc:
            logger.error("Failed to create orders table: %s", exc)
            raise OrderRepositoryError(str(exc)) from exc

    def save(self, order: Order) -> None:
        """Insert a single order."""
        query = text(
            """
            INSERT INTO orders (id, price, tax, final_price)
            VALUES (:id, :price, :tax, :final_price)
            """
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    query,
                    {
                        "id": order.id,
                        "price": str(order.price),
                        "tax": str(order.tax),
                        "final_price": str(order.final_price),
                    },
                )
        except SQLAlchemyError as exc:
            logger.error("Failed to save order id=%s: %s", order.id, exc)
            raise OrderRepositoryError(str(exc)) from exc
        logger.debug("Saved order: id=%s", order.id)

    def get_orders(self) -> list[Order]:
        """Return every row of the orders table as Order entities."""
        query = text("SELECT id, price, tax, final_price FROM orders")
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
        except SQLAlchemyError as exc:
            logger.error("Failed to read orders: %s", exc)
            raise OrderRepositoryError(str(exc)) from exc

        try:
            return [_row_to_order(row) for row in rows]
        except InvalidOperation as exc:
            logger.error("Malformed amount in orders table: %s", exc)
            raise OrderRepositoryError("malformed amount in orders table") from exc
