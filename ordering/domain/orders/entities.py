"""
Domain entities for the orders bounded context.

Entities carry data between layers. They contain no framework
imports and no IO operations.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Order:
    """A customer order as stored by the order repository."""

    id: str
    price: Decimal = Decimal("0")
    tax: Decimal = Decimal("0")
    final_price: Decimal = Decimal("0")
