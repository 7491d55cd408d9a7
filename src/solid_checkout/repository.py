"""
Order repository (Repository pattern).

OrderProcessor saves through the `OrderRepository` protocol; the console
reads history through it. The only implementation keeps orders in a list
for the lifetime of the process. Nothing is ever removed or reordered.
"""

import logging
from typing import Protocol

from solid_checkout.domain.models import Order, format_amount

logger = logging.getLogger(__name__)


class OrderRepository(Protocol):
    def save_order(self, order: Order) -> None: ...

    def get_orders(self) -> list[Order]: ...


class InMemoryOrderRepository:
    """Append-only, insertion-ordered order store."""

    def __init__(self) -> None:
        self._orders: list[Order] = []

    def save_order(self, order: Order) -> None:
        self._orders.append(order)
        logger.debug(
            "Stored order #%d (%s %s)",
            len(self._orders),
            order.payment_type,
            format_amount(order.amount),
        )
        print("Order saved successfully.")

    def get_orders(self) -> list[Order]:
        """Return the stored orders, oldest first.

        The list is the repository's own storage; treat it as read-only.
        """
        return self._orders

    def __len__(self) -> int:
        return len(self._orders)
