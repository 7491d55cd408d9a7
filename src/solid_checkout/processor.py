"""
OrderProcessor: runs one order through discount, payment and storage.

The processor depends only on capabilities (Dependency Inversion): a
PaymentMethod, an OrderLogger and an OrderRepository, plus a DiscountPolicy
for the pricing rule. Concrete variants are chosen by whoever builds it.

Execution flow (strictly linear):
    1. Apply the discount policy, rewriting ``order.amount`` in place
    2. Log "Processing order..."
    3. Charge the (possibly discounted) amount
    4. Save the order
    5. Log "Order processed."

Nothing here catches exceptions; a failing collaborator propagates to the
caller and the remaining steps are skipped.
"""

import logging

from solid_checkout.domain.models import Order, format_amount
from solid_checkout.domain.pricing import DiscountPolicy, ThresholdDiscountPolicy
from solid_checkout.logging_config import OrderLogger
from solid_checkout.repository import OrderRepository
from solid_checkout.services.payment import PaymentMethod

logger = logging.getLogger(__name__)


class OrderProcessor:
    def __init__(
        self,
        payment_method: PaymentMethod,
        order_logger: OrderLogger,
        order_repository: OrderRepository,
        discount_policy: DiscountPolicy | None = None,
    ) -> None:
        self.payment_method = payment_method
        self.order_logger = order_logger
        self.order_repository = order_repository
        # Strategy pattern: swap in a different policy if needed.
        self.discount_policy: DiscountPolicy = discount_policy or ThresholdDiscountPolicy()

    def process_order(self, order: Order) -> None:
        discounted = self.discount_policy.apply(order.amount)
        if discounted is not None:
            logger.debug(
                "Discount applied: %s -> %s", format_amount(order.amount), format_amount(discounted)
            )
            order.amount = discounted
            print(self.discount_policy.notice)

        self.order_logger.log("Processing order...")
        self.payment_method.process_payment(order.amount)
        self.order_repository.save_order(order)
        self.order_logger.log("Order processed.")
