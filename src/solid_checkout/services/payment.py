"""
Payment method variants.

Part of the **service layer**: each variant stands in for a call to a real
provider (a card processor, PayPal's API). Here processing a payment means
printing a confirmation line to the console.

Variants are stateless and created per transaction by PaymentFactory. Adding
a provider means adding a class here and registering it with the factory;
OrderProcessor is never touched (open/closed).
"""

import logging
from decimal import Decimal
from typing import ClassVar, Protocol

from solid_checkout.domain.models import PaymentType, format_amount

logger = logging.getLogger(__name__)


class PaymentMethod(Protocol):
    """Interface for charging an amount.

    The amount is trusted: callers have already parsed and discounted it,
    and the sign is not checked.
    """

    def process_payment(self, amount: Decimal) -> None: ...


class CreditCardPayment:
    """Simulates a credit card charge."""

    label: ClassVar[str] = PaymentType.CREDIT_CARD.value

    def process_payment(self, amount: Decimal) -> None:
        logger.debug("Charging %s to credit card", format_amount(amount))
        print(f"Processing credit card payment of ${format_amount(amount)}")


class PayPalPayment:
    """Simulates a PayPal charge."""

    label: ClassVar[str] = PaymentType.PAYPAL.value

    def process_payment(self, amount: Decimal) -> None:
        logger.debug("Charging %s via PayPal", format_amount(amount))
        print(f"Processing PayPal payment of ${format_amount(amount)}")
