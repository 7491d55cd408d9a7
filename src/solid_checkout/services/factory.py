"""
Factory for payment method variants.

The **Factory pattern** centralises construction: the console asks
`PaymentFactory.create(label)` for a payment method instead of instantiating
variants itself.

Benefits:
  - Single point of change when a variant needs constructor args.
  - New providers are added with `register()`, without editing callers.
  - Callers depend on the PaymentMethod protocol, never on concrete classes.
"""

import logging

from solid_checkout.errors import InvalidPaymentTypeError
from solid_checkout.services.payment import CreditCardPayment, PaymentMethod, PayPalPayment

logger = logging.getLogger(__name__)


class PaymentFactory:
    """Maps a payment-type label to a fresh PaymentMethod (class-level registry)."""

    _variants: dict[str, type[PaymentMethod]] = {
        CreditCardPayment.label: CreditCardPayment,
        PayPalPayment.label: PayPalPayment,
    }

    @classmethod
    def create(cls, type_label: str) -> PaymentMethod:
        """Return a new payment method for `type_label`.

        Matching is exact and case-sensitive. Raises InvalidPaymentTypeError
        for anything else.
        """
        variant = cls._variants.get(type_label)
        if variant is None:
            raise InvalidPaymentTypeError(type_label)
        logger.debug("Creating %s for label %r", variant.__name__, type_label)
        return variant()

    @classmethod
    def register(cls, label: str, variant: type[PaymentMethod]) -> None:
        if label in cls._variants:
            logger.info("Replacing payment variant for label %r", label)
        cls._variants[label] = variant

    @classmethod
    def labels(cls) -> list[str]:
        return list(cls._variants)
