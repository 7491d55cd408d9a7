"""
Domain models for the checkout workflow.

Models use Pydantic v2 BaseModel, as elsewhere in the package. Amounts are
``Decimal`` so that discounts stay exact and render the way a cashier expects
(``200 * 0.9`` prints as ``180.0``, ``99.99`` prints unchanged).

Enums inherit from (str, Enum) so a member compares equal to the plain label
the user typed (e.g. ``PaymentType.PAYPAL == "PayPal"``).
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class PaymentType(str, Enum):
    """Payment labels the factory knows out of the box."""

    CREDIT_CARD = "CreditCard"
    PAYPAL = "PayPal"


class Order(BaseModel):
    """A single order as entered at the console.

    ``payment_type`` is the label exactly as the user typed it; it is not
    checked against the variant that ends up processing the payment.
    ``amount`` is rewritten once by OrderProcessor when a discount applies
    and is left alone after the order is saved.
    """

    amount: Decimal
    payment_type: str = Field(..., min_length=1)


def format_amount(amount: Decimal) -> str:
    """Render an amount in fixed-point notation (``1E-7`` prints as ``0.0000001``)."""
    return f"{amount:f}"
