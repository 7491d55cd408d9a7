"""
Interactive checkout console.

Reads a menu choice, collects payment details, and hands the order to an
OrderProcessor built for the chosen payment method:

    1 -> payment type, amount (re-prompted until it parses), process order
    2 -> print transaction history
    3 -> exit

The order logger and the repository are created once by the caller and
shared across every iteration; the repository is the only state that
survives from one menu choice to the next. End of input (or Ctrl+C) at any
prompt ends the session the same way as choosing 3.
"""

import logging
import re
from collections.abc import Callable
from decimal import Decimal

from solid_checkout.domain.models import Order, format_amount
from solid_checkout.domain.pricing import DiscountPolicy
from solid_checkout.errors import InvalidPaymentTypeError
from solid_checkout.logging_config import OrderLogger
from solid_checkout.processor import OrderProcessor
from solid_checkout.repository import OrderRepository
from solid_checkout.services.factory import PaymentFactory

logger = logging.getLogger(__name__)

MENU = "Choose an option: \n1. Make a Payment \n2. View Transaction History \n3. Exit"
PAYMENT_TYPE_PROMPT = "Enter payment type (CreditCard/PayPal): "
AMOUNT_PROMPT = "Enter order amount: "
AMOUNT_REPROMPT = "Invalid input. Enter a valid amount: "
INVALID_CHOICE = "Invalid choice. Please enter 1, 2, or 3."
AMOUNT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)")


def parse_amount(text: str) -> Decimal | None:
    """Parse a user-entered amount, or return None if it is not a plain decimal.

    Only an optional sign, digits and one decimal point are accepted;
    exponents, digit-group underscores, NaN and infinities are rejected.
    """
    text = text.strip()
    if not AMOUNT_PATTERN.fullmatch(text):
        return None
    return Decimal(text)


class CheckoutConsole:
    """The read-process-print loop.

    `input_func` has the signature of the builtin `input` (the default) and is
    the only way the console reads; pass a scripted function to drive it
    from tests.
    """

    def __init__(
        self,
        order_logger: OrderLogger,
        order_repository: OrderRepository,
        input_func: Callable[[str], str] | None = None,
        discount_policy: DiscountPolicy | None = None,
    ) -> None:
        self.order_logger = order_logger
        self.order_repository = order_repository
        self.input = input_func or input
        self.discount_policy = discount_policy

    def run(self) -> None:
        logger.info("Checkout session started")
        try:
            while True:
                print(MENU)
                choice = self.input("")
                if choice == "3":
                    break
                if choice == "1":
                    self.make_payment()
                elif choice == "2":
                    self.show_history()
                else:
                    print(INVALID_CHOICE)
        except (EOFError, KeyboardInterrupt):
            print()
            logger.info("Input closed, leaving checkout")
        logger.info("Checkout session ended with %d order(s)", len(self.order_repository.get_orders()))

    def make_payment(self) -> None:
        payment_type = self.input(PAYMENT_TYPE_PROMPT)
        amount = self.read_amount()

        try:
            payment_method = PaymentFactory.create(payment_type)
        except InvalidPaymentTypeError as exc:
            logger.warning("Rejected payment type %r", exc.label)
            print(f"Error: {exc}")
            return

        processor = OrderProcessor(
            payment_method,
            self.order_logger,
            self.order_repository,
            discount_policy=self.discount_policy,
        )
        processor.process_order(Order(amount=amount, payment_type=payment_type))

    def read_amount(self) -> Decimal:
        amount = parse_amount(self.input(AMOUNT_PROMPT))
        while amount is None:
            amount = parse_amount(self.input(AMOUNT_REPROMPT))
        return amount

    def show_history(self) -> None:
        print("\nTransaction History:")
        for order in self.order_repository.get_orders():
            print(f"- Payment: {order.payment_type}, Amount: ${format_amount(order.amount)}")
