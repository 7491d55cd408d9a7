"""
Error taxonomy for the checkout console.

Only one failure is raised as an exception: asking the payment factory for a
label it does not know. Malformed amounts and unknown menu choices are handled
in place by the console and never surface as errors.
"""


class CheckoutError(Exception):
    """Base class for errors raised by the checkout package."""


class InvalidPaymentTypeError(CheckoutError, ValueError):
    """Raised by PaymentFactory when a label matches no registered variant.

    The message is shown to the user verbatim as ``Error: <message>``.
    """

    def __init__(self, label: str) -> None:
        super().__init__("Invalid payment type")
        self.label = label
