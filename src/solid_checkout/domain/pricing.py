"""
Discount policies (Strategy pattern).

OrderProcessor holds a reference to a `DiscountPolicy` (a Protocol) and calls
`apply()` on every order. To add a new scheme (e.g. a loyalty discount),
implement the protocol and hand it to the processor; the processor itself
does not change.

Policies are pure: no I/O, no clock, no shared state.
"""

from decimal import Decimal
from typing import Protocol

DISCOUNT_THRESHOLD = Decimal("100")  # exclusive: 100.00 itself pays full price
DISCOUNT_RATE = Decimal("0.10")


class DiscountPolicy(Protocol):
    """Interface for discounting an order amount.

    `apply()` returns the discounted amount, or None when the policy does
    not apply. `notice` is the line shown to the user when it does.
    """

    notice: str

    def apply(self, amount: Decimal) -> Decimal | None: ...


class ThresholdDiscountPolicy:
    """Flat percentage off any amount strictly above a threshold.

    Examples (default 10% above $100):
        - 100    -> not discounted
        - 100.01 -> 90.009
        - 200    -> 180.0
    """

    def __init__(self, threshold: Decimal = DISCOUNT_THRESHOLD, rate: Decimal = DISCOUNT_RATE) -> None:
        self.threshold = Decimal(threshold)
        self.rate = Decimal(rate)
        # normalized so 0.90 multiplies as 0.9 and 200 becomes 180.0, not 180.00
        self.multiplier = (1 - self.rate).normalize()
        # 0.10 -> "10", 0.125 -> "12.5"
        percent = (self.rate * 100).normalize()
        self.notice = f"A {percent:f}% discount has been applied!"

    def apply(self, amount: Decimal) -> Decimal | None:
        if amount > self.threshold:
            return amount * self.multiplier
        return None
