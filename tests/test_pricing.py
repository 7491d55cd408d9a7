"""Tests for the threshold discount policy."""

from decimal import Decimal

import pytest

from solid_checkout.domain.pricing import ThresholdDiscountPolicy


class TestThresholdDiscountPolicy:
    @pytest.mark.parametrize("amount", ["0", "50", "99.99", "100", "100.00", "-20"])
    def test_amounts_at_or_below_threshold_are_not_discounted(self, amount):
        assert ThresholdDiscountPolicy().apply(Decimal(amount)) is None

    def test_amount_above_threshold_gets_ten_percent_off(self):
        assert ThresholdDiscountPolicy().apply(Decimal("200")) == Decimal("180")

    def test_discounted_amount_keeps_one_decimal_place(self):
        assert str(ThresholdDiscountPolicy().apply(Decimal("200"))) == "180.0"

    def test_threshold_is_exclusive(self):
        policy = ThresholdDiscountPolicy()
        assert policy.apply(Decimal("100")) is None
        assert policy.apply(Decimal("100.01")) == Decimal("90.009")

    def test_default_notice(self):
        assert ThresholdDiscountPolicy().notice == "A 10% discount has been applied!"

    def test_custom_threshold_and_rate(self):
        policy = ThresholdDiscountPolicy(threshold=Decimal("50"), rate=Decimal("0.125"))
        assert policy.apply(Decimal("80")) == Decimal("70")
        assert policy.apply(Decimal("50")) is None
        assert policy.notice == "A 12.5% discount has been applied!"
