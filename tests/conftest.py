"""Shared fixtures for the checkout tests."""

import logging
from collections.abc import Callable, Iterable

import pytest

from solid_checkout.logging_config import ORDER_LOGGER_NAME
from solid_checkout.services.factory import PaymentFactory


def _scripted_input(lines: Iterable[str]) -> Callable[[str], str]:
    remaining = iter(lines)

    def _input(prompt: str = "") -> str:
        print(prompt, end="")
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.fixture
def scripted_input():
    """Factory for `input` replacements that replay lines, echoing prompts.

    The returned function raises EOFError once the script runs out, like a
    closed stdin.
    """
    return _scripted_input


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level
    order_logger = logging.getLogger(ORDER_LOGGER_NAME)
    yield
    root.handlers[:] = root_handlers
    root.setLevel(root_level)
    order_logger.handlers.clear()
    order_logger.setLevel(logging.NOTSET)
    order_logger.propagate = True


@pytest.fixture(autouse=True)
def restore_payment_registry():
    saved = dict(PaymentFactory._variants)
    yield
    PaymentFactory._variants.clear()
    PaymentFactory._variants.update(saved)
