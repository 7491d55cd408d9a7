"""
CLI entry point: wires the shared services and starts the checkout console.

Explicit construction stands in for a DI container: the order logger and the
repository are built exactly once here and passed by reference to the
console, which hands them to every OrderProcessor it creates.

Usage:
    # Interactive session:
    python -m solid_checkout.cli

    # Same, with diagnostics on stderr:
    python -m solid_checkout.cli --log-level DEBUG
"""

import argparse
import logging

from solid_checkout.console import CheckoutConsole
from solid_checkout.logging_config import LoggerService, configure_logging
from solid_checkout.repository import InMemoryOrderRepository

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive order and payment console")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Threshold for diagnostics written to stderr (order log lines always print)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    logger = logging.getLogger(__name__)

    order_logger = LoggerService()
    order_repository = InMemoryOrderRepository()
    logger.debug("Services ready; starting console")

    CheckoutConsole(order_logger, order_repository).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
