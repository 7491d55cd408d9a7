"""
Logging for the checkout console.

Two channels share the stdlib `logging` machinery:

  - The **order log**: the `solid_checkout.orders` logger, written to stdout
    as ``[<timestamp>] Log: <message>`` lines that are part of the console
    transcript. `LoggerService` is the single-method facade the order
    processor depends on.
  - **Diagnostics**: every module's ``logging.getLogger(__name__)``, routed to
    stderr through the root logger and silent below WARNING by default.
"""

import logging
import sys
from datetime import datetime
from typing import Protocol, TextIO

ORDER_LOGGER_NAME = "solid_checkout.orders"
ORDER_LOG_FORMAT = "[%(asctime)s] Log: %(message)s"
DIAGNOSTIC_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class OrderLogFormatter(logging.Formatter):
    """Renders timestamps as ``M/d/yyyy h:mm:ss AM``, without zero padding."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        when = datetime.fromtimestamp(record.created)
        hour = when.hour % 12 or 12
        meridiem = "AM" if when.hour < 12 else "PM"
        return f"{when.month}/{when.day}/{when.year} {hour}:{when:%M:%S} {meridiem}"


class OrderLogger(Protocol):
    """Anything that can record a line in the order log."""

    def log(self, message: str) -> None: ...


class LoggerService:
    """Writes timestamped order-log lines.

    Holds no state of its own beyond the logger reference, so one instance is
    shared by every OrderProcessor for the life of the process. When the
    order logger has no handler yet, the stdout handler is installed here so
    log lines are never dropped.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        if logger is None:
            logger = logging.getLogger(ORDER_LOGGER_NAME)
            if not logger.handlers:
                install_order_handler(logger)
        self._logger = logger

    def log(self, message: str) -> None:
        self._logger.info(message)


def install_order_handler(order_logger: logging.Logger, stream: TextIO | None = None) -> None:
    """Point `order_logger` at a single stdout (or `stream`) handler."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(OrderLogFormatter(ORDER_LOG_FORMAT))

    for old in list(order_logger.handlers):
        order_logger.removeHandler(old)
    order_logger.addHandler(handler)
    order_logger.setLevel(logging.INFO)
    # order lines belong on stdout only, never duplicated into diagnostics
    order_logger.propagate = False


def configure_logging(level: int | str = logging.WARNING, stream: TextIO | None = None) -> None:
    """Install handlers for both channels.

    Safe to call more than once: the order-log handler is replaced rather
    than stacked, and the root configuration is forced.
    """
    logging.basicConfig(level=level, format=DIAGNOSTIC_FORMAT, stream=sys.stderr, force=True)
    install_order_handler(logging.getLogger(ORDER_LOGGER_NAME), stream)
