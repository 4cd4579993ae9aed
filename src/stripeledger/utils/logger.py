"""Logging setup for the command line tool."""

import logging

import click

LOGGER_NAME = "stripeledger"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ClickEchoHandler(logging.Handler):
    """Write log records to whatever stderr click currently sees."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Args:
        debug: Log at DEBUG level, including outbound Stripe requests

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Replace handlers so repeated CLI invocations in one process don't stack
    logger.handlers.clear()
    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    stripe_logger = logging.getLogger("stripe")
    stripe_logger.handlers.clear()
    if debug:
        stripe_logger.setLevel(logging.DEBUG)
        stripe_logger.addHandler(handler)
    else:
        stripe_logger.setLevel(logging.WARNING)

    return logger
