"""Logging configuration for the AppRole client."""

import logging

import structlog


def configure_logging(debug: bool = False) -> None:
    """
    Configure structlog for the AppRole client.

    Level is DEBUG when debug is True, otherwise INFO.
    """
    level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

