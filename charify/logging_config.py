"""Logging configuration for the Charify chat server."""

import logging
import sys

# Configure package logger
logger = logging.getLogger("charify")


def configure_logging(level: int = logging.INFO) -> None:
    """Set up logging configuration."""

    # Configure root logger first
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear all existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '[%(asctime)s][%(levelname)s] %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    # Module loggers (charify.services.*, charify.routes.*) propagate up to here
    logger.handlers.clear()
    logger.addHandler(console_handler)
    logger.setLevel(level)
    logger.propagate = False

    # Quiet uvicorn's per-request access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str = "charify") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
