# arraysmith/logging.py
"""
Logging for arraysmith.

Every module logs through a child of the "arraysmith" logger:
    from arraysmith.logging import get_logger
    logger = get_logger(__name__)

arraysmith only emits DEBUG records (build start, producer failures, refused
pushes and finishes). The package logger carries a NullHandler, so nothing is
printed until an application calls configure_logging() or
arraysmith.config.configure_logging_from_config().
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "arraysmith"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stdout,
    logger_name: Optional[str] = None,
):
    """
    Attach a stream handler and set the level.

    Args:
        level: Level for the target logger
        fmt: Record format for the installed handler
        stream: Where records are written
        logger_name: Logger to configure; the root logger by default. Pass
            PACKAGE_LOGGER to see arraysmith's output without touching root.

    Repeated calls only adjust the level: a second stream handler is never
    added to a logger that already has one.
    """
    target = logging.getLogger(logger_name)
    if not any(isinstance(h, logging.StreamHandler) for h in target.handlers):
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        target.addHandler(handler)

    target.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Logger for an arraysmith module, named after its import path."""
    return logging.getLogger(name)
