# File: src/mstair/vardump/xlogging/logger_factory.py
"""
Logger factory for creating and configuring CoreLogger instances.
"""

import logging
import sys
from pathlib import Path

from mstair.vardump.xlogging.core_logger import CoreLogger


DEFAULT_LOG_LEVEL = logging.WARNING  # Default log level if not specified in environment variables


def create_logger(
    name: str | None,
    *,
    level: int | str | None = None,
) -> CoreLogger:
    """
    Return a CoreLogger with a consistent name.

    Handles normal imports (uses given name) and direct script execution (__main__).
    """
    logger_name: str = name or "vardump"
    if logger_name == "__main__":
        arg0 = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
        logger_name = arg0.stem if arg0 and arg0.exists() else "embedded_main"

    existing = logging.Logger.manager.loggerDict.get(logger_name)
    if isinstance(existing, CoreLogger):
        if level is not None:
            existing.setLevel(level)
        return existing

    if isinstance(existing, logging.Logger):
        # Plain Logger registered first (e.g. by caplog.set_level): replace it, keep its level
        del logging.Logger.manager.loggerDict[logger_name]
        if level is None and existing.level != logging.NOTSET:
            level = existing.level

    logger = _get_core_logger_from_logging(logger_name)
    if level is not None:
        logger.setLevel(level)
    return logger


def _get_core_logger_from_logging(name: str) -> CoreLogger:
    """
    Create or retrieve a CoreLogger through logging.getLogger().

    Temporarily sets CoreLogger as the logger class so the logger joins the
    logging hierarchy (parent relationships, propagation, caplog).

    :raises TypeError: If getLogger() returns wrong type.
    """
    logging_class = logging.getLoggerClass()
    if logging_class is not CoreLogger:
        logging.setLoggerClass(CoreLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        if logging_class is not CoreLogger:
            logging.setLoggerClass(logging_class)
    if not isinstance(logger, CoreLogger):
        raise TypeError(f"Failed to create CoreLogger: {logger!r}")
    return logger


# End of file: src/mstair/vardump/xlogging/logger_factory.py
