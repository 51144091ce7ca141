# File: src/mstair/vardump/xlogging/logger_constants.py

import logging


TRACE = logging.DEBUG - 1  # (9) LOG.trace() will not output at DEBUG level


_logging_constants_initialized = False


def initialize_logger_constants() -> None:
    """Initialize custom logging levels if not already initialized."""
    global _logging_constants_initialized
    if _logging_constants_initialized:
        return
    _logging_constants_initialized = True
    if "TRACE" not in logging.getLevelNamesMapping():
        logging.addLevelName(TRACE, "TRACE")


# End of file: src/mstair/vardump/xlogging/logger_constants.py
