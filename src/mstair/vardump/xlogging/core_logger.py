# File: src/mstair/vardump/xlogging/core_logger.py
"""
Structured logging with environment-driven configuration.

Example:
    >>> from mstair.vardump.xlogging import create_logger
    >>> logger = create_logger(__name__)
    >>> logger.trace("entered %s", "Node#1")

Design:
- Only the root logger owns handlers/formatters; CoreLogger instances propagate.
- Log levels are controlled per-logger (via environment and LogLevelConfig).
- initialize_root() is the only supported entry point for root setup.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from mstair.vardump.base import config as cfg
from mstair.vardump.xlogging.logger_constants import TRACE, initialize_logger_constants
from mstair.vardump.xlogging.logger_formatter import CoreFormatter
from mstair.vardump.xlogging.logger_util import LogLevelConfig


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_ROOT_ATTR_NAME = "_vardump_corelogger_initialized"


class CoreLogger(logging.Logger):
    """
    Application logger that extends logging.Logger with a TRACE level and
    environment-driven level resolution.

    Handlers are not attached directly; all CoreLogger instances propagate
    to root logger, which holds a single stderr handler per initialize_root().
    """

    def __init__(
        self,
        name: str,
        level: int | str | None = logging.NOTSET,
    ) -> None:
        initialize_logger_constants()
        if level in {logging.NOTSET, "NOTSET", "", None}:
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{self.__class__.__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Log 'msg % args' with severity 'TRACE'."""
        self.log(TRACE, msg, *args, **kwargs)

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Emit a log record unless analysis mode is active."""
        if cfg.in_analysis_mode():
            return
        if not self.isEnabledFor(level):
            return
        initialize_root()
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
        super().log(level, msg, *args, **kwargs)


def initialize_root(
    *,
    level: int | None = None,
    stream: TextIO | None = None,
    force: bool = False,
) -> None:
    """
    Install one stderr StreamHandler with CoreFormatter on the root logger.

    State is kept on the root logger attribute to avoid module-global leaks.
    Host applications that configured their own root handlers are left alone.

    :param level: Optional root level.
    :param stream: Stream for the handler (default: current sys.stderr).
    :param force: Replace a previously installed handler.
    """
    root = logging.getLogger()
    installed: logging.Handler | None = getattr(root, _LOG_ROOT_ATTR_NAME, None)
    if installed is not None and not force:
        if level is not None:
            root.setLevel(level)
        return
    if installed is not None:
        root.removeHandler(installed)
        installed.close()
    elif root.handlers and not force:
        setattr(root, _LOG_ROOT_ATTR_NAME, root.handlers[0])
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(CoreFormatter())
    root.addHandler(handler)
    setattr(root, _LOG_ROOT_ATTR_NAME, handler)
    if level is not None:
        root.setLevel(level)


# End of file: src/mstair/vardump/xlogging/core_logger.py
