# File: src/mstair/vardump/xlogging/logger_formatter.py

import logging
from typing import Any, Literal

from colorama import Fore, Style

import mstair.vardump.base.config as cfg
from mstair.vardump.xlogging.logger_constants import TRACE


__all__ = ["CoreFormatter", "get_color_code", "rgb_code"]


FormatStyle = Literal["%", "{", "$"]

DEFAULT_FORMAT = "%(levelName)s %(name)s:%(lineno)d %(funcName)s() %(message)s"


def rgb_code(r: int, g: int, b: int) -> str:
    """
    Convert RGB values to ANSI escape code for terminal color output.

    :param r: Red component (0-255)
    :param g: Green component (0-255)
    :param b: Blue component (0-255)
    :return str: ANSI escape code for the specified RGB color.
    """
    return f"\033[38;2;{max(0, min(255, r))};{max(0, min(255, g))};{max(0, min(255, b))}m"


COLOR_MAP: dict[Any, str] = {
    "TRACE": rgb_code(96, 0, 64),  # Mauve for trace logs
    "DEBUG": Fore.LIGHTBLACK_EX,
    "INFO": rgb_code(184, 184, 216),  # Light gray for info logs
    "WARNING": rgb_code(192, 176, 0),  # Yellow for warnings
    "ERROR": rgb_code(224, 128, 0),  # Orange for errors
    "CRITICAL": rgb_code(255, 64, 64),  # Red for critical errors
    None: Fore.RESET,
}


def get_color_code(key: Any = None) -> str:
    """Return the ANSI code for a level name or colorama color name, or "" when colors are off."""
    # Disable color codes in code analyzer and lambda functions
    if not cfg.in_desktop_mode():
        return ""
    if key in {"", "RESET"} or key is None:
        return Fore.RESET
    if key in COLOR_MAP:
        return COLOR_MAP[key]
    if isinstance(key, str) and key.startswith("#"):
        return rgb_code(*[int(key[i : i + 2], 16) for i in (1, 3, 5)])
    _clean_key = str(key).upper()
    if "LIGHT" in _clean_key and not _clean_key.endswith("_EX"):
        _clean_key += "_EX"
    return getattr(Fore, _clean_key, Fore.RESET)


class CoreFormatter(logging.Formatter):
    """Formatter for CoreLogger records: color-coded level names and an optional message color."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
    ) -> None:
        super().__init__(fmt=fmt or DEFAULT_FORMAT, datefmt=datefmt, style=style, validate=validate)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == TRACE:
            record.levelname = "TRACE"
        color = get_color_code(record.levelname)
        reset = Style.RESET_ALL if color else ""
        record.levelName = f"{color}{record.levelname:<7}{reset}"
        try:
            message_str = super().format(record)
        except Exception as exc:
            message_str = f"(LOGGING FORMAT ERROR: {exc!r}) {record.msg!r}"
        message_color = getattr(record, "color", None)
        if message_color:
            code = get_color_code(message_color)
            if code:
                message_str = f"{code}{message_str}{Style.RESET_ALL}"
        return message_str


# End of file: src/mstair/vardump/xlogging/logger_formatter.py
