# File: src/mstair/vardump/xlogging/logger_util.py
"""
Environment variable-driven log level configuration.

Two sources are supported:
- Pattern-based DSL strings in LOG_LEVEL / LOG_LEVELS, e.g. ``"WARNING, mstair.vardump=DEBUG"``
- Per-logger overrides in variables like LOG_LEVEL_MSTAIR_VARDUMP_DUMPER

A ``.env`` file is loaded first (without overriding the process environment).

Precedence for a logger name: exact > ancestor > glob > default > fallback.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Final, NamedTuple

from dotenv import find_dotenv, load_dotenv

from mstair.vardump.xlogging.logger_constants import initialize_logger_constants


__all__ = ["LogLevelConfig", "fs_load_dotenv"]

_LOG_VAR_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_LOG_VAR_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")

_log_level_config_instance: LogLevelConfig | None = None


def fs_load_dotenv(*, override: bool = False) -> bool:
    """
    Load variables from the nearest ``.env`` file into the environment.

    :param override: Whether ``.env`` values replace variables already set.
    :return: True if at least one environment variable was set, else False.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        return False
    return load_dotenv(dotenv_path, override=override)


@dataclass(slots=True)
class LogEnvVar:
    """
    Parsed representation of a log-level environment variable.

    Recognizes names starting with LOG_LEVEL or LOG_LEVELS. The suffix encodes the
    target module ("__" -> "_" and "_" -> ".").
    """

    NAME_RX: ClassVar[re.Pattern[str]] = re.compile(
        r"""
        ^(?P<BASENAME>LOG_LEVELS?)          # LOG_LEVEL or LOG_LEVELS
        (?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$  # optional suffix
        """,
        re.VERBOSE,
    )

    name: str = field(default="", repr=False)
    module: str = field(default="", repr=True)
    value: str = field(default="", repr=False)

    @classmethod
    def from_env_var(cls, name: str, value: str) -> LogEnvVar | None:
        """Return a LogEnvVar if the given (name, value) is valid, else None."""
        re_match = LogEnvVar.NAME_RX.match(name)
        if re_match is None:
            return None
        suffix: str = re_match["SUFFIX"].lstrip("_")
        if not suffix or suffix.upper() == "ROOT":
            module = ""
        else:
            module = suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()
        return cls(name=name, module=module, value=value)

    @classmethod
    def from_environ(cls) -> Iterator[LogEnvVar]:
        """Yield LogEnvVar instances for all matching environment variables."""
        fs_load_dotenv()
        for name, value in sorted(os.environ.items(), reverse=True):
            env_var = cls.from_env_var(name, value)
            if env_var:
                yield env_var


class LogEnvPatternLevel(NamedTuple):
    """Mapping from a pattern string to an integer log level."""

    pattern: str
    level: int


@dataclass(slots=True)
class LogLevelConfig:
    """Resolve log levels using environment variables."""

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    def update_from_environment(self) -> None:
        """Rebuild pattern->level mappings from current environment."""
        self.pattern_to_level.clear()
        for var in LogEnvVar.from_environ():
            for dsl in self.parse_log_var(var):
                self.pattern_to_level[dsl.pattern] = dsl.level

    def get_effective_level(self, logger_name: str, *, default: int = logging.WARNING) -> int:
        """Return the effective log level for a logger name."""
        name_lc = logger_name.lower()
        lc_map: dict[str, int] = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        # 1) Exact
        if name_lc in lc_map:
            return lc_map[name_lc]

        # 2) Ancestor
        for anc in LogLevelConfig._ancestors(name_lc):
            if anc in lc_map:
                return lc_map[anc]

        # 3) Best glob
        best_level: int | None = None
        best_score = -1
        for pat, level in lc_map.items():
            if not any(ch in pat for ch in "*?[") or not fnmatch.fnmatch(name_lc, pat):
                continue
            score = min((i for i, ch in enumerate(pat) if ch in "*?["), default=len(pat))
            if score > best_score:
                best_score, best_level = score, level
        if best_level is not None:
            return best_level

        # 4) Global/default, 5) Fallback
        return self.pattern_to_level.get("", default)

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the singleton LogLevelConfig instance, creating it if needed."""
        global _log_level_config_instance
        if not _log_level_config_instance:
            initialize_logger_constants()
            _log_level_config_instance = LogLevelConfig()
        return _log_level_config_instance

    @staticmethod
    def parse_log_var(var: LogEnvVar) -> Iterator[LogEnvPatternLevel]:
        """Parse one LogEnvVar into pattern->level mappings."""
        level_names: dict[str, int] = {
            k.upper(): v for k, v in logging.getLevelNamesMapping().items() if isinstance(v, int)
        }
        for fragment in _LOG_VAR_FRAGMENT_SEPARATOR_RX.split(var.value):
            pattern_level = fragment.strip()
            if not pattern_level:
                continue
            parts = _LOG_VAR_ASSIGNMENT_OPERATOR_RX.split(pattern_level, maxsplit=1)
            if len(parts) == 2:
                pattern = parts[0].strip().strip("'\"")
                level_name = parts[1].strip().strip("'\"").upper()
            else:
                pattern = ""  # bare level -> default/root
                level_name = parts[0].strip().strip("'\"").upper()

            if var.module:
                pattern = var.module if pattern in {"", "root"} else f"{var.module}.{pattern}"
            if pattern.lower() == "root":
                pattern = ""

            level_num = level_names.get(level_name, logging.NOTSET)
            if level_num == logging.NOTSET:
                continue
            yield LogEnvPatternLevel(pattern, level_num)

    @staticmethod
    def _ancestors(logger_name: str) -> list[str]:
        """Return ancestor names of a dotted logger path, most specific first."""
        parts = logger_name.split(".")
        result: list[str] = []
        while len(parts) > 1:
            parts = parts[:-1]
            result.append(".".join(parts))
        return result


# End of file: src/mstair/vardump/xlogging/logger_util.py
