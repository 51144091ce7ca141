# File: src/mstair/vardump/dumper/errors.py
"""
Exceptions raised by the dump and export engine.

Only InvalidModeError and InvalidDebugFieldProviderError reach callers. The
export engine recovers from SourceUnavailableError and RoundTripUnavailableError
internally and degrades to placeholder text.
"""

from __future__ import annotations


__all__ = [
    "InvalidDebugFieldProviderError",
    "InvalidModeError",
    "RoundTripUnavailableError",
    "SourceUnavailableError",
    "VarDumpError",
]


class VarDumpError(Exception):
    """Base class for all dump and export errors."""


class InvalidModeError(VarDumpError, ValueError):
    """Raised when dump() receives a mode token other than string, highlight or json."""

    def __init__(self, mode: object) -> None:
        super().__init__(f"Bad dump mode {mode!r}. Use only string, highlight, json.")
        self.mode = mode


class InvalidDebugFieldProviderError(VarDumpError, TypeError):
    """Raised when a value's __debug_info__() returns something other than a mapping."""

    def __init__(self, type_name: str, returned: object) -> None:
        super().__init__(
            f"{type_name}.__debug_info__() must return a mapping, got {type(returned).__name__}"
        )
        self.type_name = type_name


class SourceUnavailableError(VarDumpError, OSError):
    """Raised when the source text of a function cannot be located, read or delimited."""


class RoundTripUnavailableError(VarDumpError):
    """Raised when a value cannot be serialized by the round-trip primitive (pickle)."""


# End of file: src/mstair/vardump/dumper/errors.py
