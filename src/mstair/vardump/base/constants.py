# File: src/mstair/vardump/base/constants.py

from __future__ import annotations

from typing import Final


DEFAULT_INDENT: Final[int] = 4
"""Spaces per nesting level in structural and export output."""

DEFAULT_DEPTH: Final[int] = 10
"""Maximum descent into containers and objects when no depth is given."""

K_VARDUMP_DEPTH: Final[str] = "VARDUMP_DEPTH"
"""Environment variable that overrides DEFAULT_DEPTH."""

# Markers shared by the renderers

RESOURCE_MARKER: Final[str] = "{Resource}"
CLOSURE_MARKER: Final[str] = "{Closure}"
TRUNCATED_SEQUENCE: Final[str] = "[...]"
TRUNCATED_JSON_SEQUENCE: Final[str] = "Array:[...]"


# End of file: src/mstair/vardump/base/constants.py
