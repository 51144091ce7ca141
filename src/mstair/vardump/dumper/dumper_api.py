# File: src/mstair/vardump/dumper/dumper_api.py
"""
Deep dumps and exports of arbitrary Python values for debugging and inspection.

This module defines the public entry points:

- `dump()`: render in one of the `DumpMode` formats, selected by mode token
- `dump_as_string()`: indented structural dump, optionally syntax-highlighted
- `dump_as_json()`: JSON-like dump
- `export()`: Python expression that rebuilds the value

Compared to `repr()` and `pprint`, the dumps:

- Show object fields, honoring a class-level ``__debug_info__()`` field provider
- Number every object per call and print ``Type#n(...)`` when it is met again, so cycles terminate
- Stop descending at a depth limit and print truncation markers instead

Every call builds its own state; nothing is shared between calls or threads.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from mstair.vardump.base import config as cfg
from mstair.vardump.dumper.errors import InvalidModeError
from mstair.vardump.dumper.export_engine import ExportEngine
from mstair.vardump.dumper.highlighter import Highlighter
from mstair.vardump.dumper.json_renderer import JsonRenderer
from mstair.vardump.dumper.model import DumpContext
from mstair.vardump.dumper.structural import StructuralRenderer


__all__ = [
    "DumpMode",
    "dump",
    "dump_as_json",
    "dump_as_string",
    "export",
]


class DumpMode(StrEnum):
    """Output format selected by dump()."""

    STRING = "string"
    HIGHLIGHT = "highlight"
    JSON = "json"


def _resolve_depth(depth: int | None) -> int:
    if depth is None:
        return cfg.default_depth()
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise TypeError(f"Depth must be an int, got {type(depth).__name__}")
    if depth < 0:
        raise ValueError(f"Depth must be >= 0, got {depth}")
    return depth


def dump(
    value: Any,
    depth: int | None = None,
    mode: DumpMode | str = DumpMode.STRING,
    *,
    highlighter: Highlighter | None = None,
) -> str:
    """
    Render ``value`` in the format named by ``mode``.

    Args:
        value: The value to render.
        depth: Maximum nesting level to descend into (default: config.default_depth(), normally 10).
        mode: A DumpMode or its token: "string", "highlight" or "json".
        highlighter: Highlighter for HIGHLIGHT mode (default: RichHighlighter).

    Returns:
        str: The rendering.

    Raises:
        InvalidModeError: If ``mode`` is not one of the three tokens.
    """
    try:
        _mode = DumpMode(mode)
    except ValueError as exc:
        raise InvalidModeError(mode) from exc

    if _mode is DumpMode.JSON:
        return dump_as_json(value, depth)
    return dump_as_string(
        value, depth, highlight=_mode is DumpMode.HIGHLIGHT, highlighter=highlighter
    )


def dump_as_string(
    value: Any,
    depth: int | None = None,
    highlight: bool = False,
    *,
    highlighter: Highlighter | None = None,
) -> str:
    """
    Render an indented, human-readable structural dump of ``value``.

    Args:
        value: The value to render.
        depth: Maximum nesting level to descend into.
        highlight: Colorize the result through the highlighter.
        highlighter: Highlighter to use (default: RichHighlighter).

    Returns:
        str: The dump text.

    Raises:
        InvalidDebugFieldProviderError: If an object's ``__debug_info__()`` returns a non-mapping.
    """
    context = DumpContext(depth_limit=_resolve_depth(depth))
    renderer = StructuralRenderer(context=context, highlighter=highlighter)
    return renderer.render(value, highlight=highlight)


def dump_as_json(value: Any, depth: int | None = None) -> str:
    """
    Render a JSON-like dump of ``value``.

    Args:
        value: The value to render.
        depth: Maximum nesting level to descend into.

    Returns:
        str: The JSON-like text.
    """
    context = DumpContext(depth_limit=_resolve_depth(depth))
    return JsonRenderer(context=context).render(value)


def export(value: Any) -> str:
    """
    Return a Python expression that rebuilds ``value`` (best effort).

    Objects that pickle are exported as ``pickle.loads(...)``; evaluate the text with
    `mstair.vardump.dumper.export_engine.reconstruct()`.
    """
    return ExportEngine().export(value)


# End of file: src/mstair/vardump/dumper/dumper_api.py
