# File: src/mstair/vardump/dumper/structural.py
"""
Indented, human-readable dump of any value.

Example, for ``[1, 'a', None]``::

    [
        0 => 1,
        1 => 'a',
        2 => null
    ]

Objects are written as ``Type#index`` followed by their fields in parentheses.
An object already entered in the same call is written as ``Type#index(...)``
instead of being descended into again, so cyclic graphs terminate.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from mstair.vardump.base.constants import DEFAULT_INDENT, RESOURCE_MARKER, TRUNCATED_SEQUENCE
from mstair.vardump.dumper.highlighter import Highlighter, RichHighlighter, highlight_dump
from mstair.vardump.dumper.model import (
    DumpContext,
    ValueKind,
    classify,
    composite_fields,
    int_text,
    keyed_items,
    type_name,
)
from mstair.vardump.xlogging import create_logger


__all__ = [
    "StructuralRenderer",
    "quote_single",
]

_KindHandler: TypeAlias = Callable[[Any, int], None]


def quote_single(text: str | bytes | bytearray | memoryview) -> str:
    """Single-quote ``text``, backslash-escaping ``\\`` and ``'``."""
    if not isinstance(text, str):
        text = bytes(text).decode("utf-8", errors="backslashreplace")
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"


@dataclass(kw_only=True)
class StructuralRenderer:
    """Writes the structural dump of one value into a DumpContext."""

    context: DumpContext
    """Per-call state: depth limit, identity registry and output buffer."""

    indent: int = DEFAULT_INDENT
    """Spaces per nesting level."""

    highlighter: Highlighter | None = None
    """Collaborator used when render() is asked to highlight; defaults to RichHighlighter."""

    _handlers: dict[ValueKind, _KindHandler] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._handlers = {
            ValueKind.NULL: lambda _v, _l: self.context.write("null"),
            ValueKind.BOOL: lambda v, _l: self.context.write("true" if v else "false"),
            ValueKind.INT: lambda v, _l: self.context.write(int_text(v)),
            ValueKind.FLOAT: lambda v, _l: self.context.write(repr(float(v))),
            ValueKind.STR: lambda v, _l: self.context.write(quote_single(v)),
            ValueKind.OPAQUE: lambda _v, _l: self.context.write(RESOURCE_MARKER),
            ValueKind.SEQUENCE: self._dump_sequence,
            ValueKind.FUNCTION: self._dump_object,
            ValueKind.COMPOSITE: self._dump_object,
        }

    def render(self, value: Any, *, highlight: bool = False) -> str:
        """
        Dump ``value`` and return the text.

        :param value: The value to dump.
        :param highlight: Post-process the text through the highlighter.
        :return str: Plain or colorized dump.
        """
        self.dump_value(value, 0)
        text = self.context.output
        if highlight:
            text = highlight_dump(text, self.highlighter or RichHighlighter())
        return text

    def dump_value(self, value: Any, level: int) -> None:
        self._handlers[classify(value)](value, level)

    def _dump_sequence(self, value: Any, level: int) -> None:
        write = self.context.write
        if self.context.is_truncated(level):
            write(TRUNCATED_SEQUENCE)
            return
        items = keyed_items(value)
        if not items:
            write("[]")
            return
        spaces = " " * (level * self.indent)
        write("[")
        for n, (key, item) in enumerate(items):
            if n:
                write(",")
            write("\n" + spaces + " " * self.indent)
            self.dump_value(key, 0)
            write(" => ")
            self.dump_value(item, level + 1)
        write("\n" + spaces + "]")

    def _dump_object(self, value: Any, level: int) -> None:
        write = self.context.write
        registry = self.context.registry
        class_name = type_name(value)

        seen_index = registry.index_of(value)
        if seen_index is not None:
            write(f"{class_name}#{seen_index}(...)")
            return
        if self.context.is_truncated(level):
            write(f"{class_name}(...)")
            return

        index = registry.enter(value).index
        if classify(value) is ValueKind.FUNCTION:
            write("{" + f"{class_name}#{index}" + "}")
            return

        spaces = " " * (level * self.indent)
        fields = composite_fields(value)
        create_logger(__name__).trace("%s#%d: %d fields", class_name, index, len(fields))
        write(f"{class_name}#{index}\n{spaces}(")
        for name, field_value in fields:
            write(f"\n{spaces}{' ' * self.indent}[{name}] => ")
            self.dump_value(field_value, level + 1)
        write(f"\n{spaces})")


# End of file: src/mstair/vardump/dumper/structural.py
