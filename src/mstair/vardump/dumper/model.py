# File: src/mstair/vardump/dumper/model.py
"""
Closed classification of Python runtime values for the dump and export renderers.

Every renderer dispatches on `classify()`, so the decisions about what counts as
a function value, an opaque resource handle, or a keyed container live here.
"""

from __future__ import annotations

import io
import mmap
import socket
import threading
import types
from collections.abc import Iterable, Mapping, Sequence, Set
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final

from mstair.vardump.base.types import MISSING
from mstair.vardump.dumper.errors import InvalidDebugFieldProviderError
from mstair.vardump.dumper.identity_registry import IdentityRegistry


__all__ = [
    "DEBUG_INFO_METHOD",
    "DumpContext",
    "ValueKind",
    "classify",
    "composite_fields",
    "int_text",
    "is_list_keys",
    "keyed_items",
    "normalize_field_name",
    "type_name",
]


DEBUG_INFO_METHOD: Final[str] = "__debug_info__"
"""Name of the optional method a class defines to choose which fields get dumped."""


class ValueKind(Enum):
    """Variant of the dumped Value model."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"
    SEQUENCE = "sequence"
    COMPOSITE = "composite"
    FUNCTION = "function"
    OPAQUE = "opaque"


STRING_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray, memoryview)

FUNCTION_TYPES: Final[tuple[type, ...]] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
)

OPAQUE_TYPES: Final[tuple[type, ...]] = (
    io.IOBase,
    socket.socket,
    mmap.mmap,
    type(threading.Lock()),
    type(threading.RLock()),
)


def classify(value: Any) -> ValueKind:
    """Return the ValueKind variant for ``value``."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, STRING_TYPES):
        return ValueKind.STR
    if isinstance(value, Mapping | Set) or isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    if isinstance(value, FUNCTION_TYPES):
        return ValueKind.FUNCTION
    if isinstance(value, OPAQUE_TYPES):
        return ValueKind.OPAQUE
    return ValueKind.COMPOSITE


def int_text(value: int) -> str:
    """Decimal text of ``value``, or hex past the interpreter's int-to-str digit limit."""
    try:
        return str(int(value))
    except ValueError:
        return hex(int(value))


def type_name(value: Any) -> str:
    """Display name of the value's class."""
    return type(value).__qualname__


def keyed_items(value: Mapping[Any, Any] | Iterable[Any]) -> list[tuple[Any, Any]]:
    """
    Return the (key, value) entries of a SEQUENCE value in source order.

    Mappings keep their insertion order; other containers are keyed by position.
    """
    if isinstance(value, Mapping):
        return list(value.items())
    return list(enumerate(value))


def is_list_keys(keys: Sequence[Any]) -> bool:
    """True if ``keys`` is exactly ``0..n-1`` in order; the empty sequence qualifies."""
    return all(type(key) is int and key == i for i, key in enumerate(keys))


def normalize_field_name(name: Any) -> str:
    """Field label for display: trimmed, with NUL separators shown as ':'."""
    if isinstance(name, int) and not isinstance(name, bool):
        name = int_text(name)
    return str(name).strip().replace("\0", ":")


def composite_fields(value: Any) -> list[tuple[str, Any]]:
    """
    Return the (name, value) fields of a composite value.

    A class-level ``__debug_info__()`` method takes precedence and must return a
    mapping. Otherwise the instance ``__dict__`` is used, followed by populated
    ``__slots__`` entries declared anywhere in the class hierarchy.

    :raises InvalidDebugFieldProviderError: If ``__debug_info__()`` returns a non-mapping.
    """
    provider = getattr(type(value), DEBUG_INFO_METHOD, None)
    if provider is not None:
        dump_values = provider(value)
        if not isinstance(dump_values, Mapping):
            raise InvalidDebugFieldProviderError(type_name(value), dump_values)
        return [(normalize_field_name(k), v) for k, v in dump_values.items()]

    fields: dict[str, Any] = {}
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        fields.update((normalize_field_name(k), v) for k, v in instance_dict.items())
    for slot_name in _slot_names(type(value)):
        slot_value = getattr(value, slot_name, MISSING)
        if slot_value is not MISSING:
            fields.setdefault(normalize_field_name(slot_name), slot_value)
    return list(fields.items())


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in {"__dict__", "__weakref__"}:
                continue
            if slot.startswith("__") and not slot.endswith("__"):
                slot = f"_{klass.__name__.lstrip('_')}{slot}"
            names.append(slot)
    return names


@dataclass
class DumpContext:
    """
    Mutable state scoped to a single dump call.

    Created fresh by every public entry point and discarded on return, so
    concurrent calls never share a registry or an output buffer.
    """

    depth_limit: int
    """Containers and objects are descended into only while ``level < depth_limit``."""

    registry: IdentityRegistry = field(default_factory=IdentityRegistry)
    """Composite values entered so far in this call."""

    chunks: list[str] = field(default_factory=list, repr=False)
    """Output buffer."""

    def __post_init__(self) -> None:
        if self.depth_limit < 0:
            raise ValueError(f"Depth must be >= 0, got {self.depth_limit}")

    def write(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def output(self) -> str:
        return "".join(self.chunks)

    def is_truncated(self, level: int) -> bool:
        """True if a container at ``level`` must render as a truncation marker."""
        return self.depth_limit <= level


# End of file: src/mstair/vardump/dumper/model.py
