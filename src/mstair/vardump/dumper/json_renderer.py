# File: src/mstair/vardump/dumper/json_renderer.py
"""
JSON-like dump of any value.

- Containers keyed exactly ``0..n-1`` become arrays, other mappings become objects.
- Objects become ``{"class": "Type", "<field>": ...}``.
- Depth truncation is reported in-band as JSON strings: ``"Array:[...]"`` and ``"Type:{...}"``.
- Functions render as ``"{Closure}"`` and resource handles as ``"{Resource}"``.
- An object met again in the same call renders as the string ``"Type#index(...)"``.

The output is meant for reading, not for a strict JSON parser: floats such as
``nan`` are emitted in their lower-cased Python form. Integers past the int-to-str
digit limit are emitted in hex.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from mstair.vardump.base.constants import (
    CLOSURE_MARKER,
    RESOURCE_MARKER,
    TRUNCATED_JSON_SEQUENCE,
)
from mstair.vardump.dumper.escape_codec import quote_json_string
from mstair.vardump.dumper.model import (
    DumpContext,
    ValueKind,
    classify,
    composite_fields,
    int_text,
    is_list_keys,
    keyed_items,
    normalize_field_name,
    type_name,
)


__all__ = [
    "JsonRenderer",
    "json_literal",
]

_KindEncoder: TypeAlias = Callable[[Any, int], str]


def json_literal(value: None | bool | int | float) -> str:
    """Canonical lower-cased literal for null, booleans and numbers."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return int_text(value)
    return repr(float(value)).lower()


@dataclass(kw_only=True)
class JsonRenderer:
    """Encodes one value as JSON-like text, using a DumpContext for depth and identity."""

    context: DumpContext

    _encoders: dict[ValueKind, _KindEncoder] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._encoders = {
            ValueKind.NULL: lambda v, _l: json_literal(v),
            ValueKind.BOOL: lambda v, _l: json_literal(v),
            ValueKind.INT: lambda v, _l: json_literal(int(v)),
            ValueKind.FLOAT: lambda v, _l: json_literal(float(v)),
            ValueKind.STR: lambda v, _l: quote_json_string(v),
            ValueKind.OPAQUE: lambda _v, _l: quote_json_string(RESOURCE_MARKER),
            ValueKind.FUNCTION: lambda _v, _l: quote_json_string(CLOSURE_MARKER),
            ValueKind.SEQUENCE: self._encode_sequence,
            ValueKind.COMPOSITE: self._encode_composite,
        }

    def render(self, value: Any) -> str:
        """Return the JSON-like text for ``value``."""
        return self.encode(value, 0)

    def encode(self, value: Any, level: int) -> str:
        return self._encoders[classify(value)](value, level)

    def _encode_sequence(self, value: Any, level: int) -> str:
        if self.context.is_truncated(level):
            return quote_json_string(TRUNCATED_JSON_SEQUENCE)
        items = keyed_items(value)
        if isinstance(value, Mapping) and not is_list_keys([k for k, _ in items]):
            return "{" + ",".join(self._encode_member(k, v, level) for k, v in items) + "}"
        return "[" + ",".join(self.encode(v, level + 1) for _, v in items) + "]"

    def _encode_composite(self, value: Any, level: int) -> str:
        class_name = type_name(value)
        registry = self.context.registry
        seen_index = registry.index_of(value)
        if seen_index is not None:
            return quote_json_string(f"{class_name}#{seen_index}(...)")
        if self.context.is_truncated(level):
            return quote_json_string(f"{class_name}:{{...}}")

        registry.enter(value)
        members = [f'"class": {quote_json_string(class_name)}']
        members.extend(self._encode_member(k, v, level) for k, v in composite_fields(value))
        return "{" + ",".join(members) + "}"

    def _encode_member(self, key: Any, value: Any, level: int) -> str:
        return quote_json_string(normalize_field_name(key)) + ":" + self.encode(value, level + 1)


# End of file: src/mstair/vardump/dumper/json_renderer.py
