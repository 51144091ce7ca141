# File: src/mstair/vardump/dumper/export_engine.py
"""
Export a value as a Python expression that rebuilds it.

Meant for generating reproducible fixtures from live state, not for display.
Primitives and builtin containers become literals. Objects go through an ordered
strategy chain; the first strategy that returns text wins:

1. round-trip: ``pickle.loads(b'...')`` when the value pickles;
2. container view: ``to_dict()``, ``_asdict()`` or dataclass fields;
3. iterable: the materialized items as a dict (mappings) or list literal;
4. text form: ``str(value)`` as a string literal, for classes that define ``__str__``;
5. instance dict: the ``__dict__`` attributes as a dict literal;
6. dump: the structural dump as a string literal (documents, does not rebuild).

Only the builtin container types are written as bare literals; other containers
(``deque``, ``range``, ``OrderedDict``, ...) are objects and go through the chain,
so they come back as their own type.

Function values become their lambda source, or a placeholder lambda. Nothing
below `ExportEngine.export()` raises for an unexportable value.

Evaluate exported text with `reconstruct()`, which provides ``pickle``.
"""

from __future__ import annotations

import builtins
import dataclasses
import math
import pickle
from collections.abc import Callable, Iterable, Mapping, Sequence, Set
from dataclasses import dataclass, field
from typing import Any, Final, TypeAlias

from mstair.vardump.base import config as cfg
from mstair.vardump.base.constants import DEFAULT_INDENT, RESOURCE_MARKER
from mstair.vardump.base.types import MISSING
from mstair.vardump.dumper.errors import RoundTripUnavailableError
from mstair.vardump.dumper.function_source import (
    SourceReader,
    export_function,
    read_source_lines,
)
from mstair.vardump.dumper.model import (
    DumpContext,
    ValueKind,
    classify,
    int_text,
    keyed_items,
    type_name,
)
from mstair.vardump.dumper.structural import StructuralRenderer
from mstair.vardump.xlogging import create_logger


__all__ = [
    "ExportEngine",
    "reconstruct",
    "round_trip_blob",
]

_Path: TypeAlias = frozenset[int]
_Strategy: TypeAlias = Callable[[Any, int, _Path], str | None]

RECONSTRUCT_NAMESPACE: Final[dict[str, Any]] = {"pickle": pickle, "__builtins__": builtins}

LITERAL_CONTAINER_TYPES: Final[frozenset[type]] = frozenset({list, tuple, dict, set, frozenset})
"""Container types written as bare literals; subclasses and other containers are objects."""


def reconstruct(text: str) -> Any:
    """Evaluate text produced by `ExportEngine.export()` back into a value."""
    return eval(text, dict(RECONSTRUCT_NAMESPACE))  # noqa: S307


def round_trip_blob(value: Any) -> bytes:
    """
    Serialize ``value`` with pickle.

    :raises RoundTripUnavailableError: If the value (or anything it references) cannot be pickled.
    """
    try:
        return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
    except Exception as exc:
        raise RoundTripUnavailableError(f"{type_name(value)} does not pickle: {exc}") from exc


def _float_literal(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        return f"float({str(value)!r})"
    return repr(value)


def _string_literal(value: str | bytes | bytearray | memoryview) -> str:
    if isinstance(value, str):
        return repr(str(value))
    if isinstance(value, bytearray):
        return f"bytearray({bytes(value)!r})"
    return repr(bytes(value))


@dataclass(kw_only=True)
class ExportEngine:
    """Builds Python expressions for values; holds no per-call state."""

    indent: int = DEFAULT_INDENT
    """Spaces per nesting level."""

    source_reader: SourceReader = read_source_lines
    """Reads the declaring lines of lambdas."""

    _strategies: list[_Strategy] = field(init=False, repr=False)
    """Object strategies tried in order before the dump fallback."""

    def __post_init__(self) -> None:
        self._strategies = [
            self._via_round_trip,
            self._via_container_view,
            self._via_iterable,
            self._via_text_form,
            self._via_instance_dict,
        ]

    def export(self, value: Any) -> str:
        """Return a Python expression that rebuilds ``value`` as closely as possible."""
        return self.export_value(value, 0, frozenset())

    def export_value(self, value: Any, level: int, path: _Path) -> str:
        kind = classify(value)
        if kind is ValueKind.NULL:
            return "None"
        if kind is ValueKind.BOOL:
            return "True" if value else "False"
        if kind is ValueKind.INT:
            return int_text(value)
        if kind is ValueKind.FLOAT:
            return _float_literal(float(value))
        if kind is ValueKind.STR:
            return _string_literal(value)
        if kind is ValueKind.OPAQUE:
            return repr(RESOURCE_MARKER)
        if kind is ValueKind.FUNCTION:
            return export_function(value, source_reader=self.source_reader)
        if kind is ValueKind.SEQUENCE and type(value) in LITERAL_CONTAINER_TYPES:
            return self._export_container(value, level, path)
        return self._export_object(value, level, path)

    def _export_container(self, value: Any, level: int, path: _Path) -> str:
        if id(value) in path:
            return repr(f"{type_name(value)}(...)")
        path = path | {id(value)}

        is_mapping = isinstance(value, Mapping)
        if is_mapping:
            opener, closer, empty = "{", "}", "{}"
        elif isinstance(value, tuple):
            opener, closer, empty = "(", ")", "()"
        elif isinstance(value, frozenset):
            opener, closer, empty = "frozenset({", "})", "frozenset()"
        elif isinstance(value, Set):
            opener, closer, empty = "{", "}", "set()"
        else:
            opener, closer, empty = "[", "]", "[]"

        items = keyed_items(value)
        if not items:
            return empty
        spaces = " " * (level * self.indent)
        inner = spaces + " " * self.indent
        lines = [opener]
        for key, item in items:
            key_text = self.export_value(key, level + 1, path) + ": " if is_mapping else ""
            lines.append(f"{inner}{key_text}{self.export_value(item, level + 1, path)},")
        lines.append(spaces + closer)
        return "\n".join(lines)

    def _export_object(self, value: Any, level: int, path: _Path) -> str:
        logger = create_logger(__name__)
        for strategy in self._strategies:
            text = strategy(value, level, path)
            if text is not None:
                logger.debug("exported %s via %s", type_name(value), strategy.__name__)
                return text
        logger.debug("exported %s via dump fallback", type_name(value))
        return self._via_dump(value)

    def _via_round_trip(self, value: Any, _level: int, _path: _Path) -> str | None:
        try:
            blob = round_trip_blob(value)
        except RoundTripUnavailableError as exc:
            create_logger(__name__).debug("%s", exc)
            return None
        return f"pickle.loads({blob!r})"

    def _via_container_view(self, value: Any, level: int, path: _Path) -> str | None:
        if id(value) in path:
            return None
        view = _container_view(value)
        if view is None:
            return None
        return self.export_value(view, level, path | {id(value)})

    def _via_iterable(self, value: Any, level: int, path: _Path) -> str | None:
        if not isinstance(value, Iterable) or id(value) in path:
            return None
        try:
            materialized = dict(value.items()) if isinstance(value, Mapping) else list(value)
        except Exception as exc:
            create_logger(__name__).debug("iterating %s failed: %s", type_name(value), exc)
            return None
        return self.export_value(materialized, level, path | {id(value)})

    def _via_text_form(self, value: Any, _level: int, _path: _Path) -> str | None:
        if type(value).__str__ is object.__str__:
            return None
        try:
            return repr(str(value))
        except Exception as exc:
            create_logger(__name__).debug("str(%s) failed: %s", type_name(value), exc)
            return None

    def _via_instance_dict(self, value: Any, level: int, path: _Path) -> str | None:
        instance_dict = getattr(value, "__dict__", None)
        if not isinstance(instance_dict, Mapping) or not instance_dict or id(value) in path:
            return None
        return self.export_value(dict(instance_dict), level, path | {id(value)})

    def _via_dump(self, value: Any) -> str:
        context = DumpContext(depth_limit=cfg.default_depth())
        try:
            return repr(StructuralRenderer(context=context).render(value))
        except Exception as exc:
            create_logger(__name__).debug("dump of %s failed: %s", type_name(value), exc)
            return repr(f"{type_name(value)}(...)")


def _container_view(value: Any) -> Mapping[Any, Any] | Sequence[Any] | None:
    """Return the container an object explicitly converts itself to, or None."""
    for method_name in ("to_dict", "_asdict"):
        method = getattr(value, method_name, None)
        if not callable(method):
            continue
        try:
            view = method()
        except Exception as exc:
            create_logger(__name__).debug("%s.%s() failed: %s", type_name(value), method_name, exc)
            continue
        if isinstance(view, Mapping | list | tuple):
            return view
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = {f.name: getattr(value, f.name, MISSING) for f in dataclasses.fields(value)}
        return {k: v for k, v in fields.items() if v is not MISSING}
    return None


# End of file: src/mstair/vardump/dumper/export_engine.py
