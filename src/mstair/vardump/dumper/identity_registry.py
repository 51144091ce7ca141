# File: src/mstair/vardump/dumper/identity_registry.py
"""
Per-call registry of composite values already entered during one traversal.

Identity means ``id(value)``: two instances with identical fields are distinct.
Entered values are also held by strong reference, so an id cannot be reused by a
new object while the registry is alive. There is no removal: a value entered
anywhere in the call stays visible as a back-reference for the rest of that call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


__all__ = [
    "AlreadyVisited",
    "EntryResult",
    "Fresh",
    "IdentityRegistry",
]


@dataclass(frozen=True, slots=True)
class Fresh:
    """First sighting of an identity; ``index`` is newly assigned (1-based)."""

    index: int


@dataclass(frozen=True, slots=True)
class AlreadyVisited:
    """Re-entry of an identity; ``index`` is the one assigned on first sighting."""

    index: int


EntryResult: TypeAlias = Fresh | AlreadyVisited


class IdentityRegistry:
    """Assigns stable 1-based display indices to values by identity."""

    def __init__(self) -> None:
        self._index_by_id: dict[int, int] = {}
        self._visited: list[Any] = []

    def __len__(self) -> int:
        return len(self._visited)

    def __contains__(self, value: object) -> bool:
        return id(value) in self._index_by_id

    def __repr__(self) -> str:
        names = ", ".join(f"{type(v).__qualname__}#{i}" for i, v in enumerate(self._visited, 1))
        return f"IdentityRegistry([{names}])"

    def enter(self, value: Any) -> EntryResult:
        """
        Register ``value`` unless its identity was already entered in this call.

        :param value: The value being entered.
        :return: Fresh with the next index, or AlreadyVisited with the existing one.
        """
        existing = self._index_by_id.get(id(value))
        if existing is not None:
            return AlreadyVisited(existing)
        self._visited.append(value)
        index = len(self._visited)
        self._index_by_id[id(value)] = index
        return Fresh(index)

    def index_of(self, value: Any) -> int | None:
        """Return the index assigned to ``value``, or None if it was never entered."""
        return self._index_by_id.get(id(value))

    @property
    def visited(self) -> tuple[Any, ...]:
        """Entered values in the order they were first seen."""
        return tuple(self._visited)


# End of file: src/mstair/vardump/dumper/identity_registry.py
