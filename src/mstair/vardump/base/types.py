# File: src/mstair/vardump/base/types.py

from __future__ import annotations

from typing import Final, Self


class Sentinel:
    """
    Robust singleton base class for sentinel objects such as MISSING.

    Behaves as a falsy, unique, singleton marker, distinct from None.
    """

    __slots__ = ()

    _repr_name: str = "SENTINEL"

    def __repr__(self) -> str:
        return self._repr_name

    def __str__(self) -> str:
        return self._repr_name

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __reduce__(self) -> tuple[type, tuple[()]]:
        return (type(self), ())

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, _memo: dict[int, object]) -> Self:
        return self

    def __new__(cls) -> Self:
        if "_instance" in cls.__dict__:
            return cls.__dict__["_instance"]
        instance = super().__new__(cls)
        type.__setattr__(cls, "_instance", instance)
        return instance


class Missing(Sentinel):
    """Singleton indicating a missing or unset value (e.g. an unpopulated slot)."""

    _repr_name = "MISSING"


MISSING: Final[Missing] = Missing()


# End of file: src/mstair/vardump/base/types.py
