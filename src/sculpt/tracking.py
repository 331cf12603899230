"""Weak, identity-keyed instance tracking.

`weakref.WeakKeyDictionary` keys on equality and needs hashable keys, which
would merge distinct instances that compare equal and reject instances of
classes with ``__eq__`` but no ``__hash__``. These containers key on ``id()``
and hold only weak references, so tracking never keeps an instance alive.
"""

from __future__ import annotations

import weakref
from typing import Any, Generic, TypeVar


V = TypeVar("V")

_MISSING = object()


def supports_weakrefs(cls: type) -> bool:
    """Check whether instances of `cls` can be weakly referenced."""
    return getattr(cls, "__weakrefoffset__", 0) != 0


class InstanceMap(Generic[V]):
    """Maps live instances (by identity) to values."""

    def __init__(self):
        self._entries: dict[int, tuple[weakref.ref, V]] = {}

    def _ref(self, instance: Any) -> weakref.ref:
        key = id(instance)
        entries = self._entries

        def _discard(ref: weakref.ref, key: int = key) -> None:
            entry = entries.get(key)
            if entry is not None and entry[0] is ref:
                del entries[key]

        return weakref.ref(instance, _discard)

    def set(self, instance: Any, value: V) -> None:
        self._entries[id(instance)] = (self._ref(instance), value)

    def get(self, instance: Any, default: Any = None) -> V | Any:
        entry = self._entries.get(id(instance))
        if entry is None or entry[0]() is not instance:
            return default
        return entry[1]

    def delete(self, instance: Any) -> bool:
        entry = self._entries.get(id(instance))
        if entry is None or entry[0]() is not instance:
            return False
        del self._entries[id(instance)]
        return True

    def __contains__(self, instance: Any) -> bool:
        return self.get(instance, _MISSING) is not _MISSING

    def __len__(self) -> int:
        return sum(1 for ref, _ in self._entries.values() if ref() is not None)


class InstanceSet:
    """A set of live instances, compared by identity."""

    def __init__(self):
        self._map: InstanceMap[bool] = InstanceMap()

    def add(self, instance: Any) -> None:
        self._map.set(instance, True)

    def discard(self, instance: Any) -> None:
        self._map.delete(instance)

    def __contains__(self, instance: Any) -> bool:
        return instance in self._map

    def __len__(self) -> int:
        return len(self._map)
