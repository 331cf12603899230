"""In-memory provider for tests, prototypes and static data."""

from __future__ import annotations

import asyncio
import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from ..bindings.map import BindingMap
from ..bindings.types import ABSENT
from ..errors import IdentityError
from ..filters.types import Filter, FilterKind, as_filter
from .base import Provider


logger = logging.getLogger(__name__)

# Kinds that can be tested against None; ordering comparisons cannot
_NULL_SAFE_KINDS = frozenset({
    FilterKind.EQUALS,
    FilterKind.NOT_EQUALS,
    FilterKind.INCLUDES,
    FilterKind.EXCLUDES,
})


def _present(values: dict[str, Any]) -> dict[str, Any]:
    return {name: value for name, value in values.items() if value is not ABSENT}


def matches(record: dict[str, Any], filters: dict[str, Filter]) -> bool:
    """Check a record against every filter. Missing properties never match."""
    for name, flt in filters.items():
        if name not in record:
            return False
        value = record[name]
        if value is None and flt.kind not in _NULL_SAFE_KINDS:
            return False
        if not flt.test(value):
            return False
    return True


@dataclass(eq=False)
class MemoryProvider(Provider):
    """
    Provider that keeps records in a list.

    Filters are applied with `Filter.test`; plain filter values are treated
    as equality. Identities are integers assigned from 1 upwards. Records
    returned from `find` are copies, so callers cannot mutate the store.
    """
    # Records to start with (copied)
    initial: list[dict[str, Any]] = field(default_factory=list)

    _records: list[dict[str, Any]] = field(default_factory=list, init=False)
    _next_id: int = field(default=1, init=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False)

    def __post_init__(self):
        for record in self.initial:
            self._records.append(copy.deepcopy(record))

    @property
    def records(self) -> list[dict[str, Any]]:
        """Snapshot of the stored records."""
        return copy.deepcopy(self._records)

    def clear(self) -> None:
        self._records.clear()
        self._next_id = 1

    def _select(self, filters: dict[str, Any] | None) -> list[dict[str, Any]]:
        resolved = {name: as_filter(value) for name, value in (filters or {}).items()}
        return [record for record in self._records if matches(record, resolved)]

    async def find(
        self,
        filters: dict[str, Any] | None,
        bindings: BindingMap,
    ) -> list[dict[str, Any]]:
        async with self._lock:
            found = self._select(filters)
            logger.debug(f"find {filters!r}: {len(found)} record(s)")
            return copy.deepcopy(found)

    async def create(self, values: dict[str, Any], bindings: BindingMap) -> int:
        identity_name = bindings.identity_name
        if identity_name is None:
            raise IdentityError("MemoryProvider requires an identity binding to create records")

        async with self._lock:
            # Skip identities already taken by seeded records
            taken = {record.get(identity_name) for record in self._records}
            while self._next_id in taken:
                self._next_id += 1

            new_id = self._next_id
            self._next_id += 1

            record = copy.deepcopy(_present(values))
            record[identity_name] = new_id
            self._records.append(record)

        logger.debug(f"create {identity_name}={new_id}")
        return new_id

    async def update(
        self,
        filters: dict[str, Any],
        values: dict[str, Any],
        bindings: BindingMap,
    ) -> bool:
        changes = copy.deepcopy(_present(values))
        async with self._lock:
            selected = self._select(filters)
            for record in selected:
                record.update(changes)
        logger.debug(f"update {filters!r}: {len(selected)} record(s)")
        return len(selected) > 0

    async def delete(self, filters: dict[str, Any], bindings: BindingMap) -> bool:
        async with self._lock:
            selected = self._select(filters)
            if selected:
                doomed = {id(record) for record in selected}
                self._records = [r for r in self._records if id(r) not in doomed]
        logger.debug(f"delete {filters!r}: {len(selected)} record(s)")
        return len(selected) > 0
