"""Filter types - single-value predicates used to find records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class FilterKind(str, Enum):
    """
    Kinds of filter.

    Providers that build native queries switch on the kind rather than
    calling `Filter.test`.
    """
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL_TO = "less_than_or_equal_to"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"
    INCLUDES = "includes"
    EXCLUDES = "excludes"
    BETWEEN = "between"
    NOT_BETWEEN = "not_between"


@dataclass(frozen=True)
class Filter:
    """A predicate over a single value."""
    kind: ClassVar[FilterKind]

    value: Any

    def test(self, candidate: Any) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class EqualsFilter(Filter):
    kind: ClassVar[FilterKind] = FilterKind.EQUALS

    def test(self, candidate: Any) -> bool:
        return candidate == self.value


@dataclass(frozen=True)
class NotEqualsFilter(Filter):
    kind: ClassVar[FilterKind] = FilterKind.NOT_EQUALS

    def test(self, candidate: Any) -> bool:
        return candidate != self.value


@dataclass(frozen=True)
class LessThanFilter(Filter):
    kind: ClassVar[FilterKind] = FilterKind.LESS_THAN

    def test(self, candidate: Any) -> bool:
        return candidate < self.value


@dataclass(frozen=True)
class LessThanOrEqualToFilter(Filter):
    kind: ClassVar[FilterKind] = FilterKind.LESS_THAN_OR_EQUAL_TO

    def test(self, candidate: Any) -> bool:
        return candidate <= self.value


@dataclass(frozen=True)
class GreaterThanFilter(Filter):
    kind: ClassVar[FilterKind] = FilterKind.GREATER_THAN

    def test(self, candidate: Any) -> bool:
        return candidate > self.value


@dataclass(frozen=True)
class GreaterThanOrEqualToFilter(Filter):
    kind: ClassVar[FilterKind] = FilterKind.GREATER_THAN_OR_EQUAL_TO

    def test(self, candidate: Any) -> bool:
        return candidate >= self.value


@dataclass(frozen=True)
class IncludesFilter(Filter):
    """Matches candidates contained in `value` (a collection)."""
    kind: ClassVar[FilterKind] = FilterKind.INCLUDES

    def test(self, candidate: Any) -> bool:
        return candidate in self.value


@dataclass(frozen=True)
class ExcludesFilter(Filter):
    """Matches candidates not contained in `value` (a collection)."""
    kind: ClassVar[FilterKind] = FilterKind.EXCLUDES

    def test(self, candidate: Any) -> bool:
        return candidate not in self.value


@dataclass(frozen=True, init=False)
class RangeFilter(Filter):
    """
    Base for two-value filters.

    Bounds are stored low-to-high whatever order they were given in.
    """
    min: Any
    max: Any

    def __init__(self, low: Any, high: Any):
        if high < low:
            low, high = high, low
        object.__setattr__(self, "min", low)
        object.__setattr__(self, "max", high)
        object.__setattr__(self, "value", (low, high))


@dataclass(frozen=True, init=False)
class BetweenFilter(RangeFilter):
    """Exclusive range: bounds themselves do not match."""
    kind: ClassVar[FilterKind] = FilterKind.BETWEEN

    def test(self, candidate: Any) -> bool:
        return self.min < candidate < self.max


@dataclass(frozen=True, init=False)
class NotBetweenFilter(RangeFilter):
    kind: ClassVar[FilterKind] = FilterKind.NOT_BETWEEN

    def test(self, candidate: Any) -> bool:
        return not (self.min < candidate < self.max)


def equals(value: Any) -> EqualsFilter:
    return EqualsFilter(value)


def not_equals(value: Any) -> NotEqualsFilter:
    return NotEqualsFilter(value)


def less_than(value: Any) -> LessThanFilter:
    return LessThanFilter(value)


def less_than_or_equal_to(value: Any) -> LessThanOrEqualToFilter:
    return LessThanOrEqualToFilter(value)


def greater_than(value: Any) -> GreaterThanFilter:
    return GreaterThanFilter(value)


def greater_than_or_equal_to(value: Any) -> GreaterThanOrEqualToFilter:
    return GreaterThanOrEqualToFilter(value)


def includes(value: Any) -> IncludesFilter:
    return IncludesFilter(value)


def excludes(value: Any) -> ExcludesFilter:
    return ExcludesFilter(value)


def between(low: Any, high: Any) -> BetweenFilter:
    return BetweenFilter(low, high)


def not_between(low: Any, high: Any) -> NotBetweenFilter:
    return NotBetweenFilter(low, high)


def as_filter(value: Any) -> Filter:
    """Wrap a plain value in an EqualsFilter; Filters pass through."""
    if isinstance(value, Filter):
        return value
    return EqualsFilter(value)
