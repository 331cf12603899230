"""Filters used by providers to find records."""

from .types import (
    BetweenFilter,
    EqualsFilter,
    ExcludesFilter,
    Filter,
    FilterKind,
    GreaterThanFilter,
    GreaterThanOrEqualToFilter,
    IncludesFilter,
    LessThanFilter,
    LessThanOrEqualToFilter,
    NotBetweenFilter,
    NotEqualsFilter,
    RangeFilter,
    as_filter,
    between,
    equals,
    excludes,
    greater_than,
    greater_than_or_equal_to,
    includes,
    less_than,
    less_than_or_equal_to,
    not_between,
    not_equals,
)

__all__ = [
    "Filter",
    "FilterKind",
    "RangeFilter",
    "EqualsFilter",
    "NotEqualsFilter",
    "LessThanFilter",
    "LessThanOrEqualToFilter",
    "GreaterThanFilter",
    "GreaterThanOrEqualToFilter",
    "IncludesFilter",
    "ExcludesFilter",
    "BetweenFilter",
    "NotBetweenFilter",
    "as_filter",
    "equals",
    "not_equals",
    "less_than",
    "less_than_or_equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "includes",
    "excludes",
    "between",
    "not_between",
]
