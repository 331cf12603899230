"""Tests for filters."""

import pytest

from sculpt.filters import (
    EqualsFilter,
    FilterKind,
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


class TestComparisonFilters:
    def test_equals(self):
        assert equals(3).test(3)
        assert not equals(3).test(4)

    def test_not_equals(self):
        assert not_equals(3).test(4)
        assert not not_equals(3).test(3)

    def test_less_than(self):
        assert less_than(3).test(2)
        assert not less_than(3).test(3)

    def test_less_than_or_equal_to(self):
        assert less_than_or_equal_to(3).test(3)
        assert not less_than_or_equal_to(3).test(4)

    def test_greater_than(self):
        assert greater_than(3).test(4)
        assert not greater_than(3).test(3)

    def test_greater_than_or_equal_to(self):
        assert greater_than_or_equal_to(3).test(3)
        assert not greater_than_or_equal_to(3).test(2)


class TestMembershipFilters:
    def test_includes(self):
        assert includes(["a", "b"]).test("a")
        assert not includes(["a", "b"]).test("c")

    def test_excludes(self):
        assert excludes(["a", "b"]).test("c")
        assert not excludes(["a", "b"]).test("a")


class TestRangeFilters:
    def test_between_is_exclusive(self):
        assert between(2, 5).test(3)
        assert not between(2, 5).test(2)
        assert not between(2, 5).test(5)

    def test_not_between(self):
        assert not_between(2, 5).test(2)
        assert not_between(2, 5).test(6)
        assert not not_between(2, 5).test(3)

    def test_bounds_normalised(self):
        flt = between(5, 2)
        assert (flt.min, flt.max) == (2, 5)
        assert flt.value == (2, 5)
        assert flt.test(3)

    def test_strings(self):
        assert between("b", "d").test("c")


class TestKinds:
    @pytest.mark.parametrize("flt,kind", [
        (equals(1), FilterKind.EQUALS),
        (not_equals(1), FilterKind.NOT_EQUALS),
        (less_than(1), FilterKind.LESS_THAN),
        (less_than_or_equal_to(1), FilterKind.LESS_THAN_OR_EQUAL_TO),
        (greater_than(1), FilterKind.GREATER_THAN),
        (greater_than_or_equal_to(1), FilterKind.GREATER_THAN_OR_EQUAL_TO),
        (includes([1]), FilterKind.INCLUDES),
        (excludes([1]), FilterKind.EXCLUDES),
        (between(1, 2), FilterKind.BETWEEN),
        (not_between(1, 2), FilterKind.NOT_BETWEEN),
    ])
    def test_every_filter_has_a_kind(self, flt, kind):
        assert flt.kind is kind

    def test_filters_are_immutable(self):
        with pytest.raises(AttributeError):
            equals(1).value = 2

    def test_as_filter(self):
        assert as_filter(3) == EqualsFilter(3)
        flt = greater_than(3)
        assert as_filter(flt) is flt
