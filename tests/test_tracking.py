"""Tests for identity-keyed weak tracking."""

import gc

from sculpt.tracking import InstanceMap, InstanceSet, supports_weakrefs


class Plain:
    pass


class AlwaysEqual:
    def __eq__(self, other):
        return True


class Slotted:
    __slots__ = ("value",)


class TestInstanceMap:
    def test_set_and_get(self):
        tracked = InstanceMap()
        obj = Plain()
        tracked.set(obj, 5)

        assert tracked.get(obj) == 5
        assert obj in tracked
        assert tracked.get(Plain(), "default") == "default"

    def test_none_value_is_tracked(self):
        tracked = InstanceMap()
        obj = Plain()
        tracked.set(obj, None)
        assert obj in tracked

    def test_keys_by_identity_not_equality(self):
        tracked = InstanceMap()
        a, b = AlwaysEqual(), AlwaysEqual()
        tracked.set(a, 1)

        assert b not in tracked
        tracked.set(b, 2)
        assert (tracked.get(a), tracked.get(b)) == (1, 2)

    def test_delete(self):
        tracked = InstanceMap()
        obj = Plain()
        tracked.set(obj, 1)

        assert tracked.delete(obj) is True
        assert tracked.delete(obj) is False
        assert obj not in tracked

    def test_entries_released_with_instance(self):
        tracked = InstanceMap()
        obj = Plain()
        tracked.set(obj, 1)
        assert len(tracked) == 1

        del obj
        gc.collect()

        assert len(tracked) == 0
        assert tracked._entries == {}

    def test_replacing_entry_keeps_it_alive(self):
        tracked = InstanceMap()
        obj = Plain()
        tracked.set(obj, 1)
        tracked.set(obj, 2)
        gc.collect()
        assert tracked.get(obj) == 2


class TestInstanceSet:
    def test_add_and_discard(self):
        pending = InstanceSet()
        obj = Plain()

        pending.add(obj)
        assert obj in pending
        assert len(pending) == 1

        pending.discard(obj)
        assert obj not in pending
        pending.discard(obj)


def test_supports_weakrefs():
    assert supports_weakrefs(Plain)
    assert not supports_weakrefs(Slotted)
    assert not supports_weakrefs(int)
