"""Tests for BindingMap."""

import pytest

from sculpt.bindings import ABSENT, BindingMap, identity, integer, string
from sculpt.errors import ConfigurationError, InvalidTypeError, UnknownBindingError


class Thing:
    pass


@pytest.fixture
def bindings() -> BindingMap:
    return BindingMap({
        "id": identity(),
        "name": string(required=True),
        "age": integer(),
    })


class TestSet:
    def test_identity_name(self, bindings):
        assert bindings.identity_name == "id"
        assert bindings.get_identity_name() == "id"

    def test_no_identity(self):
        assert BindingMap({"name": string()}).identity_name is None

    def test_two_identities_rejected(self):
        with pytest.raises(ConfigurationError, match="one identity binding"):
            BindingMap({"id": identity(), "other_id": identity()})

    def test_non_binding_rejected(self):
        with pytest.raises(TypeError):
            BindingMap({"name": "string"})

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidTypeError):
            BindingMap([("name", string())])

    def test_set_replaces_everything(self, bindings):
        bindings.set({"title": string()})
        assert bindings.names == ["title"]
        assert bindings.identity_name is None

    def test_failed_set_keeps_previous_bindings(self, bindings):
        with pytest.raises(ConfigurationError):
            bindings.set({"a": identity(), "b": identity()})
        assert bindings.names == ["id", "name", "age"]
        assert bindings.identity_name == "id"

    def test_order_preserved(self, bindings):
        assert [name for name, _ in bindings] == ["id", "name", "age"]
        assert len(bindings) == 3


class TestLookup:
    def test_get(self, bindings):
        assert bindings.get("name") == string(required=True)

    def test_get_unknown(self, bindings):
        with pytest.raises(UnknownBindingError, match="'email'"):
            bindings.get("email")

    def test_ensure(self, bindings):
        bindings.ensure("age")
        with pytest.raises(UnknownBindingError):
            bindings.ensure("email")

    def test_contains(self, bindings):
        assert "name" in bindings
        assert "email" not in bindings


class TestObjectValues:
    def test_get_object_values_covers_every_binding(self, bindings):
        thing = Thing()
        thing.name = "Ada"
        thing.email = "ada@example.com"

        values = bindings.get_object_values(thing)

        assert list(values) == ["id", "name", "age"]
        assert values["name"] == "Ada"
        assert values["id"] is ABSENT
        assert values["age"] is ABSENT
        assert "email" not in values

    def test_get_object_values_ignores_class_attributes(self, bindings):
        class WithDefault:
            age = 30

        assert bindings.get_object_values(WithDefault())["age"] is ABSENT

    def test_get_object_values_reads_slots(self, bindings):
        class Base:
            __slots__ = ("id",)

        class Slotted(Base):
            __slots__ = "name"

        thing = Slotted()
        thing.id = 3
        thing.name = "Ada"

        assert bindings.get_object_values(thing) == {"id": 3, "name": "Ada", "age": ABSENT}

    def test_unset_slots_are_absent(self, bindings):
        class Slotted:
            __slots__ = ("id", "name", "age")

        assert bindings.get_object_values(Slotted())["name"] is ABSENT

    def test_none_is_a_value(self, bindings):
        thing = Thing()
        thing.age = None
        assert bindings.get_object_values(thing)["age"] is None

    def test_set_object_values(self, bindings):
        thing = Thing()
        bindings.set_object_values(thing, {"name": "Ada", "age": 36, "email": "x"})
        assert thing.name == "Ada"
        assert thing.age == 36
        assert not hasattr(thing, "email")

    def test_set_object_values_leaves_missing_names(self, bindings):
        thing = Thing()
        thing.age = 20
        bindings.set_object_values(thing, {"name": "Ada"})
        assert thing.age == 20

    def test_absent_values_are_not_assigned(self, bindings):
        thing = Thing()
        bindings.set_object_values(thing, {"name": ABSENT})
        assert not hasattr(thing, "name")

    def test_set_object_values_with_nothing(self, bindings):
        thing = Thing()
        bindings.set_object_values(thing, None)
        assert vars(thing) == {}
