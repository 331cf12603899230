"""Tests for the Provider base class."""

import pytest

from sculpt.bindings import BindingMap, identity
from sculpt.errors import ProviderNotImplementedError
from sculpt.providers import Provider


class PartialProvider(Provider):
    async def find(self, filters, bindings):
        return []


@pytest.fixture
def bindings():
    return BindingMap({"id": identity()})


class TestDefaults:
    @pytest.mark.asyncio
    async def test_unimplemented_methods_raise(self, bindings):
        provider = Provider()

        with pytest.raises(ProviderNotImplementedError, match=r"Provider\.find\(\)"):
            await provider.find(None, bindings)
        with pytest.raises(NotImplementedError):
            await provider.create({}, bindings)
        with pytest.raises(NotImplementedError):
            await provider.update({"id": 1}, {}, bindings)
        with pytest.raises(NotImplementedError):
            await provider.delete({"id": 1}, bindings)

    @pytest.mark.asyncio
    async def test_error_names_subclass(self, bindings):
        provider = PartialProvider()
        assert await provider.find(None, bindings) == []

        with pytest.raises(ProviderNotImplementedError) as exc_info:
            await provider.create({}, bindings)

        assert exc_info.value.provider == "PartialProvider"
        assert exc_info.value.method == "create"

    @pytest.mark.asyncio
    async def test_model_surfaces_missing_method(self, orm, user_cls, user_bindings, make_user):
        orm.model(user_cls, user_bindings, provider=PartialProvider())

        with pytest.raises(ProviderNotImplementedError):
            await orm.commit(make_user(name="Ada"))
