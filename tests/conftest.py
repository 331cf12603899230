"""Shared test fixtures for sculpt tests."""

import pytest

from sculpt import identity, integer, sculpt, string
from sculpt.providers.memory import MemoryProvider

from tests.mocks.recording_provider import RecordingProvider


# =============================================================================
# Modelled classes
# =============================================================================

@pytest.fixture
def user_cls():
    """A fresh, unmodelled User class per test (decorate mutates classes)."""
    class User:
        pass
    return User


@pytest.fixture
def user_bindings():
    return {
        "id": identity(),
        "name": string(required=True),
        "age": integer(),
    }


# =============================================================================
# Facade and provider fixtures
# =============================================================================

@pytest.fixture
def orm():
    """Empty Sculpt facade."""
    return sculpt()


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def memory_provider() -> MemoryProvider:
    return MemoryProvider()


@pytest.fixture
def user_model(orm, user_cls, user_bindings, provider):
    """User modelled with the recording provider."""
    return orm.model(user_cls, user_bindings, provider=provider)


@pytest.fixture
def make_user(user_cls):
    def _make(**values):
        user = user_cls()
        for name, value in values.items():
            setattr(user, name, value)
        return user
    return _make
