"""Exception hierarchy for sculpt."""

from __future__ import annotations

from typing import Any


class SculptError(Exception):
    """Base exception for all sculpt errors."""
    pass


class ConfigurationError(SculptError):
    """Raised when a model, binding or schema is configured incorrectly."""
    pass


class InvalidTypeError(ConfigurationError, TypeError):
    """Raised when an argument is not of the kind sculpt expects."""
    pass


class ModelNotFoundError(SculptError):
    """Raised when a class has not been modelled."""
    pass


class UnknownBindingError(SculptError):
    """Raised when a property name has no binding."""

    def __init__(self, name: str):
        super().__init__(f"No binding exists for property '{name}'")
        self.name = name


class InvalidOrderError(SculptError, ValueError):
    """Raised when a sort direction is not 'asc' or 'desc'."""

    def __init__(self, name: str, direction: Any):
        super().__init__(f"Invalid sort value '{direction}' for binding '{name}'")
        self.name = name
        self.direction = direction


class InvalidBindingValueError(SculptError, ValueError):
    """Raised when a bound value fails its binding's validation."""

    def __init__(self, property: str, value: Any, reason: str):
        super().__init__(f"Invalid value {value!r} for property '{property}' - {reason}")
        self.property = property
        self.value = value
        self.reason = reason


class MissingProviderError(SculptError):
    """Raised when a model is used without a provider."""
    pass


class IdentityError(SculptError):
    """Raised when a model's identity cannot be used."""
    pass


class IdentityTamperedError(IdentityError):
    """Raised when an identity value was set outside of find/commit."""
    pass


class ReentrantCommitError(SculptError):
    """Raised when an instance is committed while a commit is still pending."""
    pass


class InstanceTypeError(SculptError, TypeError):
    """Raised when an instance is not of the modelled type."""
    pass


class ProviderNotImplementedError(SculptError, NotImplementedError):
    """Raised when a provider method has not been overridden."""

    def __init__(self, provider: str, method: str):
        super().__init__(f"{provider}.{method}() - method not implemented")
        self.provider = provider
        self.method = method
