"""Model - validation, identity tracking and persistence for one class.

A modelled class can be instantiated, validated and, once a provider is
configured, found, committed and deleted through that provider.

Each model remembers the identity value it last saw for every instance it
loaded or committed. An instance whose identity property no longer matches
that value has been tampered with (for example a new instance given an ID by
hand, or an existing one re-pointed at another record) and is refused.
"""

from __future__ import annotations

import inspect
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping

from .bindings.map import BindingMap
from .bindings.types import ABSENT
from .errors import (
    IdentityError,
    IdentityTamperedError,
    InstanceTypeError,
    InvalidBindingValueError,
    InvalidOrderError,
    InvalidTypeError,
    MissingProviderError,
    ReentrantCommitError,
)
from .providers.base import Provider
from .tracking import InstanceMap, InstanceSet, supports_weakrefs


logger = logging.getLogger(__name__)

SORT_DIRECTIONS = ("asc", "desc")


def _callable_without_args(cls: type) -> bool:
    try:
        inspect.signature(cls).bind()
    except (TypeError, ValueError):
        return False
    return True


class Model:
    """
    Binds a class to its property bindings and, optionally, a provider.
    """

    def __init__(
        self,
        type_: type,
        bindings: BindingMap,
        provider: Provider | None = None,
    ):
        if not isinstance(type_, type):
            raise InvalidTypeError(f"Invalid model type: '{type(type_).__name__}'")
        if not supports_weakrefs(type_):
            raise InvalidTypeError(
                f"Instances of '{type_.__qualname__}' cannot be weakly referenced"
            )
        if not isinstance(bindings, BindingMap):
            raise InvalidTypeError(f"Invalid bindings type: '{type(bindings).__name__}'")

        self.type = type_
        self.bindings = bindings
        self._provider: Provider | None = None
        self._identities: InstanceMap[Any] = InstanceMap()
        self._pending_commits = InstanceSet()
        self._no_arg_constructor = _callable_without_args(type_)

        if provider is not None:
            self.provider = provider

    @property
    def name(self) -> str:
        return self.type.__qualname__

    @property
    def provider(self) -> Provider | None:
        return self._provider

    @provider.setter
    def provider(self, provider: Provider | None) -> None:
        """Set the provider. `None` removes the current one."""
        if provider is not None and not isinstance(provider, Provider):
            raise InvalidTypeError(f"Invalid provider type: '{type(provider).__name__}'")
        self._provider = provider

    def _require_provider(self) -> Provider:
        if self._provider is None:
            raise MissingProviderError(f"Model '{self.name}' doesn't have a provider")
        return self._provider

    def create_instance(self, values: Mapping[str, Any] | None = None) -> Any:
        """
        Create an instance and set its bound properties from `values`.

        Classes that can be constructed without arguments are called, so
        defaults set in ``__init__`` are present. Otherwise the instance is
        allocated with ``__new__`` and ``__init__`` is skipped.
        """
        if self._no_arg_constructor:
            instance = self.type()
        else:
            instance = self.type.__new__(self.type)
        self.bindings.set_object_values(instance, values)
        return instance

    def get_identity(self, instance: Any) -> Any:
        """Current identity value of an instance, or None if it has none."""
        identity_name = self.bindings.identity_name
        if identity_name is None:
            return None
        value = self.bindings.get_object_values(instance)[identity_name]
        return None if value is ABSENT else value

    def is_tracked(self, instance: Any) -> bool:
        return instance in self._identities

    def is_committing(self, instance: Any) -> bool:
        return instance in self._pending_commits

    # Validation

    def validate_filters(self, filters: Mapping[str, Any] | None) -> None:
        """Ensure every filtered property has a binding."""
        for name in filters or {}:
            self.bindings.ensure(name)

    def validate_order(self, order: Mapping[str, str] | None) -> None:
        """Ensure every ordered property has a binding and a valid direction."""
        for name, direction in (order or {}).items():
            self.bindings.ensure(name)
            if direction not in SORT_DIRECTIONS:
                raise InvalidOrderError(name, direction)

    def validate_values(self, values: Mapping[str, Any]) -> None:
        """
        Validate property values against their bindings.

        Raises:
            UnknownBindingError: If a value has no binding
            InvalidBindingValueError: On the first value that fails validation
        """
        for name, value in values.items():
            reason = self.bindings.get(name).validate(value)
            if reason:
                raise InvalidBindingValueError(name, value, str(reason))

    def validate_instance(self, instance: Any) -> None:
        if not isinstance(instance, self.type):
            raise InstanceTypeError(
                f"Invalid instance: expected '{self.name}', got '{type(instance).__qualname__}'"
            )

    def validate_identity(self, instance: Any) -> None:
        """
        Ensure the model has an identity and the instance's hasn't been
        changed since it was last found or committed.
        """
        if self.bindings.identity_name is None:
            raise IdentityError("An identity binding is required to commit")

        expected = self._identities.get(instance)
        if self.get_identity(instance) != expected:
            raise IdentityTamperedError("Identity binding values cannot be set externally")

    def validate(self, instance: Any) -> None:
        """Validate an instance's bound values."""
        self.validate_instance(instance)
        self.validate_values(self.bindings.get_object_values(instance))

    # Persistence

    async def find(
        self,
        filters: Mapping[str, Any] | None = None,
        order: Mapping[str, str] | None = None,
    ) -> list[Any]:
        """
        Retrieve instances from the provider.

        Args:
            filters: Property name -> Filter (or plain value) to match
            order: Property name -> "asc" | "desc"

        Returns:
            Instances in the order the provider returned them
        """
        provider = self._require_provider()
        self.validate_filters(filters)
        self.validate_order(order)

        records = await provider.find(dict(filters) if filters else filters, self.bindings)

        instances = []
        for record in records:
            instance = self.create_instance(record)
            self._identities.set(instance, self.get_identity(instance))
            instances.append(instance)

        logger.debug(f"{self.name}: found {len(instances)} instance(s)")
        return instances

    async def find_one(
        self,
        filters: Mapping[str, Any] | None = None,
        order: Mapping[str, str] | None = None,
    ) -> Any | None:
        """Retrieve the first matching instance, or None."""
        instances = await self.find(filters, order)
        return instances[0] if instances else None

    async def delete(self, instance: Any) -> bool:
        """
        Delete an instance through the provider.

        Returns:
            True if the provider removed it, False if it was never persisted
            or the provider removed nothing
        """
        provider = self._require_provider()
        self.validate_instance(instance)
        self.validate_identity(instance)

        identity = self.get_identity(instance)
        if not identity:
            return False

        filters = {self.bindings.identity_name: identity}
        if await provider.delete(filters, self.bindings):
            self._identities.delete(instance)
            logger.debug(f"{self.name}: deleted {filters}")
            return True
        return False

    @contextmanager
    def _commit_guard(self, instance: Any) -> Iterator[None]:
        # Rejects overlapping commits of one instance; does not queue them
        if instance in self._pending_commits:
            raise ReentrantCommitError(
                "Unable to commit this model because the provider is already committing changes to it"
            )
        self._pending_commits.add(instance)
        try:
            yield
        finally:
            self._pending_commits.discard(instance)

    async def commit(self, instance: Any) -> bool:
        """
        Commit an instance through the provider.

        New instances (no identity) are created and receive the identity the
        provider assigns. Instances that were found or committed before are
        updated in place.

        Raises:
            ReentrantCommitError: If a commit of this instance is still pending
        """
        provider = self._require_provider()
        self.validate_instance(instance)
        self.validate_identity(instance)

        identity_name = self.bindings.identity_name
        values = self.bindings.get_object_values(instance)
        self.validate_values(values)

        identity = self.get_identity(instance)

        with self._commit_guard(instance):
            if not identity:
                create_values = {k: v for k, v in values.items() if k != identity_name}
                identity = await provider.create(create_values, self.bindings)
                if identity is None:
                    raise IdentityError(
                        f"{type(provider).__name__}.create() did not return an identity"
                    )
                setattr(instance, identity_name, identity)
                self._identities.set(instance, identity)
                logger.debug(f"{self.name}: created {identity_name}={identity!r}")
            else:
                filters = {identity_name: identity}
                await provider.update(filters, values, self.bindings)
                logger.debug(f"{self.name}: updated {filters}")

        return True

    def __repr__(self) -> str:
        provider = type(self._provider).__name__ if self._provider else None
        return f"Model({self.name}, {self.bindings!r}, provider={provider})"
