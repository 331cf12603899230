"""Sculpt facade - the public API for modelling and persisting classes.

Flow:
1. Application models a class with its property bindings
2. Application assigns a provider to one or more modelled classes
3. find/commit/delete calls resolve the class's Model and delegate to it
4. The Model validates and guards, then calls the provider
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Iterable, Mapping

from .bindings.loader import load_bindings, load_schema_file
from .bindings.map import BindingMap
from .bindings.types import Binding
from .config import SculptConfig
from .errors import ConfigurationError, InvalidTypeError
from .model import Model
from .providers.base import Provider
from .registry import ModelRegistry


logger = logging.getLogger(__name__)


class Sculpt:
    """
    Facade over a registry of models.

    Each Sculpt keeps its own registry, so separate instances never share
    models or providers.
    """

    def __init__(self, config: SculptConfig | None = None):
        self.config = config or SculptConfig()
        self.registry = ModelRegistry()
        self._properties: dict[str, Any] = self.config.to_properties()
        self._schema: dict[str, dict[str, Binding]] = {}
        if self.config.schema_file:
            self._schema = load_schema_file(self.config.schema_file)

    # Properties

    def set(self, property: str, value: Any) -> None:
        """Set a facade-level property (e.g. ``decorate``)."""
        self._properties[property] = value

    def get(self, property: str) -> Any:
        """Get a facade-level property, or None if it was never set."""
        return self._properties.get(property)

    # Modelling

    def model(
        self,
        type_: type,
        bindings: Mapping[str, Binding],
        *,
        provider: Provider | None = None,
        decorate: bool | None = None,
    ) -> Model:
        """
        Model a class by declaring its property bindings.

        Args:
            type_: The class to model
            bindings: Property name -> Binding
            provider: Provider to use for the class
            decorate: Attach save()/delete()/find() to the class. When None,
                the facade's ``decorate`` property decides.

        Example:
            class User:
                pass

            orm = sculpt()
            orm.model(User, {"id": identity(), "name": string(required=True)})
        """
        if not isinstance(type_, type):
            raise InvalidTypeError(f"Invalid model type: '{type(type_).__name__}'")
        if not isinstance(bindings, Mapping):
            raise InvalidTypeError(
                f"Invalid property bindings type: '{type(bindings).__name__}'"
            )

        model = Model(type_, BindingMap(bindings), provider=provider)
        self.registry.register(model)

        if decorate is True or (self.get("decorate") is True and decorate is not False):
            self.decorate(type_)

        return model

    def model_from_schema(
        self,
        type_: type,
        name: str | None = None,
        **options: Any,
    ) -> Model:
        """Model a class using bindings from the loaded schema file."""
        schema_name = name or type_.__name__
        if schema_name not in self._schema:
            raise ConfigurationError(f"No bindings for '{schema_name}' in schema")
        return self.model(type_, self._schema[schema_name], **options)

    def load_schema(self, data: Mapping[str, Mapping[str, Any]]) -> None:
        """Add type bindings from a dictionary (same format as schema files)."""
        for type_name, bindings in data.items():
            self._schema[type_name] = load_bindings(bindings or {})

    def get_model(self, type_: type) -> Model:
        """Get the model for a class (raises ModelNotFoundError if unmodelled)."""
        return self.registry.get(type_)

    def provider(
        self,
        provider: Provider | None,
        types: type | Iterable[type],
    ) -> None:
        """
        Set the provider for one or more modelled classes.

        Passing None removes the classes' provider.
        """
        if provider is not None and not isinstance(provider, Provider):
            raise InvalidTypeError(f"Invalid provider type: '{type(provider).__name__}'")

        if isinstance(types, type):
            types = [types]
        elif not isinstance(types, (list, tuple, set, frozenset)):
            raise InvalidTypeError(f"Invalid model type: '{type(types).__name__}'")

        for type_ in types:
            self.get_model(type_).provider = provider
            logger.info(
                f"Provider for {type_.__qualname__} set to "
                f"{type(provider).__name__ if provider else None}"
            )

    def decorate(self, type_: type) -> None:
        """
        Add convenience methods to a modelled class.

        Adds ``Class.find()`` and ``Class.find_one()`` static methods and
        ``instance.save()`` / ``instance.delete()`` coroutine methods.
        """
        self.get_model(type_)

        facade = self

        async def save(instance):
            return await facade.commit(instance)

        async def delete(instance):
            return await facade.delete(instance)

        type_.find = staticmethod(functools.partial(self.find, type_))
        type_.find_one = staticmethod(functools.partial(self.find_one, type_))
        type_.save = save
        type_.delete = delete
        logger.debug(f"Decorated {type_.__qualname__}")

    # Operations

    async def find(
        self,
        type_: type,
        filters: Mapping[str, Any] | None = None,
        order: Mapping[str, str] | None = None,
    ) -> list[Any]:
        """Retrieve instances of a modelled class from its provider."""
        return await self.get_model(type_).find(filters, order)

    async def find_one(
        self,
        type_: type,
        filters: Mapping[str, Any] | None = None,
        order: Mapping[str, str] | None = None,
    ) -> Any | None:
        """Retrieve the first matching instance of a modelled class, or None."""
        return await self.get_model(type_).find_one(filters, order)

    async def delete(self, instance: Any) -> bool:
        """Permanently remove an instance from its provider's store."""
        return await self.get_model(type(instance)).delete(instance)

    async def commit(self, instance: Any) -> bool:
        """Create or update an instance in its provider's store."""
        return await self.get_model(type(instance)).commit(instance)

    def validate(self, instance: Any) -> None:
        """
        Validate an instance against its bindings.

        Raises:
            InvalidBindingValueError: If a bound value is invalid
        """
        self.get_model(type(instance)).validate(instance)


def sculpt(config: SculptConfig | None = None) -> Sculpt:
    """Create a new, empty Sculpt facade."""
    return Sculpt(config)
