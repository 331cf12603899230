"""Base provider interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import ProviderNotImplementedError

if TYPE_CHECKING:
    from ..bindings.map import BindingMap


class Provider:
    """
    Base class for storage providers.

    A provider connects a model to a data store. Providers share one
    signature so they can be swapped: start with an in-memory provider, then
    move to one backed by a database or a REST API without touching the
    models.

    Every method receives the model's BindingMap so the provider can inspect
    property names and kinds (for example to build a native query). Filters
    arrive as a name -> value mapping where values are usually `Filter`
    objects; providers either call `Filter.test` on candidate values or
    translate `Filter.kind` into their own query language.

    Methods that are not overridden raise ProviderNotImplementedError.
    """

    async def find(
        self,
        filters: dict[str, Any] | None,
        bindings: BindingMap,
    ) -> list[dict[str, Any]]:
        """
        Retrieve records from the data store.

        Returns:
            A list of property name -> value mappings, one per record
        """
        raise ProviderNotImplementedError(type(self).__name__, "find")

    async def create(
        self,
        values: dict[str, Any],
        bindings: BindingMap,
    ) -> Any:
        """
        Create a new record.

        Returns:
            The identity the store assigned to the record
        """
        raise ProviderNotImplementedError(type(self).__name__, "create")

    async def update(
        self,
        filters: dict[str, Any],
        values: dict[str, Any],
        bindings: BindingMap,
    ) -> bool | None:
        """Amend the records matching `filters` with `values`."""
        raise ProviderNotImplementedError(type(self).__name__, "update")

    async def delete(
        self,
        filters: dict[str, Any],
        bindings: BindingMap,
    ) -> bool:
        """
        Remove the records matching `filters`.

        Returns:
            True if anything was removed
        """
        raise ProviderNotImplementedError(type(self).__name__, "delete")
