"""Binding map - the named, ordered bindings for one modelled type."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from ..errors import ConfigurationError, InvalidTypeError, UnknownBindingError
from .types import ABSENT, Binding, BindingKind


def slot_names(cls: type) -> frozenset[str]:
    """Names declared in ``__slots__`` anywhere on the class's MRO."""
    names = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.update(slots)
    return frozenset(names)


class BindingMap:
    """
    Ordered collection of property bindings.

    Holds at most one identity binding and remembers its property name so
    the model and providers can address records by their primary key.
    """

    def __init__(self, bindings: Mapping[str, Binding] | None = None):
        self._bindings: dict[str, Binding] = {}
        self._identity_name: str | None = None
        if bindings is not None:
            self.set(bindings)

    def set(self, bindings: Mapping[str, Binding]) -> None:
        """
        Replace all bindings.

        Raises:
            InvalidTypeError: If a name is not a string or a value is not a Binding
            ConfigurationError: If more than one identity binding is given
        """
        if not isinstance(bindings, Mapping):
            raise InvalidTypeError(
                f"Invalid property bindings type: '{type(bindings).__name__}'"
            )

        new_bindings: dict[str, Binding] = {}
        identity_name = None
        for name, binding in bindings.items():
            if not isinstance(name, str):
                raise InvalidTypeError(f"Invalid binding name type: '{type(name).__name__}'")
            if not isinstance(binding, Binding):
                raise InvalidTypeError(f"Invalid binding type: '{type(binding).__name__}'")
            if binding.kind is BindingKind.IDENTITY:
                if identity_name is not None:
                    raise ConfigurationError("A model can only have one identity binding")
                identity_name = name
            new_bindings[name] = binding

        self._bindings = new_bindings
        self._identity_name = identity_name

    def ensure(self, name: str) -> None:
        """Raise UnknownBindingError if no binding exists for `name`."""
        if name not in self._bindings:
            raise UnknownBindingError(name)

    def get(self, name: str) -> Binding:
        self.ensure(name)
        return self._bindings[name]

    def get_identity_name(self) -> str | None:
        return self._identity_name

    @property
    def identity_name(self) -> str | None:
        """Name of the identity property, or None if the map has no identity."""
        return self._identity_name

    @property
    def names(self) -> list[str]:
        return list(self._bindings)

    def set_object_values(self, target: Any, values: Mapping[str, Any] | None) -> None:
        """
        Assign bound values onto an object.

        Only names present in `values` are assigned; other attributes on
        `target` are left as they are. ABSENT values count as not present.
        """
        if not values:
            return
        for name in self._bindings:
            if name in values and values[name] is not ABSENT:
                setattr(target, name, values[name])

    def get_object_values(self, source: Any) -> dict[str, Any]:
        """
        Read bound values from an object's own attributes.

        Every bound name appears exactly once; unset properties map to ABSENT.
        Both ``__dict__`` attributes and ``__slots__`` members count as own
        attributes; class-level defaults do not.
        """
        own = vars(source) if hasattr(source, "__dict__") else {}
        slots = slot_names(type(source))
        values = {}
        for name in self._bindings:
            if name in own:
                values[name] = own[name]
            elif name in slots:
                values[name] = getattr(source, name, ABSENT)
            else:
                values[name] = ABSENT
        return values

    def items(self) -> list[tuple[str, Binding]]:
        return list(self._bindings.items())

    def __iter__(self) -> Iterator[tuple[str, Binding]]:
        return iter(self._bindings.items())

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __repr__(self) -> str:
        kinds = ", ".join(f"{name}={binding.kind.value if binding.kind else 'any'}"
                          for name, binding in self._bindings.items())
        return f"BindingMap({kinds})"
