"""Binding types - per-property validation rules."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar

from ..errors import ConfigurationError, InvalidTypeError


class _Absent:
    """Marker for a property that has never been set (distinct from None)."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> _Absent:
        return self

    def __deepcopy__(self, memo: dict) -> _Absent:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


class BindingKind(str, Enum):
    """Kinds of value a binding can describe."""
    IDENTITY = "identity"
    STRING = "string"
    INTEGER = "integer"
    DATE = "date"
    BOOLEAN = "boolean"


class FailureReason(str, Enum):
    """Why a value failed validation."""
    REQUIRED = "required"
    INVALID_TYPE = "invalid type"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BindingOptions:
    """
    Options recognised by bindings.

    `allow_empty` only applies to string bindings.
    """
    required: bool = False
    allow_empty: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BindingOptions:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown binding option(s): {', '.join(sorted(unknown))}"
            )
        return cls(**data)


@dataclass(frozen=True)
class Binding:
    """
    Base binding. Validates presence only.

    Subclasses set `kind` and extend `validate`, always applying the base
    rule first.
    """
    kind: ClassVar[BindingKind | None] = None

    options: BindingOptions = field(default_factory=BindingOptions)

    def __post_init__(self) -> None:
        if not isinstance(self.options, BindingOptions):
            raise InvalidTypeError(
                f"Invalid binding options type: '{type(self.options).__name__}'"
            )
        if self.options.allow_empty and self.kind is not BindingKind.STRING:
            raise ConfigurationError(
                f"'allow_empty' is not a valid option for {type(self).__name__}"
            )

    @property
    def required(self) -> bool:
        return self.options.required

    def validate(self, value: Any) -> FailureReason | None:
        if self.options.required and value is ABSENT:
            return FailureReason.REQUIRED
        return None


@dataclass(frozen=True)
class IdentityBinding(Binding):
    """Marks the primary key property of a modelled type."""
    kind: ClassVar[BindingKind] = BindingKind.IDENTITY


@dataclass(frozen=True)
class StringBinding(Binding):
    kind: ClassVar[BindingKind] = BindingKind.STRING

    @property
    def allow_empty(self) -> bool:
        return self.options.allow_empty

    def validate(self, value: Any) -> FailureReason | None:
        error = super().validate(value)
        if error:
            return error

        if value is not ABSENT and not isinstance(value, str):
            return FailureReason.INVALID_TYPE

        # An empty string counts as a missing value unless explicitly allowed
        if not self.options.allow_empty and value == "":
            return FailureReason.REQUIRED

        return None


@dataclass(frozen=True)
class IntegerBinding(Binding):
    """Accepts any real number (`int` or `float`), but not `bool`."""
    kind: ClassVar[BindingKind] = BindingKind.INTEGER

    def validate(self, value: Any) -> FailureReason | None:
        error = super().validate(value)
        if error:
            return error

        if value is not ABSENT and (not isinstance(value, (int, float)) or isinstance(value, bool)):
            return FailureReason.INVALID_TYPE

        return None


@dataclass(frozen=True)
class DateBinding(Binding):
    """Accepts `date` and `datetime` values. `None` means no date."""
    kind: ClassVar[BindingKind] = BindingKind.DATE

    def validate(self, value: Any) -> FailureReason | None:
        error = super().validate(value)
        if error:
            return error

        if value is not ABSENT and value is not None and not isinstance(value, datetime.date):
            return FailureReason.INVALID_TYPE

        return None


@dataclass(frozen=True)
class BooleanBinding(Binding):
    kind: ClassVar[BindingKind] = BindingKind.BOOLEAN

    def validate(self, value: Any) -> FailureReason | None:
        error = super().validate(value)
        if error:
            return error

        if value is not ABSENT and not isinstance(value, bool):
            return FailureReason.INVALID_TYPE

        return None


BINDING_TYPES: dict[BindingKind, type[Binding]] = {
    BindingKind.IDENTITY: IdentityBinding,
    BindingKind.STRING: StringBinding,
    BindingKind.INTEGER: IntegerBinding,
    BindingKind.DATE: DateBinding,
    BindingKind.BOOLEAN: BooleanBinding,
}


def identity(required: bool = False) -> IdentityBinding:
    return IdentityBinding(BindingOptions(required=required))


def string(required: bool = False, allow_empty: bool = False) -> StringBinding:
    return StringBinding(BindingOptions(required=required, allow_empty=allow_empty))


def integer(required: bool = False) -> IntegerBinding:
    return IntegerBinding(BindingOptions(required=required))


def date(required: bool = False) -> DateBinding:
    return DateBinding(BindingOptions(required=required))


def boolean(required: bool = False) -> BooleanBinding:
    return BooleanBinding(BindingOptions(required=required))
