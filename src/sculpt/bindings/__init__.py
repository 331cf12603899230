"""Bindings - per-property validation rules and the maps that hold them."""

from .types import (
    ABSENT,
    Binding,
    BindingKind,
    BindingOptions,
    BooleanBinding,
    DateBinding,
    FailureReason,
    IdentityBinding,
    IntegerBinding,
    StringBinding,
    boolean,
    date,
    identity,
    integer,
    string,
)
from .map import BindingMap
from .loader import (
    load_binding,
    load_bindings,
    load_schema,
    load_schema_file,
    load_schema_from_json,
    load_schema_from_yaml,
)

__all__ = [
    "ABSENT",
    "Binding",
    "BindingKind",
    "BindingOptions",
    "BindingMap",
    "BooleanBinding",
    "DateBinding",
    "FailureReason",
    "IdentityBinding",
    "IntegerBinding",
    "StringBinding",
    "boolean",
    "date",
    "identity",
    "integer",
    "string",
    "load_binding",
    "load_bindings",
    "load_schema",
    "load_schema_file",
    "load_schema_from_json",
    "load_schema_from_yaml",
]
