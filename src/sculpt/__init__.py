"""
Sculpt - Object Mapping Layer

Describe a class's persisted properties with bindings, validate instances
against them, and delegate storage to a pluggable provider:

    Binding (property rule)  →  Model (class + bindings)  →  Provider (store)
           ↓                            ↓                          ↓
     "What is valid"         "Which object is which"         "Where it lives"
"""

__version__ = "0.1.0"

from .bindings import (
    ABSENT,
    Binding,
    BindingKind,
    BindingMap,
    BindingOptions,
    FailureReason,
    boolean,
    date,
    identity,
    integer,
    string,
)
from .config import SculptConfig, configure_logging
from .errors import (
    ConfigurationError,
    IdentityError,
    IdentityTamperedError,
    InstanceTypeError,
    InvalidBindingValueError,
    InvalidOrderError,
    InvalidTypeError,
    MissingProviderError,
    ModelNotFoundError,
    ProviderNotImplementedError,
    ReentrantCommitError,
    SculptError,
    UnknownBindingError,
)
from .filters import Filter, FilterKind
from .model import Model
from .providers import MemoryProvider, Provider
from .registry import ModelRegistry
from .service import Sculpt, sculpt

__all__ = [
    "ABSENT",
    "Binding",
    "BindingKind",
    "BindingMap",
    "BindingOptions",
    "FailureReason",
    "boolean",
    "date",
    "identity",
    "integer",
    "string",
    "Filter",
    "FilterKind",
    "Model",
    "ModelRegistry",
    "Provider",
    "MemoryProvider",
    "Sculpt",
    "sculpt",
    "SculptConfig",
    "configure_logging",
    "SculptError",
    "ConfigurationError",
    "InvalidTypeError",
    "ModelNotFoundError",
    "UnknownBindingError",
    "InvalidOrderError",
    "InvalidBindingValueError",
    "MissingProviderError",
    "IdentityError",
    "IdentityTamperedError",
    "ReentrantCommitError",
    "InstanceTypeError",
    "ProviderNotImplementedError",
]
