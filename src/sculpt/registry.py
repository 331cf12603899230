"""Model registry - maps modelled classes to their models."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from .errors import InvalidTypeError, ModelNotFoundError
from .model import Model

logger = logging.getLogger(__name__)


def type_key(cls: type) -> str:
    """Stable identifier for a class: ``module.QualifiedName``."""
    if not isinstance(cls, type):
        raise InvalidTypeError(f"Invalid model type: '{type(cls).__name__}'")
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass
class ModelRegistry:
    """
    Registry of models by type key.

    Models are registered when a class is modelled and looked up whenever an
    instance or class is passed to the facade. An entry only answers for the
    exact class object it was built for, so a class redefined under the same
    name is not mistaken for the old one.
    """
    _models: dict[str, Model] = field(default_factory=dict)
    _lock: threading.RLock = field(default_factory=threading.RLock)

    def register(self, model: Model) -> None:
        """Register a model, replacing any model for the same key."""
        key = type_key(model.type)
        with self._lock:
            if key in self._models:
                logger.warning(f"Replacing existing model for {key}")
            self._models[key] = model
        logger.info(f"Registered model {key} ({len(model.bindings)} binding(s))")

    def get(self, cls: type) -> Model:
        """
        Get the model for a class.

        Raises:
            InvalidTypeError: If `cls` is not a class
            ModelNotFoundError: If the class has not been modelled
        """
        key = type_key(cls)
        with self._lock:
            model = self._models.get(key)
        if model is None or model.type is not cls:
            raise ModelNotFoundError(f"No model for type '{cls.__qualname__}'")
        return model

    def has(self, cls: type) -> bool:
        if not isinstance(cls, type):
            return False
        with self._lock:
            model = self._models.get(type_key(cls))
        return model is not None and model.type is cls

    def unregister(self, cls: type) -> bool:
        key = type_key(cls)
        with self._lock:
            model = self._models.get(key)
            if model is None or model.type is not cls:
                return False
            del self._models[key]
        return True

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._models.keys())

    def __len__(self) -> int:
        return len(self._models)
