"""
Binding loaders.

Build binding sets from plain dictionaries and YAML/JSON schema files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..errors import ConfigurationError
from .types import BINDING_TYPES, Binding, BindingKind, BindingOptions


logger = logging.getLogger(__name__)


def load_binding(name: str, spec: Any) -> Binding:
    """
    Build a single binding from its schema entry.

    The entry is either a kind name (``"string"``) or a mapping with a
    ``kind`` key and any binding options::

        name:
          kind: string
          required: true
          allow_empty: false
    """
    if isinstance(spec, Binding):
        return spec

    if isinstance(spec, str):
        kind_name, options = spec, {}
    elif isinstance(spec, Mapping):
        options = dict(spec)
        kind_name = options.pop("kind", None)
        if kind_name is None:
            raise ConfigurationError(f"Binding '{name}' has no kind")
    else:
        raise ConfigurationError(
            f"Invalid schema for binding '{name}': {type(spec).__name__}"
        )

    try:
        kind = BindingKind(kind_name)
    except ValueError:
        valid = ", ".join(k.value for k in BindingKind)
        raise ConfigurationError(
            f"Unknown binding kind '{kind_name}' for '{name}' (expected one of: {valid})"
        ) from None

    return BINDING_TYPES[kind](BindingOptions.from_dict(options))


def load_bindings(data: Mapping[str, Any]) -> dict[str, Binding]:
    """Build a name -> Binding dict, preserving the order of `data`."""
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Invalid bindings schema: {type(data).__name__}")
    return {name: load_binding(name, spec) for name, spec in data.items()}


def load_schema(data: Mapping[str, Any]) -> dict[str, dict[str, Binding]]:
    """
    Build bindings for several types at once.

    Expected format:
        User:
          id: identity
          name: {kind: string, required: true}
          born: date

        Post:
          id: identity
          title: string
    """
    schema = {}
    for type_name, bindings in data.items():
        schema[type_name] = load_bindings(bindings or {})
    return schema


def load_schema_from_yaml(file_path: str | Path) -> dict[str, dict[str, Binding]]:
    """
    Load a binding schema from a YAML file.

    Returns an empty schema if the file does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        logger.warning(f"Schema file not found: {path}")
        return {}

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    schema = load_schema(data)
    logger.info(f"Loaded bindings for {len(schema)} type(s) from {path}")
    return schema


def load_schema_from_json(file_path: str | Path) -> dict[str, dict[str, Binding]]:
    """Load a binding schema from a JSON file."""
    path = Path(file_path)
    if not path.exists():
        logger.warning(f"Schema file not found: {path}")
        return {}

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return load_schema(data or {})


def load_schema_file(file_path: str | Path) -> dict[str, dict[str, Binding]]:
    """Load a schema file, choosing the format from its suffix."""
    path = Path(file_path)
    if path.suffix in (".yaml", ".yml"):
        return load_schema_from_yaml(path)
    return load_schema_from_json(path)
