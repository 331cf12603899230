"""Configuration for sculpt."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ModelDefaults:
    """Defaults applied when classes are modelled."""
    # Attach save()/delete()/find() to modelled classes unless told otherwise
    decorate: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration (only applied by configure_logging)."""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class SculptConfig:
    """Main configuration container."""
    models: ModelDefaults = field(default_factory=ModelDefaults)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    # Binding schema file (YAML or JSON) to load type bindings from
    schema_file: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SculptConfig:
        """Create config from dictionary."""
        return cls(
            models=ModelDefaults(**(data.get("models") or {})),
            logging=LoggingConfig(**(data.get("logging") or {})),
            schema_file=data.get("schema_file"),
        )

    @classmethod
    def from_yaml(cls, path: str) -> SculptConfig:
        """Load config from YAML file."""
        import yaml
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_json(cls, path: str) -> SculptConfig:
        """Load config from JSON file."""
        import json
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_properties(self) -> dict[str, Any]:
        """Facade-level properties seeded from this config."""
        return {"decorate": self.models.decorate}


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure root logging for applications that don't do it themselves."""
    config = config or LoggingConfig()
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.WARNING),
        format=config.format,
    )
