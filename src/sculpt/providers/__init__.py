"""Storage providers."""

from .base import Provider
from .memory import MemoryProvider

__all__ = [
    "Provider",
    "MemoryProvider",
]
