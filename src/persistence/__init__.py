"""Capa de persistencia clave-valor (memory/json/db)."""

from .provider import PersistenceProvider, StoreUnavailableError
from .memory_provider import MemoryPersistenceProvider
from .factory import create_persistence_provider

__all__ = [
    "PersistenceProvider",
    "StoreUnavailableError",
    "MemoryPersistenceProvider",
    "create_persistence_provider",
]
