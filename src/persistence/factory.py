"""Factory de persistencia por variable de entorno."""

from __future__ import annotations

import os

from ..logging_config import get_logger
from .db_provider import DatabasePersistenceProvider
from .json_provider import JsonPersistenceProvider
from .memory_provider import MemoryPersistenceProvider
from .provider import PersistenceProvider, StoreUnavailableError


def create_persistence_provider() -> PersistenceProvider:
    """Crea el backend de PERSISTENCE_MODE; si no está disponible se usa memoria."""
    mode = os.getenv("PERSISTENCE_MODE", "json").strip().lower() or "json"
    if mode == "memory":
        return MemoryPersistenceProvider()
    if mode not in ("json", "db"):
        raise RuntimeError(f"PERSISTENCE_MODE inválido: {mode!r}. Usa 'json', 'db' o 'memory'.")
    try:
        if mode == "db":
            return DatabasePersistenceProvider()
        return JsonPersistenceProvider()
    except StoreUnavailableError as exc:
        get_logger("Persistence").warning(
            "Almacén %s no disponible: %s. Se usa almacenamiento en memoria.", mode, exc
        )
        return MemoryPersistenceProvider()
