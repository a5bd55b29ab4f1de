"""Contrato de persistencia clave-valor para el estado de la partida y el saludo."""

from __future__ import annotations

from abc import ABC, abstractmethod


class StoreUnavailableError(RuntimeError):
    """El almacén no está disponible o una operación de lectura/escritura ha fallado."""


class PersistenceProvider(ABC):
    """Interfaz de almacenamiento desacoplada del engine.

    Las claves y los valores son texto; la (de)serialización vive en PersistedValue.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Devuelve el texto guardado en key o None si no existe."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Guarda value en key (la última escritura gana)."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Elimina la entrada de key. No falla si no existe."""
