"""Implementación en memoria de PersistenceProvider (tests y modo efímero)."""

from __future__ import annotations

from .provider import PersistenceProvider


class MemoryPersistenceProvider(PersistenceProvider):
    """Diccionario clave -> texto que vive lo que vive el proceso."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._items)
