"""Saludo con el nombre persistido en el almacén."""

from __future__ import annotations

from ..persistence import PersistenceProvider
from .persisted_value import PersistedValue

NAME_KEY = "name"


class Greeting:
    """Nombre del jugador guardado bajo NAME_KEY."""

    def __init__(self, store: PersistenceProvider, initial_name: str = "", key: str = NAME_KEY) -> None:
        self._name: PersistedValue[str] = PersistedValue(store, key, initial_name)

    @property
    def name(self) -> str:
        return self._name.get()

    @property
    def message(self) -> str:
        name = self._name.get()
        return f"Hello {name}" if name else "Please type your name"

    def on_name_changed(self, text: str) -> None:
        self._name.set(text)
