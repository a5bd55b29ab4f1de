"""PersistedValue: un valor en memoria sincronizado con una clave del almacén."""

from __future__ import annotations

import json
from typing import Callable, Generic, TypeVar

from ..logging_config import get_logger
from ..persistence import PersistenceProvider, StoreUnavailableError

T = TypeVar("T")


class PersistedValue(Generic[T]):
    """Valor de tipo T guardado en store[key] como serialize(value).

    El valor inicial se lee una sola vez al construir; si no existe o
    deserializa a un valor falsy se usa default (se invoca si es callable).
    Cada set()/set_key() ejecuta synchronize(): si la clave cambió se borra la
    entrada anterior y después se escribe la actual.

    Si el almacén falla, la instancia pasa a modo efímero: el valor sigue en
    memoria y no se vuelve a tocar el almacén.
    """

    def __init__(
        self,
        store: PersistenceProvider,
        key: str,
        default: T | Callable[[], T],
        serialize: Callable[[T], str] = json.dumps,
        deserialize: Callable[[str], T] = json.loads,
    ) -> None:
        self._store = store
        self._key = key
        self._prev_key = key
        self._serialize = serialize
        self._deserialize = deserialize
        self._ephemeral = False
        self._log = get_logger("PersistedValue")
        self._value: T = self._read_initial(default)
        self.synchronize()

    def _read_initial(self, default: T | Callable[[], T]) -> T:
        raw: str | None = None
        try:
            raw = self._store.get(self._key)
        except StoreUnavailableError as exc:
            self._degrade("get", exc)
        if raw is not None:
            try:
                value = self._deserialize(raw)
            except (ValueError, TypeError) as exc:
                self._log.warning("No se pudo deserializar key=%s, se usa el valor por defecto: %s", self._key, exc)
            else:
                if value:
                    return value
        return default() if callable(default) else default

    def _degrade(self, operation: str, exc: Exception) -> None:
        self._ephemeral = True
        self._log.warning(
            "Almacén no disponible (%s key=%s): %s. Se sigue solo en memoria.",
            operation,
            self._key,
            exc,
        )

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> T:
        return self._value

    @property
    def ephemeral(self) -> bool:
        return self._ephemeral

    def get(self) -> T:
        return self._value

    def set(self, new_value: T) -> None:
        self._value = new_value
        self.synchronize()

    def set_key(self, new_key: str) -> None:
        self._key = new_key
        self.synchronize()

    def synchronize(self) -> None:
        """Reconcilia el almacén con (key, value)."""
        if self._ephemeral:
            self._prev_key = self._key
            return
        # Si serialize falla, _prev_key no avanza y la próxima pasada borra la clave vieja.
        serialized = self._serialize(self._value)
        prev_key = self._prev_key
        try:
            if prev_key != self._key:
                self._store.remove(prev_key)
            self._store.set(self._key, serialized)
        except StoreUnavailableError as exc:
            self._prev_key = self._key
            self._degrade("sync", exc)
            return
        self._prev_key = self._key
        self._log.debug("sync key=%s (prev=%s)", self._key, prev_key)
