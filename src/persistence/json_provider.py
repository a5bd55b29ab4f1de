"""Implementación JSON de PersistenceProvider."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from .provider import PersistenceProvider, StoreUnavailableError

PROJECT_ROOT = Path(__file__).resolve().parents[2]
STORE_FILENAME = "store.json"


class JsonPersistenceProvider(PersistenceProvider):
    """Persistencia en filesystem: un único store.json con el mapa clave -> texto."""

    def __init__(self, base_path: Path | None = None) -> None:
        self._root = self._resolve_base_path(base_path)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreUnavailableError(f"No se puede crear {self._root}: {exc}") from exc

    @staticmethod
    def _resolve_base_path(base_path: Path | None = None) -> Path:
        if base_path is not None:
            return base_path
        configured = os.getenv("TICTACTOE_STORAGE_DIR", "").strip()
        if configured:
            candidate = Path(configured)
            return candidate if candidate.is_absolute() else (PROJECT_ROOT / candidate)
        return PROJECT_ROOT / "storage"

    @property
    def path(self) -> Path:
        return self._root / STORE_FILENAME

    @staticmethod
    def _read_json(path: Path, default: Any) -> Any:
        if not path.exists():
            return default
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def _write_json(path: Path, data: Any) -> None:
        # Temporal + os.replace: store.json nunca queda escrito a medias.
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def _load(self) -> dict[str, str]:
        try:
            items = self._read_json(self.path, {})
        except (OSError, ValueError) as exc:
            raise StoreUnavailableError(f"store.json ilegible: {exc}") from exc
        if not isinstance(items, dict):
            raise StoreUnavailableError("store.json no contiene un objeto JSON")
        return items

    def _dump(self, items: dict[str, str]) -> None:
        try:
            self._write_json(self.path, items)
        except OSError as exc:
            raise StoreUnavailableError(f"No se puede escribir store.json: {exc}") from exc

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._dump(items)

    def remove(self, key: str) -> None:
        items = self._load()
        if key not in items:
            return
        del items[key]
        self._dump(items)
