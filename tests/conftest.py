"""Fixtures compartidos para tests."""

import pytest
from src.core import GameEngine
from src.persistence import MemoryPersistenceProvider, PersistenceProvider, StoreUnavailableError


class BrokenStore(PersistenceProvider):
    """Almacén que falla en todas las operaciones."""

    def __init__(self):
        self.calls = 0

    def get(self, key):
        self.calls += 1
        raise StoreUnavailableError("store down")

    def set(self, key, value):
        self.calls += 1
        raise StoreUnavailableError("store down")

    def remove(self, key):
        self.calls += 1
        raise StoreUnavailableError("store down")


@pytest.fixture
def store() -> MemoryPersistenceProvider:
    """Almacén en memoria vacío."""
    return MemoryPersistenceProvider()


@pytest.fixture
def broken_store() -> BrokenStore:
    return BrokenStore()


@pytest.fixture
def engine(store) -> GameEngine:
    """GameEngine recién creado sobre el almacén en memoria."""
    return GameEngine(persistence_provider=store)
