"""Core: motor headless de tres en raya y valores persistidos (sin I/O ni FastAPI)."""

from .engine import GameEngine, create_engine
from .errors import InvalidHistoryIndexError, InvalidSquareError
from .greeting import Greeting
from .persisted_value import PersistedValue

__all__ = [
    "GameEngine",
    "create_engine",
    "Greeting",
    "PersistedValue",
    "InvalidHistoryIndexError",
    "InvalidSquareError",
]
