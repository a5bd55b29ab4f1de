"""API HTTP FastAPI para el motor de partida."""

from .app import app
from .dependencies import get_engine, get_greeting

__all__ = ["app", "get_engine", "get_greeting"]
