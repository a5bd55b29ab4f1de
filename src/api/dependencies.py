"""Dependencias FastAPI: motor de partida y saludo singleton.

Las rutas síncronas corren en un threadpool; toda lectura/transición del
motor o del saludo se hace con ENGINE_LOCK tomado.
"""

from threading import RLock

from src.core import Greeting, create_engine
from src.persistence import create_persistence_provider

ENGINE_LOCK = RLock()

_engine = None
_greeting = None
_persistence = None


def get_persistence_provider():
    global _persistence
    with ENGINE_LOCK:
        if _persistence is None:
            _persistence = create_persistence_provider()
        return _persistence


def get_engine():
    global _engine
    with ENGINE_LOCK:
        if _engine is None:
            _engine = create_engine(persistence_provider=get_persistence_provider())
        return _engine


def get_greeting():
    global _greeting
    with ENGINE_LOCK:
        if _greeting is None:
            _greeting = Greeting(get_persistence_provider())
        return _greeting
