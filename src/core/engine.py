"""Motor headless de tres en raya con historial y viaje en el tiempo. Sin I/O ni FastAPI."""

from __future__ import annotations

from typing import Any

from ..logging_config import get_logger
from ..persistence import PersistenceProvider, create_persistence_provider
from .board import (
    BOARD_SIZE,
    Cell,
    Player,
    Snapshot,
    calculate_next_value,
    calculate_status,
    calculate_winner,
    empty_board,
    is_full,
    is_valid_snapshot,
)
from .errors import InvalidHistoryIndexError, InvalidSquareError
from .persisted_value import PersistedValue

HISTORY_KEY = "squares"
HISTORY_INDEX_KEY = "historyIndex"


def _initial_history() -> list[Snapshot]:
    return [empty_board()]


def _is_valid_history(value: Any) -> bool:
    """Lista no vacía de snapshots, empezando en el tablero vacío, con un movimiento por paso."""
    if not isinstance(value, list) or not value:
        return False
    if not all(is_valid_snapshot(s) for s in value):
        return False
    if value[0] != empty_board():
        return False
    for prev, curr in zip(value, value[1:]):
        changed = [i for i in range(BOARD_SIZE) if prev[i] != curr[i]]
        if len(changed) != 1:
            return False
        i = changed[0]
        if prev[i] is not None or curr[i] != calculate_next_value(prev):
            return False
    return True


def history_label(index: int) -> str:
    return f"History item {index + 1}" if index > 0 else "Reset history"


class GameEngine:
    """Motor de partida: historial de snapshots + índice actual, ambos persistidos."""

    def __init__(
        self,
        persistence_provider: PersistenceProvider | None = None,
        history_key: str = HISTORY_KEY,
        index_key: str = HISTORY_INDEX_KEY,
    ) -> None:
        self._logger = get_logger("GameEngine")
        self._persistence = persistence_provider or create_persistence_provider()
        self._history: PersistedValue[list[Snapshot]] = PersistedValue(
            self._persistence, history_key, _initial_history
        )
        self._index: PersistedValue[int] = PersistedValue(self._persistence, index_key, 0)
        self._repair_loaded_state()

    def _repair_loaded_state(self) -> None:
        history = self._history.get()
        if not _is_valid_history(history):
            self._logger.warning("Historial persistido inválido en key=%s; se reinicia.", self._history.key)
            self._history.set(_initial_history())
        index = self._index.get()
        last = len(self._history.get()) - 1
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= last:
            self._logger.warning("historyIndex persistido fuera de rango (%r); se usa %d.", index, last)
            self._index.set(last)

    # -----------------------------
    # Estado derivado
    # -----------------------------
    @property
    def history(self) -> list[Snapshot]:
        """Copia del historial completo."""
        return [list(snapshot) for snapshot in self._history.get()]

    @property
    def current_index(self) -> int:
        return self._index.get()

    @property
    def squares(self) -> Snapshot:
        """Snapshot en la posición actual."""
        return list(self._history.get()[self._index.get()])

    @property
    def winner(self) -> Cell:
        return calculate_winner(self.squares)

    @property
    def next_value(self) -> Player:
        return calculate_next_value(self.squares)

    @property
    def status(self) -> str:
        squares = self.squares
        return calculate_status(calculate_winner(squares), squares, calculate_next_value(squares))

    @property
    def is_finished(self) -> bool:
        squares = self.squares
        return calculate_winner(squares) is not None or is_full(squares)

    def history_labels(self) -> list[dict[str, Any]]:
        current = self._index.get()
        return [
            {"index": i, "label": history_label(i), "current": i == current}
            for i in range(len(self._history.get()))
        ]

    def get_status(self) -> dict[str, Any]:
        """Contrato de estado para los adaptadores: tablero, status, ganador, siguiente jugador e historial."""
        squares = self.squares
        winner = calculate_winner(squares)
        next_value = calculate_next_value(squares)
        return {
            "squares": squares,
            "status": calculate_status(winner, squares, next_value),
            "winner": winner,
            "next_player": next_value,
            "current_index": self._index.get(),
            "history": self.history_labels(),
            "finished": winner is not None or is_full(squares),
        }

    # -----------------------------
    # Transiciones
    # -----------------------------
    def select_square(self, square: int) -> bool:
        """Juega en square desde la posición actual. Devuelve False si la jugada se ignora.

        Jugar desde una posición anterior descarta el futuro alternativo.
        """
        if isinstance(square, bool) or not isinstance(square, int) or not 0 <= square < BOARD_SIZE:
            raise InvalidSquareError(f"Casilla fuera de rango: {square!r}")
        squares = self.squares
        if calculate_winner(squares) or squares[square]:
            return False

        value = calculate_next_value(squares)
        squares[square] = value
        index = self._index.get()
        history = self._history.get()[: index + 1] + [squares]
        self._history.set(history)
        self._index.set(len(history) - 1)

        self._logger.debug("select_square %d -> %s (history=%d)", square, value, len(history))
        winner = calculate_winner(squares)
        if winner:
            self._logger.info("Partida terminada: gana %s", winner)
        elif is_full(squares):
            self._logger.info("Partida terminada: empate")
        return True

    def jump_to_history(self, index: int) -> None:
        size = len(self._history.get())
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
            raise InvalidHistoryIndexError(f"Índice de historial fuera de rango: {index!r} (len={size})")
        self._index.set(index)

    def restart(self) -> None:
        self._history.set(_initial_history())
        self._index.set(0)
        self._logger.debug("restart")


def create_engine(persistence_provider: PersistenceProvider | None = None) -> GameEngine:
    """Factory: una instancia del motor (para API, terminal o tests)."""
    return GameEngine(persistence_provider=persistence_provider)
