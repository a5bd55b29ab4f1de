"""Funciones puras sobre un snapshot del tablero 3x3."""

from __future__ import annotations

from typing import Literal, Optional, Sequence

Player = Literal["X", "O"]
Cell = Optional[Player]
Snapshot = list[Cell]

BOARD_SIZE = 9

# Filas, columnas y diagonales, en este orden.
LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def empty_board() -> Snapshot:
    return [None] * BOARD_SIZE


def calculate_next_value(squares: Sequence[Cell]) -> Player:
    """Empieza X; con el mismo número de X que de O vuelve a tocar X."""
    x_count = sum(1 for cell in squares if cell == "X")
    o_count = sum(1 for cell in squares if cell == "O")
    return "X" if x_count == o_count else "O"


def calculate_winner(squares: Sequence[Cell]) -> Cell:
    """Devuelve el jugador con tres en línea o None."""
    for a, b, c in LINES:
        if squares[a] and squares[a] == squares[b] == squares[c]:
            return squares[a]
    return None


def is_full(squares: Sequence[Cell]) -> bool:
    return all(squares)


def calculate_status(winner: Cell, squares: Sequence[Cell], next_value: Player) -> str:
    if winner:
        return f"Winner: {winner}"
    if is_full(squares):
        return "Scratch: Cat's game"
    return f"Next player: {next_value}"


def is_valid_snapshot(value: object) -> bool:
    """True si value es una lista de 9 casillas con None, 'X' u 'O'."""
    if not isinstance(value, list) or len(value) != BOARD_SIZE:
        return False
    return all(cell in (None, "X", "O") for cell in value)
