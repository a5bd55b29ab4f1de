"""Errores de contrato del motor (argumentos inválidos de quien llama)."""


class InvalidHistoryIndexError(ValueError):
    """jump_to_history con un índice fuera de [0, len(history))."""


class InvalidSquareError(ValueError):
    """select_square con una casilla fuera de 0..8."""
