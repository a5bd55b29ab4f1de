"""Abstracciones de I/O para desacoplar el motor de terminal/HTTP.

El motor no conoce input() ni print(); el bucle de sesión recibe InputProvider
y OutputHandler por inyección.
"""

from dataclasses import dataclass
from typing import Any, Literal, Protocol

CommandKind = Literal["square", "jump", "restart", "name", "exit", "unknown"]


@dataclass
class UserCommand:
    """Evento de UI ya interpretado."""
    kind: CommandKind
    index: int | None = None
    text: str = ""


EXIT_COMMANDS = {"exit", "quit", "salir", "q"}


def parse_command(raw: str) -> UserCommand:
    """Traduce una línea de texto a un evento de UI.

    "0".."8" -> casilla, "h N" -> historial, "r" -> reinicio, "n NOMBRE" -> nombre.
    """
    text = (raw or "").strip()
    lowered = text.lower()
    if lowered in EXIT_COMMANDS:
        return UserCommand(kind="exit")
    if lowered in ("r", "restart"):
        return UserCommand(kind="restart")
    if lowered == "n" or lowered.startswith("n "):
        return UserCommand(kind="name", text=text[2:].strip())
    if lowered.startswith("h "):
        arg = text[2:].strip()
        if arg.lstrip("-").isdigit():
            return UserCommand(kind="jump", index=int(arg))
        return UserCommand(kind="unknown", text=text)
    if text.isdigit():
        return UserCommand(kind="square", index=int(text))
    return UserCommand(kind="unknown", text=text)


class InputProvider(Protocol):
    """Provee el siguiente evento del jugador."""

    def get_user_input(self) -> UserCommand:
        """Bloquea hasta que haya entrada (en terminal)."""
        ...


class OutputHandler(Protocol):
    """Recibe los datos de render del motor."""

    def on_greeting(self, message: str) -> None:
        ...

    def on_board(self, status: dict[str, Any]) -> None:
        """status es GameEngine.get_status(): squares, status, history, ..."""
        ...

    def on_error(self, msg: str) -> None:
        ...


# --- Implementaciones para terminal ---


class TerminalInputProvider:
    """InputProvider que usa input()."""

    def get_user_input(self) -> UserCommand:
        return parse_command(input("> "))


class TerminalOutputHandler:
    """OutputHandler que imprime en stdout."""

    def on_greeting(self, message: str) -> None:
        print(message)

    def on_board(self, status: dict[str, Any]) -> None:
        squares = status.get("squares", [])
        print()
        for row in range(3):
            cells = squares[row * 3:row * 3 + 3]
            print(" " + " | ".join(cell or str(row * 3 + i) for i, cell in enumerate(cells)))
        print()
        print(status.get("status", ""))
        for entry in status.get("history", []):
            marker = "*" if entry.get("current") else " "
            print(f" {marker} [{entry['index']}] {entry['label']}")
        print()

    def on_error(self, msg: str) -> None:
        print(msg)
