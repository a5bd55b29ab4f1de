"""Bootstrap de sesión por terminal: crea motor y saludo con I/O inyectados."""

from typing import Callable

from .core import GameEngine, Greeting, InvalidHistoryIndexError, InvalidSquareError
from .io_adapters import InputProvider, OutputHandler
from .logging_config import get_logger
from .persistence import PersistenceProvider


def run_game_loop(
    engine: GameEngine,
    greeting: Greeting,
    *,
    input_provider: InputProvider,
    output_handler: OutputHandler,
) -> None:
    """Despacha eventos del jugador hasta que pide salir."""
    log = get_logger("Session")
    output_handler.on_greeting(greeting.message)
    output_handler.on_board(engine.get_status())
    while True:
        command = input_provider.get_user_input()
        if command.kind == "exit":
            log.debug("exit requested")
            return
        if command.kind == "name":
            greeting.on_name_changed(command.text)
            output_handler.on_greeting(greeting.message)
            continue
        try:
            if command.kind == "square":
                if not engine.select_square(command.index):
                    output_handler.on_error("Jugada ignorada: casilla ocupada o partida terminada.")
            elif command.kind == "jump":
                engine.jump_to_history(command.index)
            elif command.kind == "restart":
                engine.restart()
            else:
                output_handler.on_error(f"Comando no reconocido: {command.text!r}")
                continue
        except (InvalidHistoryIndexError, InvalidSquareError) as e:
            output_handler.on_error(str(e))
            continue
        output_handler.on_board(engine.get_status())


def create_session(
    store: PersistenceProvider,
    *,
    input_provider: InputProvider,
    output_handler: OutputHandler,
    initial_name: str = "",
) -> tuple[Callable[[], None], GameEngine, Greeting]:
    """Crea motor y saludo sobre store. Devuelve (runner, engine, greeting)."""
    engine = GameEngine(persistence_provider=store)
    greeting = Greeting(store, initial_name=initial_name)

    def runner() -> None:
        run_game_loop(
            engine,
            greeting,
            input_provider=input_provider,
            output_handler=output_handler,
        )

    return runner, engine, greeting
