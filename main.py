"""Punto de entrada por terminal del tres en raya."""

from dotenv import load_dotenv

from src.io_adapters import TerminalInputProvider, TerminalOutputHandler
from src.logging_config import setup_terminal_logging, get_logger
from src.persistence import create_persistence_provider
from src.session import create_session

# Cargar variables de entorno
load_dotenv()


def main():
    """Función principal."""
    setup_terminal_logging()
    logger = get_logger("CLI")

    print("=== Tic-tac-toe ===")
    print("Casilla: 0-8 | historial: h N | reiniciar: r | nombre: n NOMBRE | salir: q\n")

    try:
        store = create_persistence_provider()
    except RuntimeError as e:
        logger.error("No se pudo crear el almacén: %s", e)
        print(f"\nError: {e}")
        return

    runner, _engine, _greeting = create_session(
        store,
        input_provider=TerminalInputProvider(),
        output_handler=TerminalOutputHandler(),
    )
    try:
        runner()
    except (KeyboardInterrupt, EOFError):
        print()
    logger.info("Sesión terminada")


if __name__ == "__main__":
    main()
