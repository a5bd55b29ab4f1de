"""Logging centralizado: terminal (con colores) o API (texto plano), con componente por registro."""

from __future__ import annotations

import logging
import os
import sys

import colorama

colorama.just_fix_windows_console()

LOGGER_NAME = "tictactoe"

_logger: logging.Logger | None = None


class PlainFormatter(logging.Formatter):
    """Formato sin códigos de color."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)s | %(component)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        record.component = getattr(record, "component", "-")
        return super().format(record)


class ColoredFormatter(PlainFormatter):
    """Formato con colores por nivel (para terminal)."""

    COLORS = {
        logging.DEBUG: colorama.Fore.CYAN,
        logging.INFO: colorama.Fore.GREEN,
        logging.WARNING: colorama.Fore.YELLOW,
        logging.ERROR: colorama.Fore.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        color = self.COLORS.get(record.levelno, "")
        return f"{color}{base}{colorama.Style.RESET_ALL}"


def _configure(default_level: str, formatter: logging.Formatter) -> logging.Logger:
    global _logger
    log_level_name = os.getenv("TICTACTOE_LOG_LEVEL", default_level).upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(log_level)
    _logger.handlers.clear()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(formatter)
    _logger.addHandler(stream_handler)
    return _logger


def setup_terminal_logging() -> logging.Logger:
    """Configura logging para la partida por terminal: stderr con colores, nivel INFO por defecto."""
    return _configure("INFO", ColoredFormatter())


def setup_api_logging() -> logging.Logger:
    """Configura logging mínimo para modo API: solo stderr, nivel WARNING."""
    logger = _configure("WARNING", PlainFormatter())
    for name in ("uvicorn.access", "httpx"):
        logging.getLogger(name).setLevel(logging.WARNING)
    return logger


def get_logger(component: str) -> logging.LoggerAdapter:
    """Devuelve un LoggerAdapter que añade component a cada registro."""
    if _logger is None:
        # Sin setup previo (p. ej. tests): logger hijo que propaga a root
        base = logging.getLogger(f"{LOGGER_NAME}.{component}")
        return logging.LoggerAdapter(base, {"component": component})
    return logging.LoggerAdapter(_logger, {"component": component})
