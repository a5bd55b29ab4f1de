"""Aplicación FastAPI: motor de tres en raya vía HTTP."""

from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from src.logging_config import get_logger, setup_api_logging
from .dependencies import get_engine
from .routes import router, greeting_router
from .schemas import HealthResponse

_repo_root = Path(__file__).resolve().parents[2]
load_dotenv(_repo_root / ".env")


@asynccontextmanager
async def _lifespan(_app: FastAPI):
    setup_api_logging()
    try:
        # Carga el historial persistido antes de la primera petición.
        get_engine()
    except RuntimeError as exc:
        get_logger("API").warning("Startup engine bootstrap skipped: %s", exc)
    yield


app = FastAPI(
    title="Tic-tac-toe API",
    description="API del motor de tres en raya con historial persistido",
    version="0.1.0",
    lifespan=_lifespan,
)
app.include_router(router)
app.include_router(greeting_router)


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")
