"""Endpoints HTTP para el motor de partida y el saludo."""

from fastapi import APIRouter, HTTPException, Depends

from src.core import InvalidHistoryIndexError
from .schemas import (
    StatusResponse,
    SquareRequest,
    SquareResponse,
    JumpRequest,
    NameRequest,
    GreetingResponse,
)
from .dependencies import ENGINE_LOCK, get_engine, get_greeting

router = APIRouter(prefix="/game", tags=["game"])
greeting_router = APIRouter(prefix="/greeting", tags=["greeting"])


@router.get("/status", response_model=StatusResponse)
def get_status(engine=Depends(get_engine)):
    """Devuelve tablero, status, ganador, siguiente jugador e historial."""
    with ENGINE_LOCK:
        return StatusResponse(**engine.get_status())


@router.post("/square", response_model=SquareResponse)
def select_square(body: SquareRequest, engine=Depends(get_engine)):
    """Juega una casilla. Si está ocupada o la partida terminó, applied=False y nada cambia."""
    with ENGINE_LOCK:
        applied = engine.select_square(body.index)
        return SquareResponse(applied=applied, **engine.get_status())


@router.post("/jump", response_model=StatusResponse)
def jump_to_history(body: JumpRequest, engine=Depends(get_engine)):
    with ENGINE_LOCK:
        try:
            engine.jump_to_history(body.index)
        except InvalidHistoryIndexError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return StatusResponse(**engine.get_status())


@router.post("/restart", response_model=StatusResponse)
def restart(engine=Depends(get_engine)):
    with ENGINE_LOCK:
        engine.restart()
        return StatusResponse(**engine.get_status())


@greeting_router.get("", response_model=GreetingResponse)
def get_greeting_message(greeting=Depends(get_greeting)):
    with ENGINE_LOCK:
        return GreetingResponse(name=greeting.name, message=greeting.message)


@greeting_router.post("/name", response_model=GreetingResponse)
def change_name(body: NameRequest, greeting=Depends(get_greeting)):
    with ENGINE_LOCK:
        greeting.on_name_changed(body.name)
        return GreetingResponse(name=greeting.name, message=greeting.message)
