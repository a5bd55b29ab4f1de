"""Modelos Pydantic para requests/responses de la API."""

from typing import Optional
from pydantic import BaseModel, Field


# --- GET /game/status ---
class HistoryEntry(BaseModel):
    index: int
    label: str
    current: bool = False


class StatusResponse(BaseModel):
    squares: list[Optional[str]] = Field(default_factory=list)
    status: str
    winner: Optional[str] = None
    next_player: str
    current_index: int = 0
    history: list[HistoryEntry] = Field(default_factory=list)
    finished: bool = False


# --- POST /game/square ---
class SquareRequest(BaseModel):
    index: int = Field(ge=0, le=8)


class SquareResponse(StatusResponse):
    applied: bool = True


# --- POST /game/jump ---
class JumpRequest(BaseModel):
    index: int


# --- /greeting ---
class NameRequest(BaseModel):
    name: str = Field(default="", max_length=200)


class GreetingResponse(BaseModel):
    name: str = ""
    message: str


# --- Health ---
class HealthResponse(BaseModel):
    status: str = "ok"
