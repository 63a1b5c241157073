"""HTTP endpoints driving the single-player game loop."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, HTTPException, status
from pydantic import ValidationError

from krishicash_backend.api.dependencies import GameServiceDep  # noqa: TC001
from krishicash_backend.api.models import (
    EventCatalogResponse,
    GameStateResponse,
    GoalCatalogResponse,
)
from krishicash_backend.game_logic import GAME_ACTION_ADAPTER

router = APIRouter(prefix="/game", tags=["game"])


@router.get("", response_model=GameStateResponse)
def read_game(service: GameServiceDep) -> GameStateResponse:
    """Return the current run."""

    return service.snapshot()


@router.post("/actions", response_model=GameStateResponse)
def apply_action(
    service: GameServiceDep,
    payload: dict[str, Any] = Body(...),
) -> GameStateResponse:
    """Apply one player action.

    Actions that are not valid in the current phase leave the run unchanged;
    only payloads that do not describe an action at all are rejected.
    """

    try:
        action = GAME_ACTION_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc
    return service.apply(action)


@router.get("/goals", response_model=GoalCatalogResponse)
def list_goals(service: GameServiceDep) -> GoalCatalogResponse:
    """Return the saving goal catalog."""

    return service.goals()


@router.get("/events", response_model=EventCatalogResponse)
def list_events(service: GameServiceDep) -> EventCatalogResponse:
    """Return the monthly event catalog."""

    return service.events()
