"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from functools import cache
from typing import Annotated

from fastapi import Depends

from krishicash_backend.api.services import GameService
from krishicash_backend.database import DatabaseService, get_database
from krishicash_backend.database.dependencies import SettingsDep
from krishicash_backend.game_logic import DatabaseGameStateStore

DatabaseDep = Annotated[DatabaseService, Depends(get_database)]


@cache
def _build_game_service(database: DatabaseService, save_slot_key: str) -> GameService:
    """Create the process-wide :class:`GameService` bound to one save slot."""
    store = DatabaseGameStateStore(database, save_slot_key)
    return GameService.create_default(store=store)


def get_game_service(settings: SettingsDep, database: DatabaseDep) -> GameService:
    """Return the shared :class:`GameService` instance."""

    return _build_game_service(database, settings.save_slot_key)


GameServiceDep = Annotated[GameService, Depends(get_game_service)]
