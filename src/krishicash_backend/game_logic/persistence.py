"""Persistence abstractions for game state snapshots.

The engine only depends on the :class:`GameStateStore` protocol: ``load`` once
at startup, ``save`` after every transition. Snapshots travel as JSON text so
every adapter stores the same shape, and a payload that no longer validates
is treated as absent rather than surfaced as an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from pydantic import ValidationError

from krishicash_backend.database.repositories import SaveSlotRepository
from krishicash_backend.game_logic.state import GameState

if TYPE_CHECKING:
    from krishicash_backend.database.service import DatabaseService

logger = logging.getLogger(__name__)

DEFAULT_SAVE_SLOT_KEY = "krishicash_game_state"


def serialize_state(state: GameState) -> str:
    """Return the JSON snapshot for *state*."""
    return state.model_dump_json()


def deserialize_state(payload: str | bytes | None) -> GameState | None:
    """Return the state stored in *payload*, or ``None`` when it is unusable."""
    if not payload:
        return None
    try:
        return GameState.model_validate_json(payload)
    except ValidationError as exc:
        logger.warning(
            "Discarding unreadable game snapshot (%d error(s))", exc.error_count()
        )
        return None


class GameStateStore(Protocol):
    """Protocol describing how game state snapshots are persisted."""

    def save(self, state: GameState) -> None:
        """Persist *state*, replacing any previous snapshot."""

    def load(self) -> GameState | None:
        """Return the latest stored snapshot or ``None``."""


class InMemoryGameStateStore:
    """Trivial in-memory implementation of :class:`GameStateStore`."""

    def __init__(self, key: str = DEFAULT_SAVE_SLOT_KEY) -> None:
        self._key = key
        self._payloads: dict[str, str] = {}

    def save(self, state: GameState) -> None:
        """Store the serialized *state* under the slot key."""
        self._payloads[self._key] = serialize_state(state)

    def load(self) -> GameState | None:
        """Return the stored snapshot if available and readable."""
        return deserialize_state(self._payloads.get(self._key))


class DatabaseGameStateStore:
    """SQLAlchemy-backed :class:`GameStateStore` keeping one row per save slot."""

    def __init__(
        self, database: DatabaseService, key: str = DEFAULT_SAVE_SLOT_KEY
    ) -> None:
        self._database = database
        self._key = key

    def save(self, state: GameState) -> None:
        """Upsert the serialized *state* into the save-slot table."""
        with self._database.session() as session:
            SaveSlotRepository(session).upsert(self._key, serialize_state(state))

    def load(self) -> GameState | None:
        """Return the stored snapshot if available and readable."""
        with self._database.session() as session:
            slot = SaveSlotRepository(session).get_by_key(self._key)
            payload = slot.payload if slot is not None else None
        return deserialize_state(payload)


__all__ = [
    "DEFAULT_SAVE_SLOT_KEY",
    "DatabaseGameStateStore",
    "GameStateStore",
    "InMemoryGameStateStore",
    "deserialize_state",
    "serialize_state",
]
