"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any, TypeVar

import pytest

from krishicash_backend.game_logic import GameEngine, GameState, GamePhase
from krishicash_backend.game_logic.catalog import GAME_EVENTS, SAVING_GOALS, GameEvent
from krishicash_backend.game_logic.configuration import (
    EconomyConfiguration,
    get_default_economy_configuration,
)
from krishicash_backend.settings import get_settings

_T = TypeVar("_T")


class ScriptedRandom:
    """Random source returning catalog entries by id, in the given order."""

    def __init__(self, *ids: str) -> None:
        self._ids = list(ids)
        self.calls = 0

    def choice(self, population: Sequence[_T]) -> _T:
        wanted = self._ids[self.calls % len(self._ids)]
        self.calls += 1
        for item in population:
            if getattr(item, "id", None) == wanted:
                return item
        msg = f"{wanted} is not part of the population"
        raise LookupError(msg)


@pytest.fixture(autouse=True)
def _mock_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    database_path = tmp_path_factory.mktemp("db") / "krishicash.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{database_path}")
    get_settings.cache_clear()
    get_default_economy_configuration.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_economy_configuration.cache_clear()


@pytest.fixture
def configuration() -> EconomyConfiguration:
    return EconomyConfiguration()


@pytest.fixture
def scripted_random() -> Callable[..., ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def make_engine() -> Callable[..., GameEngine]:
    """Return a builder for engines whose monthly events follow given ids."""

    def _build(
        *event_ids: str,
        configuration: EconomyConfiguration | None = None,
        **kwargs: Any,
    ) -> GameEngine:
        return GameEngine(
            configuration=configuration or EconomyConfiguration(),
            rng_service=ScriptedRandom(*(event_ids or ("medical_1",))),
            **kwargs,
        )

    return _build


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Return a builder for mid-run states with the first goal assigned."""

    def _build(**updates: Any) -> GameState:
        base: dict[str, Any] = {
            "current_goal": SAVING_GOALS[0],
            "phase": GamePhase.DECISION,
        }
        base.update(updates)
        return GameState(**base)

    return _build


@pytest.fixture
def event_by_id() -> Callable[[str], GameEvent]:
    def _lookup(event_id: str) -> GameEvent:
        return next(event for event in GAME_EVENTS if event.id == event_id)

    return _lookup
