from __future__ import annotations

import logging
import math

import pytest
from pydantic import ValidationError

from krishicash_backend.database import DatabaseService, SaveSlotRepository
from krishicash_backend.game_logic import (
    EndMonthAction,
    ResolveEventAction,
    SaveAction,
    StartMonthAction,
)
from krishicash_backend.game_logic.persistence import (
    DatabaseGameStateStore,
    InMemoryGameStateStore,
    deserialize_state,
    serialize_state,
)
from krishicash_backend.game_logic.phases import GamePhase


@pytest.fixture
def played_state(make_engine, make_state):
    engine = make_engine("crop_loss_2")
    state = make_state(phase=GamePhase.PLAYING)
    for action in (
        StartMonthAction(),
        ResolveEventAction(),
        SaveAction(amount=1000),
        EndMonthAction(),
    ):
        state = engine.apply(state, action)
    return state


@pytest.fixture
def database(tmp_path) -> DatabaseService:
    service = DatabaseService(f"sqlite:///{tmp_path / 'slots.db'}")
    service.create_schema()
    return service


def test_snapshot_round_trip(played_state) -> None:
    restored = deserialize_state(serialize_state(played_state))

    assert restored == played_state
    assert restored.month_history[0].event.id == "crop_loss_2"
    assert restored.month_history[0].decisions[0].amount == 1000


@pytest.mark.parametrize("payload", ["{not json", '{"month": 13}', "", None])
def test_unreadable_snapshots_read_as_absent(
    payload, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING)

    assert deserialize_state(payload) is None
    if payload:
        assert "Discarding unreadable game snapshot" in caplog.text


@pytest.mark.parametrize("field", ["balance", "savings", "debt", "monthly_income"])
def test_states_reject_non_finite_money(make_state, field: str) -> None:
    with pytest.raises(ValidationError):
        make_state(**{field: math.nan})
    with pytest.raises(ValidationError):
        make_state(**{field: math.inf})


def test_in_memory_store_keeps_the_latest_snapshot(played_state, make_state) -> None:
    store = InMemoryGameStateStore()
    assert store.load() is None

    store.save(make_state())
    store.save(played_state)

    assert store.load() == played_state


def test_database_store_upserts_per_key(database, played_state, make_state) -> None:
    store = DatabaseGameStateStore(database, "slot-a")
    other = DatabaseGameStateStore(database, "slot-b")

    store.save(make_state())
    store.save(played_state)

    assert store.load() == played_state
    assert other.load() is None


def test_database_store_discards_corrupt_rows(database) -> None:
    with database.session() as session:
        SaveSlotRepository(session).upsert("slot-a", "garbage")

    assert DatabaseGameStateStore(database, "slot-a").load() is None
