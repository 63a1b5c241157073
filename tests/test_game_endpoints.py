from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from krishicash_backend.api import create_api
from krishicash_backend.api.dependencies import get_game_service
from krishicash_backend.api.services import GameService
from krishicash_backend.game_logic import (
    GameController,
    GamePhase,
    InMemoryGameStateStore,
)
from krishicash_backend.game_logic.catalog import SAVING_GOALS

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def store() -> InMemoryGameStateStore:
    return InMemoryGameStateStore()


@pytest.fixture
def client(make_engine, store) -> Iterator[TestClient]:
    app = create_api()
    service = GameService(GameController(make_engine("good_rain_1"), store))
    app.dependency_overrides[get_game_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_read_game_returns_the_intro_screen(client: TestClient) -> None:
    response = client.get("/game")

    assert response.status_code == 200
    body = response.json()
    assert body["state"]["phase"] == "intro"
    assert body["state"]["current_goal"]["id"] == "emergency_fund"
    assert body["allowed_actions"] == ["start", "restart"]
    assert body["expenses"]["total"] == 6500
    assert body["insurance_premium_quote"] == 500
    assert body["loan_interest_rate"] == pytest.approx(0.2)
    assert body["outcome"] is None
    assert body["lessons"] == []


def test_actions_advance_the_run(client: TestClient, store) -> None:
    client.post("/game/actions", json={"kind": "start"})
    client.post("/game/actions", json={"kind": "select_goal", "goal_id": "dairy_cow"})
    response = client.post("/game/actions", json={"kind": "start_month"})

    assert response.status_code == 200
    state = response.json()["state"]
    assert state["phase"] == "event"
    assert state["balance"] == 5500
    assert state["current_event"]["id"] == "good_rain_1"
    assert store.load().current_goal.id == "dairy_cow"


def test_invalid_action_leaves_the_run_unchanged(client: TestClient) -> None:
    response = client.post("/game/actions", json={"kind": "save", "amount": 100})

    assert response.status_code == 200
    assert response.json()["state"]["phase"] == "intro"
    assert response.json()["state"]["savings"] == 0


@pytest.mark.parametrize(
    "payload", [{"kind": "fly"}, {"kind": "save"}, {"goal_id": "tractor"}, [1, 2]]
)
def test_malformed_actions_are_rejected(client: TestClient, payload) -> None:
    response = client.post("/game/actions", json=payload)

    assert response.status_code == 422


@pytest.mark.parametrize(
    "body",
    [
        '{"kind": "take_loan", "amount": Infinity}',
        '{"kind": "save", "amount": NaN}',
        '{"kind": "repay_loan", "amount": 1e27}',
    ],
)
def test_unusable_amounts_are_rejected(client: TestClient, store, body: str) -> None:
    response = client.post(
        "/game/actions",
        content=body,
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 422
    assert store.load() is None


def test_catalog_endpoints(client: TestClient) -> None:
    goals = client.get("/game/goals").json()["goals"]
    events = client.get("/game/events").json()["events"]

    assert [goal["id"] for goal in goals][:2] == ["emergency_fund", "dairy_cow"]
    assert len(goals) == len(SAVING_GOALS)
    assert len(events) == 10
    assert {event["type"] for event in events} >= {"crop_loss", "good_rain"}


def test_ended_run_reports_outcome_and_lessons(make_engine, make_state) -> None:
    store = InMemoryGameStateStore()
    store.save(make_state(phase=GamePhase.YEAR_END, month=12, savings=15000))
    engine = make_engine(goals=(SAVING_GOALS[0],))
    app = create_api()
    service = GameService(GameController(engine, store))
    app.dependency_overrides[get_game_service] = lambda: service

    with TestClient(app) as test_client:
        body = test_client.post("/game/actions", json={"kind": "continue_year"}).json()

    assert body["state"]["phase"] == "ended"
    assert body["allowed_actions"] == ["restart"]
    assert body["outcome"]["tier"] in {"secure", "stable", "vulnerable"}
    assert any(lesson["positive"] for lesson in body["lessons"])


def test_default_service_persists_to_the_database() -> None:
    with TestClient(create_api()) as test_client:
        test_client.post("/game/actions", json={"kind": "start"})
        body = test_client.get("/game").json()

    assert body["state"]["phase"] == "goal_selection"
