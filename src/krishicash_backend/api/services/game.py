"""Game service exposed to the API layer."""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING

from krishicash_backend.api.models import (
    EventCatalogResponse,
    GameStateResponse,
    GoalCatalogResponse,
)
from krishicash_backend.game_logic import GameController, GamePhase
from krishicash_backend.game_logic.phases import actions_for_phase
from krishicash_backend.game_logic.rules import (
    assess_outcome,
    derive_lessons,
    loan_interest_rate,
    scaled_expenses,
    scaled_premium,
)

if TYPE_CHECKING:
    from krishicash_backend.game_logic import ActionBase, GameState
    from krishicash_backend.game_logic.persistence import GameStateStore


class GameService:
    """Serialize access to one :class:`GameController` and shape its responses."""

    def __init__(self, controller: GameController) -> None:
        self._controller = controller
        self._lock = Lock()

    @classmethod
    def create_default(cls, store: GameStateStore | None = None) -> GameService:
        """Return a service driving a controller with default configuration."""
        return cls(GameController.create_default(store=store))

    @property
    def controller(self) -> GameController:
        """Return the wrapped controller."""
        return self._controller

    def snapshot(self) -> GameStateResponse:
        """Return the current run."""
        with self._lock:
            return self._build_response(self._controller.state)

    def apply(self, action: ActionBase) -> GameStateResponse:
        """Apply *action* and return the resulting run."""
        with self._lock:
            return self._build_response(self._controller.dispatch(action))

    def goals(self) -> GoalCatalogResponse:
        """Return the saving goals in assignment order."""
        return GoalCatalogResponse(goals=list(self._controller.engine.goals))

    def events(self) -> EventCatalogResponse:
        """Return the unscaled monthly events."""
        return EventCatalogResponse(events=list(self._controller.engine.events))

    def _build_response(self, state: GameState) -> GameStateResponse:
        configuration = self._controller.engine.configuration
        multiplier = state.difficulty_multiplier
        response = GameStateResponse(
            state=state,
            expenses=scaled_expenses(multiplier, configuration),
            insurance_premium_quote=scaled_premium(multiplier, configuration),
            loan_interest_rate=loan_interest_rate(multiplier, configuration),
            allowed_actions=list(actions_for_phase(state.phase)),
        )
        if state.phase is GamePhase.ENDED:
            response = response.model_copy(
                update={
                    "outcome": assess_outcome(state),
                    "lessons": list(derive_lessons(state, configuration)),
                }
            )
        return response


__all__ = ["GameService"]
