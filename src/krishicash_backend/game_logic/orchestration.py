"""High-level orchestration helpers connecting the engine to external callers.

This module exposes a thin façade that presentation layers use to drive a run.
It owns the current :class:`GameState`, forwards named actions to the
:class:`GameEngine`, and writes a snapshot through the configured
:class:`GameStateStore` whenever a transition produced a new state.
"""

from __future__ import annotations

import logging

from krishicash_backend.game_logic.actions import (
    ActionBase,
    BuyInsuranceAction,
    ContinueMonthAction,
    ContinueYearAction,
    EndMonthAction,
    RepayLoanAction,
    ResolveEventAction,
    RestartAction,
    SaveAction,
    SelectGoalAction,
    StartAction,
    StartMonthAction,
    StopInsuranceAction,
    TakeLoanAction,
    UpdateInsuranceAction,
)
from krishicash_backend.game_logic.configuration import (
    RunOverrides,
    build_run_configuration,
)
from krishicash_backend.game_logic.engine import GameEngine
from krishicash_backend.game_logic.persistence import (
    GameStateStore,
    InMemoryGameStateStore,
)
from krishicash_backend.game_logic.phases import ActionKind
from krishicash_backend.game_logic.state import GameState  # noqa: TC001
from krishicash_backend.shared.rng import RandomSource  # noqa: TC001

logger = logging.getLogger(__name__)


class GameController:
    """Coordinate a single run for the presentation layer.

    The controller is the only owner of the current state. Every public action
    method returns the state after the action, which is the unchanged state
    when the action was not valid at that point of the run.
    """

    def __init__(self, engine: GameEngine, store: GameStateStore) -> None:
        self._engine = engine
        self._store = store
        restored = store.load()
        if restored is None:
            self._state = engine.initial_state()
        else:
            logger.info(
                "Restored run at year %d month %d (%s)",
                restored.year,
                restored.month,
                restored.phase.value,
            )
            self._state = restored

    @classmethod
    def create_default(
        cls,
        *,
        store: GameStateStore | None = None,
        overrides: RunOverrides | None = None,
        rng_service: RandomSource | None = None,
    ) -> GameController:
        """Return a controller configured with default handlers and catalogs."""
        engine = GameEngine(
            configuration=build_run_configuration(overrides),
            rng_service=rng_service,
        )
        return cls(engine, store or InMemoryGameStateStore())

    @property
    def state(self) -> GameState:
        """Return the current state of the run."""
        return self._state

    @property
    def engine(self) -> GameEngine:
        """Return the engine applying transitions."""
        return self._engine

    def dispatch(self, action: ActionBase) -> GameState:
        """Apply *action* and persist the result when the state changed."""
        updated = self._engine.apply(self._state, action)
        if updated is self._state and action.action_kind is not ActionKind.RESTART:
            return updated
        self._state = updated
        self._store.save(updated)
        return updated

    def start(self) -> GameState:
        """Leave the intro screen."""
        return self.dispatch(StartAction())

    def select_goal(self, goal_id: str) -> GameState:
        """Choose the goal for the current year."""
        return self.dispatch(SelectGoalAction(goal_id=goal_id))

    def start_month(self) -> GameState:
        """Begin the next month."""
        return self.dispatch(StartMonthAction())

    def resolve_event(self) -> GameState:
        """Apply the drawn event."""
        return self.dispatch(ResolveEventAction())

    def save(self, amount: float) -> GameState:
        """Move *amount* from cash into savings."""
        return self.dispatch(SaveAction(amount=amount))

    def buy_insurance(self) -> GameState:
        """Buy crop insurance."""
        return self.dispatch(BuyInsuranceAction())

    def update_insurance(self, amount: float) -> GameState:
        """Change the monthly insurance premium."""
        return self.dispatch(UpdateInsuranceAction(amount=amount))

    def stop_insurance(self) -> GameState:
        """Cancel crop insurance."""
        return self.dispatch(StopInsuranceAction())

    def take_loan(self, amount: float) -> GameState:
        """Borrow *amount*."""
        return self.dispatch(TakeLoanAction(amount=amount))

    def repay_loan(self, amount: float) -> GameState:
        """Repay up to *amount* of debt."""
        return self.dispatch(RepayLoanAction(amount=amount))

    def end_month(self) -> GameState:
        """Close the current month."""
        return self.dispatch(EndMonthAction())

    def continue_month(self) -> GameState:
        """Leave the month summary."""
        return self.dispatch(ContinueMonthAction())

    def continue_year(self) -> GameState:
        """Settle the year and move on."""
        return self.dispatch(ContinueYearAction())

    def restart(self) -> GameState:
        """Discard the run and start over."""
        return self.dispatch(RestartAction())


__all__ = ["GameController"]
