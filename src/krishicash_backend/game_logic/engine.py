"""Transition engine mapping (state, action) pairs onto the next state."""

from __future__ import annotations

import logging
from collections.abc import Mapping  # noqa: TC003

from krishicash_backend.game_logic.actions import ActionBase  # noqa: TC001
from krishicash_backend.game_logic.catalog import (
    GAME_EVENTS,
    SAVING_GOALS,
    GameEvent,
    Goal,
)
from krishicash_backend.game_logic.configuration import (
    EconomyConfiguration,
    get_default_economy_configuration,
)
from krishicash_backend.game_logic.handlers import (
    ActionContext,
    ActionHandlerModel,
    ActionHandlers,
)
from krishicash_backend.game_logic.phases import ActionKind, GamePhase, is_action_allowed
from krishicash_backend.game_logic.rules import compute_stability
from krishicash_backend.game_logic.state import GameState, initial_state
from krishicash_backend.shared.rng import DeterministicRandomService, RandomSource

logger = logging.getLogger(__name__)


class GameEngine:
    """Apply player actions to immutable game states.

    The engine never raises for player mistakes. An action sent in the wrong
    phase, or one whose preconditions fail, returns the very state object it
    was given so callers can detect the no-op with an identity check.
    """

    def __init__(
        self,
        handlers: ActionHandlers | Mapping[ActionKind, ActionHandlerModel] | None = None,
        *,
        configuration: EconomyConfiguration | None = None,
        rng_service: RandomSource | None = None,
        goals: tuple[Goal, ...] = SAVING_GOALS,
        events: tuple[GameEvent, ...] = GAME_EVENTS,
    ) -> None:
        configuration = configuration or get_default_economy_configuration()
        if handlers is None:
            handlers = ActionHandlers()
        handler_map = (
            handlers.as_mapping()
            if isinstance(handlers, ActionHandlers)
            else dict(handlers)
        )
        missing = [kind for kind in ActionKind if kind not in handler_map]
        if missing:
            kind_labels = ", ".join(kind.value for kind in missing)
            msg = f"No handlers registered for actions: {kind_labels}"
            raise ValueError(msg)
        if not goals:
            msg = "The goal catalog must contain at least one goal."
            raise ValueError(msg)
        if not events:
            msg = "The event catalog must contain at least one event."
            raise ValueError(msg)

        self._handlers = handler_map
        self._context = ActionContext(
            configuration=configuration,
            rng_service=rng_service
            or DeterministicRandomService(configuration.rng_seed),
            goals=goals,
            events=events,
        )

    @property
    def configuration(self) -> EconomyConfiguration:
        """Return the economic parameters of the run."""
        return self._context.configuration

    @property
    def goals(self) -> tuple[Goal, ...]:
        """Return the goal catalog in assignment order."""
        return self._context.goals

    @property
    def events(self) -> tuple[GameEvent, ...]:
        """Return the unscaled event catalog."""
        return self._context.events

    def initial_state(self) -> GameState:
        """Return the state a fresh run starts from."""
        return initial_state(self._context.configuration, self._context.goals)

    def apply(self, state: GameState, action: ActionBase) -> GameState:
        """Return the state that follows *state* once *action* is applied."""
        kind = action.action_kind
        if not is_action_allowed(kind, state.phase):
            logger.debug("Ignoring %s during phase %s", kind.value, state.phase.value)
            return state

        handler = self._handlers[kind]
        updated = handler.handle(state, action, self._context)
        if updated is state:
            logger.debug("Ignoring %s: preconditions not met", kind.value)
            return state

        if handler.recomputes_stability:
            updated = updated.evolve(
                stability_score=compute_stability(updated, self._context.configuration)
            )
        self._log_milestones(state, updated)
        return updated

    @staticmethod
    def _log_milestones(previous: GameState, current: GameState) -> None:
        if current.phase is previous.phase:
            return
        if current.phase is GamePhase.YEAR_END:
            logger.info("Year %d finished with savings %.2f", current.year, current.savings)
        elif current.phase is GamePhase.ENDED:
            logger.info(
                "Run ended after %d year(s) with %d goal(s) completed",
                len(current.year_history),
                len(current.completed_goals),
            )
        elif current.phase is GamePhase.INTRO:
            logger.info("Run restarted")
        elif current.year != previous.year:
            logger.info(
                "Starting year %d at difficulty %.2f",
                current.year,
                current.difficulty_multiplier,
            )


__all__ = ["GameEngine"]
