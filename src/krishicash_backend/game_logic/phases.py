"""Phase definitions and the action-to-phase table of the game loop."""

from __future__ import annotations

from enum import StrEnum


class GamePhase(StrEnum):
    """Enumeration of the discrete stages of a run."""

    INTRO = "intro"
    GOAL_SELECTION = "goal_selection"
    PLAYING = "playing"
    EVENT = "event"
    DECISION = "decision"
    SUMMARY = "summary"
    YEAR_END = "year_end"
    ENDED = "ended"


class ActionKind(StrEnum):
    """Identifiers of every action the controller accepts."""

    START = "start"
    SELECT_GOAL = "select_goal"
    START_MONTH = "start_month"
    RESOLVE_EVENT = "resolve_event"
    SAVE = "save"
    BUY_INSURANCE = "buy_insurance"
    UPDATE_INSURANCE = "update_insurance"
    STOP_INSURANCE = "stop_insurance"
    TAKE_LOAN = "take_loan"
    REPAY_LOAN = "repay_loan"
    END_MONTH = "end_month"
    CONTINUE_MONTH = "continue_month"
    CONTINUE_YEAR = "continue_year"
    RESTART = "restart"


# restart is accepted everywhere and therefore absent from this table.
ACTION_PHASES: dict[ActionKind, GamePhase] = {
    ActionKind.START: GamePhase.INTRO,
    ActionKind.SELECT_GOAL: GamePhase.GOAL_SELECTION,
    ActionKind.START_MONTH: GamePhase.PLAYING,
    ActionKind.RESOLVE_EVENT: GamePhase.EVENT,
    ActionKind.SAVE: GamePhase.DECISION,
    ActionKind.BUY_INSURANCE: GamePhase.DECISION,
    ActionKind.UPDATE_INSURANCE: GamePhase.DECISION,
    ActionKind.STOP_INSURANCE: GamePhase.DECISION,
    ActionKind.TAKE_LOAN: GamePhase.DECISION,
    ActionKind.REPAY_LOAN: GamePhase.DECISION,
    ActionKind.END_MONTH: GamePhase.DECISION,
    ActionKind.CONTINUE_MONTH: GamePhase.SUMMARY,
    ActionKind.CONTINUE_YEAR: GamePhase.YEAR_END,
}


def is_action_allowed(kind: ActionKind, phase: GamePhase) -> bool:
    """Return whether *kind* may be applied while the run is in *phase*."""
    if kind is ActionKind.RESTART:
        return True
    return ACTION_PHASES.get(kind) is phase


def actions_for_phase(phase: GamePhase) -> tuple[ActionKind, ...]:
    """Return the actions a client may offer while the run is in *phase*."""
    allowed = tuple(kind for kind, owner in ACTION_PHASES.items() if owner is phase)
    return (*allowed, ActionKind.RESTART)


__all__ = [
    "ACTION_PHASES",
    "ActionKind",
    "GamePhase",
    "actions_for_phase",
    "is_action_allowed",
]
