"""Concrete implementations for the action handlers.

Every handler receives the current state, the action payload and the shared
:class:`ActionContext`. A handler whose preconditions fail returns the state
object it was given, unchanged; the engine treats that identity as "ignored".
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from krishicash_backend.game_logic.actions import (
    ActionBase,
    RepayLoanAction,
    SaveAction,
    SelectGoalAction,
    TakeLoanAction,
    UpdateInsuranceAction,
)
from krishicash_backend.game_logic.catalog import (
    GAME_EVENTS,
    SAVING_GOALS,
    GameEvent,
    Goal,
    find_goal,
)
from krishicash_backend.game_logic.configuration import EconomyConfiguration
from krishicash_backend.game_logic.phases import ActionKind, GamePhase
from krishicash_backend.game_logic.rules import (
    amortize_debt,
    apply_event_cost,
    apply_loan,
    check_income_growth,
    draw_event,
    goal_met,
    next_goal,
    scaled_premium,
    total_expenses,
)
from krishicash_backend.game_logic.state import (
    GameState,
    MonthRecord,
    YearRecord,
    initial_state,
)
from krishicash_backend.shared.events import DecisionRecord
from krishicash_backend.shared.rng import RandomSource
from krishicash_backend.shared.value_objects import (
    is_transaction_amount,
    round_currency,
)

MONTHS_PER_YEAR = 12


class ActionContext(BaseModel):
    """Immutable collaborators shared by every handler of an engine."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    configuration: EconomyConfiguration
    rng_service: RandomSource
    goals: tuple[Goal, ...] = SAVING_GOALS
    events: tuple[GameEvent, ...] = GAME_EVENTS


class ActionHandlerModel(BaseModel):
    """Base class for concrete action handlers using Pydantic for validation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    recomputes_stability: ClassVar[bool] = False

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        """Return the state that follows *state* once *action* is applied."""
        raise NotImplementedError


def _settle_year(
    state: GameState, context: ActionContext
) -> tuple[GameState, Goal | None]:
    """Close the year: record it, pay for a met goal and find the next goal."""
    completed = goal_met(state)
    goal = state.current_goal
    record = YearRecord(
        year=state.year,
        final_savings=state.savings,
        final_income=state.monthly_income,
        final_stability=state.stability_score,
        goal_completed=completed,
        goal_name=goal.name if goal is not None else None,
    )
    savings = state.savings
    completed_goals = state.completed_goals
    if completed and goal is not None:
        savings = round_currency(max(0.0, savings - goal.target_amount))
        completed_goals = (*completed_goals, goal.id)
    settled = state.evolve(
        savings=savings,
        completed_goals=completed_goals,
        year_history=(*state.year_history, record),
    )
    return settled, next_goal(completed_goals, context.goals)


class StartHandlerImpl(ActionHandlerModel):
    """Leave the intro screen."""

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        if context.configuration.goal_selection_enabled:
            return state.with_phase(GamePhase.GOAL_SELECTION)
        return state.with_phase(GamePhase.PLAYING)


class SelectGoalHandlerImpl(ActionHandlerModel):
    """Assign the chosen catalog goal to the current year."""

    def handle(
        self, state: GameState, action: SelectGoalAction, context: ActionContext
    ) -> GameState:
        goal = find_goal(action.goal_id, context.goals)
        if goal is None or goal.id in state.completed_goals:
            return state
        return state.evolve(current_goal=goal, phase=GamePhase.PLAYING)


class StartMonthHandlerImpl(ActionHandlerModel):
    """Collect income, pay fixed costs, premium and EMI, then draw an event.

    The EMI is limited to the cash left after expenses and premium, so a
    short month defers repayment instead of pushing the balance further down.
    """

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        configuration = context.configuration
        multiplier = state.difficulty_multiplier
        balance = (
            state.balance
            + state.monthly_income
            - total_expenses(multiplier, configuration)
        )
        if state.has_insurance:
            balance -= state.insurance_premium

        payment = amortize_debt(state.debt, balance, configuration)
        event = draw_event(
            context.events, multiplier, context.rng_service, configuration
        )
        return state.evolve(
            balance=round_currency(balance - payment),
            debt=round_currency(max(0.0, state.debt - payment)),
            current_event=event,
            phase=GamePhase.EVENT,
        )


class ResolveEventHandlerImpl(ActionHandlerModel):
    """Apply the month's event cost and reward."""

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        event = state.current_event
        if event is None:
            return state.with_phase(GamePhase.DECISION)
        cost = apply_event_cost(state, event, context.configuration)
        reward = event.reward or 0.0
        return state.evolve(
            balance=round_currency(state.balance - cost + reward),
            phase=GamePhase.DECISION,
        )


class SaveHandlerImpl(ActionHandlerModel):
    """Move cash into savings and extend the saving streak."""

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: SaveAction, context: ActionContext
    ) -> GameState:
        if not is_transaction_amount(action.amount):
            return state
        amount = round_currency(action.amount)
        if amount <= 0 or amount > state.balance:
            return state
        return state.evolve(
            balance=round_currency(state.balance - amount),
            savings=round_currency(state.savings + amount),
            consecutive_saving_months=state.consecutive_saving_months + 1,
            total_saved_this_streak=round_currency(
                state.total_saved_this_streak + amount
            ),
        ).record_decision(DecisionRecord(kind=ActionKind.SAVE.value, amount=amount))


class BuyInsuranceHandlerImpl(ActionHandlerModel):
    """Buy crop insurance at the difficulty-scaled premium."""

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        premium = scaled_premium(state.difficulty_multiplier, context.configuration)
        if state.has_insurance or state.balance < premium:
            return state
        return state.evolve(
            balance=round_currency(state.balance - premium),
            has_insurance=True,
            insurance_premium=float(premium),
        ).record_decision(
            DecisionRecord(kind=ActionKind.BUY_INSURANCE.value, amount=premium)
        )


class UpdateInsuranceHandlerImpl(ActionHandlerModel):
    """Change the monthly premium of an active policy."""

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: UpdateInsuranceAction, context: ActionContext
    ) -> GameState:
        if not state.has_insurance or not is_transaction_amount(action.amount):
            return state
        premium = round_currency(action.amount)
        return state.evolve(insurance_premium=premium).record_decision(
            DecisionRecord(kind=ActionKind.UPDATE_INSURANCE.value, amount=premium)
        )


class StopInsuranceHandlerImpl(ActionHandlerModel):
    """Cancel an active policy."""

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        if not state.has_insurance:
            return state
        return state.evolve(has_insurance=False, insurance_premium=0.0).record_decision(
            DecisionRecord(kind=ActionKind.STOP_INSURANCE.value)
        )


class TakeLoanHandlerImpl(ActionHandlerModel):
    """Borrow cash; interest is added to the debt up front."""

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: TakeLoanAction, context: ActionContext
    ) -> GameState:
        if not is_transaction_amount(action.amount):
            return state
        amount = round_currency(action.amount)
        if amount <= 0:
            return state
        if context.configuration.single_loan_only and state.debt > 0:
            return state
        outcome = apply_loan(state, amount, context.configuration)
        return state.evolve(
            balance=outcome.balance, debt=outcome.debt
        ).record_decision(DecisionRecord(kind=ActionKind.TAKE_LOAN.value, amount=amount))


class RepayLoanHandlerImpl(ActionHandlerModel):
    """Pay down debt from cash, never below zero."""

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: RepayLoanAction, context: ActionContext
    ) -> GameState:
        if not is_transaction_amount(action.amount):
            return state
        amount = round_currency(action.amount)
        if amount <= 0 or amount > state.balance or state.debt <= 0:
            return state
        repayment = min(amount, state.debt)
        return state.evolve(
            balance=round_currency(state.balance - repayment),
            debt=round_currency(max(0.0, state.debt - repayment)),
        ).record_decision(
            DecisionRecord(kind=ActionKind.REPAY_LOAN.value, amount=repayment)
        )


class EndMonthHandlerImpl(ActionHandlerModel):
    """Record the month, apply income growth and move the calendar."""

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        configuration = context.configuration
        record = MonthRecord(
            month=state.month,
            income=state.monthly_income,
            expenses=total_expenses(state.difficulty_multiplier, configuration),
            savings=state.savings,
            balance=state.balance,
            event=state.current_event,
            decisions=state.month_decisions,
        )
        closed = state.evolve(
            month_history=(*state.month_history, record),
            month_decisions=(),
            current_event=None,
        )

        growth = check_income_growth(closed, configuration)
        if growth is not None:
            closed = closed.evolve(
                monthly_income=growth.new_income,
                consecutive_saving_months=0,
                total_saved_this_streak=0.0,
            )

        if state.month + 1 <= MONTHS_PER_YEAR:
            if not configuration.insurance_persists:
                closed = closed.evolve(has_insurance=False, insurance_premium=0.0)
            return closed.evolve(month=state.month + 1, phase=GamePhase.SUMMARY)

        if configuration.max_years is not None and state.year >= configuration.max_years:
            settled, upcoming = _settle_year(closed, context)
            return settled.evolve(current_goal=upcoming, phase=GamePhase.ENDED)
        return closed.with_phase(GamePhase.YEAR_END)


class ContinueMonthHandlerImpl(ActionHandlerModel):
    """Leave the month summary for the next month."""

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        return state.with_phase(GamePhase.PLAYING)


class ContinueYearHandlerImpl(ActionHandlerModel):
    """Settle the year's goal and start the next, harder year."""

    recomputes_stability: ClassVar[bool] = True

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        settled, upcoming = _settle_year(state, context)
        if upcoming is None:
            return settled.evolve(current_goal=None, phase=GamePhase.ENDED)
        multiplier = round(
            state.difficulty_multiplier + context.configuration.difficulty_step, 4
        )
        return settled.evolve(
            year=state.year + 1,
            month=1,
            difficulty_multiplier=multiplier,
            has_insurance=False,
            insurance_premium=0.0,
            consecutive_saving_months=0,
            total_saved_this_streak=0.0,
            current_goal=upcoming,
            current_event=None,
            month_history=(),
            phase=GamePhase.PLAYING,
        )


class RestartHandlerImpl(ActionHandlerModel):
    """Discard the run and return to the intro screen."""

    def handle(
        self, state: GameState, action: ActionBase, context: ActionContext
    ) -> GameState:
        return initial_state(context.configuration, context.goals)


class ActionHandlers(BaseModel):
    """Registry binding every action kind to its handler."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    start: ActionHandlerModel = Field(default_factory=StartHandlerImpl)
    select_goal: ActionHandlerModel = Field(default_factory=SelectGoalHandlerImpl)
    start_month: ActionHandlerModel = Field(default_factory=StartMonthHandlerImpl)
    resolve_event: ActionHandlerModel = Field(default_factory=ResolveEventHandlerImpl)
    save: ActionHandlerModel = Field(default_factory=SaveHandlerImpl)
    buy_insurance: ActionHandlerModel = Field(default_factory=BuyInsuranceHandlerImpl)
    update_insurance: ActionHandlerModel = Field(
        default_factory=UpdateInsuranceHandlerImpl
    )
    stop_insurance: ActionHandlerModel = Field(default_factory=StopInsuranceHandlerImpl)
    take_loan: ActionHandlerModel = Field(default_factory=TakeLoanHandlerImpl)
    repay_loan: ActionHandlerModel = Field(default_factory=RepayLoanHandlerImpl)
    end_month: ActionHandlerModel = Field(default_factory=EndMonthHandlerImpl)
    continue_month: ActionHandlerModel = Field(default_factory=ContinueMonthHandlerImpl)
    continue_year: ActionHandlerModel = Field(default_factory=ContinueYearHandlerImpl)
    restart: ActionHandlerModel = Field(default_factory=RestartHandlerImpl)

    def as_mapping(self) -> dict[ActionKind, ActionHandlerModel]:
        """Return the handlers keyed by action kind."""
        return {kind: getattr(self, kind.value) for kind in ActionKind}


__all__ = [
    "MONTHS_PER_YEAR",
    "ActionContext",
    "ActionHandlerModel",
    "ActionHandlers",
    "BuyInsuranceHandlerImpl",
    "ContinueMonthHandlerImpl",
    "ContinueYearHandlerImpl",
    "EndMonthHandlerImpl",
    "RepayLoanHandlerImpl",
    "ResolveEventHandlerImpl",
    "RestartHandlerImpl",
    "SaveHandlerImpl",
    "SelectGoalHandlerImpl",
    "StartHandlerImpl",
    "StartMonthHandlerImpl",
    "StopInsuranceHandlerImpl",
    "TakeLoanHandlerImpl",
    "UpdateInsuranceHandlerImpl",
]
