"""Pure financial rules behind every transition of the game loop.

Nothing in this module owns state. Each function takes the values it needs,
usually a :class:`GameState` and the :class:`EconomyConfiguration` of the run,
and returns plain numbers or small frozen result models. The engine composes
these functions; tests exercise them directly.
"""

from __future__ import annotations

from collections.abc import Sequence  # noqa: TC003
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic.config import ConfigDict

from krishicash_backend.game_logic.catalog import SAVING_GOALS, GameEvent, Goal
from krishicash_backend.shared.enums import EventType, OutcomeTier
from krishicash_backend.shared.value_objects import (
    ExpenseBreakdown,
    clamp,
    round_currency,
    round_half_up,
)

if TYPE_CHECKING:
    from krishicash_backend.game_logic.configuration import EconomyConfiguration
    from krishicash_backend.game_logic.state import GameState
    from krishicash_backend.shared.rng import RandomSource

SECURE_STABILITY_THRESHOLD = 80
STABLE_STABILITY_THRESHOLD = 50


class LoanOutcome(BaseModel):
    """Balance and debt after a loan has been disbursed."""

    model_config = ConfigDict(frozen=True)

    balance: float
    debt: float
    interest: float


class IncomeGrowth(BaseModel):
    """Income raise unlocked by a long enough saving streak."""

    model_config = ConfigDict(frozen=True)

    new_income: float
    bonus: int


class OutcomeAssessment(BaseModel):
    """Overall rating shown when the run ends."""

    model_config = ConfigDict(frozen=True)

    tier: OutcomeTier
    title: str
    description: str


class Lesson(BaseModel):
    """One piece of end-of-run feedback."""

    model_config = ConfigDict(frozen=True)

    positive: bool
    text: str


def scaled_expenses(
    multiplier: float, configuration: EconomyConfiguration
) -> ExpenseBreakdown:
    """Return the fixed expenses scaled by the difficulty *multiplier*."""
    return ExpenseBreakdown(
        household=round_half_up(configuration.household_expense * multiplier),
        farming=round_half_up(configuration.farming_expense * multiplier),
        education=round_half_up(configuration.education_expense * multiplier),
    )


def total_expenses(multiplier: float, configuration: EconomyConfiguration) -> int:
    """Return the sum of all scaled fixed expenses."""
    return scaled_expenses(multiplier, configuration).total


def scaled_premium(multiplier: float, configuration: EconomyConfiguration) -> int:
    """Return the monthly insurance premium at the given difficulty."""
    return round_half_up(configuration.insurance_premium * multiplier)


def scale_event(
    event: GameEvent, multiplier: float, configuration: EconomyConfiguration
) -> GameEvent:
    """Return a copy of *event* with its cost and reward scaled for difficulty.

    Costs grow linearly with the multiplier while rewards grow by
    ``0.8 + 0.2 * multiplier``, so later years get harder.
    """
    updates: dict[str, float] = {}
    if event.cost is not None:
        updates["cost"] = float(round_half_up(event.cost * multiplier))
    if event.reward is not None:
        reward_factor = (
            configuration.reward_base_factor
            + configuration.reward_step_factor * multiplier
        )
        updates["reward"] = float(round_half_up(event.reward * reward_factor))
    return event.model_copy(update=updates)


def draw_event(
    catalog: Sequence[GameEvent],
    multiplier: float,
    rng: RandomSource,
    configuration: EconomyConfiguration,
) -> GameEvent:
    """Pick one catalog event uniformly through *rng* and scale it."""
    return scale_event(rng.choice(catalog), multiplier, configuration)


def compute_stability(state: GameState, configuration: EconomyConfiguration) -> int:
    """Return the 0-100 financial health score for *state*.

    The score is the sum of five independently clamped parts: balance (25),
    savings (30), debt (25), insurance (10) and flexibility (10).
    """
    monthly_expenses = total_expenses(state.difficulty_multiplier, configuration)

    balance_score = clamp(state.balance / monthly_expenses * 12.5 + 12.5, 0, 25)
    savings_score = clamp(state.savings / monthly_expenses * 10, 0, 30)
    debt_score = max(0.0, 25 - (state.debt / state.monthly_income) * 15)
    insurance_score = 10 if state.has_insurance else 0
    flexibility_score = clamp(state.net_worth / monthly_expenses * 5 + 5, 0, 10)

    total = (
        balance_score + savings_score + debt_score + insurance_score + flexibility_score
    )
    return round_half_up(clamp(total, 0, 100))


def amortize_debt(
    debt: float, balance_after_expenses: float, configuration: EconomyConfiguration
) -> float:
    """Return this month's installment, limited by the cash left after expenses."""
    if debt <= 0:
        return 0.0
    installment = debt / configuration.emi_months
    payment = min(installment, max(balance_after_expenses, 0.0))
    return min(round_currency(payment), debt)


def loan_interest_rate(multiplier: float, configuration: EconomyConfiguration) -> float:
    """Return the flat loan interest rate at the given difficulty."""
    return (
        configuration.loan_base_interest_rate
        + (multiplier - 1) * configuration.loan_interest_step
    )


def apply_loan(
    state: GameState, amount: float, configuration: EconomyConfiguration
) -> LoanOutcome:
    """Disburse *amount* and add principal plus interest to the debt."""
    rate = loan_interest_rate(state.difficulty_multiplier, configuration)
    interest = round_currency(amount * rate)
    return LoanOutcome(
        balance=round_currency(state.balance + amount),
        debt=round_currency(state.debt + amount + interest),
        interest=interest,
    )


def apply_event_cost(
    state: GameState, event: GameEvent, configuration: EconomyConfiguration
) -> float:
    """Return what *event* actually costs the household.

    Insured households pay at most the configured cap for crop losses.
    """
    cost = event.cost or 0.0
    if event.type is EventType.CROP_LOSS and state.has_insurance:
        return min(configuration.crop_loss_insured_cap, cost)
    return cost


def check_income_growth(
    state: GameState, configuration: EconomyConfiguration
) -> IncomeGrowth | None:
    """Return the income raise earned by the current saving streak, if any."""
    if state.consecutive_saving_months < configuration.income_growth_min_months:
        return None
    if state.total_saved_this_streak < configuration.income_growth_min_saved:
        return None
    bonus = round_half_up(
        configuration.income_growth_bonus * state.difficulty_multiplier
    )
    return IncomeGrowth(new_income=state.monthly_income + bonus, bonus=bonus)


def goal_met(state: GameState) -> bool:
    """Return whether savings cover the current goal."""
    if state.current_goal is None:
        return False
    return state.savings >= state.current_goal.target_amount


def next_goal(
    completed: Sequence[str], catalog: Sequence[Goal] = SAVING_GOALS
) -> Goal | None:
    """Return the first catalog goal that has not been completed."""
    for goal in catalog:
        if goal.id not in completed:
            return goal
    return None


def assess_outcome(state: GameState) -> OutcomeAssessment:
    """Rate the run from its final stability score."""
    if state.stability_score > SECURE_STABILITY_THRESHOLD:
        return OutcomeAssessment(
            tier=OutcomeTier.SECURE,
            title="Financially Secure Farmer!",
            description=(
                "Excellent! You managed your finances wisely and built a stable "
                "future."
            ),
        )
    if state.stability_score > STABLE_STABILITY_THRESHOLD:
        return OutcomeAssessment(
            tier=OutcomeTier.STABLE,
            title="Stable but Needs Improvement",
            description=(
                "You did okay, but there's room to improve your financial habits."
            ),
        )
    return OutcomeAssessment(
        tier=OutcomeTier.VULNERABLE,
        title="Financially Vulnerable",
        description="Your finances need attention. Try saving more and avoiding debt.",
    )


def derive_lessons(
    state: GameState, configuration: EconomyConfiguration
) -> tuple[Lesson, ...]:
    """Return the end-of-run feedback that applies to *state*."""
    goals_done = len(state.completed_goals)
    candidates = (
        (
            goals_done >= 3,
            True,
            f"Amazing! You completed {goals_done} major goals!",
        ),
        (
            state.savings >= 10000,
            True,
            "Excellent savings! You built a strong financial cushion.",
        ),
        (
            state.savings < 5000 and goals_done == 0,
            False,
            "Try to save more regularly to build emergency funds.",
        ),
        (
            state.monthly_income > configuration.starting_income * 1.25,
            True,
            "Your consistent saving unlocked significant income growth!",
        ),
        (
            state.debt == 0,
            True,
            "You avoided or paid off debt - excellent discipline!",
        ),
        (
            state.debt > 0,
            False,
            "High-interest loans hurt your finances. Avoid when possible.",
        ),
        (
            state.stability_score >= SECURE_STABILITY_THRESHOLD,
            True,
            "You maintained excellent financial stability throughout!",
        ),
    )
    return tuple(
        Lesson(positive=positive, text=text)
        for applies, positive, text in candidates
        if applies
    )


__all__ = [
    "IncomeGrowth",
    "Lesson",
    "LoanOutcome",
    "OutcomeAssessment",
    "amortize_debt",
    "apply_event_cost",
    "apply_loan",
    "assess_outcome",
    "check_income_growth",
    "compute_stability",
    "derive_lessons",
    "draw_event",
    "goal_met",
    "loan_interest_rate",
    "next_goal",
    "scale_event",
    "scaled_expenses",
    "scaled_premium",
    "total_expenses",
]
