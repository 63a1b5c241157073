"""Household state containers used by the game logic layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from krishicash_backend.game_logic.catalog import GameEvent, Goal  # noqa: TC001
from krishicash_backend.game_logic.phases import GamePhase
from krishicash_backend.shared.events import DecisionRecord  # noqa: TC001

if TYPE_CHECKING:
    from krishicash_backend.game_logic.configuration import EconomyConfiguration


class MonthRecord(BaseModel):
    """Snapshot of the household finances taken when a month closes."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    month: int = Field(..., ge=1, le=12)
    income: float
    expenses: float = Field(..., ge=0)
    savings: float = Field(..., ge=0)
    balance: float
    event: GameEvent | None = None
    decisions: tuple[DecisionRecord, ...] = Field(default_factory=tuple)


class YearRecord(BaseModel):
    """Snapshot of the household finances taken when a year closes."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    year: int = Field(..., ge=1)
    final_savings: float = Field(..., ge=0)
    final_income: float
    final_stability: int = Field(..., ge=0, le=100)
    goal_completed: bool
    goal_name: str | None = None


class GameState(BaseModel):
    """Single source of truth for a run.

    Instances are frozen; every transition returns a new value built with
    :meth:`pydantic.BaseModel.model_copy`, so history tuples are shared
    between successive states rather than mutated.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    year: int = Field(default=1, ge=1)
    month: int = Field(default=1, ge=1, le=12)
    balance: float = 0
    monthly_income: float = Field(default=12000, gt=0)
    savings: float = Field(default=0, ge=0)
    stability_score: int = Field(default=70, ge=0, le=100)
    has_insurance: bool = False
    insurance_premium: float = Field(default=0, ge=0)
    debt: float = Field(default=0, ge=0)
    consecutive_saving_months: int = Field(default=0, ge=0)
    total_saved_this_streak: float = Field(default=0, ge=0)
    current_goal: Goal | None = None
    completed_goals: tuple[str, ...] = Field(default_factory=tuple)
    difficulty_multiplier: float = Field(default=1.0, ge=1)
    phase: GamePhase = GamePhase.INTRO
    current_event: GameEvent | None = None
    month_decisions: tuple[DecisionRecord, ...] = Field(default_factory=tuple)
    month_history: tuple[MonthRecord, ...] = Field(default_factory=tuple)
    year_history: tuple[YearRecord, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _validate_consistency(self) -> GameState:
        """Reject snapshots that break the run invariants."""
        if len(self.completed_goals) != len(set(self.completed_goals)):
            msg = "Completed goals must not contain duplicates."
            raise ValueError(msg)
        if self.current_goal is None and self.phase is not GamePhase.ENDED:
            msg = "A run without a current goal must be ended."
            raise ValueError(msg)
        if self.has_insurance is False and self.insurance_premium:
            msg = "Uninsured households cannot carry a premium."
            raise ValueError(msg)
        return self

    def evolve(self, **changes: Any) -> GameState:
        """Return a copy of the state with *changes* applied."""
        return self.model_copy(update=changes)

    def with_phase(self, phase: GamePhase) -> GameState:
        """Return a state moved to *phase*."""
        return self.model_copy(update={"phase": phase})

    def record_decision(self, decision: DecisionRecord) -> GameState:
        """Return a state with *decision* appended to this month's decisions."""
        return self.model_copy(
            update={"month_decisions": (*self.month_decisions, decision)}
        )

    @property
    def net_worth(self) -> float:
        """Return cash plus savings minus outstanding debt."""
        return self.balance + self.savings - self.debt


def initial_state(
    configuration: EconomyConfiguration, goals: tuple[Goal, ...]
) -> GameState:
    """Return the state a fresh run starts from."""
    return GameState(
        balance=configuration.starting_balance,
        monthly_income=configuration.starting_income,
        stability_score=configuration.starting_stability,
        current_goal=goals[0] if goals else None,
        phase=GamePhase.INTRO if goals else GamePhase.ENDED,
    )


__all__ = ["GameState", "MonthRecord", "YearRecord", "initial_state"]
