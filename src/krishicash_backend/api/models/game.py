"""Pydantic models for the game endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from krishicash_backend.game_logic.catalog import GameEvent, Goal
from krishicash_backend.game_logic.phases import ActionKind
from krishicash_backend.game_logic.rules import Lesson, OutcomeAssessment
from krishicash_backend.game_logic.state import GameState
from krishicash_backend.shared import ExpenseBreakdown


class GameStateResponse(BaseModel):
    """Current run together with the values a client needs to render it."""

    state: GameState
    expenses: ExpenseBreakdown
    insurance_premium_quote: int
    loan_interest_rate: float
    allowed_actions: list[ActionKind]
    outcome: OutcomeAssessment | None = None
    lessons: list[Lesson] = Field(default_factory=list)


class GoalCatalogResponse(BaseModel):
    """Saving goals in the order they are assigned."""

    goals: list[Goal]


class EventCatalogResponse(BaseModel):
    """Unscaled monthly events."""

    events: list[GameEvent]
