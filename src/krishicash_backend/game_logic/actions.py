"""Player actions accepted by the game engine."""

# ruff: noqa: TC001

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.config import ConfigDict

from krishicash_backend.game_logic.phases import ActionKind
from krishicash_backend.shared.value_objects import MAX_TRANSACTION_AMOUNT


class ActionBase(BaseModel):
    """Common configuration for every action payload."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @property
    def action_kind(self) -> ActionKind:
        """Return the action identifier as an enum member."""
        return ActionKind(self.kind)  # type: ignore[attr-defined]


class StartAction(ActionBase):
    """Leave the intro screen."""

    kind: Literal["start"] = "start"


class SelectGoalAction(ActionBase):
    """Pick the goal to pursue this year."""

    kind: Literal["select_goal"] = "select_goal"
    goal_id: str = Field(..., min_length=1)


class StartMonthAction(ActionBase):
    """Collect income, pay fixed costs and draw the month's event."""

    kind: Literal["start_month"] = "start_month"


class ResolveEventAction(ActionBase):
    """Apply the drawn event to the household."""

    kind: Literal["resolve_event"] = "resolve_event"


class SaveAction(ActionBase):
    """Move cash into savings.

    Only the upper bound is enforced by the schema; non-positive amounts
    reach the engine and behave as ignored actions.
    """

    kind: Literal["save"] = "save"
    amount: float = Field(..., le=MAX_TRANSACTION_AMOUNT)


class BuyInsuranceAction(ActionBase):
    """Buy crop insurance at the current premium."""

    kind: Literal["buy_insurance"] = "buy_insurance"


class UpdateInsuranceAction(ActionBase):
    """Change the monthly premium of active insurance."""

    kind: Literal["update_insurance"] = "update_insurance"
    amount: float = Field(..., le=MAX_TRANSACTION_AMOUNT)


class StopInsuranceAction(ActionBase):
    """Cancel active insurance."""

    kind: Literal["stop_insurance"] = "stop_insurance"


class TakeLoanAction(ActionBase):
    """Borrow cash against future income."""

    kind: Literal["take_loan"] = "take_loan"
    amount: float = Field(..., le=MAX_TRANSACTION_AMOUNT)


class RepayLoanAction(ActionBase):
    """Pay down outstanding debt from cash."""

    kind: Literal["repay_loan"] = "repay_loan"
    amount: float = Field(..., le=MAX_TRANSACTION_AMOUNT)


class EndMonthAction(ActionBase):
    """Close the month and record it."""

    kind: Literal["end_month"] = "end_month"


class ContinueMonthAction(ActionBase):
    """Leave the month summary."""

    kind: Literal["continue_month"] = "continue_month"


class ContinueYearAction(ActionBase):
    """Settle the year's goal and roll into the next year."""

    kind: Literal["continue_year"] = "continue_year"


class RestartAction(ActionBase):
    """Throw the run away and start over."""

    kind: Literal["restart"] = "restart"


GameAction = Annotated[
    StartAction
    | SelectGoalAction
    | StartMonthAction
    | ResolveEventAction
    | SaveAction
    | BuyInsuranceAction
    | UpdateInsuranceAction
    | StopInsuranceAction
    | TakeLoanAction
    | RepayLoanAction
    | EndMonthAction
    | ContinueMonthAction
    | ContinueYearAction
    | RestartAction,
    Field(discriminator="kind"),
]

GAME_ACTION_ADAPTER: TypeAdapter[GameAction] = TypeAdapter(GameAction)


__all__ = [
    "GAME_ACTION_ADAPTER",
    "ActionBase",
    "BuyInsuranceAction",
    "ContinueMonthAction",
    "ContinueYearAction",
    "EndMonthAction",
    "GameAction",
    "RepayLoanAction",
    "ResolveEventAction",
    "RestartAction",
    "SaveAction",
    "SelectGoalAction",
    "StartAction",
    "StartMonthAction",
    "StopInsuranceAction",
    "TakeLoanAction",
    "UpdateInsuranceAction",
]
