"""Fixed catalogs of savings goals and monthly events."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from krishicash_backend.shared.enums import EventType


class Goal(BaseModel):
    """Savings target assigned to a single year of the run."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = Field(..., min_length=1)
    name: str
    target_amount: float = Field(..., gt=0)
    icon: str = ""
    description: str = ""


class GameEvent(BaseModel):
    """Random occurrence applied to the household at the start of a month."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = Field(..., min_length=1)
    type: EventType
    title: str
    description: str
    cost: float | None = Field(default=None, ge=0)
    reward: float | None = Field(default=None, ge=0)
    interest: float | None = Field(default=None, ge=0)


SAVING_GOALS: tuple[Goal, ...] = (
    Goal(
        id="emergency_fund",
        name="Emergency Fund",
        target_amount=15000,
        icon="🛟",
        description="Three months of expenses set aside for bad days.",
    ),
    Goal(
        id="dairy_cow",
        name="Dairy Cow",
        target_amount=30000,
        icon="🐄",
        description="A milking cow for a steady second income.",
    ),
    Goal(
        id="drip_irrigation",
        name="Drip Irrigation",
        target_amount=45000,
        icon="💧",
        description="Water-saving irrigation so a dry spell hurts less.",
    ),
    Goal(
        id="tractor",
        name="Tractor Down Payment",
        target_amount=60000,
        icon="🚜",
        description="Your own tractor instead of renting one each season.",
    ),
    Goal(
        id="education",
        name="Children's Education",
        target_amount=80000,
        icon="🎓",
        description="College fees for the next generation.",
    ),
)


GAME_EVENTS: tuple[GameEvent, ...] = (
    GameEvent(
        id="medical_1",
        type=EventType.MEDICAL,
        title="Medical Emergency",
        description="A family member fell sick and needs immediate treatment.",
        cost=2000,
    ),
    GameEvent(
        id="medical_2",
        type=EventType.MEDICAL,
        title="Hospital Visit",
        description="Your child needs medical attention and medicines.",
        cost=1500,
    ),
    GameEvent(
        id="crop_loss_1",
        type=EventType.CROP_LOSS,
        title="Pest Attack",
        description="Pests damaged a portion of your crops.",
        cost=3000,
    ),
    GameEvent(
        id="crop_loss_2",
        type=EventType.CROP_LOSS,
        title="Drought Impact",
        description="Lack of rain affected your harvest yield.",
        cost=2500,
    ),
    GameEvent(
        id="good_rain_1",
        type=EventType.GOOD_RAIN,
        title="Excellent Harvest",
        description="Good rainfall blessed your fields with a bumper crop!",
        reward=2500,
    ),
    GameEvent(
        id="good_rain_2",
        type=EventType.GOOD_RAIN,
        title="Premium Crop Sale",
        description="Your high-quality produce fetched excellent prices at the market.",
        reward=3000,
    ),
    GameEvent(
        id="festival_1",
        type=EventType.FESTIVAL,
        title="Festival Season",
        description="It's festival time! Family expects gifts and celebrations.",
        cost=1500,
    ),
    GameEvent(
        id="equipment_1",
        type=EventType.EQUIPMENT,
        title="Tool Repair",
        description="Your farming equipment needs urgent repair.",
        cost=1000,
    ),
    GameEvent(
        id="bonus_1",
        type=EventType.BONUS,
        title="Government Subsidy",
        description="You received a farming subsidy from the government.",
        reward=2000,
    ),
    GameEvent(
        id="loan_offer_1",
        type=EventType.LOAN_OFFER,
        title="Quick Loan Offer",
        description="An agent offers you a quick loan of ₹5000 at 20% interest.",
        interest=20,
    ),
)


def find_goal(goal_id: str, catalog: tuple[Goal, ...] = SAVING_GOALS) -> Goal | None:
    """Return the catalog goal with *goal_id* or ``None`` when unknown."""
    for goal in catalog:
        if goal.id == goal_id:
            return goal
    return None


__all__ = ["GAME_EVENTS", "SAVING_GOALS", "GameEvent", "Goal", "find_goal"]
