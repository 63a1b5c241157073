"""Immutable value objects shared across the domain layer."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

_CURRENCY_QUANTIZE = Decimal("0.01")
_WHOLE_QUANTIZE = Decimal(1)

# Largest amount a single player action may move; keeps cent rounding exact.
MAX_TRANSACTION_AMOUNT = 1_000_000_000.0


def clamp(value: float, lower: float, upper: float) -> float:
    """Return *value* limited to the closed range [*lower*, *upper*]."""
    return max(lower, min(upper, value))


def is_transaction_amount(value: float) -> bool:
    """Return whether *value* is a positive, finite amount within the action limit."""
    return math.isfinite(value) and 0 < value <= MAX_TRANSACTION_AMOUNT


def round_half_up(value: float) -> int:
    """Round *value* to the nearest whole unit, halves away from zero."""
    return int(Decimal(str(value)).quantize(_WHOLE_QUANTIZE, rounding=ROUND_HALF_UP))


def round_currency(value: float) -> float:
    """Round *value* to two decimal places, halves away from zero."""
    return float(
        Decimal(str(value)).quantize(_CURRENCY_QUANTIZE, rounding=ROUND_HALF_UP)
    )


class ExpenseBreakdown(BaseModel):
    """Fixed monthly household expenses after difficulty scaling."""

    model_config = ConfigDict(frozen=True)

    household: int = Field(..., ge=0)
    farming: int = Field(..., ge=0)
    education: int = Field(..., ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        """Return the sum of every expense line."""
        return self.household + self.farming + self.education


__all__ = [
    "MAX_TRANSACTION_AMOUNT",
    "ExpenseBreakdown",
    "clamp",
    "is_transaction_amount",
    "round_currency",
    "round_half_up",
]
