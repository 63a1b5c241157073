"""Decision logging primitives shared across the backend."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class DecisionRecord(BaseModel):
    """Captures an immutable snapshot of a decision the player took in a month."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    kind: str = Field(..., min_length=1)
    amount: float | None = None


__all__ = ["DecisionRecord"]
