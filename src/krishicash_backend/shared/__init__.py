"""Shared utilities, shared models and cross-cutting helpers for the backend."""

from krishicash_backend.shared.enums import EventType, OutcomeTier
from krishicash_backend.shared.events import DecisionRecord
from krishicash_backend.shared.rng import DeterministicRandomService, RandomSource
from krishicash_backend.shared.value_objects import (
    MAX_TRANSACTION_AMOUNT,
    ExpenseBreakdown,
    clamp,
    is_transaction_amount,
    round_currency,
    round_half_up,
)

__all__ = [
    "MAX_TRANSACTION_AMOUNT",
    "DecisionRecord",
    "DeterministicRandomService",
    "EventType",
    "ExpenseBreakdown",
    "OutcomeTier",
    "RandomSource",
    "clamp",
    "is_transaction_amount",
    "round_currency",
    "round_half_up",
]
