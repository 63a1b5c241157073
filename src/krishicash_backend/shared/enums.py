"""Shared enumerations used across the backend."""

from enum import StrEnum


class EventType(StrEnum):
    """Categories of monthly random events a household can face."""

    MEDICAL = "medical"
    CROP_LOSS = "crop_loss"
    GOOD_RAIN = "good_rain"
    LOAN_OFFER = "loan_offer"
    FESTIVAL = "festival"
    EQUIPMENT = "equipment"
    BONUS = "bonus"


class OutcomeTier(StrEnum):
    """Final financial-health rating shown when a run ends."""

    SECURE = "secure"
    STABLE = "stable"
    VULNERABLE = "vulnerable"
