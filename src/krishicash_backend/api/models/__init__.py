"""Models used for API request and response payloads."""

from krishicash_backend.api.models.game import (
    EventCatalogResponse,
    GameStateResponse,
    GoalCatalogResponse,
)

__all__ = [
    "EventCatalogResponse",
    "GameStateResponse",
    "GoalCatalogResponse",
]
