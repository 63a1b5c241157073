"""Service layer bridging the API routers and the game logic."""

from krishicash_backend.api.services.game import GameService

__all__ = ["GameService"]
