"""KrishiCash backend: a household budgeting game for farming families.

The package is split into ``game_logic`` (pure rules and the transition
engine), ``database`` (SQLAlchemy save slots) and ``api`` (FastAPI routes).
"""

from krishicash_backend.game_logic import GameController, GameEngine
from krishicash_backend.main import run_dev, run_prod
from krishicash_backend.settings import BackendSettings, get_settings, settings

__version__ = "0.1.0"

main = run_dev

__all__ = [
    "BackendSettings",
    "GameController",
    "GameEngine",
    "__version__",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
    "settings",
]
