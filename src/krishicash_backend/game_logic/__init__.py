"""Core rules and mechanics that drive KrishiCash gameplay."""

from krishicash_backend.game_logic.actions import (
    GAME_ACTION_ADAPTER,
    ActionBase,
    BuyInsuranceAction,
    ContinueMonthAction,
    ContinueYearAction,
    EndMonthAction,
    GameAction,
    RepayLoanAction,
    ResolveEventAction,
    RestartAction,
    SaveAction,
    SelectGoalAction,
    StartAction,
    StartMonthAction,
    StopInsuranceAction,
    TakeLoanAction,
    UpdateInsuranceAction,
)
from krishicash_backend.game_logic.catalog import (
    GAME_EVENTS,
    SAVING_GOALS,
    GameEvent,
    Goal,
)
from krishicash_backend.game_logic.configuration import (
    EconomyConfiguration,
    EconomyDefaults,
    RunOverrides,
    build_run_configuration,
    get_default_economy_configuration,
)
from krishicash_backend.game_logic.engine import GameEngine
from krishicash_backend.game_logic.handlers import ActionContext, ActionHandlers
from krishicash_backend.game_logic.orchestration import GameController
from krishicash_backend.game_logic.persistence import (
    DatabaseGameStateStore,
    GameStateStore,
    InMemoryGameStateStore,
)
from krishicash_backend.game_logic.phases import ActionKind, GamePhase
from krishicash_backend.game_logic.state import (
    GameState,
    MonthRecord,
    YearRecord,
    initial_state,
)

__all__ = [
    "GAME_ACTION_ADAPTER",
    "GAME_EVENTS",
    "SAVING_GOALS",
    "ActionBase",
    "ActionContext",
    "ActionHandlers",
    "ActionKind",
    "BuyInsuranceAction",
    "ContinueMonthAction",
    "ContinueYearAction",
    "DatabaseGameStateStore",
    "EconomyConfiguration",
    "EconomyDefaults",
    "EndMonthAction",
    "GameAction",
    "GameController",
    "GameEngine",
    "GameEvent",
    "GamePhase",
    "GameState",
    "GameStateStore",
    "Goal",
    "InMemoryGameStateStore",
    "MonthRecord",
    "RepayLoanAction",
    "ResolveEventAction",
    "RestartAction",
    "RunOverrides",
    "SaveAction",
    "SelectGoalAction",
    "StartAction",
    "StartMonthAction",
    "StopInsuranceAction",
    "TakeLoanAction",
    "UpdateInsuranceAction",
    "YearRecord",
    "build_run_configuration",
    "get_default_economy_configuration",
    "initial_state",
]
