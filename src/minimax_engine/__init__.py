"""
Minimax Engine - depth-limited adversarial search over pluggable grid games.

This package provides a minimax search, optionally with alpha-beta pruning,
over any game that implements the GameState/Move contract.

Quick Start:
    from minimax_engine import MinimaxEngine, TicTacToe

    game = TicTacToe()
    engine = MinimaxEngine(game.snapshot(max_player=1))
    engine.decide(depth=9, maximizing_player=1)
    print(game.state_string())

Modules:
    core    - Fundamental types (SearchResult, Outcome), sentinels, hashing
    games   - GameState/Move contract, live games, bundled grid games
    search  - Successor deduplication, minimax variants, MinimaxEngine
    utils   - Configuration and factories
"""

from minimax_engine.core import Outcome, SearchResult, SearchStats
from minimax_engine.errors import (
    MinimaxError,
    InvalidStateError,
    InvalidHeuristicError,
    SearchError,
    NoLegalMoveError,
    MoveError,
    MoveAlreadyAppliedError,
    IllegalMoveError,
)
from minimax_engine.games import (
    GameState,
    Move,
    GameBase,
    TicTacToe,
    ConnectFour,
)
from minimax_engine.search import (
    MinimaxEngine,
    enumerate_successors,
    search,
    search_alphabeta,
    search_plain,
)
from minimax_engine.api import play_game
from minimax_engine.utils.config import Config
from minimax_engine.utils.factory import create_game, create_engine

__version__ = "1.0.0"

__all__ = [
    # Main API
    "MinimaxEngine",
    "search",
    "search_alphabeta",
    "search_plain",
    "enumerate_successors",
    "play_game",
    "Config",
    "create_game",
    "create_engine",
    # Contract
    "GameState",
    "Move",
    "GameBase",
    # Games
    "TicTacToe",
    "ConnectFour",
    # Types
    "Outcome",
    "SearchResult",
    "SearchStats",
    # Errors
    "MinimaxError",
    "InvalidStateError",
    "InvalidHeuristicError",
    "SearchError",
    "NoLegalMoveError",
    "MoveError",
    "MoveAlreadyAppliedError",
    "IllegalMoveError",
]
