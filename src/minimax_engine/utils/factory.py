"""
Factory functions for creating games and engines.
"""

from minimax_engine.games.game_base import GameBase
from minimax_engine.search.engine import MinimaxEngine
from minimax_engine.utils.config import GAMES


def create_game(game_name: str) -> GameBase:
    """
    Create a game instance in its initial position.

    Args:
        game_name: Key from GAMES registry (e.g., "tic_tac_toe")

    Returns:
        Fresh game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    return GAMES[game_name]()


def create_engine(game: GameBase, max_player: int) -> MinimaxEngine:
    """
    Create an engine rooted at the game's current position.

    Args:
        game: Live game the engine's moves are applied to
        max_player: Player the snapshot's heuristic scores for

    Returns:
        Engine whose current_board is a fresh snapshot of ``game``
    """
    return MinimaxEngine(game.snapshot(max_player))
