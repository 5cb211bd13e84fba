"""
Public API for playing games against the minimax engine.

Usage:
    from minimax_engine import play_game, Config, create_game

    config = Config("tic_tac_toe", ai_players=[2])
    game = create_game(config.game_name)
    play_game(game, config)
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, TYPE_CHECKING

from minimax_engine.errors import IllegalMoveError, NoLegalMoveError
from minimax_engine.search.engine import MinimaxEngine
from minimax_engine.utils.factory import create_engine

if TYPE_CHECKING:
    from minimax_engine.games.game_base import GameBase
    from minimax_engine.utils.config import Config

logger = logging.getLogger(__name__)


def _ai_turn(
    game: "GameBase",
    engine: MinimaxEngine,
    depth: int,
    use_pruning: bool,
) -> Optional[int]:
    """
    Engine selects and applies a move. Returns the locus played, or None if
    the engine had nothing to play.
    """
    player = game.current_player()
    engine.reroot(game.snapshot(player))
    before = len(game.history)

    try:
        engine.decide(depth, player, use_pruning)
    except NoLegalMoveError as e:
        logger.warning("Player %d has no move to play (value=%s)", player, e.value)
        return None

    return game.history[before] if len(game.history) > before else None


def _human_turn(game: "GameBase") -> int:
    """Prompt human for a locus, apply it, return it."""
    valid = game.valid_loci()
    print(f"\nYour turn (Player {game.current_player()})")
    print(f"Valid cells: {', '.join(map(str, valid))}")

    while True:
        raw = input("Move: ").strip()
        try:
            locus = int(raw)
        except ValueError:
            print(f"Invalid input: expected a cell number, got {raw!r}")
            continue
        try:
            game.apply_move(locus)
            return game.history[-1]
        except IllegalMoveError as e:
            print(f"Illegal move: {e}")


def play_game(game: "GameBase", config: "Config") -> int:
    """
    Main entry point: play one game on the terminal.

    Parameters
    ----------
    game : GameBase
        The live game to play on.
    config : Config
        Search depth, pruning, and which players the engine controls.
        Every other player is prompted for input.

    Returns
    -------
    int
        The winning player's ID, or 0 for a draw or abandoned game.
    """
    ai_set = set(config.ai_players)
    engines: Dict[int, MinimaxEngine] = {}

    print(
        f"Starting {game.game_id()} at depth {config.depth}. "
        f"Pruning: {'ON' if config.use_pruning else 'OFF'}"
    )
    print(game.state_string())

    try:
        while not game.is_over():
            current = game.current_player()
            if current not in ai_set:
                locus = _human_turn(game)
                print(f"\nYou played: {locus}")
            else:
                engine = engines.get(current)
                if engine is None:
                    engine = engines[current] = create_engine(game, current)
                locus = _ai_turn(game, engine, config.depth, config.use_pruning)
                if locus is None:
                    break
                print(f"\nAI (Player {current}) played: {locus}")

            print(game.state_string())

        print("\n" + "=" * 40)
        print("GAME OVER")
        print("=" * 40)

        winner = game.winner()
        print(f"Winner: Player {winner}" if winner else "Draw")
        return winner

    except KeyboardInterrupt:
        print("\nInterrupted - shutting down...")
        return 0
    except Exception:
        logger.exception("Fatal error in play loop")
        raise


__all__ = [
    "play_game",
    "MinimaxEngine",
]
