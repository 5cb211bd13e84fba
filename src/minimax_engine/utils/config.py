"""
Configuration and game registry.
"""

from typing import Optional, Sequence

from minimax_engine.games import ConnectFour, TicTacToe


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "tic_tac_toe": TicTacToe,
    "connect_four": ConnectFour,
}

# Search depth that plays each game well without long waits
DEFAULT_DEPTHS = {
    "tic_tac_toe": 9,
    "connect_four": 5,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_GAME = "tic_tac_toe"
DEFAULT_MAXIMIZING_PLAYER = 2  # Human plays first as player 1 by default
DEFAULT_USE_PRUNING = True


class Config:
    """Play configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = DEFAULT_GAME,
        depth: Optional[int] = None,
        use_pruning: bool = DEFAULT_USE_PRUNING,
        ai_players: Sequence[int] = (DEFAULT_MAXIMIZING_PLAYER,),
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES.keys())
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")

        self.game_name = game_name
        self.depth = DEFAULT_DEPTHS[game_name] if depth is None else depth
        self.use_pruning = use_pruning

        if self.depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {self.depth}")

        # Derive dependent values
        num_players = GAMES[game_name]().num_players()
        invalid = [p for p in ai_players if p < 1 or p > num_players]
        if invalid:
            raise ValueError(
                f"Invalid player number(s): {invalid}. "
                f"{game_name} only supports players 1-{num_players}."
            )
        self.ai_players = sorted(set(ai_players))
        self.num_players = num_players

