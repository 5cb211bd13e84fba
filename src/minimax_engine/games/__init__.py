"""
Games module - the search contract and bundled grid games.
"""

from minimax_engine.games.game_state import GameState
from minimax_engine.games.move import Move
from minimax_engine.games.game_base import GameBase
from minimax_engine.games.game_rules import (
    in_bounds,
    index_of,
    coords_of,
    lines_of_length,
    line_winner,
    open_lines,
    board_full,
)
from minimax_engine.games.tic_tac_toe import TicTacToe, TicTacToeState, PlaceMarkMove
from minimax_engine.games.connect_four import ConnectFour, ConnectFourState, DropMove

__all__ = [
    "GameState",
    "Move",
    "GameBase",
    "TicTacToe",
    "TicTacToeState",
    "PlaceMarkMove",
    "ConnectFour",
    "ConnectFourState",
    "DropMove",
    "in_bounds",
    "index_of",
    "coords_of",
    "lines_of_length",
    "line_winner",
    "open_lines",
    "board_full",
]
