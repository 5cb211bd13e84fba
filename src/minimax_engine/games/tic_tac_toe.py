"""
TicTacToe game implementation - optimized.

Uses a flat int8 board:
    0 = empty
    1 = player 1 (X)
    2 = player 2 (O)
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from minimax_engine.core.types import DRAW_SCORE, LOSS_SCORE, WIN_SCORE
from minimax_engine.errors import IllegalMoveError, MoveError
from minimax_engine.games.game_base import GameBase
from minimax_engine.games.game_rules import board_full, coords_of, line_winner, lines_of_length
from minimax_engine.games.game_state import GameState
from minimax_engine.games.move import Move

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

SIZE = 3
NUM_PLAYERS = 2

# Pre-computed winning lines (indices into flattened 3x3 board)
_WIN_LINES = lines_of_length(SIZE, SIZE, SIZE)


def _next_player(player: int) -> int:
    return player % NUM_PLAYERS + 1


class TicTacToe(GameBase):
    """Live TicTacToe board that PlaceMarkMove applies to."""

    __slots__ = ('cells', 'player', 'history', '_winner')

    def __init__(self):
        self.cells = np.zeros(SIZE * SIZE, dtype=np.int8)
        self.player = 1
        self.history: List[int] = []
        self._winner = 0  # 0=none, 1=player1, 2=player2

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def game_id(self) -> str:
        return "tic_tac_toe"

    def num_players(self) -> int:
        return NUM_PLAYERS

    def current_player(self) -> int:
        return self.player

    def set_position(self, cells, player: int) -> None:
        """Replace the board. The winner is recomputed from the cells."""
        self.cells = np.array(cells, dtype=np.int8).reshape(-1)
        self.player = player
        self.history = []
        self._winner = line_winner(self.cells, _WIN_LINES)

    def valid_loci(self) -> List[int]:
        """Empty cell positions, or nothing once the game is over."""
        if self._winner:
            return []
        return [int(i) for i in np.flatnonzero(self.cells == 0)]

    def apply_move(self, locus: int) -> None:
        if not 0 <= locus < self.cells.size:
            raise IllegalMoveError(f"Cell {locus} is off the board")
        if self.is_over():
            raise IllegalMoveError("Game is already over")
        if self.cells[locus] != 0:
            r, c = coords_of(SIZE, locus)
            raise IllegalMoveError(f"Cell ({r},{c}) is occupied")

        self.cells[locus] = self.player
        self.history.append(locus)
        self._winner = line_winner(self.cells, _WIN_LINES)
        self.player = _next_player(self.player)

    def is_over(self) -> bool:
        return self._winner != 0 or board_full(self.cells)

    def winner(self) -> int:
        return self._winner

    def snapshot(self, max_player: int) -> "TicTacToeState":
        return TicTacToeState(self.cells.copy(), self.player, max_player, game=self)

    def state_string(self) -> str:
        board = self.cells.reshape(SIZE, SIZE)
        lines = ["╭───┬───┬───╮"]
        for i in range(SIZE):
            row = "│ " + " │ ".join(CELL_STRINGS[int(board[i, j])] for j in range(SIZE)) + " │"
            lines.append(row)
            if i < SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)


class TicTacToeState(GameState):
    """
    Search snapshot of a TicTacToe position.

    The heuristic is perfect: +inf if max_player has a line, -inf if the
    opponent has one, 0 otherwise.
    """

    __slots__ = ('max_player', 'game', '_score')

    cell_dtype = np.int8

    def __init__(
        self,
        cells,
        player_ply: int,
        max_player: int = 1,
        game: Optional[TicTacToe] = None,
        producing_move: Optional[Move] = None,
    ):
        super().__init__(SIZE, SIZE, cells, player_ply, producing_move)
        self.max_player = max_player
        self.game = game
        self._score: Optional[float] = None

    def heuristic(self) -> float:
        if self._score is None:
            winner = line_winner(self.cells, _WIN_LINES)
            if winner == 0:
                self._score = DRAW_SCORE
            elif winner == self.max_player:
                self._score = WIN_SCORE
            else:
                self._score = LOSS_SCORE
        return self._score

    def successors(self, locus: int) -> List[GameState]:
        if self.cells[locus] != 0 or self.heuristic() != DRAW_SCORE:
            return []
        return [PlaceMarkMove(self.game).compute(self, locus)]

    def clone_into(self, source: GameState) -> None:
        super().clone_into(source)
        self._score = None


class PlaceMarkMove(Move):
    """Put the acting player's mark on an empty cell."""

    def __init__(self, game: Optional[TicTacToe] = None):
        super().__init__()
        self.game = game
        self.locus = -1
        self.player = 0

    def compute(self, parent: GameState, *loci: int) -> TicTacToeState:
        self.locus = loci[0]
        self.player = parent.player_ply

        cells = parent.copy_cells()
        cells[self.locus] = self.player
        return TicTacToeState(
            cells,
            _next_player(self.player),
            max_player=getattr(parent, 'max_player', 1),
            game=self.game,
            producing_move=self,
        )

    def _apply(self) -> None:
        if self.game is None:
            raise MoveError("No live game attached to this move")
        if self.game.current_player() != self.player:
            raise IllegalMoveError(
                f"Move was computed for player {self.player}, "
                f"but player {self.game.current_player()} is to act"
            )
        self.game.apply_move(self.locus)

    def __repr__(self) -> str:
        return f"PlaceMarkMove(player={self.player}, locus={self.locus})"
