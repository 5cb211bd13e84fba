"""
ConnectFour game implementation.

Uses a flat int8 board, row 0 at the top:
    0 = empty
    1 = player 1 (red)
    2 = player 2 (yellow)

Acting at any cell of a column drops a piece into that column, so every
locus in a column yields the same child state.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from minimax_engine.core.types import DRAW_SCORE, LOSS_SCORE, WIN_SCORE
from minimax_engine.errors import IllegalMoveError, InvalidStateError, MoveError
from minimax_engine.games.game_base import GameBase
from minimax_engine.games.game_rules import (
    board_full,
    index_of,
    line_winner,
    lines_of_length,
    open_lines,
)
from minimax_engine.games.game_state import GameState
from minimax_engine.games.move import Move

CELL_STRINGS = {0: ".", 1: "R", 2: "Y"}

DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
DEFAULT_CONNECT = 4
NUM_PLAYERS = 2


def _next_player(player: int) -> int:
    return player % NUM_PLAYERS + 1


def landing_locus(cells: np.ndarray, width: int, column: int) -> Optional[int]:
    """Flat index where a piece dropped into ``column`` comes to rest."""
    empties = np.flatnonzero(cells[column::width] == 0)
    if empties.size == 0:
        return None
    return index_of(width, int(empties[-1]), column)


class ConnectFour(GameBase):
    """Live ConnectFour board that DropMove applies to."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        connect: int = DEFAULT_CONNECT,
    ):
        if connect < 1 or connect > max(width, height):
            raise InvalidStateError(
                f"A run of {connect} does not fit on a {width}x{height} board"
            )
        self.width = width
        self.height = height
        self.connect = connect
        self.cells = np.zeros(width * height, dtype=np.int8)
        self.player = 1
        self.history: List[int] = []
        self._lines = lines_of_length(width, height, connect)
        self._winner = 0

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def game_id(self) -> str:
        return "connect_four"

    def num_players(self) -> int:
        return NUM_PLAYERS

    def current_player(self) -> int:
        return self.player

    def set_position(self, cells, player: int) -> None:
        """Replace the board. The winner is recomputed from the cells."""
        cells = np.array(cells, dtype=np.int8).reshape(-1)
        if cells.size != self.width * self.height:
            raise InvalidStateError(
                f"Expected {self.width * self.height} cells, got {cells.size}"
            )
        self.cells = cells
        self.player = player
        self.history = []
        self._winner = line_winner(self.cells, self._lines)

    def valid_loci(self) -> List[int]:
        """Landing cell of every column that still has room."""
        if self._winner:
            return []
        loci = []
        for column in range(self.width):
            locus = landing_locus(self.cells, self.width, column)
            if locus is not None:
                loci.append(locus)
        return loci

    def apply_move(self, locus: int) -> None:
        if not 0 <= locus < self.cells.size:
            raise IllegalMoveError(f"Cell {locus} is off the board")
        if self.is_over():
            raise IllegalMoveError("Game is already over")

        column = locus % self.width
        landing = landing_locus(self.cells, self.width, column)
        if landing is None:
            raise IllegalMoveError(f"Column {column} is full")

        self.cells[landing] = self.player
        self.history.append(landing)
        self._winner = line_winner(self.cells, self._lines)
        self.player = _next_player(self.player)

    def is_over(self) -> bool:
        return self._winner != 0 or board_full(self.cells)

    def winner(self) -> int:
        return self._winner

    def snapshot(self, max_player: int) -> "ConnectFourState":
        return ConnectFourState(
            self.width,
            self.height,
            self.cells.copy(),
            self.player,
            connect=self.connect,
            max_player=max_player,
            game=self,
        )

    def state_string(self) -> str:
        board = self.cells.reshape(self.height, self.width)
        rows = [
            "| " + " ".join(CELL_STRINGS[int(v)] for v in row) + " |"
            for row in board
        ]
        footer = "  " + " ".join(str(c % 10) for c in range(self.width))
        return "\n".join(rows + [footer])


class ConnectFourState(GameState):
    """
    Search snapshot of a ConnectFour position.

    Heuristic: +inf/-inf for a completed run, otherwise the number of lines
    max_player can still complete minus the opponent's.
    """

    __slots__ = ('connect', 'max_player', 'game', '_lines', '_score', '_winner')

    cell_dtype = np.int8

    def __init__(
        self,
        width: int,
        height: int,
        cells,
        player_ply: int,
        connect: int = DEFAULT_CONNECT,
        max_player: int = 1,
        game: Optional[ConnectFour] = None,
        producing_move: Optional[Move] = None,
    ):
        super().__init__(width, height, cells, player_ply, producing_move)
        if connect < 1 or connect > max(width, height):
            raise InvalidStateError(
                f"A run of {connect} does not fit on a {width}x{height} board"
            )
        self.connect = connect
        self.max_player = max_player
        self.game = game
        self._lines = lines_of_length(width, height, connect)
        self._score: Optional[float] = None
        self._winner: Optional[int] = None

    def winner(self) -> int:
        if self._winner is None:
            self._winner = line_winner(self.cells, self._lines)
        return self._winner

    def heuristic(self) -> float:
        if self._score is None:
            winner = self.winner()
            if winner == self.max_player:
                self._score = WIN_SCORE
            elif winner != 0:
                self._score = LOSS_SCORE
            elif board_full(self.cells):
                self._score = DRAW_SCORE
            else:
                opponent = _next_player(self.max_player)
                self._score = float(
                    open_lines(self.cells, self._lines, self.max_player)
                    - open_lines(self.cells, self._lines, opponent)
                )
        return self._score

    def successors(self, locus: int) -> List[GameState]:
        if self.winner():
            return []
        if landing_locus(self.cells, self.width, locus % self.width) is None:
            return []
        return [DropMove(self.game).compute(self, locus)]

    def clone_into(self, source: GameState) -> None:
        super().clone_into(source)
        self.connect = getattr(source, 'connect', self.connect)
        self._lines = lines_of_length(self.width, self.height, self.connect)
        self._score = None
        self._winner = None


class DropMove(Move):
    """Drop the acting player's piece into a column."""

    def __init__(self, game: Optional[ConnectFour] = None):
        super().__init__()
        self.game = game
        self.column = -1
        self.landing = -1
        self.player = 0

    def compute(self, parent: GameState, *loci: int) -> ConnectFourState:
        self.column = loci[0] % parent.width
        landing = landing_locus(parent.cells, parent.width, self.column)
        if landing is None:
            raise IllegalMoveError(f"Column {self.column} is full")
        self.landing = landing
        self.player = parent.player_ply

        cells = parent.copy_cells()
        cells[self.landing] = self.player
        return ConnectFourState(
            parent.width,
            parent.height,
            cells,
            _next_player(self.player),
            connect=getattr(parent, 'connect', DEFAULT_CONNECT),
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
        self.game.apply_move(self.landing)

    def __repr__(self) -> str:
        return f"DropMove(player={self.player}, column={self.column})"
