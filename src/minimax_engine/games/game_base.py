"""
GameBase - abstract base class for live, mutable grid games.
"""

from abc import ABC, abstractmethod
from typing import List

from minimax_engine.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for the live game a Move is applied to.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - The live game is the single authoritative board; it is only changed by
      apply_move() (usually from Move.apply()).
    - The search never touches the live game. It works on GameState
      snapshots taken with snapshot().
    """

    # Loci played so far, in order (landing cells for gravity games)
    history: List[int]

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return number of players in the game."""
        pass

    @abstractmethod
    def current_player(self) -> int:
        """Return ID of player to act."""
        pass

    @abstractmethod
    def valid_loci(self) -> list[int]:
        """
        Return every flat cell index a player may act at.
        Example (TicTacToe): the empty cells.
        """
        pass

    @abstractmethod
    def apply_move(self, locus: int) -> None:
        """
        Apply a move at ``locus`` to the game. Mutates internal state.

        Raises:
            IllegalMoveError: if the move is not allowed.
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def winner(self) -> int:
        """Return the winning player's ID, or 0 if there is none (yet)."""
        pass

    @abstractmethod
    def snapshot(self, max_player: int) -> GameState:
        """
        Return a search root for the current position.

        Args:
            max_player: The player the snapshot's heuristic() scores for.
        """
        pass

    @abstractmethod
    def get_cell_strings(self) -> dict[int, str]:
        """
        Return a dictionary of [int -> str] where each cell value maps to its display string
            (e.g. {0: " ", 1: "X", 2: "O"} for tic_tac_toe)
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
