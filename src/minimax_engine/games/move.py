"""
Move - the difference between a parent state and one child state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from minimax_engine.errors import MoveAlreadyAppliedError

if TYPE_CHECKING:
    from minimax_engine.games.game_state import GameState


class Move(ABC):
    """
    Abstract move.

    A move has two jobs:
    - compute(): pure. Build the child state reached from a parent and record
      itself as that child's producing_move.
    - apply(): effectful. Make the live game reflect the move. The engine
      calls it once, right before it swaps its current state.

    Subclasses implement _apply(); apply() guards against a second call.
    """

    def __init__(self):
        self._applied = False

    @property
    def applied(self) -> bool:
        """Whether apply() has already run."""
        return self._applied

    @abstractmethod
    def compute(self, parent: "GameState", *loci: int) -> "GameState":
        """
        Return the state that results from this move on ``parent``.

        Args:
            parent: The state prior to the move. Must not be modified.
            loci:   The acting cell index, and any other index the move needs.
        """
        pass

    @abstractmethod
    def _apply(self) -> None:
        """Perform the move on the live game."""
        pass

    def apply(self) -> None:
        """Make the move happen on the live game (at most once)."""
        if self._applied:
            raise MoveAlreadyAppliedError(f"{self!r} has already been applied")
        self._apply()
        self._applied = True
