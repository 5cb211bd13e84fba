"""
GameState - value snapshot of one ply, searched by the engine.

Optimized for fast copying and comparison. Cells use a flat integer array
(int64 unless a game narrows cell_dtype):
    0 = empty
    1 = player 1's tile
    2 = player 2's tile
    etc.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

import numpy as np

from minimax_engine.core.hashing import hash_state
from minimax_engine.core.types import Outcome, classify, is_forced
from minimax_engine.errors import InvalidStateError

if TYPE_CHECKING:
    from minimax_engine.games.move import Move


class GameState(ABC):
    """
    Abstract, value-comparable game snapshot.

    A state is never changed after construction except through clone_into(),
    which the engine uses to re-root itself without changing identity.
    Subclasses supply the game rules through heuristic() and successors().
    """
    __slots__ = ('player_ply', 'width', 'height', 'cells', 'producing_move')

    # Storage type for cells; games with small tile codes narrow it.
    cell_dtype = np.int64

    def __init__(
        self,
        width: int,
        height: int,
        cells,
        player_ply: int,
        producing_move: Optional["Move"] = None,
    ):
        if width <= 0 or height <= 0:
            raise InvalidStateError(f"Grid must be non-empty, got {width}x{height}")

        cells = np.asarray(cells).reshape(-1)
        if cells.size != width * height:
            raise InvalidStateError(
                f"Expected {width * height} cells for a {width}x{height} grid, "
                f"got {cells.size}"
            )

        self.width = int(width)
        self.height = int(height)
        self.cells = self._coerce_cells(cells)
        self.player_ply = int(player_ply)
        self.producing_move = producing_move

    @classmethod
    def _coerce_cells(cls, cells: np.ndarray) -> np.ndarray:
        """Convert to cell_dtype, rejecting codes that would not survive the cast."""
        if cells.dtype.kind not in "biuf":
            raise InvalidStateError(f"Cells must be integers, got dtype {cells.dtype}")
        if cells.dtype.kind == "f" and not np.array_equal(cells, np.trunc(cells)):
            raise InvalidStateError("Cells must be integers, got fractional values")

        limits = np.iinfo(cls.cell_dtype)
        low, high = cells.min(), cells.max()
        if low < limits.min or high > limits.max:
            raise InvalidStateError(
                f"Cell codes must lie in [{limits.min}, {limits.max}] "
                f"for {np.dtype(cls.cell_dtype).name} cells, got [{low}, {high}]"
            )
        return cells.astype(cls.cell_dtype)

    # ------------------------------------------------------------------
    # Game rules
    # ------------------------------------------------------------------

    @abstractmethod
    def heuristic(self) -> float:
        """
        Score this state for the maximizing player; higher is better.

        Return +inf for a forced win and -inf for a forced loss. The search
        treats either as terminal and expands no further.
        """
        pass

    @abstractmethod
    def successors(self, locus: int) -> List["GameState"]:
        """
        Return every legal child reachable by acting at ``locus``.

        ``locus`` is a flat cell index in ``[0, width*height)``. Must not
        modify this state. Each child has ``producing_move`` set. Returns an
        empty list when nothing can be done at the locus.
        """
        pass

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    def equals(self, other: object) -> bool:
        """Structural equality: dimensions, player to move and every cell."""
        if not isinstance(other, GameState):
            return False
        if (
            self.width != other.width
            or self.height != other.height
            or self.player_ply != other.player_ply
        ):
            return False
        return bool(np.array_equal(self.cells, other.cells))

    def differs_from(self, other: "GameState") -> bool:
        """True if any cell differs (player to move is ignored)."""
        if self.cells.shape != other.cells.shape:
            return True
        return not np.array_equal(self.cells, other.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Only stable while the state is not re-rooted with clone_into().
        return hash(self.state_key())

    def state_key(self) -> str:
        """Hash of everything equals() compares."""
        return hash_state(self.width, self.height, self.player_ply, self.cells)

    def clone_into(self, source: "GameState") -> None:
        """Replace dimensions, player to move and cells with the source's."""
        self.width = source.width
        self.height = source.height
        self.player_ply = source.player_ply
        self.cells = source.cells.copy()

    def copy_cells(self) -> np.ndarray:
        """Fast copy - cells.copy() is optimized for contiguous int arrays."""
        return self.cells.copy()

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    def grid(self) -> np.ndarray:
        """Cells as a (height, width) array (a copy)."""
        return self.cells.reshape(self.height, self.width).copy()

    def is_terminal(self) -> bool:
        """True if no locus yields a child that changes the cells."""
        for locus in range(self.size):
            for child in self.successors(locus):
                if child.differs_from(self):
                    return False
        return True

    def outcome(self) -> Outcome:
        """Tagged view of heuristic(); DRAW only when no move remains."""
        value = self.heuristic()
        if is_forced(value):
            return classify(value)
        return classify(value, terminal=self.is_terminal())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.width}x{self.height}, "
            f"player_ply={self.player_ply}, cells={self.cells.tolist()})"
        )
